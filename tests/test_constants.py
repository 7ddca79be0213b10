from collections import Counter

import pytest

from solong.constants import Key, key_from_code


@pytest.mark.parametrize(
    "code,key",
    [(65307, Key.ESC), (119, Key.W), (97, Key.A), (115, Key.S), (100, Key.D)],
)
def test_linux_codes(code, key):
    assert key_from_code(code, "linux") is key


@pytest.mark.parametrize(
    "code,key",
    [(53, Key.ESC), (13, Key.W), (0, Key.A), (1, Key.S), (2, Key.D), (29, Key.NUM_0)],
)
def test_apple_codes(code, key):
    assert key_from_code(code, "darwin") is key


def test_same_key_differs_between_platforms():
    assert key_from_code(13, "darwin") is Key.W
    assert key_from_code(13, "linux") is None


def test_unknown_code_is_none():
    assert key_from_code(99999, "linux") is None
    assert key_from_code(99999, "darwin") is None


@pytest.mark.parametrize("platform", ["linux", "darwin"])
def test_every_key_has_exactly_one_code(platform):
    found = Counter(
        key_from_code(code, platform) for code in range(70000)
    )
    found.pop(None, None)
    assert set(found) == set(Key)
    assert all(count == 1 for count in found.values())


def test_unsupported_platform():
    with pytest.raises(ValueError):
        key_from_code(13, "win32")