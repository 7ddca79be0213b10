# solong

A small tile-based 2D game. You walk a character around a walled room,
pick up every collectible and then walk into the exit. Enemies stand on
the floor (they are animated but do not move); walking into one ends the
game, and so does reaching 100 moves.

## Installing

```
pip install .
```

The game window is drawn with pygame.

## Playing

```
so-long path/to/level.ber
```

The same command can be started as `python -m solong.app path/to/level.ber`.

The sprites are XPM files read from the current working directory, under
the relative paths listed in `solong.constants` (for example
`image/wall/floor.xpm`, `image/character/char_front_1.xpm`). They are not
shipped with this package; run the game from a directory that holds
them. If any image cannot be read the program prints `UNEXPECTED ERROR`
and exits with status 1.

Keys:

- `W`, `A`, `S`, `D`: move up, left, down, right
- `Esc` or closing the window: quit

Every successful step prints the running move count to standard output.
Walking into the exit once every collectible is taken shows the win
banner; walking into an enemy, or reaching 100 moves, shows the loss
banner. While a banner is on screen, any movement key closes the game.

## Map files

A map is a plain-text file whose name ends in `.ber`. Every line must
have the same length and the outer border must be all `1`. Lines are
split on `\n` only, so the file must not end with a newline and must not
use `\r\n` line endings. The characters allowed are:

| Char | Meaning                                   |
|------|-------------------------------------------|
| `1`  | wall on the border, hole inside the room  |
| `0`  | floor                                     |
| `P`  | player start (exactly one)                |
| `C`  | collectible (at least one)                |
| `E`  | exit (at least one)                       |
| `N`  | enemy                                     |

Example:

```
1111111
1P0C0E1
10N0001
1111111
```

Outcomes of the command:

- wrong number of arguments: prints `ARGUMENTS ERROR 😐`, status -1
- the file cannot be opened: prints `MAP NOT EXIST`, status 0
- an invalid map: prints `MAP NAME ERROR`, `MAP ERROR`, `WALL ERROR`
  or `NOT ALL ELEMENTS OF THE MAP CAN BE FOUND`, status 1

## Using the pieces from Python

- `solong.mapfile`: `load_map(path)` reads, validates and organises a map
  into a `GameMap`; `read_map_lines`, `check_name`, `check_map` and
  `organize_map` are the individual steps, and raise `MapError` on bad
  input. `WallLayout.from_size(height, width)` gives the door and torch
  placement.
- `solong.game.Game` holds the game state; `Game.handle_key(key)` applies
  a `Key` press and raises `QuitGame` when the game should close.
  `advance_frame` and `advance_enemy_frame` step the animation counters.
- `solong.constants` defines `Tile`, `Key`, `Message`, the asset paths,
  and `key_from_code(code, platform)`, which maps raw X11 (`"linux"`) or
  macOS (`"darwin"`) keycodes to a `Key`.
- `solong.xpm`: `load_xpm(path)`, `parse_xpm_text(text)` and
  `parse_xpm_lines(lines)` decode XPM images into an `XpmImage`
  (raising `XpmError`); `strip_comments` and `text_to_rgb` are the helpers.
- `solong.colors.lookup_color(name)` resolves X11 colour names.
- `solong.render`: `render_scene(game)` lists the `(Sprite, x, y)` draws
  for the current frame, `message_overlay(game)` the win or loss banner,
  and `torch_frame` / `enemy_frame` pick animation images.
- `solong.app`: `App(game, asset_dir).run()` opens the pygame window,
  `load_images(asset_dir)` loads every sprite, and `main(argv)` is the
  command.