# solong

A small top-down puzzle game played on a tile map. Walk your character
around the map, pick up every slime (`C`), then step onto the chest (`E`)
to clear the level. The move count is printed to standard output after
every step.

## Installing

```
pip install .
```

The game window uses pygame.

## Playing

```
solong path/to/level.ber
```

The game loads its tile images from a directory named `imgs` in the
current working directory. It needs these files there, in a format pygame
can load:

```
imgs/land.xpm          imgs/player_up.xpm      imgs/slime.xpm
imgs/wall.xpm          imgs/player_left.xpm    imgs/slime_monster.xpm
imgs/chest.xpm         imgs/player_down.xpm    imgs/player_right.xpm
```

If one is missing, `FileNotFoundError` is raised. Each tile is drawn
100 × 100 pixels, so the window is 100 pixels per column and per row.

Controls:

| Key   | Action     |
|-------|------------|
| W     | move up    |
| A     | move left  |
| S     | move down  |
| D     | move right |
| Esc   | quit       |

Closing the window also quits. The player image faces the way it last
tried to move. The chest stays locked until every slime has been
collected; once you step onto it, `clear!!` is printed and the game ends.

If the arguments or the map are wrong, the reason is printed (for
example `Error : not *.ber file` or `Error : invalid map (Unsolvable map)`)
and the command exits without opening a window. Exactly one argument,
the map file, must be given.

## Map files

A level is a plain text file whose name ends in `.ber`. Each line is one
row of tiles:

| Char | Tile                 |
|------|----------------------|
| `1`  | wall                 |
| `0`  | floor                |
| `P`  | player start         |
| `C`  | slime (collectible)  |
| `E`  | chest (exit)         |

Example:

```
1111111111
1P0C00C0E1
1111111111
```

A map is rejected when it:

- cannot be opened, or has more than 11 lines;
- is empty, or larger than 18 columns by 10 rows;
- holds any character other than `0 1 P C E`;
- is not a rectangle;
- is not enclosed by walls;
- does not have exactly one `P`, exactly one `E` and at least one `C`;
- cannot be solved: some slime or the chest cannot be reached from the
  start. The chest blocks the way, so slimes only reachable through it
  do not count.

## Using it as a library

Maps can be loaded, checked and played without opening a window:

```python
from solong.mapdata import parse_map
from solong.validation import validate_map
from solong.game import Game, Direction, MoveResult

game_map = parse_map("1111111\n1P0C0E1\n1111111\n")
validate_map(game_map)          # raises solong.mapdata.MapError on a bad map

game = Game(game_map)           # messages go to stdout unless stream= is given
result = game.move(Direction.RIGHT)
assert result is MoveResult.MOVED
```

- `solong.mapdata`: `GameMap`, `MapError`, `parse_map(text)`,
  `load_map(path)`, `count_lines(path)`, `is_composed_of(text, allowed)`.
- `solong.validation`: `validate_args(argv)`, `validate_map(game_map)`
  and the individual checks (`is_ber_file`, `is_valid_field`,
  `is_rectangle`, `is_surrounded_by_wall`, `has_valid_items`,
  `is_reachable`).
- `solong.game`: `Game` with `move(direction)` and `handle_key(keycode)`,
  returning a `MoveResult` (`IGNORED`, `BLOCKED`, `MOVED`, `CLEARED`,
  `QUIT`); `Direction` and `Key`.
- `solong.app`: `Renderer`, `load_tiles(image_dir)`, `run(game_map)` and
  `main(argv)`, the command's entry point.

The package also provides small text and buffer helpers
(`solong.strings`, `solong.memory`, `solong.charclass`, `solong.output`),
a singly linked list (`solong.linkedlist`) and a line reader that reads
through a fixed-size buffer (`solong.linereader`), which the map loader
uses.

## What it does not do

- No tile images are included; you supply the `imgs` directory.
- The `slime_monster` image is loaded but never drawn: there are no
  enemies.
- The move count is printed to the terminal, not shown in the window.

## Running the tests

```
pip install .[test]
pytest
```