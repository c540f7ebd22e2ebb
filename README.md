# solong

A small top-down puzzle game. You walk a player around a walled map,
pick up every collectible, and then step onto the exit to win.

## Installing

```
pip install .
```

The game window is drawn with pygame, which is installed as a dependency.

## Playing

```
so_long path/to/level.ber
```

Exactly one argument, the map file, is expected. With none the game
reports `Insert map`; with more than one it reports `Too many arguments`.
Errors are printed in red on standard output and the command exits with
status 1.

The sprites are loaded from an `imgs` directory in the current working
directory: `player_down.xpm`, `player_top.xpm`, `player_right.xpm`,
`player_left.xpm`, `wall.xpm`, `empty.xpm`, `exit_o.xpm`, `exit_c.xpm`
and `item_1.xpm`, each drawn on a 32×32 pixel tile. These image files are
not part of the package; you supply them.

Controls:

| Key   | Action      |
|-------|-------------|
| W     | move up     |
| A     | move left   |
| S     | move down   |
| D     | move right  |
| Esc   | quit        |

Closing the window also quits.

Every accepted move is echoed on the terminal, for example
`Key pressed: RIGHT (100)`. The exit stays closed until every
collectible has been picked up; the player cannot step onto a closed exit.
Once the exit is open and the player reaches it, the window shows
`YOU WIN!`, the terminal prints `Close game with ESC`, and further moves
are ignored.

## Map format

A map is a plain text file, one row per line, using these characters:

| Char | Meaning      |
|------|--------------|
| `1`  | wall         |
| `0`  | floor        |
| `P`  | player start |
| `C`  | collectible  |
| `E`  | exit         |

A map is accepted only if:

- it has at least three rows and no empty lines;
- all rows have the same length and the map is not square;
- the first and last rows are entirely walls, and every row starts and ends with a wall;
- no other characters appear;
- there is exactly one `P`, exactly one `E`, and at least one `C`;
- no `P`, `C` or `E` is boxed in by walls on all four sides.

Example:

```
1111111111
1P0C00C0E1
1111111111
```

A file that cannot be opened is reported as `Invalid Map`; a file that
breaks the rules above is reported as `Map Error`.

## Using it as a library

```python
from solong.mapfile import load_map, MapError
from solong.game import Game, Direction

rows = load_map("level.ber")   # raises MapError on a bad map
game = Game.from_rows(rows)
game.move(Direction.RIGHT)     # True if the player moved
game.press(100)                # key codes: 119 W, 97 A, 115 S, 100 D, 65307 Esc
print(game.rows, game.collected, game.exit_open, game.won)
```

`solong.mapfile` offers `read_map`, `validate_map` and `load_map`;
`solong.cli.check_arguments` picks the map path out of an argument list
and `solong.cli.main` runs the whole game.

`solong.render.sprite_name(cell, facing)` names the sprite for a cell,
`solong.render.draw_commands(game)` lists what to draw for a game state
as `(kind, value, x, y)` tuples, and `solong.render.Renderer` draws a
game onto a pygame surface.

The package also ships small helpers used by the game:

- `solong.lines` — `LineReader` and `read_lines` read a text or binary
  stream line by line through a fixed-size buffer (42 by default);
- `solong.printf` — `format_printf` and `printf` handle the conversions
  `%c %s %p %d %i %u %x %X %%`;
- `solong.text` — string helpers such as `split`, `substr`, `strtrim`,
  `strnstr`, `strncmp`, `strchr`, `strrchr`, `strlcpy`, `strlcat`,
  `strjoin`, `strmapi` and `striteri`;
- `solong.chars` — `is_alpha`, `is_digit`, `is_alnum`, `is_ascii`,
  `is_print`, `to_lower`, `to_upper`;
- `solong.numbers` — `atoi` and `itoa`;
- `solong.memory` — byte-buffer helpers `memset`, `bzero`, `calloc`,
  `memchr`, `memcmp`, `memcpy`, `memmove`;
- `solong.linked` — a singly linked `LinkedList` of `Node`s;
- `solong.output` — `put_char`, `put_str`, `put_endl`, `put_nbr`.

## Running the tests

```
pip install .[test]
pytest
```