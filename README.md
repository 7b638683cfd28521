# raycube

raycube reads and checks `.cub` map files for a grid-based raycasting game,
decodes XPM images for use as wall textures, and fills in the pixels of one
textured screen column from the result of a ray cast.

## The `.cub` format

A map file starts with six element lines, in any order. Blank lines may
appear between them.

```
NO ./textures/north.xpm
SO ./textures/south.xpm
WE ./textures/west.xpm
EA ./textures/east.xpm
F 220,100,0
C 225,30,0
```

- `NO`, `SO`, `WE` and `EA` name the wall texture for each side. Each path
  must be a file that can be opened for reading.
- `F` and `C` give the floor and ceiling colours as three comma-separated
  numbers, each at most 255. Exactly two commas are allowed, never two in a
  row, and only digits and spaces may appear between them.
- An element given twice is an error, as is any other text among the
  element lines.

The grid follows the elements, after any blank lines. It may use only `0`
(floor), `1` (wall), spaces, and exactly one of `N`, `S`, `E` or `W`, which
marks where the player starts and which way the player faces. Every cell
reachable from the start without crossing a wall must lie inside the grid
and must not be a space; otherwise the map is rejected with `Wrong map`.

## Command line

```
raycube maps/level1.cub
```

The command takes exactly one argument: a path at least ten characters long
that ends in `.cub`. It loads and checks the map. If the arguments or the
map are wrong, it prints a red `Error` line followed by a yellow message
saying what is wrong, and exits with status 1. A valid map gives no output
and exit status 0.

## Library use

```python
from raycube.cubmap import load_map
from raycube.errors import MapError

try:
    cub = load_map("maps/level1.cub")
except MapError as exc:
    print(exc)
else:
    print(cub.player_x, cub.player_y, cub.direction)
    print(hex(cub.floor), hex(cub.ceiling), cub.north)
```

- `raycube.cubmap`: `parse_map(text)` checks the text of a map file and
  `load_map(path)` reads it from disk; both return a `CubMap` with `grid`,
  `height`, `player_x`, `player_y`, `direction`, `elements`, `floor`,
  `ceiling` and the `north`, `south`, `west` and `east` texture paths. The
  steps are also available on their own: `find_map_start`, `extract_grid`,
  `find_player` and `check_closed`.
- `raycube.elements`: `parse_elements(lines)` reads the six element lines
  into an `Elements` object; `parse_rgb("R,G,B")` returns `0xRRGGBB`;
  `texture_path`, `color_text` and `is_direction_line` handle single lines.
- `raycube.errors`: every check raises `MapError`, which carries a
  `message` and a `status`; `format_error` builds the coloured text the
  command prints.
- `raycube.textutil`: the small string helpers the parser uses (`atoi`,
  `split_words`, `split_lines`, `skip_spaces`, `count_commas`).
- `raycube.xpm`: `read_xpm_file(path)` and `xpm_from_data(strings)` return
  an `XpmImage` with `width`, `height`, `pixels`, `pixel(x, y)` and
  `to_bytes(big_endian=False)`. The transparent colour `None` becomes
  `0xFF000000`. `good_color` converts a colour for displays of fewer than
  24 bits.
- `raycube.colornames`: `lookup_color(name)` gives the value of a named
  X11 colour, ignoring case.
- `raycube.render`: `render_column(frame, x, ray, textures, ceiling, floor,
  step)` draws column `x` of a flat 800 x 600 pixel list, using a `Ray` and
  a `Textures` set of four 64 x 64 textures; `check_args` checks the command
  arguments.

## What the package does not do

raycube does not open a window, cast rays, move the player or run a game
loop. The command stops after the map has been checked. `render_column`
needs a `Ray` whose wall hit, draw range and texture column have already
been worked out by the caller.

## Running the tests

```
pip install -e .[test]
pytest
```