# wirefdf

An isometric wireframe viewer for height maps.

A map file is plain text. Each line is a row of the grid and holds integer
heights separated by spaces. For example:

```
0 0 0 0
0 5 5 0
0 5 5 0
0 0 0 0
```

A value starts with a digit, `+` or `-` and runs to the next space; its
leading integer is the height. Rows may differ in length. Every point is
joined to its right and lower neighbours, and the wireframe is drawn in an
isometric projection.

## Installation

```
pip install .
```

## Usage

```
wirefdf path/to/map.fdf
```

The command takes exactly one argument, the map file, and opens a
1240 x 670 window titled `fdf`. It prints an error to standard error and
exits with status 1 when the argument count is wrong, when the file cannot
be opened (`Error : Can't open file`), when it is empty
(`Error : File is empty`), or when a line is blank or holds anything other
than values and spaces (`Error : Invalid map`).

### Keys

| Key          | Action                   |
|--------------|--------------------------|
| Escape       | Quit                     |
| Q            | Rotate                   |
| W            | Increase size            |
| S            | Decrease size            |
| E            | Change colour            |
| Arrow keys   | Move the drawing         |

Closing the window also quits.

## Library use

The pieces can be used without opening a window:

```python
from wirefdf.heightmap import read_map, parse_map
from wirefdf.render import View, render, project

heightmap = read_map("map.fdf")          # raises MapError on bad input
image = render(heightmap, View())        # an Image of 1240 x 670 pixels
print(hex(image.pixel(620, 335)))        # colour as 0xRRGGBB

small = parse_map(["0 1", "1 0"])
print(project(View(), small.rows[0][1]))
```

- `wirefdf.heightmap` has `Point`, `HeightMap` (with `right`, `down` and
  `points`), `MapError`, `parse_line`, `parse_map` and `read_map`.
- `wirefdf.render` has `View` (spacing, angle, offset and colour), `Image`
  (`put_pixel`, `pixel`, `draw_line`), `project` and `render`.
- `wirefdf.app` has `apply_key`, which returns the view after a key press
  and raises `Quit` for Escape, `run`, which shows a map in a window, and
  `main`, the command above.
- `wirefdf.libft` holds small helpers: character tests and conversions
  (`chars`), byte-buffer operations (`memory`), string search and
  comparison (`strsearch`), string building and splitting (`strbuild`),
  a singly linked list (`lists`), stream output (`output`) and a buffered
  line reader (`lines`).

## What it does not do

The viewer reads height-map files only. It does not load image files, and
colours are given as numbers only; named colours are not recognised.

## Running the tests

```
pip install .[test]
pytest
```