# cub3d

Building blocks for reading `.cub` scene files, the plain-text descriptions
of a textured ray-casting level: four wall textures, floor and ceiling
colours, and a grid map.

## Install

```
pip install .
```

For the tests:

```
pip install .[test]
pytest
```

## What is in the package

| Module | Contents |
| --- | --- |
| `cub3d.mapdata` | `CubMap`, the scene data, and `Texture`, the wall slots `NO`, `SO`, `EA`, `WE` |
| `cub3d.validation` | `is_valid_extension(file_name, extension)`, `is_valid_file(file_name)` |
| `cub3d.linereader` | `LineReader`, reading a stream line by line through a fixed-size buffer, and `get_line` |
| `cub3d.textutil` | `atoi`, `itoa`, `split`, `strtrim`, `substr`, `strjoin`, `strmapi`, `striteri` |
| `cub3d.search` | `strchr`, `strrchr`, `strncmp`, `strnstr`, returning indices or `None` |
| `cub3d.memory` | byte-buffer operations: `memset`, `bzero`, `calloc`, `memcpy`, `memmove`, `memchr`, `memcmp`, `strlen`, `strdup`, `strlcpy`, `strlcat` |
| `cub3d.linkedlist` | `LinkedList` and its `Node` |
| `cub3d.output` | `put_char`, `put_str`, `put_endl`, `put_nbr`, writing to a stream (standard output by default) |
| `cub3d.chars` | ASCII tests and case conversion: `is_alpha`, `is_digit`, `is_alnum`, `is_ascii`, `is_print`, `to_upper`, `to_lower` |

### Scene data

`CubMap` holds `textures` (a list indexed by `Texture`, `None` until set),
`floor_color` and `ceiling_color` (three integers each, `-1` until set),
`grid` (a list of strings), and `width` and `height` (`-1` until set).

- `settings_complete()` is true once every texture is set and both colours
  have been given a first component.
- `summary()` returns a report of the settings, with `Not Loaded` for a
  missing texture.

### File names

`is_valid_extension(name, ".cub")` is true when the text from the last dot of
the name starts with the extension and the name is longer than the
extension. `is_valid_file(name)` is true when the file can be opened for
reading.

### Reading lines

`LineReader(stream, buffer_size=1024)` works on text or binary streams.
`read_line()` returns the next line with its newline, or `None` at the end;
iterating over the reader yields every line.

## Example

```python
from cub3d.linereader import LineReader
from cub3d.mapdata import CubMap, Texture
from cub3d.textutil import atoi, split
from cub3d.validation import is_valid_extension, is_valid_file

name = "scene.cub"
if is_valid_extension(name, ".cub") and is_valid_file(name):
    with open(name) as stream:
        for line in LineReader(stream):
            print(line.rstrip("\r\n"))

scene = CubMap()
scene.textures[Texture.NO] = "./textures/north.xpm"
scene.floor_color = [atoi(part) for part in split("220,100,0", ",")]
print(scene.settings_complete())  # False: three textures and the ceiling are missing
print(scene.summary())
```

## What the package does not do

There is no command-line program, and nothing here reads a whole `.cub` file
into a `CubMap`: turning the `NO`/`SO`/`EA`/`WE`/`F`/`C` lines into settings,
building the grid, and checking its characters, its single player start and
its enclosing walls is left to the caller, using the pieces above. There is
no rendering or game loop either.