# cubed

A small top-down raycasting sandbox. A player stands on a built-in tile map;
every frame the scene is drawn into an in-memory 32-bit framebuffer: wall
cells are outlined as squares, the player is outlined as a square, and a
single red ray is drawn from the player. The framebuffer is then shown in a
1800 x 1400 window titled `cub3D`.

## Running

```
pip install .
cubed
```

`cubed` exits with status 1 if no window can be opened, and 0 when the window
is closed.

Controls:

- `W` / `S` move up and down
- `A` / `D` move left and right
- close the window to quit

While a movement key is held the player moves one whole map tile per frame.
The left and right arrow keys are tracked as held or released, but nothing
uses them yet.

## Using the pieces

The package can also be used as a library.

- `cubed.image.Image(width, height)` — a fixed-size framebuffer of
  little-endian 32-bit pixels. `put_pixel(x, y, color)` writes a `0xRRGGBB`
  colour and ignores coordinates outside the image; `get_pixel(x, y)` reads
  one back and raises `IndexError` outside it; `clear(color=0)` fills the
  image; `to_rgb_bytes()` returns packed R, G, B bytes row by row.
- `cubed.render` — `draw_square` (outline), `draw_map` (outlines every `'1'`
  cell at 64 pixels per tile), `draw_line` (Bresenham, both ends included),
  `raycast` and `draw_frame`, which moves the player, clears the image and
  redraws everything.
- `cubed.player` — `Player`, a dataclass holding position in tiles, view
  angle and held keys, with `key_press`, `key_release` and `move`; `Key`
  holds the key codes it reacts to. Unknown key codes are ignored.
- `cubed.app` — `default_map()`, `Game` (image, map and player, with
  `key_press`, `key_release` and `update`, which returns the redrawn image)
  and the `main` entry point.
- `cubed.colors.lookup_color(name, suffix=None)` — resolves an XPM colour
  specification: `#hex` values, or X11 colour names matched without regard
  to case. `none` gives -1 and an unknown name gives 0.
- `cubed.xpm` — `load_xpm_file(path)` and `parse_xpm(lines)` build an
  `Image` from XPM data, with `None` pixels set to `0xFF000000`;
  `strip_comments`, `extract_quoted_lines` and `split_words` are the steps
  used on the way. Malformed input raises `XpmError`.
- `cubed.linereader.LineReader(stream, buffer_size=512)` — reads a text or
  binary stream line by line, newline included, pulling `buffer_size` at a
  time; call `read_line()` (returns `None` at the end) or iterate over it.
- `cubed.textutil` — `atoi` (32-bit wrap-around), `is_digits`, `split`,
  `substr` and `strncmp`.

```python
from cubed.image import Image
from cubed.render import draw_line

image = Image(100, 100)
draw_line(image, 0, 0, 99, 99, 0xFF0000)
assert image.get_pixel(50, 50) == 0xFF0000
```

## What it does not do

- There is no first-person 3D view: the only ray is one fixed-length line
  on the top-down map, and its vertical end point is computed from the
  player's horizontal position.
- Maps are not read from files; the game always uses `default_map()`.
- The player is not stopped by walls, and turning is not implemented.
- Textures are not drawn: XPM images can be loaded, but the game does not
  use them.

## Tests

```
pip install .[test]
pytest
```