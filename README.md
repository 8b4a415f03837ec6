# raycub

Pure-Python building blocks for a first-person raycasting viewer on a grid
map: an XPM texture reader with the X11 colour-name table, an in-memory
32-bit image type, the records that hold game state, a top-down minimap
renderer, and a window-event hook table with a queue-driven event loop.

It has no dependencies outside the standard library.

## Installing

```
pip install .
```

## Modules

### `raycub.colornames`

- `lookup_color(name)` returns the `0xRRGGBB` value of a colour name,
  ignoring case. `"none"` gives `-1` (transparent). An unknown name raises
  `KeyError`.
- `color_names()` returns every distinct name in table order.

### `raycub.image`

- `Image(width, height, pixels=...)` — a grid of 32-bit pixels stored row by
  row, filled with zeros when no pixels are given. Values are kept as signed
  32-bit integers, so `0xFF000000` reads back negative. A non-positive size or
  pixel data of the wrong length raises `ValueError`.
  - `set_pixel(x, y, color)` / `get_pixel(x, y)`; coordinates outside the
    image raise `IndexError`.
  - `blit(source, x, y)` copies another image in, clipped to the edges.
  - `size_line` (bytes per row), `endian` (0 little, 1 big),
    `bits_per_pixel` (32).
- `mask_shifts(red_mask, green_mask, blue_mask)` returns
  `(shift, bits)` for each mask, flattened into a 6-tuple.
- `good_color(color, depth, decrgb)` returns the colour unchanged for depths
  of 24 and more, and otherwise packs it using the shifts from `mask_shifts`.

### `raycub.xpm`

- `read_xpm(path)` reads an XPM file and returns an `Image`.
- `parse_xpm(lines)` builds an image from the XPM strings: header
  (`width height colours chars-per-pixel`), colour lines, then pixel rows.
  Colours given as `None` become `0xFF000000`. Bad or short data raises
  `XpmError` (a `ValueError`).
- `strip_comments(text)` blanks out `/* */` and `//` comments outside quoted
  strings, keeping the text length; `extract_strings(text)` returns the
  contents of every double-quoted string.
- `text_to_rgb(name, end)` reads `#RRGGBB` as hexadecimal, otherwise looks
  the name up (joined with `end` when given); unknown names give 0.
- `str_to_wordtab(text)` splits on spaces and tabs.

```python
from raycub.xpm import parse_xpm

image = parse_xpm([
    "2 1 2 1",
    "a c #ff0000",
    "b c blue",
    "ab",
])
print(hex(image.get_pixel(0, 0)), hex(image.get_pixel(1, 0)))  # 0xff0000 0xff
```

### `raycub.gamedata`

Dataclasses `Player`, `TexInfo`, `MapInfo`, `Ray` and `GameData` holding the
scene, player and frame state, with the constants `WIN_WIDTH` (640),
`WIN_HEIGHT` (480), `TEX_SIZE` (64) and the texture indices `NORTH`, `SOUTH`,
`EAST`, `WEST`. `format_data(data)` describes the map, textures, colours and
player; `debug_display_data(data, stream=None)` writes that to a stream
(stdout by default); `format_char_tab(rows)` frames rows with blank lines.

### `raycub.minimap`

- `generate_minimap(data)` returns a `Minimap` whose `rows` show the part of
  `data.map` around the player, with `P` at the player's tile. A row stops at
  the first cell that is off the map or neither `0` nor `1`.
- `draw_minimap(minimap)` paints the tiles and a 5-pixel border into a new
  `Image` of side `minimap.image_size`.
- `mmap_offset(view_dist, size, mapsize, pos)` is the first map coordinate
  shown; `Minimap.screen_position(win_height)` gives where the image is placed.

### `raycub.events`

- `EventType` and `EventMask` name the event codes and selection masks.
- `HookTable` holds one hook per event type: `hook(event_type, func, mask)`
  (`None` detaches), shortcuts `key_hook` (key release), `mouse_hook`
  (button press) and `expose_hook`, `event_mask()` for the union of masks,
  and `dispatch(event_type, *args)`. Key hooks get the key symbol, button
  hooks `(button, x, y)`, motion hooks `(x, y)`, others nothing; an expose
  event with a non-zero count is not passed on.
- `EventLoop` keeps a list of registered `windows` and a queue:
  `post(target, event_type, *args)`, `flush()`, `loop_hook(func)`,
  `loop()` and `loop_end()`. The loop runs while a window is registered and
  `loop_end` has not been called; without an idle hook it returns once the
  queue is empty. A `CLIENT_MESSAGE` whose first argument is
  `"WM_DELETE_WINDOW"` also fires the window's `DESTROY_NOTIFY` hook.

## What this package does not do

There is no command to run and no on-screen window: the package draws into
`Image` objects and delivers events posted to an `EventLoop`, but nothing
shows images or reads real keyboard and mouse input. It does not read or
validate `.cub` scene files, does not check that a map is closed by walls,
does not move or turn the player, and does not cast rays to render the 3D
view. `GameData` and its records only hold that state for code that does.

## Tests

```
pip install .[test]
pytest
```