# qrpaint

`qrpaint` draws QR code module grids: as half-block text, as a small two-colour
PNG, or block by block onto a raster canvas with a choice of shapes.

It does not encode data into a QR symbol. It takes a `ModuleGrid`, which holds
a kind (finder, timing, data and so on) and an on/off state for every cell, and
draws it.

## Installation

```
pip install qrpaint
```

Requires Python 3.10 or later and Pillow.

## Building a grid

```python
from qrpaint.writer import IterDirection, Module, ModuleGrid, ModuleKind

rows = [
    [True, False, True],
    [False, True, False],
    [True, False, True],
]
grid = ModuleGrid.from_bitmap(rows, ModuleKind.DATA)
grid.set(1, 0, Module(ModuleKind.FINDER, True))

print(grid.width(), grid.height())   # 3 3
print(grid.bitmap())                 # rows of booleans, indexed [y][x]
for x, y, module in grid.iterate(IterDirection.ROW):
    ...
```

`get` and `set` raise `IndexError` outside the grid; `from_bitmap` raises
`ValueError` when the rows differ in length.

## Writers

`qrpaint.writer.Writer` is the base for anything that renders a grid: it has
`write(mat)` and `close()` and works as a context manager, calling `close()` on
exit. `NonWriter` discards everything.

### Text output

`FileWriter` writes the grid to a text stream with half-block characters, two
module rows per line. `render_half_blocks(mat)` returns the same text as a
string. Writing with a `FileWriter` whose stream is `None` raises `ValueError`.

```python
import sys
from qrpaint.file_writer import FileWriter, render_half_blocks

print(render_half_blocks(grid), end="")
FileWriter(sys.stdout).write(grid)
```

### Compressed PNG

`CompressedWriter` writes a two-colour palette PNG (white background, black
modules) at the highest compression level, which suits transfer over a
network. The image is `width * block_size + 2 * padding` pixels on each side.
`render_compressed(mat, option)` returns the Pillow image without saving it.

```python
from qrpaint.compressed import CompressedOption, CompressedWriter

with CompressedWriter.open("small.png", CompressedOption(padding=4, block_size=2)) as writer:
    writer.write(grid)
```

## Drawing blocks on a canvas

`qrpaint.standard.shape` provides `Canvas`, a path-based RGBA surface that
starts fully transparent (`move_to`, `line_to`, `quadratic_to`, `close_path`,
`draw_rectangle`, `draw_circle`, then `fill` with the colour set by
`set_color`; `draw_image` pastes an image; `image()` returns a copy).

A `DrawContext` describes one block: its canvas, upper-left corner, width and
height, colour and a `Neighbour` bit mask saying which of the eight
surrounding blocks, and the block itself, are set. A `Shape` draws from a
context; `Rectangle` and `Circle` are built in.

```python
from qrpaint.standard.shape import Canvas, DrawContext, Neighbour, Rectangle

block = 10
canvas = Canvas(grid.width() * block, grid.height() * block)
canvas.draw_rectangle(0, 0, canvas.width, canvas.height)
canvas.set_color((255, 255, 255, 255))
canvas.fill()

shape = Rectangle()
for x, y, module in grid.iterate():
    if module.is_set:
        ctx = DrawContext(canvas, x * block, y * block, block, block,
                          (0, 0, 0, 255), Neighbour.SELF)
        shape.draw(ctx)

image = canvas.image()
```

The caller works out the neighbour mask for each block; it is only read by
shapes that react to their neighbours.

### Custom shapes

`qrpaint.standard.shapes` has drawing functions for module styles. Pick one
for finder blocks and one for the other blocks, and put them together with
`assemble`:

```python
from qrpaint.standard.shapes import assemble, liquid_block, rounded_finder

shape = assemble(rounded_finder(), liquid_block())
shape.draw(ctx)          # ordinary block
shape.draw_finder(ctx)   # finder block
```

Block styles: `liquid_block`, `square_blocks(size)`, `circle_blocks(size)`,
`chain_block`, `h_chain_block`, `v_chain_block`, `h_stripe_block(ratio)` and
`v_stripe_block(ratio)`. Finder styles: `rounded_finder` and `square_finder`.
Sizes outside 0.1–1.0 fall back to 1.0; stripe ratios outside 0.6–1.0 fall
back to 0.85.

### Gradients

`qrpaint.standard.gradient` replaces every pixel of one colour with a linear
gradient. The angle is in degrees: 0 right, 90 up, 180 left, 270 down.

```python
from qrpaint.standard.gradient import ColorStop, new_gradient

gradient = new_gradient(45, ColorStop(0.0, (255, 0, 0, 255)), ColorStop(1.0, (0, 0, 255, 255)))
image = gradient.apply(image, (0, 0, 0, 255))
```

### Encoding the image

`qrpaint.standard.image_format` has `JpegEncoder` and `PngEncoder`, each with
`encode(stream, img)`, and `encoder_for(ImageFormat.JPEG | ImageFormat.PNG)`.
JPEG output drops the alpha channel.

## Image helpers

`qrpaint.imgkit` holds small Pillow helpers:

- `read(path)` loads an image; a file Pillow cannot decode raises `ValueError`.
- `save(img, filename)` writes `.jpg`/`.jpeg` as JPEG and `.png` as PNG; any
  other extension raises `ValueError`.
- `gray(src)` converts to greyscale.
- `binaryzation(src, threshold)` thresholds to black (at or below) and white
  (above); thresholds outside 0–255 become 128.
- `scale(src, size, resample)` resizes to an RGBA image, bilinear by default.

## What this package does not do

There is no ready-made writer that turns a grid into a finished styled image
file in one call, and no set of colour, logo, border or halftone options for
one. Drawing a styled image means driving `Canvas`, `DrawContext` and the
shapes yourself, as shown above. There is also no command-line tool.