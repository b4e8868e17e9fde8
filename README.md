# pixelfx

A collection of per-pixel effects for colour raster images. Images are NumPy
arrays of shape `(height, width, 3)` holding red, green and blue values; Pillow
reads and writes the files.

## Installation

```
pip install .
```

To run the test suite as well:

```
pip install ".[test]"
pytest
```

## Using the library

```python
from pixelfx.pixels import load_image, save_image
from pixelfx.geometry import flip_vertical
from pixelfx.patterns import mosaic

image = load_image("photo.jpg")
save_image(flip_vertical(image), "flipped.png")
save_image(mosaic(image, 16), "mosaic.png")
```

Every effect takes an image and returns a new `uint8` array of the same size;
the input is left untouched. An input that is not shaped `(height, width, 3)`
raises `ValueError`, as do images too small for an effect and out-of-range
parameters.

### `pixelfx.pixels`

- `load_image(path)`: reads any image Pillow can open and converts it to RGB.
- `save_image(image, path)`: writes an RGB array; the format follows the file
  extension.
- `to_uint8(values)`: rounds to nearest and clamps into 0..255; NaN becomes 0.
- `grey(image)`: the mean of the three channels of each pixel, as a float
  `(height, width)` array.

### `pixelfx.geometry`

- `flip_vertical`, `flip_horizontal`: mirror top to bottom or left to right.
- `swap_halves_vertical`, `swap_halves_horizontal`: exchange the two halves
  around row or column `(size - 1) // 2`. Lines the move never writes stay
  black, and where the halves overlap the bottom (or right) half wins.

### `pixelfx.channels`

- `split_bands`: keeps only red in the top third, blue in the middle third and
  green in the bottom third.
- `quadrant_channels`: red top-left, blue bottom-left, green top-right and grey
  bottom-right.
- `fold_intensity`: doubles dark values and mirrors bright ones back down.
- `invert_fold`: the complement of `fold_intensity`.
- `horizontal_brighten`: adds brightness rising from 0 at the left edge to 255
  at the right.
- `stepped_brighten`: cuts the image into eight horizontal bands and brightens
  band `i` by `32 * i`.

### `pixelfx.masks`

- `grey_outside_diamond`: greys every pixel outside the inscribed diamond.
- `grey_outside_circle`: greys every pixel outside the inscribed ellipse.
- `grey_corners`: keeps colour within one half-size of the nearest corner and
  greys the rest.
- `fade_to_grey`: blends from full colour at the left edge to grey at the right.

### `pixelfx.patterns`

- `mosaic(image, blocks=16)`: replaces square blocks with their mean colour;
  the block side is `2 * (height // (2 * blocks))`.
- `checkerboard(image, cells=8)`: blacks out alternate cells of a `cells` by
  `cells` board.
- `diamond_tiles`, `oval_tiles`: dim to half brightness everything outside a
  diamond or oval in each tile of a 4 by 4 grid. The shape's size is the whole
  number `height // width`, so an image wider than it is tall is dimmed
  everywhere.
- `circular_rings`, `diamond_rings`: black out every other ring of concentric
  ellipses or diamonds.
- `vertical_waves`, `horizontal_waves`: black out alternate wavy stripes.

### `pixelfx.warp`

Pixels pushed off the edge are lost and uncovered pixels stay black.

- `sine_shift_rows`: slides each row sideways by a quarter of the width times a
  sine of its height, one period over the image height.
- `sine_shift_columns`: slides each column up or down by a quarter of the
  height times a sine of its position, one period over the image width.
- `stepped_column_wave(image, steps=16)`: cuts the image into `steps` vertical
  strips and moves strip `i` down by `width / 4 * sin(2 * 3.14 * i / (steps - 1))`
  rows; `steps` must be at least 2.

## Command line

```
pixelfx EFFECT INPUT OUTPUT [--blocks N] [--cells N] [--steps N]
pixelfx --list
```

`EFFECT` is the name of any function listed above under `geometry`, `channels`,
`masks`, `patterns` or `warp`; `pixelfx --list` prints them all. `--blocks`
applies only to `mosaic`, `--cells` only to `checkerboard` and `--steps` only
to `stepped_column_wave`; giving one to another effect is a usage error. If the
input cannot be read or the effect rejects the image, the command prints the
reason to standard error and exits with status 1.

```
pixelfx mosaic photo.jpg mosaic.png --blocks 32
pixelfx --help
```

## What it does not do

pixelfx only reads and writes files: it has no window or viewer for showing
the source and result on screen.