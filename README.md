# captchakit

Image captchas for web forms and APIs. The package draws slide and rotate
challenge images and gives you the answer data to keep on the server, so you
can check what the user sends back. It also has the check for click-the-points
captchas.

Images are made with Pillow.

## Installation

```
pip install captchakit
```

To run the test suite:

```
pip install "captchakit[test]"
pytest
```

## Slide captcha

A slide captcha needs background pictures and at least one set of piece
images: an overlay (the piece itself), a shadow (drawn into the hole) and a
mask (the shape of the piece).

```python
from PIL import Image

from captchakit import slide, slide_options

background = Image.open("background.jpg")
piece = slide_options.GraphImage(
    overlay_image=Image.open("tile.png"),
    shadow_image=Image.open("tile-shadow.png"),
    mask_image=Image.open("tile-mask.png"),
)

builder = slide.Builder()
builder.set_resources(
    slide_options.with_backgrounds([background]),
    slide_options.with_graph_images([piece]),
)

captcha = builder.make()
data = captcha.generate()
```

`builder.make()` gives the basic mode: the piece starts at the left edge and
moves along a horizontal line. `builder.make_drag_drop()` gives the drag mode,
where the piece starts at a side chosen from the dead zone directions
(`slide_options.DeadZoneDirection`) and can move in both directions.

Options are added with `builder.set_options(...)` or passed to
`slide.Builder(...)`, using the functions from `captchakit.slide_options`:
`with_image_size`, `with_image_alpha`, `with_range_graph_size`,
`with_range_graph_angle_pos`, `with_gen_graph_number` (how many holes are
drawn on the picture), `with_enable_graph_vertical_random` and
`with_range_dead_zone_directions`. `slide_options.default_options()` shows the
defaults (a 300 × 220 picture, pieces of 60 to 70 pixels).
`builder.clear()` drops every option and resource added so far.

`generate()` returns a `slide_options.CaptchaData` with:

- `block`: a `slide_options.Block` with the hole position (`x`, `y`), the
  piece size, and the piece's start position (`dx`, `dy`). `block.to_dict()`
  gives it as a dictionary ready for JSON.
- `master_image`: the picture with the hole, as `JPEGImageData`.
- `tile_image`: the piece, as `PNGImageData`.

Send both images to the client and keep the block on the server.

When the user answers, compare the position they report with the stored
hole position:

```python
ok = slide.validate(sx, sy, data.block.x, data.block.y, padding=4)
```

This is true when `sx` and `sy` each lie within `padding` pixels of the
stored coordinates.

If the resources are incomplete, `generate()` raises a `slide.SlideError`
subclass: `slide.EmptyBackgroundImageError` without backgrounds,
`slide.GraphImageError` without piece images, and `slide.ImageTypeError`,
`slide.ShadowImageTypeError` or `slide.MaskImageTypeError` when a piece lacks
one of its images.

## Rotate captcha

```python
from PIL import Image

from captchakit import rotate, rotate_options

builder = rotate.Builder()
builder.set_resources(rotate_options.with_images([Image.open("photo.jpg")]))
builder.set_options(rotate_options.with_image_square_size(220))

captcha = builder.make()
data = captcha.generate()
```

Other options are `with_range_angle_pos`, `with_range_thumb_image_square_size`
and `with_thumb_image_alpha` from `captchakit.rotate_options`; by default the
angle is between 30 and 330 degrees.

`data.master_image` is a square cut of the picture reduced to its inscribed
circle. `data.thumb_image` is a smaller circle from it, turned by a random
angle. Both are `PNGImageData`. `data.block` is a `rotate_options.Block`
holding that angle and the image sizes.

Check the angle the user turned it by:

```python
ok = rotate.validate(data.block.angle, d_angle, padding=5)
```

The check passes when `angle + d_angle` lies within `padding` degrees of 360.
Without any images, `generate()` raises `rotate.EmptyImageError`; when an
entry is not a Pillow image it raises `rotate.ImageTypeError`. Both derive
from `rotate.RotateError`.

## Click check

```python
from captchakit import click_validate

ok = click_validate.validate(sx, sy, dx, dy, width, height, padding=5)
```

This is true when the click (`sx`, `sy`) falls inside the box whose top-left
corner is at (`dx`, `dy`) and which is `width + 2 * padding` wide and
`height + 2 * padding` high.

## Image output

`captchakit.imagedata` wraps the generated images:

- `JPEGImageData.to_bytes(quality)`, `to_base64(quality)` (a `data:` URI) and
  `to_base64_data(quality)` (bare Base64). A quality outside 55 to 100, or
  none, means 100. `save_to_file(path, quality)` writes the file and creates
  its directories.
- `PNGImageData.to_bytes()`, `to_base64()`, `to_base64_data()` and
  `save_to_file(path)`.

An empty wrapper raises `imagedata.EmptyImageError` when encoded and
`imagedata.MissingImageDataError` when saved. Transparent parts of a JPEG are
laid on black.

## Building blocks

The lower-level modules can be used on their own:

- `captchakit.options`: `RangeVal`, `Size`, `Point` and the `Distort` and
  `Quality` levels.
- `captchakit.codec`: `encode_png`, `encode_jpeg`, `decode_png`,
  `decode_jpeg` and their Base64 forms.
- `captchakit.canvas`: `NRGBACanvas` and `create_nrgba_canvas`, an RGBA
  canvas that rotates, scales, crops to a circle and draws text.
- `captchakit.palette`: `PaletteCanvas` and `create_palette_canvas`, an
  indexed-colour canvas that rotates, distorts, and draws lines, circles and
  text.
- `captchakit.geometry`: `Matrix`, `rotated_size`, `calc_resized_rect` and
  the rectangle types.
- `captchakit.helper`: `parse_hex_color` (raises `ColorError`),
  `rgb_to_hex`, `hex_to_rgb` and small utilities.
- `captchakit.rand` and `captchakit.randgen`: random numbers and random
  picks of colours, images and crop positions.

## What this package does not do

- It does not generate click captchas. There is no drawing of characters or
  shapes to click on; only the check in `click_validate` is included.
- It does not keep answers. Storing each `block` between generating a
  challenge and checking the reply, and expiring it, is up to your
  application.
- It has no server and no command line; it is a library to call from your
  own code.