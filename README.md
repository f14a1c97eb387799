# rtpixels

A small toolkit with no dependencies for working with raw pixel buffers in
memory.

## Modules

- `rtpixels.image`
  - `Image.create(width, height, bits_per_pixel, byte_order)` makes a
    zero-filled image. `bits_per_pixel` is 8, 16, 24 or 32, and
    `byte_order` is 0 (least significant byte first) or 1 (most significant
    byte first). Rows are padded to 32 bits. Bad sizes or settings raise
    `ValueError`.
  - `put_pixel(x, y, color)` stores the low bytes of `color`, and
    `get_pixel(x, y)` reads them back. Coordinates outside the image raise
    `IndexError`.
  - `data_addr()` returns `(buffer, bits_per_pixel, size_line, byte_order)`.
    The buffer is the image's own `bytearray`, so writing to it changes the
    image.
  - `ImageType` names how pixels are stored (`XIMAGE`, `SHM`, `SHM_PIXMAP`).
    Images made here are `XIMAGE`.
- `rtpixels.color`: `ColorFormat.from_masks(depth, red_mask, green_mask,
  blue_mask)` describes a TrueColor visual. `pixel_value(color)` turns a
  `0xRRGGBB` colour into a pixel value for that visual. At a depth of 24 or
  more it returns the colour unchanged.
- `rtpixels.colornames`: `lookup_color(name)` returns the `0xRRGGBB` value
  of an X11 colour name and ignores case. `"none"` gives -1, and an unknown
  name raises `KeyError`.
- `rtpixels.xpm`: loads XPM images.
  - `xpm_to_image(xpm_data, bits_per_pixel=32, byte_order=0)` reads a
    sequence of strings.
  - `xpm_text_to_image(text, ...)` reads the text of an XPM file.
  - `xpm_file_to_image(path, ...)` reads a file.
  - Pixels whose colour is `None` are stored as `TRANSPARENT`
    (`0xFF000000`).
  - Malformed data raises `XpmError`, a subclass of `ValueError`.
  - The helpers `strip_comments`, `color_key` and `text_to_rgb` are public.
- `rtpixels.wordtab`: the string helpers the XPM reader uses: `find`,
  `find_unquoted` and `split_words`.
- `rtpixels.sprintf`
  - `sprintf(fmt, *args)` handles the `%c %s %p %d %i %u %x %X %%`
    conversions. Any other conversion, a lone trailing `%` or a missing
    argument raises `FormatError`. Extra arguments are ignored.
  - `to_base(number, digits)` writes a non-negative number with a given
    digit alphabet.

## What it does not do

The package has no display support. It opens no windows, draws nothing on
screen and runs no event loop. Images live only in memory as byte buffers.
You read them back with `get_pixel` or `data_addr()`.

## Install

```
pip install .
```

## Example

```python
from rtpixels.image import Image
from rtpixels.xpm import xpm_to_image
from rtpixels.colornames import lookup_color
from rtpixels.sprintf import sprintf

img = Image.create(4, 4, 32, 0)
img.put_pixel(1, 2, lookup_color("orange"))
assert img.get_pixel(1, 2) == 0xFFA500

icon = xpm_to_image(
    [
        "2 1 2 1",
        "a c red",
        "b c #00FF00",
        "ab",
    ],
    32,
    0,
)
print(sprintf("%dx%d first=%x", icon.width, icon.height, icon.get_pixel(0, 0)))
# 2x1 first=ff0000
```

## Tests

```
pip install .[test]
pytest
```