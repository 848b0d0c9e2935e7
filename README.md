# imgconvert

A small image library and command-line converter for three formats: binary
PPM (P6, maximum colour value 255), uncompressed bottom-up 24-bit BMP, and JPEG.
JPEG files are read and written through Pillow.

## Installation

```
pip install .
```

## Command line

```
imgconvert <in_file> <out_file>
```

You can also run it as `python -m imgconvert.converter <in_file> <out_file>`.

The format of each file comes from its extension: `.ppm`, `.bmp`, `.jpg` or
`.jpeg`. The check is case-sensitive, so `.JPG` is not recognised. If the
conversion works, the command prints `Successfully converted` and exits with
code 0. If it fails, it writes a message to standard error and exits with one of
these codes:

| Code | Meaning                           |
|------|-----------------------------------|
| 1    | wrong number of arguments         |
| 2    | unknown format of the input file  |
| 3    | unknown format of the output file |
| 4    | loading failed                    |
| 5    | saving failed                     |

## Library

```python
from imgconvert.image import Color, Image
from imgconvert.bmp import save_bmp, load_bmp
from imgconvert.converter import convert, format_for_path

image = Image(4, 3, Color.black())
image.set_pixel(1, 2, Color(255, 0, 0, 255))
save_bmp("out.bmp", image)

loaded = load_bmp("out.bmp")
assert loaded.get_pixel(1, 2).r == 255

convert("out.bmp", "out.jpg")
```

### `imgconvert.image`

- `Color(r, g, b, a=255)` is a frozen dataclass with 8-bit channels. A channel
  outside 0..255 raises `ValueError`. `Color.black()` returns opaque black.
- `Image(width=0, height=0, fill=None)` is a grid of colours. When `fill` is
  omitted, the grid is filled with opaque black. It has the `width` and `height`
  properties and the methods `get_pixel(x, y)`, `set_pixel(x, y, color)` and
  `row(y)`, which returns a tuple. Iterating over an image yields its rows from
  top to bottom. A coordinate outside the image raises `IndexError`. An image is
  truthy only when its width and height are both positive. Two images compare
  equal when they have the same size and the same pixels.
- `ImageFormatError` is a subclass of `ValueError`. It is raised when a file
  does not hold an image in a supported form.

### Format modules

- `imgconvert.ppm`: `save_ppm(path, image)` and `load_ppm(path)`
- `imgconvert.bmp`: `save_bmp(path, image)`, `load_bmp(path)` and
  `bmp_stride(width)`, which gives the padded row size in bytes
- `imgconvert.jpeg`: `save_jpeg(path, image)` and `load_jpeg(path)`

Saving drops the alpha channel. Loading always gives opaque colours. A file
that is malformed, unsupported or truncated raises `ImageFormatError`. A file
that cannot be opened raises `OSError`. `save_jpeg` refuses an image with no
area. JPEG is lossy, so pixel values read back from a JPEG file can differ
slightly from those that were saved.

### `imgconvert.converter`

- `Format` is an enum with the members `JPEG`, `PPM`, `BMP` and `UNKNOWN`.
- `format_by_extension(path)` returns the `Format` that matches a file's
  extension.
- `format_for_path(path)` returns the matching `ImageFormat`, or `None` if the
  extension is unknown. Each `ImageFormat` has its own `load(path)` and
  `save(path, image)` methods.
- `convert(in_path, out_path)` reads one file, writes the other and returns the
  image. It raises `ImageFormatError` if an extension is unknown or if the
  loaded image is empty.
- `main(argv=None)` runs the command line and returns the exit code.

## Limitations

- Only the three formats listed above are supported.
- PPM files must be binary P6 with a maximum colour value of 255.
- BMP files must be uncompressed, 24-bit and bottom-up. Negative heights are
  rejected.

## Tests

```
pip install ".[test]"
pytest
```