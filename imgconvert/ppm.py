"""Reading and writing binary PPM (P6) images."""

from __future__ import annotations

import os
import re
from typing import Iterator, Union

from imgconvert.image import Color, Image, ImageFormatError

PathLike = Union[str, "os.PathLike[str]"]

PPM_SIGNATURE = b"P6"
PPM_MAX = 255

_WORD = re.compile(rb"\s*(\S+)")
_INTEGER = re.compile(rb"\s*([+-]?\d+)")


def save_ppm(path: PathLike, image: Image) -> None:
    """Write the image as a P6 PPM file; alpha is dropped."""
    header = b"%s\n%d %d\n%d\n" % (PPM_SIGNATURE, image.width, image.height, PPM_MAX)
    with open(path, "wb") as out:
        out.write(header)
        for row in image:
            out.write(bytes(channel for c in row for channel in (c.r, c.g, c.b)))


def _read(pattern: "re.Pattern[bytes]", data: bytes, pos: int, what: str) -> tuple[bytes, int]:
    match = pattern.match(data, pos)
    if match is None:
        raise ImageFormatError(f"PPM header: cannot read {what}")
    return match.group(1), match.end()


def _colors(chunk: bytes) -> Iterator[Color]:
    channels = iter(chunk)
    for r, g, b in zip(channels, channels, channels):
        yield Color(r, g, b, 255)


def load_ppm(path: PathLike) -> Image:
    """Read a P6 PPM file with a maximum colour value of 255."""
    with open(path, "rb") as src:
        data = src.read()

    signature, pos = _read(_WORD, data, 0, "signature")
    width_text, pos = _read(_INTEGER, data, pos, "width")
    height_text, pos = _read(_INTEGER, data, pos, "height")
    max_text, pos = _read(_INTEGER, data, pos, "maximum colour value")
    width, height, color_max = int(width_text), int(height_text), int(max_text)

    if signature != PPM_SIGNATURE or color_max != PPM_MAX:
        raise ImageFormatError("only P6 images with maximum colour value 255 are supported")
    if data[pos:pos + 1] != b"\n":
        raise ImageFormatError("PPM header must end with a newline")
    pos += 1
    if width < 0 or height < 0:
        raise ImageFormatError(f"invalid PPM size {width}x{height}")

    line_size = width * 3
    pixels = data[pos:pos + line_size * height]
    if len(pixels) < line_size * height:
        raise ImageFormatError("PPM pixel data is truncated")

    if width == 0 or height == 0:
        return Image(width, height)
    rows = (
        list(_colors(pixels[start:start + line_size]))
        for start in range(0, line_size * height, line_size)
    )
    return Image._from_rows(rows)