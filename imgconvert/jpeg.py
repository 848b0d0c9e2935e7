"""Reading and writing JPEG images."""

from __future__ import annotations

import os
from typing import Iterator, Union

from PIL import Image as PILImage

from imgconvert.image import Color, Image, ImageFormatError

PathLike = Union[str, "os.PathLike[str]"]


def save_jpeg(path: PathLike, image: Image) -> None:
    """Write the image as an RGB JPEG file with default quality; alpha is dropped."""
    if not image:
        raise ImageFormatError(
            f"cannot save a {image.width}x{image.height} image as JPEG"
        )
    data = bytes(channel for row in image for c in row for channel in (c.r, c.g, c.b))
    picture = PILImage.frombytes("RGB", (image.width, image.height), data)
    with open(path, "wb") as out:
        picture.save(out, format="JPEG")


def _colors(chunk: bytes) -> Iterator[Color]:
    channels = iter(chunk)
    for r, g, b in zip(channels, channels, channels):
        yield Color(r, g, b, 255)


def load_jpeg(path: PathLike) -> Image:
    """Read a JPEG file, decoded to opaque RGB colours."""
    with open(path, "rb") as src:
        try:
            with PILImage.open(src, formats=["JPEG"]) as picture:
                rgb = picture.convert("RGB")
                width, height = rgb.size
                pixels = rgb.tobytes()
        except (OSError, SyntaxError, ValueError) as exc:
            raise ImageFormatError(f"cannot decode JPEG data: {exc}") from exc

    if width == 0 or height == 0:
        return Image(width, height)
    line_size = width * 3
    rows = (
        list(_colors(pixels[start:start + line_size]))
        for start in range(0, line_size * height, line_size)
    )
    return Image._from_rows(rows)