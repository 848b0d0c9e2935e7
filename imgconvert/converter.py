"""Conversion of image files between PPM, JPEG and BMP, chosen by extension."""

from __future__ import annotations

import enum
import os
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Optional, Sequence, Union

from imgconvert.bmp import load_bmp, save_bmp
from imgconvert.image import Image, ImageFormatError
from imgconvert.jpeg import load_jpeg, save_jpeg
from imgconvert.ppm import load_ppm, save_ppm

PathLike = Union[str, "os.PathLike[str]"]


class Format(enum.Enum):
    """Image file formats recognised by extension."""

    JPEG = "jpeg"
    PPM = "ppm"
    BMP = "bmp"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class ImageFormat:
    """A file format together with its loader and saver."""

    format: Format
    loader: Callable[[PathLike], Image]
    saver: Callable[[PathLike, Image], None]

    def load(self, path: PathLike) -> Image:
        """Read an image from path in this format."""
        return self.loader(path)

    def save(self, path: PathLike, image: Image) -> None:
        """Write the image to path in this format."""
        self.saver(path, image)


_EXTENSIONS = {
    ".jpg": Format.JPEG,
    ".jpeg": Format.JPEG,
    ".ppm": Format.PPM,
    ".bmp": Format.BMP,
}

_FORMATS = {
    Format.JPEG: ImageFormat(Format.JPEG, load_jpeg, save_jpeg),
    Format.PPM: ImageFormat(Format.PPM, load_ppm, save_ppm),
    Format.BMP: ImageFormat(Format.BMP, load_bmp, save_bmp),
}


def format_by_extension(path: PathLike) -> Format:
    """Return the format named by the file's extension (case-sensitive)."""
    return _EXTENSIONS.get(Path(path).suffix, Format.UNKNOWN)


def format_for_path(path: PathLike) -> Optional[ImageFormat]:
    """Return the loader/saver for the file's extension, or None if unknown."""
    return _FORMATS.get(format_by_extension(path))


def _load(image_format: ImageFormat, path: PathLike) -> Image:
    image = image_format.load(path)
    if not image:
        raise ImageFormatError(f"loaded image from {os.fspath(path)} is empty")
    return image


def convert(in_path: PathLike, out_path: PathLike) -> Image:
    """Read in_path and write it to out_path, both in the formats of their extensions."""
    input_format = format_for_path(in_path)
    if input_format is None:
        raise ImageFormatError(f"unknown format of the input file {os.fspath(in_path)}")
    output_format = format_for_path(out_path)
    if output_format is None:
        raise ImageFormatError(f"unknown format of the output file {os.fspath(out_path)}")
    image = _load(input_format, in_path)
    output_format.save(out_path, image)
    return image


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Command-line entry point: imgconvert <in_file> <out_file>."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 2:
        print("Usage: imgconvert <in_file> <out_file>", file=sys.stderr)
        return 1

    in_path, out_path = args
    input_format = format_for_path(in_path)
    if input_format is None:
        print("Unknown format of the input file", file=sys.stderr)
        return 2

    output_format = format_for_path(out_path)
    if output_format is None:
        print("Unknown format of the output file", file=sys.stderr)
        return 3

    try:
        image = _load(input_format, in_path)
    except (OSError, ImageFormatError):
        print("Loading failed", file=sys.stderr)
        return 4

    try:
        output_format.save(out_path, image)
    except (OSError, ImageFormatError):
        print("Saving failed", file=sys.stderr)
        return 5

    print("Successfully converted")
    return 0


if __name__ == "__main__":
    sys.exit(main())