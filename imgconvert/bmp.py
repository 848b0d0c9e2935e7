"""Reading and writing uncompressed 24-bit BMP images."""

from __future__ import annotations

import os
import struct
from typing import Iterator, Union

from imgconvert.image import Color, Image, ImageFormatError

PathLike = Union[str, "os.PathLike[str]"]

_SIGNATURE = 0x4D42
_FILE_HEADER = struct.Struct("<HIII")
_INFO_HEADER = struct.Struct("<IiiHHIIiiII")
_HEADERS_SIZE = _FILE_HEADER.size + _INFO_HEADER.size
_INFO_HEADER_SIZE = 40
_BIT_COUNT = 24
_PIXELS_PER_METER = 11811
_COLORS_IMPORTANT = 0x1000000


def bmp_stride(width: int) -> int:
    """Bytes per stored row: three per pixel, padded to a multiple of four."""
    return 4 * ((width * 3 + 3) // 4)


def save_bmp(path: PathLike, image: Image) -> None:
    """Write the image as a bottom-up 24-bit BMP file; alpha is dropped."""
    width, height = image.width, image.height
    stride = bmp_stride(width)
    image_size = stride * height

    file_header = _FILE_HEADER.pack(_SIGNATURE, _HEADERS_SIZE + image_size, 0, _HEADERS_SIZE)
    info_header = _INFO_HEADER.pack(
        _INFO_HEADER_SIZE,
        width,
        height,
        1,
        _BIT_COUNT,
        0,
        image_size,
        _PIXELS_PER_METER,
        _PIXELS_PER_METER,
        0,
        _COLORS_IMPORTANT,
    )
    with open(path, "wb") as out:
        out.write(file_header)
        out.write(info_header)
        for row in reversed(list(image)):
            line = bytes(channel for c in row for channel in (c.b, c.g, c.r))
            out.write(line.ljust(stride, b"\0"))


def _colors(chunk: bytes) -> Iterator[Color]:
    channels = iter(chunk)
    for b, g, r in zip(channels, channels, channels):
        yield Color(r, g, b, 255)


def load_bmp(path: PathLike) -> Image:
    """Read an uncompressed bottom-up 24-bit BMP file."""
    with open(path, "rb") as src:
        data = src.read()

    if len(data) < _FILE_HEADER.size:
        raise ImageFormatError("BMP file header is truncated")
    signature, _file_size, _reserved, data_offset = _FILE_HEADER.unpack_from(data, 0)
    if signature != _SIGNATURE:
        raise ImageFormatError("not a BMP file")

    if len(data) < _HEADERS_SIZE:
        raise ImageFormatError("BMP info header is truncated")
    (header_size, width, height, _planes, bit_count, compression,
     *_rest) = _INFO_HEADER.unpack_from(data, _FILE_HEADER.size)
    if header_size != _INFO_HEADER_SIZE or bit_count != _BIT_COUNT or compression != 0:
        raise ImageFormatError("only uncompressed 24-bit BMP images are supported")
    if width < 0 or height < 0:
        raise ImageFormatError(f"unsupported BMP size {width}x{height}")

    stride = bmp_stride(width)
    pixels = data[data_offset:data_offset + stride * height]
    if len(pixels) < stride * height:
        raise ImageFormatError("BMP pixel data is truncated")

    if width == 0 or height == 0:
        return Image(width, height)
    stored = [
        list(_colors(pixels[start:start + width * 3]))
        for start in range(0, stride * height, stride)
    ]
    return Image._from_rows(reversed(stored))