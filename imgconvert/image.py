"""In-memory raster images made of RGBA colours."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, Optional, Sequence


class ImageFormatError(ValueError):
    """Raised when a file does not hold an image in a supported form."""


@dataclass(frozen=True)
class Color:
    """An RGBA colour with 8-bit channels."""

    r: int = 0
    g: int = 0
    b: int = 0
    a: int = 255

    def __post_init__(self) -> None:
        for name in ("r", "g", "b", "a"):
            value = getattr(self, name)
            if not 0 <= value <= 255:
                raise ValueError(f"channel {name}={value} is outside 0..255")

    @classmethod
    def black(cls) -> "Color":
        """Opaque black."""
        return cls(0, 0, 0, 255)


class Image:
    """A rectangular grid of colours; an image with no area is falsy."""

    def __init__(self, width: int = 0, height: int = 0, fill: Optional[Color] = None) -> None:
        if width < 0 or height < 0:
            raise ValueError(f"invalid image size {width}x{height}")
        if fill is None:
            fill = Color.black()
        self._width = width
        self._height = height
        self._rows = [[fill] * width for _ in range(height)]

    @classmethod
    def _from_rows(cls, rows: Iterable[Sequence[Color]]) -> "Image":
        row_lists = [list(row) for row in rows]
        width = len(row_lists[0]) if row_lists else 0
        if any(len(row) != width for row in row_lists):
            raise ValueError("rows have different lengths")
        image = cls(0, 0)
        image._width = width if row_lists else 0
        image._height = len(row_lists)
        image._rows = row_lists
        return image

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    def _check(self, x: int, y: int) -> None:
        if not (0 <= x < self._width and 0 <= y < self._height):
            raise IndexError(f"pixel ({x}, {y}) is outside a {self._width}x{self._height} image")

    def get_pixel(self, x: int, y: int) -> Color:
        """Return the colour at column x of row y."""
        self._check(x, y)
        return self._rows[y][x]

    def set_pixel(self, x: int, y: int, color: Color) -> None:
        """Set the colour at column x of row y."""
        self._check(x, y)
        self._rows[y][x] = color

    def row(self, y: int) -> tuple[Color, ...]:
        """Return the colours of row y, left to right."""
        if not 0 <= y < self._height:
            raise IndexError(f"row {y} is outside an image of height {self._height}")
        return tuple(self._rows[y])

    def __iter__(self) -> Iterator[tuple[Color, ...]]:
        """Yield the rows from top to bottom."""
        for row in self._rows:
            yield tuple(row)

    def __bool__(self) -> bool:
        return self._width > 0 and self._height > 0

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Image):
            return NotImplemented
        return (
            self._width == other._width
            and self._height == other._height
            and self._rows == other._rows
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Image(width={self._width}, height={self._height})"