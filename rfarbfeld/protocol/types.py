from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Iterator, List, Optional, Sequence, Tuple, Union

from .errors import DimensionMismatch

CHANNEL_MAX = 0xFFFF
DIMENSION_MAX = 0xFFFFFFFF

Coordinate = Tuple[int, int]


@dataclass(frozen=True)
class Pixel:
    """One RGBA sample, 16 bits per channel."""

    red: int = 0
    green: int = 0
    blue: int = 0
    alpha: int = 0

    def __post_init__(self) -> None:
        for name, value in zip(("red", "green", "blue", "alpha"), self):
            if not 0 <= value <= CHANNEL_MAX:
                raise ValueError(f"{name} must be within 0..{CHANNEL_MAX}, got {value}")

    @classmethod
    def from_sequence(cls, values: Sequence[int]) -> "Pixel":
        if len(values) != 4:
            raise ValueError("A pixel needs exactly four channel values")
        return cls(values[0], values[1], values[2], values[3])

    def __iter__(self) -> Iterator[int]:
        return iter((self.red, self.green, self.blue, self.alpha))

    def replace(self, **channels: int) -> "Pixel":
        """Return a copy with the given channels changed."""
        return replace(self, **channels)


class Image:
    """Row-major grid of pixels whose count always equals width * height.

    Lookups through ``get`` and ``get_at`` return None when out of range;
    subscripting raises IndexError instead. A pixel can be swapped through
    ``image[index] = pixel`` or ``image[x, y] = pixel``, the sequence
    itself is never replaced. Pixels are immutable, so one channel is
    changed by writing back a copy::

        image[x, y] = image[x, y].replace(red=0xFFFF)
    """

    __slots__ = ("_width", "_height", "_pixels")

    def __init__(self, width: int, height: int, pixels: Sequence[Pixel]) -> None:
        for name, value in (("width", width), ("height", height)):
            if not isinstance(value, int) or isinstance(value, bool):
                raise TypeError(f"{name} must be an int, got {type(value).__name__}")
            if not 0 <= value <= DIMENSION_MAX:
                raise ValueError(f"{name} must be within 0..{DIMENSION_MAX}, got {value}")
        expected = width * height
        if len(pixels) != expected:
            raise DimensionMismatch(expected, len(pixels))
        for pixel in pixels:
            if not isinstance(pixel, Pixel):
                raise TypeError(f"Expected Pixel, got {type(pixel).__name__}")
        self._width = width
        self._height = height
        self._pixels: List[Pixel] = list(pixels)

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def size(self) -> Coordinate:
        return self._width, self._height

    @property
    def pixels(self) -> Tuple[Pixel, ...]:
        return tuple(self._pixels)

    def __len__(self) -> int:
        return len(self._pixels)

    def __iter__(self) -> Iterator[Pixel]:
        return iter(self._pixels)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Image):
            return NotImplemented
        return self.size == other.size and self._pixels == other._pixels

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Image(width={self._width}, height={self._height})"

    def index_of(self, x: int, y: int) -> Optional[int]:
        """Map a coordinate to its linear index, or None if it lies outside."""
        if 0 <= x < self._width and 0 <= y < self._height:
            return y * self._width + x
        return None

    def get(self, index: int) -> Optional[Pixel]:
        if 0 <= index < len(self._pixels):
            return self._pixels[index]
        return None

    def get_at(self, x: int, y: int) -> Optional[Pixel]:
        index = self.index_of(x, y)
        if index is None:
            return None
        return self._pixels[index]

    def set_at(self, x: int, y: int, pixel: Pixel) -> None:
        self[x, y] = pixel

    def rows(self) -> Iterator[Tuple[Pixel, ...]]:
        for row in range(self._height):
            start = row * self._width
            yield tuple(self._pixels[start : start + self._width])

    def __getitem__(self, key: Union[int, Coordinate]) -> Pixel:
        index = self._resolve(key)
        return self._pixels[index]

    def __setitem__(self, key: Union[int, Coordinate], pixel: Pixel) -> None:
        if not isinstance(pixel, Pixel):
            raise TypeError(f"Expected Pixel, got {type(pixel).__name__}")
        index = self._resolve(key)
        self._pixels[index] = pixel

    def _resolve(self, key: Union[int, Coordinate]) -> int:
        if isinstance(key, tuple):
            x, y = key
            index = self.index_of(x, y)
            if index is None:
                raise IndexError(f"Coordinate ({x}, {y}) outside {self._width}x{self._height} image")
            return index
        if not 0 <= key < len(self._pixels):
            raise IndexError(f"Pixel index {key} out of range")
        return key
