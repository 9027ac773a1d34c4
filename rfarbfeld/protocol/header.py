from __future__ import annotations

from typing import BinaryIO, Tuple

from .errors import InvalidMagic, IoError, TruncatedDimensions, TruncatedHeader

MAGIC = b"farbfeld"
HEADER_SIZE = 8
DIMENSIONS_SIZE = 8


def read_exact(source: BinaryIO, size: int) -> bytes:
    """Read up to ``size`` bytes, retrying short reads until EOF."""
    chunks = bytearray()
    while len(chunks) < size:
        try:
            chunk = source.read(size - len(chunks))
        except (OSError, ValueError) as exc:
            # ValueError: the source was already closed
            raise IoError("Failed to read farbfeld data", bytes_read=len(chunks), cause=exc) from exc
        if not chunk:
            break
        chunks += chunk
    return bytes(chunks)


def read_header(source: BinaryIO) -> None:
    """Consume the magic tag, failing if it is short or wrong."""
    data = read_exact(source, HEADER_SIZE)
    if len(data) < HEADER_SIZE:
        raise TruncatedHeader(
            f"Failed to read enough data for magic number! Read {len(data)} bytes.",
            bytes_read=len(data),
        )
    if data != MAGIC:
        raise InvalidMagic("Magic number indicated not farbfeld data!", bytes_read=len(data))


def read_dimensions(source: BinaryIO) -> Tuple[int, int]:
    """Consume the width and height fields."""
    data = read_exact(source, DIMENSIONS_SIZE)
    if len(data) < DIMENSIONS_SIZE:
        raise TruncatedDimensions(
            f"Failed to read enough data for dimensions! Read {len(data)} bytes.",
            bytes_read=len(data),
        )
    width = int.from_bytes(data[0:4], "big", signed=False)
    height = int.from_bytes(data[4:8], "big", signed=False)
    return width, height


def pack_header(width: int, height: int) -> bytes:
    """Build the magic tag plus dimension fields."""
    return MAGIC + width.to_bytes(4, "big", signed=False) + height.to_bytes(4, "big", signed=False)
