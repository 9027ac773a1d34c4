from __future__ import annotations

from typing import BinaryIO, Iterable, Iterator, List, Optional

from ..settings import DecodeSettings
from .errors import IoError, TruncatedPixelRecord
from .types import Pixel

RECORD_SIZE = 8


def parse_pixel(record: bytes) -> Pixel:
    """Parse one 8-byte record into a Pixel (big-endian r, g, b, a)."""
    if len(record) != RECORD_SIZE:
        raise ValueError(f"Pixel record must be {RECORD_SIZE} bytes, got {len(record)}")
    return Pixel(
        int.from_bytes(record[0:2], "big"),
        int.from_bytes(record[2:4], "big"),
        int.from_bytes(record[4:6], "big"),
        int.from_bytes(record[6:8], "big"),
    )


def pack_pixel(pixel: Pixel) -> bytes:
    """Pack a Pixel into its 8-byte record."""
    out = bytearray()
    for channel in pixel:
        out += channel.to_bytes(2, "big", signed=False)
    return bytes(out)


def encode_pixels(pixels: Iterable[Pixel]) -> bytes:
    return b"".join(pack_pixel(pixel) for pixel in pixels)


def _fill_record(source: BinaryIO, record: bytearray, done: int) -> int:
    filled = 0
    view = memoryview(record)
    while filled < RECORD_SIZE:
        try:
            chunk = source.read(RECORD_SIZE - filled)
        except (OSError, ValueError) as exc:
            raise IoError(
                f"Failed to read data for pixel {done}",
                bytes_read=filled,
                cause=exc,
            ) from exc
        if not chunk:
            break
        view[filled : filled + len(chunk)] = chunk
        filled += len(chunk)
    return filled


def iter_pixels(source: BinaryIO) -> Iterator[Pixel]:
    """Yield pixels until the source ends cleanly on a record boundary."""
    record = bytearray(RECORD_SIZE)
    done = 0
    while True:
        count = _fill_record(source, record, done)
        if count == 0:
            return
        if count < RECORD_SIZE:
            raise TruncatedPixelRecord(
                f"Failed to read enough data for pixel {done}! Read {count} bytes.",
                bytes_read=count,
            )
        yield parse_pixel(record)
        done += 1


def decode_pixels(
    source: BinaryIO,
    expected: int = 0,
    settings: Optional[DecodeSettings] = None,
) -> List[Pixel]:
    """Decode every remaining record of the source.

    The declared count only sizes the initial buffer, clamped by
    ``settings.max_preallocated_pixels``; the stream length decides how
    many pixels come back.
    """
    settings = settings or DecodeSettings()
    capacity = settings.preallocation_for(expected)
    pixels: List[Pixel] = [Pixel()] * capacity
    count = 0
    for pixel in iter_pixels(source):
        if count < capacity:
            pixels[count] = pixel
        else:
            pixels.append(pixel)
        count += 1
    del pixels[count:]
    return pixels
