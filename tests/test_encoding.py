import io

import pytest

from rfarbfeld import DecodeSettings, ErrorKind, IoError, Pixel, TruncatedPixelRecord, decode
from rfarbfeld.protocol import decode_pixels, iter_pixels, pack_header, pack_pixel, parse_pixel, read_dimensions


class TrickleReader:
    """Hands out at most ``step`` bytes per read, like a pipe."""

    def __init__(self, data, step=3):
        self._data = io.BytesIO(data)
        self._step = step

    def read(self, size=-1):
        return self._data.read(min(size, self._step))


class FailingReader:
    def __init__(self, data):
        self._data = io.BytesIO(data)

    def read(self, size=-1):
        chunk = self._data.read(size)
        if not chunk:
            raise OSError("device went away")
        return chunk


def test_parse_pixel_is_big_endian():
    assert parse_pixel(bytes.fromhex("0102 0304 0506 0708")) == Pixel(0x0102, 0x0304, 0x0506, 0x0708)
    with pytest.raises(ValueError):
        parse_pixel(b"\x00" * 7)


def test_pack_pixel_layout():
    assert pack_pixel(Pixel(1, 2, 0xFFFF, 0x8000)) == bytes.fromhex("0001 0002 ffff 8000")


def test_pack_header_layout():
    assert pack_header(258, 1) == b"farbfeld" + bytes.fromhex("00000102 00000001")


def test_read_dimensions_full_u32_range():
    width, height = read_dimensions(io.BytesIO(bytes.fromhex("ffffffff 00000000")))
    assert (width, height) == (0xFFFFFFFF, 0)


def test_short_reads_are_joined():
    data = bytes.fromhex("0001 0002 0003 0004 0005 0006 0007 0008")
    assert decode_pixels(TrickleReader(data)) == [Pixel(1, 2, 3, 4), Pixel(5, 6, 7, 8)]


def test_trickled_partial_record_is_truncated():
    with pytest.raises(TruncatedPixelRecord) as info:
        decode_pixels(TrickleReader(b"\x00" * 13))
    assert info.value.bytes_read == 5


def test_read_failure_is_wrapped():
    with pytest.raises(IoError) as info:
        decode_pixels(FailingReader(b"\x00" * 8))
    assert info.value.kind is ErrorKind.IO_ERROR
    assert isinstance(info.value.cause, OSError)
    assert isinstance(info.value.__cause__, OSError)
    assert "device went away" in str(info.value)


def test_iter_pixels_is_lazy():
    source = io.BytesIO(bytes.fromhex("0001 0002 0003 0004") + b"\x00")
    pixels = iter_pixels(source)
    assert next(pixels) == Pixel(1, 2, 3, 4)
    with pytest.raises(TruncatedPixelRecord):
        next(pixels)


def test_declared_count_does_not_bound_decoding():
    data = b"\x00\x01" * 4 * 5
    settings = DecodeSettings(max_preallocated_pixels=2)
    assert len(decode_pixels(io.BytesIO(data), expected=1_000_000, settings=settings)) == 5


def test_huge_declared_count_with_no_records():
    assert decode_pixels(io.BytesIO(b""), expected=0xFFFFFFFF * 0xFFFFFFFF) == []


@pytest.mark.parametrize("data", [b"", b"farbfeld"])
def test_read_failure_in_header_or_dimensions(data):
    with pytest.raises(IoError) as info:
        decode(FailingReader(data))
    assert isinstance(info.value.cause, OSError)


def test_closed_source_is_io_error():
    source = io.BytesIO(b"farbfeld")
    source.close()
    with pytest.raises(IoError) as info:
        decode(source)
    assert isinstance(info.value.cause, ValueError)
