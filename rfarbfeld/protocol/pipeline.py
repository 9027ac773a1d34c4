from __future__ import annotations

import io
from typing import BinaryIO, Optional

from ..logging_config import get_logger
from ..settings import DecodeSettings
from .encoding import decode_pixels, encode_pixels
from .header import pack_header, read_dimensions, read_header
from .types import Image

logger = get_logger("protocol.pipeline")


def decode(source: BinaryIO, settings: Optional[DecodeSettings] = None) -> Image:
    """Decode one farbfeld image from a readable byte source.

    Header, dimensions and pixel records are consumed in that order; the
    first failure propagates and no partial image is returned. Read failures
    (OSError, or ValueError from a closed source) surface as IoError.
    """
    read_header(source)
    width, height = read_dimensions(source)
    logger.debug("Header ok, declared %dx%d", width, height)
    pixels = decode_pixels(source, width * height, settings)
    logger.debug("Read %d pixel records", len(pixels))
    return Image(width, height, pixels)


def decode_bytes(data: bytes, settings: Optional[DecodeSettings] = None) -> Image:
    """Decode an in-memory farbfeld buffer."""
    return decode(io.BytesIO(data), settings)


def encode(image: Image) -> bytes:
    """Serialize an image back to farbfeld bytes."""
    return pack_header(image.width, image.height) + encode_pixels(image)


def write_image(image: Image, sink: BinaryIO) -> int:
    """Write an image to a writable byte sink, returning bytes written."""
    data = encode(image)
    sink.write(data)
    logger.debug("Wrote %dx%d image (%d bytes)", image.width, image.height, len(data))
    return len(data)
