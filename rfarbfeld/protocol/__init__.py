from .encoding import RECORD_SIZE, decode_pixels, encode_pixels, iter_pixels, pack_pixel, parse_pixel
from .errors import (
    DecodeError,
    DimensionMismatch,
    ErrorKind,
    InvalidMagic,
    IoError,
    TruncatedDimensions,
    TruncatedHeader,
    TruncatedPixelRecord,
)
from .header import MAGIC, pack_header, read_dimensions, read_exact, read_header
from .pipeline import decode, decode_bytes, encode, write_image
from .types import Image, Pixel

__all__ = [
    "decode",
    "decode_bytes",
    "decode_pixels",
    "DecodeError",
    "DimensionMismatch",
    "encode",
    "encode_pixels",
    "ErrorKind",
    "Image",
    "InvalidMagic",
    "IoError",
    "iter_pixels",
    "MAGIC",
    "pack_header",
    "pack_pixel",
    "parse_pixel",
    "Pixel",
    "read_dimensions",
    "read_exact",
    "read_header",
    "RECORD_SIZE",
    "TruncatedDimensions",
    "TruncatedHeader",
    "TruncatedPixelRecord",
    "write_image",
]
