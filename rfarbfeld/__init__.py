from .protocol import (
    DecodeError,
    DimensionMismatch,
    ErrorKind,
    Image,
    InvalidMagic,
    IoError,
    Pixel,
    TruncatedDimensions,
    TruncatedHeader,
    TruncatedPixelRecord,
    decode,
    decode_bytes,
    encode,
    write_image,
)
from .settings import DecodeSettings
from .transport import FileSource, load, save

__version__ = "0.1.0"

__all__ = [
    "decode",
    "decode_bytes",
    "DecodeError",
    "DecodeSettings",
    "DimensionMismatch",
    "encode",
    "ErrorKind",
    "FileSource",
    "Image",
    "InvalidMagic",
    "IoError",
    "load",
    "Pixel",
    "save",
    "TruncatedDimensions",
    "TruncatedHeader",
    "TruncatedPixelRecord",
    "write_image",
]
