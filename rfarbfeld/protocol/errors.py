from __future__ import annotations

from enum import Enum
from typing import Optional


class ErrorKind(Enum):
    IO_ERROR = "io_error"
    TRUNCATED_HEADER = "truncated_header"
    TRUNCATED_DIMENSIONS = "truncated_dimensions"
    TRUNCATED_PIXEL_RECORD = "truncated_pixel_record"
    INVALID_MAGIC = "invalid_magic"
    DIMENSION_MISMATCH = "dimension_mismatch"


class DecodeError(Exception):
    """Base class for every failure raised while decoding farbfeld data."""

    kind: ErrorKind

    def __init__(
        self,
        message: str,
        bytes_read: Optional[int] = None,
        cause: Optional[BaseException] = None,
    ) -> None:
        super().__init__(message)
        self.bytes_read = bytes_read
        self.cause = cause

    def __str__(self) -> str:
        message = super().__str__()
        if self.cause is not None:
            return f"{message}: {self.cause}"
        return message


class IoError(DecodeError):
    kind = ErrorKind.IO_ERROR


class TruncatedHeader(DecodeError):
    kind = ErrorKind.TRUNCATED_HEADER


class TruncatedDimensions(DecodeError):
    kind = ErrorKind.TRUNCATED_DIMENSIONS


class TruncatedPixelRecord(DecodeError):
    kind = ErrorKind.TRUNCATED_PIXEL_RECORD


class InvalidMagic(DecodeError):
    kind = ErrorKind.INVALID_MAGIC


class DimensionMismatch(DecodeError):
    kind = ErrorKind.DIMENSION_MISMATCH

    def __init__(self, expected: int, actual: int) -> None:
        super().__init__(f"Declared dimensions need {expected} pixels, got {actual}")
        self.expected = expected
        self.actual = actual
