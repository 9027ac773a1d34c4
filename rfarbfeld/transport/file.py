from __future__ import annotations

import asyncio
import sys
from contextlib import contextmanager
from typing import BinaryIO, Iterator, Optional

from ..logging_config import get_logger
from ..protocol import Image, IoError, decode, write_image
from ..settings import DecodeSettings

STDIO_PATH = "-"

logger = get_logger("transport.file")


class FileSource:
    """Farbfeld byte source backed by a file path, or stdin/stdout for ``-``."""

    def __init__(self, path: str, settings: Optional[DecodeSettings] = None) -> None:
        self._path = path
        self._settings = settings

    @property
    def path(self) -> str:
        return self._path

    @contextmanager
    def open(self) -> Iterator[BinaryIO]:
        if self._path == STDIO_PATH:
            yield sys.stdin.buffer
            return
        try:
            handle = open(self._path, "rb")
        except OSError as exc:
            raise IoError(f"Failed to open {self._path}", cause=exc) from exc
        with handle:
            yield handle

    def decode(self) -> Image:
        with self.open() as handle:
            image = decode(handle, self._settings)
        logger.debug("Loaded %s (%dx%d)", self._path, image.width, image.height)
        return image

    async def decode_async(self) -> Image:
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(None, self.decode)

    def save(self, image: Image) -> int:
        if self._path == STDIO_PATH:
            written = write_image(image, sys.stdout.buffer)
            sys.stdout.buffer.flush()
            return written
        try:
            with open(self._path, "wb") as handle:
                return write_image(image, handle)
        except OSError as exc:
            raise IoError(f"Failed to write {self._path}", cause=exc) from exc


def load(path: str, settings: Optional[DecodeSettings] = None) -> Image:
    return FileSource(path, settings).decode()


def save(image: Image, path: str) -> int:
    return FileSource(path).save(image)
