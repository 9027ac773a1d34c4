from __future__ import annotations

from typing import Optional

from ...protocol import Image
from ...settings import DecodeSettings
from ...transport import FileSource
from .base import ImageConverter


class FarbfeldConverter(ImageConverter):
    def __init__(self, settings: Optional[DecodeSettings] = None) -> None:
        self._settings = settings

    def load(self, path: str) -> Image:
        return FileSource(path, self._settings).decode()
