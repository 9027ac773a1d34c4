from __future__ import annotations

import os
from typing import Dict, Optional, Set

from ...protocol import Image
from ...settings import DecodeSettings
from .base import ImageConverter
from .farbfeld import FarbfeldConverter
from .image import PillowConverter, from_pil, to_pil

FARBFELD_EXTENSIONS: Set[str] = {".ff", ".farbfeld"}
PILLOW_EXTENSIONS: Set[str] = {".png", ".jpg", ".jpeg", ".gif", ".bmp", ".tif", ".tiff"}
SUPPORTED_EXTENSIONS: Set[str] = FARBFELD_EXTENSIONS | PILLOW_EXTENSIONS


class ImageLoader:
    def __init__(
        self,
        converters: Optional[Dict[str, ImageConverter]] = None,
        settings: Optional[DecodeSettings] = None,
    ) -> None:
        if converters is None:
            converters = {}
            farbfeld_converter = FarbfeldConverter(settings)
            for ext in FARBFELD_EXTENSIONS:
                converters[ext] = farbfeld_converter
            pillow_converter = PillowConverter()
            for ext in PILLOW_EXTENSIONS:
                converters[ext] = pillow_converter
        self._converters = converters

    @property
    def supported_extensions(self) -> Set[str]:
        return set(self._converters.keys())

    def load(self, path: str) -> Image:
        ext = os.path.splitext(path)[1].lower()
        converter = self._converters.get(ext)
        if not converter:
            raise ValueError(f"Unsupported file extension: {ext}")
        return converter.load(path)


def load_image(path: str, settings: Optional[DecodeSettings] = None) -> Image:
    return ImageLoader(settings=settings).load(path)


__all__ = [
    "FARBFELD_EXTENSIONS",
    "ImageConverter",
    "ImageLoader",
    "SUPPORTED_EXTENSIONS",
    "from_pil",
    "load_image",
    "to_pil",
]
