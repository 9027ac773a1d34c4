from __future__ import annotations

from PIL import Image as PILImage
from PIL import ImageOps

from ...protocol import Image


class ImageConverter:
    def load(self, path: str) -> Image:
        raise NotImplementedError


class PillowBackedConverter(ImageConverter):
    @staticmethod
    def _load_pil(path: str) -> PILImage.Image:
        with PILImage.open(path) as img:
            img = ImageOps.exif_transpose(img)
            return img.copy()
