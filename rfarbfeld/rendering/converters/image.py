from __future__ import annotations

from typing import List

from PIL import Image as PILImage

from ...logging_config import get_logger
from ...protocol import Image, Pixel
from .base import PillowBackedConverter

# Pillow 16-bit greyscale modes and the byte order of their raw data
GREY16_BYTEORDER = {"I;16": "little", "I;16L": "little", "I;16B": "big"}
CHANNEL_SCALE = 257

logger = get_logger("rendering.converters")


def to_pil(image: Image) -> PILImage.Image:
    """Render to an 8-bit RGBA Pillow image, keeping the high byte of each channel."""
    size = (image.width, image.height)
    if len(image) == 0:
        return PILImage.new("RGBA", size)
    data = bytearray()
    for pixel in image:
        data += bytes(channel >> 8 for channel in pixel)
    return PILImage.frombytes("RGBA", size, bytes(data))


def from_pil(img: PILImage.Image) -> Image:
    """Build an Image from any Pillow image.

    8-bit channels are widened by 257 so full intensity maps to 0xFFFF;
    16-bit greyscale keeps its precision.
    """
    if img.mode in GREY16_BYTEORDER:
        pixels = _grey16_pixels(img)
    else:
        pixels = _rgba8_pixels(img)
    logger.debug("Converted %s image %dx%d", img.mode, img.width, img.height)
    return Image(img.width, img.height, pixels)


def _grey16_pixels(img: PILImage.Image) -> List[Pixel]:
    byteorder = GREY16_BYTEORDER[img.mode]
    raw = img.tobytes()
    pixels = []
    for i in range(0, len(raw), 2):
        value = int.from_bytes(raw[i : i + 2], byteorder)
        pixels.append(Pixel(value, value, value, 0xFFFF))
    return pixels


def _rgba8_pixels(img: PILImage.Image) -> List[Pixel]:
    if img.mode != "RGBA":
        img = img.convert("RGBA")
    raw = img.tobytes()
    pixels = []
    for i in range(0, len(raw), 4):
        r, g, b, a = raw[i : i + 4]
        pixels.append(Pixel(r * CHANNEL_SCALE, g * CHANNEL_SCALE, b * CHANNEL_SCALE, a * CHANNEL_SCALE))
    return pixels


class PillowConverter(PillowBackedConverter):
    def load(self, path: str) -> Image:
        return from_pil(self._load_pil(path))
