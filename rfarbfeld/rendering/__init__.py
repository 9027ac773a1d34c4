from .converters import from_pil, load_image, to_pil

__all__ = ["from_pil", "load_image", "to_pil"]
