from .file import STDIO_PATH, FileSource, load, save

__all__ = ["FileSource", "load", "save", "STDIO_PATH"]
