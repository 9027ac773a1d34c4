from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

DEFAULT_MAX_PREALLOCATED_PIXELS = 1 << 20
MAX_PREALLOC_ENV_VAR = "RFARBFELD_MAX_PREALLOC"


@dataclass
class DecodeSettings:
    max_preallocated_pixels: int = DEFAULT_MAX_PREALLOCATED_PIXELS

    def __post_init__(self) -> None:
        if self.max_preallocated_pixels < 0:
            raise ValueError("max_preallocated_pixels must not be negative")

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "DecodeSettings":
        env = os.environ if environ is None else environ
        raw = env.get(MAX_PREALLOC_ENV_VAR)
        if raw is None or raw.strip() == "":
            return cls()
        try:
            value = int(raw)
        except ValueError as exc:
            raise ValueError(f"{MAX_PREALLOC_ENV_VAR} must be an integer, got {raw!r}") from exc
        return cls(max_preallocated_pixels=value)

    def preallocation_for(self, declared: int) -> int:
        """Clamp a declared pixel count to the eager allocation ceiling."""
        return max(0, min(declared, self.max_preallocated_pixels))
