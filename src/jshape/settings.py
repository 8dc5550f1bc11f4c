from __future__ import annotations

import os
from dataclasses import dataclass, field


def _env_bool(name: str, default: bool) -> bool:
    val = os.getenv(name)
    if val is None:
        return default
    return val.lower() in {"1", "true", "yes", "on"}


@dataclass
class Settings:
    schema_path: str | None = field(default_factory=lambda: os.getenv("JSHAPE_SCHEMA_PATH"))
    compound_fallback: bool = field(
        default_factory=lambda: _env_bool("JSHAPE_COMPOUND_FALLBACK", True)
    )


settings = Settings()
