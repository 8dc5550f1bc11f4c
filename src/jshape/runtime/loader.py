from __future__ import annotations

import json
import logging
from pathlib import Path

from ..core.schema.model import Schema, SchemaConfigError, load_schema

logger = logging.getLogger(__name__)


def load_schema_file(path: str | Path) -> Schema:
    """Load a schema from a JSON object of ``{branch: {required, optional}}``."""
    p = Path(path)
    try:
        raw = json.loads(p.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        logger.error(f"Failed to read schema file {p}: {e}")
        raise SchemaConfigError(f"cannot read schema file {p}: {e}") from e
    return load_schema(raw)
