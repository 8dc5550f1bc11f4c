"""Shape ad-hoc handler output into JSend-style response envelopes."""

from __future__ import annotations

from .core.matcher.match import find_branch, is_valid, matches
from .core.projector.project import ErrorResult, pick, project
from .core.schema.model import (
    DEFAULT_SCHEMA,
    BranchSpec,
    Schema,
    SchemaConfigError,
    as_schema,
    is_valid_schema,
    load_schema,
)
from .envelopes import coerce, error, fail, success
from .shaper import Shaper

__all__ = [
    "DEFAULT_SCHEMA",
    "BranchSpec",
    "ErrorResult",
    "Schema",
    "SchemaConfigError",
    "Shaper",
    "as_schema",
    "coerce",
    "error",
    "fail",
    "find_branch",
    "is_valid",
    "is_valid_schema",
    "load_schema",
    "matches",
    "pick",
    "project",
    "success",
]
