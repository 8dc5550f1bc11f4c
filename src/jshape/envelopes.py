"""JSend-style convenience constructors.

Each helper builds a candidate with the right ``status`` and hands it to
:func:`~jshape.core.projector.project.project`.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from .core.projector.project import ErrorResult, project
from .core.schema.model import DEFAULT_SCHEMA, Schema

SUCCESS = "success"
FAIL = "fail"
ERROR = "error"


def success(
    payload: Any, schema: Schema = DEFAULT_SCHEMA, *, compound_fallback: bool | None = None
) -> dict[str, Any]:
    if payload is None:
        return ErrorResult("success payload is None")
    return project({"status": SUCCESS, "data": payload}, schema, compound_fallback=compound_fallback)


def fail(
    payload: Any, schema: Schema = DEFAULT_SCHEMA, *, compound_fallback: bool | None = None
) -> dict[str, Any]:
    if payload is None:
        return ErrorResult("fail payload is None")
    return project({"status": FAIL, "data": payload}, schema, compound_fallback=compound_fallback)


def error(
    message: str,
    code: int | None = None,
    schema: Schema = DEFAULT_SCHEMA,
    *,
    compound_fallback: bool | None = None,
) -> dict[str, Any]:
    if not isinstance(message, str):
        return ErrorResult("error message is not a string")
    candidate: dict[str, Any] = {"status": ERROR, "message": message}
    if code is not None:
        candidate["code"] = code
    return project(candidate, schema, compound_fallback=compound_fallback)


def coerce(
    candidate: Any,
    status: str,
    schema: Schema = DEFAULT_SCHEMA,
    *,
    compound_fallback: bool | None = None,
) -> dict[str, Any]:
    """Shape ``candidate`` as a ``status`` response, overriding its own status."""
    if not isinstance(candidate, Mapping):
        return ErrorResult("candidate is not a mapping")
    return project({**candidate, "status": status}, schema, compound_fallback=compound_fallback)
