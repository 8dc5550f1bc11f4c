"""Projection of candidates onto the branch they match.

``project`` never raises for bad input: anything that cannot be shaped comes
back as an :class:`ErrorResult`. Only a malformed schema raises
(:class:`~jshape.core.schema.model.SchemaConfigError`).
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from ...settings import settings
from ..matcher.match import find_branch, is_mapping
from ..schema.model import DEFAULT_SCHEMA, Schema, as_schema
from .fallback import compound_fallback as _compound_fallback

logger = logging.getLogger(__name__)

STATUS_KEY = "status"


class ErrorResult(dict):
    """Fixed ``{"status": "error", "message": ""}`` envelope for unshapeable input.

    ``reason`` is kept as an attribute so it never leaks into the response.
    """

    def __init__(self, reason: str = "") -> None:
        super().__init__({STATUS_KEY: "error", "message": ""})
        self.reason = reason

    def __repr__(self) -> str:
        return f"ErrorResult({dict.__repr__(self)}, reason={self.reason!r})"


def pick(candidate: Mapping[str, Any], keys: Iterable[str]) -> dict[str, Any]:
    out: dict[str, Any] = {}
    for k in keys:
        if k in candidate and k not in out:
            out[k] = candidate[k]
    return out


def _default_fields(status: Any, default: Schema) -> list[str]:
    if isinstance(status, str) and status in default:
        return list(default[status].fields)
    # Unknown status: expose anything any default branch allows
    keys: list[str] = []
    for spec in default.values():
        keys.extend(k for k in spec.fields if k not in keys)
    return keys


def degrade(candidate: Mapping[str, Any], default: Schema = DEFAULT_SCHEMA) -> dict[str, Any]:
    status = candidate[STATUS_KEY]
    out = pick(candidate, _default_fields(status, default))
    out[STATUS_KEY] = status
    return out


def project(
    candidate: Any,
    schema: Schema = DEFAULT_SCHEMA,
    *,
    compound_fallback: bool | None = None,
) -> dict[str, Any]:
    """Shape ``candidate`` into the first branch of ``schema`` it matches.

    Args:
        candidate: Object to shape; only mappings with a non-None ``status`` are accepted
        schema: Ordered branch mapping, loaded or raw; earlier branches win ties
        compound_fallback: Allow mapping the default schema's data field onto the
            custom schema's field when only the default schema matches.
            ``None`` uses ``settings.compound_fallback``.

    Returns:
        A new dict with the permitted keys, or an :class:`ErrorResult`
    """
    if not is_mapping(candidate):
        logger.debug(f"Cannot shape non-mapping {type(candidate).__name__}")
        return ErrorResult("candidate is not a mapping")
    if candidate.get(STATUS_KEY) is None:
        logger.debug("Cannot shape candidate without status")
        return ErrorResult("candidate has no status")

    schema = as_schema(schema)
    branch = find_branch(candidate, schema)
    if branch is not None:
        out = pick(candidate, schema[branch].fields)
        out[STATUS_KEY] = candidate[STATUS_KEY]
        return out

    if compound_fallback is None:
        compound_fallback = settings.compound_fallback
    if compound_fallback:
        out = _compound_fallback(candidate, schema, DEFAULT_SCHEMA)
        if out is not None:
            return out

    logger.debug(
        f"No branch matched status={candidate[STATUS_KEY]!r}; degrading to default fields"
    )
    return degrade(candidate, DEFAULT_SCHEMA)
