from __future__ import annotations

import logging
from typing import Any

from . import envelopes
from .core.matcher.match import is_valid
from .core.projector.project import project
from .core.schema.model import DEFAULT_SCHEMA, Schema, is_valid_schema, load_schema
from .runtime.loader import load_schema_file
from .settings import settings

logger = logging.getLogger(__name__)


def _configured_schema() -> Schema:
    if settings.schema_path:
        logger.info(f"Loading response schema from {settings.schema_path}")
        return load_schema_file(settings.schema_path)
    return DEFAULT_SCHEMA


class Shaper:
    """Response shaper bound to one schema.

    The schema is validated on construction; an invalid one raises
    :class:`~jshape.core.schema.model.SchemaConfigError` and no instance is made.
    """

    validate = staticmethod(is_valid)
    is_valid_schema = staticmethod(is_valid_schema)

    def __init__(
        self,
        schema: Any = None,
        *,
        compound_fallback: bool | None = None,
    ) -> None:
        self._schema = _configured_schema() if schema is None else load_schema(schema)
        self._compound_fallback = compound_fallback

    @property
    def schema(self) -> Schema:
        return self._schema

    def is_valid(self, candidate: Any) -> bool:
        return is_valid(candidate, self._schema)

    def get_response(self, candidate: Any, schema: Any = None) -> dict[str, Any]:
        """Shape ``candidate`` by its own status, against ``schema`` or the bound one."""
        target = self._schema if schema is None else load_schema(schema)
        return project(candidate, target, compound_fallback=self._compound_fallback)

    def success(self, payload: Any) -> dict[str, Any]:
        return envelopes.success(payload, self._schema, compound_fallback=self._compound_fallback)

    def fail(self, payload: Any) -> dict[str, Any]:
        return envelopes.fail(payload, self._schema, compound_fallback=self._compound_fallback)

    def error(self, message: str, code: int | None = None) -> dict[str, Any]:
        return envelopes.error(
            message, code, self._schema, compound_fallback=self._compound_fallback
        )

    def coerce(self, candidate: Any, status: str) -> dict[str, Any]:
        return envelopes.coerce(
            candidate, status, self._schema, compound_fallback=self._compound_fallback
        )
