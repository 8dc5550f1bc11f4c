"""Status-keyed response schemas.

A schema maps a branch name (``success``, ``fail``, ``error`` for JSend) to the
fields a response in that branch must and may carry.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from types import MappingProxyType
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

logger = logging.getLogger(__name__)


class SchemaConfigError(ValueError):
    """Raised when a schema is malformed (e.g. a branch without ``required``)."""


class BranchSpec(BaseModel):
    model_config = ConfigDict(frozen=True)

    required: tuple[str, ...] = Field(..., description="Keys that must be present")
    optional: tuple[str, ...] = Field(
        default=(), description="Keys that are kept when present"
    )

    @property
    def fields(self) -> tuple[str, ...]:
        return self.required + self.optional


Schema = Mapping[str, BranchSpec]


def _freeze(branches: dict[str, BranchSpec]) -> Schema:
    return MappingProxyType(branches)


DEFAULT_SCHEMA: Schema = _freeze(
    {
        "success": BranchSpec(required=("status", "data")),
        "fail": BranchSpec(required=("status", "data")),
        "error": BranchSpec(required=("status", "message"), optional=("code", "data")),
    }
)


def _has_required(spec: Any) -> bool:
    if isinstance(spec, BranchSpec):
        return True
    return isinstance(spec, Mapping) and "required" in spec


def is_valid_schema(schema: Any) -> bool:
    """Return True if every branch in ``schema`` defines ``required``.

    ``required`` may be empty; an empty schema is valid.
    """
    if not isinstance(schema, Mapping):
        return False
    return all(_has_required(spec) for spec in schema.values())


def load_schema(raw: Any) -> Schema:
    """Parse a raw branch mapping into a read-only :data:`Schema`.

    Branch order is kept as given. Raises :class:`SchemaConfigError` when
    :func:`is_valid_schema` fails or a branch cannot be parsed.
    """
    if not is_valid_schema(raw):
        logger.error("Invalid schema: every branch must define 'required'")
        raise SchemaConfigError("every schema branch must define 'required'")

    branches: dict[str, BranchSpec] = {}
    for name, spec in raw.items():
        if isinstance(spec, BranchSpec):
            branches[str(name)] = spec
            continue
        try:
            branches[str(name)] = BranchSpec.model_validate(dict(spec))
        except ValidationError as e:
            logger.error(f"Invalid schema branch '{name}': {e}")
            raise SchemaConfigError(f"invalid schema branch '{name}': {e}") from e
    return _freeze(branches)


def as_schema(schema: Any) -> Schema:
    """Return ``schema`` as-is when already loaded, else run it through :func:`load_schema`."""
    if isinstance(schema, Mapping) and all(
        isinstance(spec, BranchSpec) for spec in schema.values()
    ):
        return schema
    return load_schema(schema)
