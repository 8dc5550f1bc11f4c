"""Key-presence matching of candidates against schema branches."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from ..schema.model import DEFAULT_SCHEMA, BranchSpec, Schema, as_schema


def is_mapping(candidate: Any) -> bool:
    return isinstance(candidate, Mapping)


def has_required_keys(keys: Iterable[str], candidate: Any) -> bool:
    keys = list(keys)
    # An empty key list is a catch-all
    if not keys:
        return True
    if not is_mapping(candidate):
        return False
    return all(key in candidate for key in keys)


def matches(candidate: Any, spec: BranchSpec) -> bool:
    """True if every required key of ``spec`` is a key of ``candidate``.

    Values are not inspected, so ``{"data": None}`` satisfies ``data``.
    """
    return has_required_keys(spec.required, candidate)


def is_valid(candidate: Any, schema: Schema = DEFAULT_SCHEMA) -> bool:
    return any(matches(candidate, spec) for spec in as_schema(schema).values())


def find_branch(candidate: Any, schema: Schema) -> str | None:
    """Return the first branch, in declaration order, matched by ``candidate``."""
    for name, spec in as_schema(schema).items():
        if matches(candidate, spec):
            return name
    return None
