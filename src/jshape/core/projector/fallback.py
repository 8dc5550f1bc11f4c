"""Cross-schema fallback.

When a custom schema does not match but the default schema does, the default
branch's data field (``data`` or ``message``) is renamed to the custom branch's
own data field, e.g. ``{"status": "success", "data": x}`` becomes
``{"payload": x, "status": "success"}`` for a custom ``payload`` field.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from ..matcher.match import find_branch, matches
from ..schema.model import BranchSpec, Schema

logger = logging.getLogger(__name__)


def _branch_for_status(status: Any, schema: Schema) -> BranchSpec | None:
    if not isinstance(status, str):
        return None
    return schema.get(status)


def single_data_field(spec: BranchSpec | None) -> str | None:
    """Name of the only non-status required field of ``spec``, if exactly one."""
    if spec is None:
        return None
    fields = [k for k in spec.required if k != "status"]
    return fields[0] if len(fields) == 1 else None


def compound_fallback(
    candidate: Mapping[str, Any], schema: Schema, default: Schema
) -> dict[str, Any] | None:
    status = candidate["status"]

    default_spec = _branch_for_status(status, default)
    if default_spec is None or not matches(candidate, default_spec):
        name = find_branch(candidate, default)
        if name is None:
            return None
        default_spec = default[name]

    source = single_data_field(default_spec)
    target = single_data_field(_branch_for_status(status, schema))
    if source is None or target is None:
        return None

    logger.debug(f"Mapping default field '{source}' onto '{target}' for status={status!r}")
    return {target: candidate[source], "status": status}
