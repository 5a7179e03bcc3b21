"""Ingress field normalization.

Request bodies and query strings may use camelCase or snake_case. They are
mapped once, here, onto the canonical snake_case names used everywhere else.
"""
from __future__ import annotations

import re
from typing import Any, Mapping

from ..core.exceptions import ValidationError

_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])")

# Names that differ by more than case style.
FIELD_ALIASES = {
    "area": "place",
    "total_leave": "total_leaves",
    "note": "notes",
}


def to_snake(name: str) -> str:
    return _CAMEL_BOUNDARY.sub("_", name).lower()


def normalize_keys(data: Any) -> dict[str, Any]:
    if data is None:
        return {}
    if not isinstance(data, Mapping):
        raise ValidationError("Request body must be a JSON object", reason="invalid_body")

    out: dict[str, Any] = {}
    for key, value in data.items():
        canonical = to_snake(str(key))
        canonical = FIELD_ALIASES.get(canonical, canonical)
        # The canonical spelling wins over an alias sent in the same body.
        if canonical in out and to_snake(str(key)) != canonical:
            continue
        out[canonical] = value
    return out
