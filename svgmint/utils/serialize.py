"""TypeScript object-literal serializer for generated asset modules."""

from __future__ import annotations

import re
from typing import Any

_IDENTIFIER_RE = re.compile(r"^[A-Za-z_$][\w$]*$")


def ts_string(value: str) -> str:
    """Single-quoted TypeScript string literal."""
    escaped = value.replace("\\", "\\\\").replace("'", "\\'")
    escaped = escaped.replace("\n", "\\n").replace("\r", "\\r")
    return f"'{escaped}'"


def ts_key(key: str) -> str:
    return key if _IDENTIFIER_RE.match(key) else ts_string(key)


def ts_literal(value: Any) -> str:
    """Render dicts, lists and scalars as a compact TypeScript expression."""
    if isinstance(value, dict):
        members = ", ".join(f"{ts_key(str(k))}: {ts_literal(v)}" for k, v in value.items())
        return "{" + members + "}"
    if isinstance(value, (list, tuple)):
        return "[" + ", ".join(ts_literal(v) for v in value) + "]"
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return "null"
    if isinstance(value, (int, float)):
        return repr(value)
    return ts_string(str(value))


def ts_interface_body(tree: dict[str, Any]) -> str:
    """``{"uuid": "number", "colors": {"fill": "string"}}`` -> ``{uuid?: number; colors?: {fill?: string}}``."""
    members = []
    for key, value in tree.items():
        rendered = ts_interface_body(value) if isinstance(value, dict) else value
        members.append(f"{ts_key(key)}?: {rendered}")
    return "{" + "; ".join(members) + "}"
