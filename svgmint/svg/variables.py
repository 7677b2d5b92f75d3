"""Template variable engine: the ``{{default|dot.path}}`` placeholder mini-language.

Placeholders may appear in any attribute value or CSS declaration. Scanning builds
two nested maps keyed by dot path:

    type_map     {"colors": {"fill": "string"}, "radius": "number"}
    default_map  {"colors": {"fill": "red"},    "radius": 5}

Normalization then rewrites every placeholder to its runtime form ``{{dot.path}}``.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from typing import Any

logger = logging.getLogger(__name__)

PLACEHOLDER_RE = re.compile(r"\{\{([^{}|]+)\|([^{}|]+)\}\}")
_NUMBER_RE = re.compile(r"^\s*[-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?\s*$")

NUMBER = "number"
STRING = "string"


@dataclass
class VariableScan:
    type_map: dict[str, Any] = field(default_factory=dict)
    default_map: dict[str, Any] = field(default_factory=dict)

    def merge(self, other: "VariableScan") -> "VariableScan":
        """Fold ``other`` into this scan; later declarations win."""
        for path, value in _flatten(other.type_map).items():
            dot_assign(self.type_map, path, value)
        for path, value in _flatten(other.default_map).items():
            dot_assign(self.default_map, path, value)
        return self


def parse_literal(value: str) -> int | float | str:
    """Numeric defaults become numbers, everything else stays a string."""
    if not _NUMBER_RE.match(value):
        return value
    text = value.strip()
    if "." in text or "e" in text.lower():
        return float(text)
    return int(text)


def infer_type(value: str) -> str:
    return NUMBER if _NUMBER_RE.match(value) else STRING


def scan_variables(text: str | None) -> VariableScan:
    """Collect every ``{{default|name}}`` declaration in ``text``.

    Repeated declarations of the same path are allowed; the last one wins and a
    conflicting default is reported.
    """
    scan = VariableScan()
    if not text:
        return scan
    for match in PLACEHOLDER_RE.finditer(text):
        default, name = match.group(1), match.group(2).strip()
        dot_assign(scan.type_map, name, infer_type(default))
        dot_assign(scan.default_map, name, parse_literal(default))
    return scan


def normalize_placeholders(text: str) -> str:
    """``{{red|fillColor}}`` -> ``{{fillColor}}``; defaults are dropped."""
    return PLACEHOLDER_RE.sub(lambda m: "{{" + m.group(2).strip() + "}}", text)


def dot_assign(tree: dict[str, Any], path: str, value: Any) -> dict[str, Any]:
    """Insert ``value`` at dot ``path`` without clobbering sibling keys.

    Intermediate objects are created when absent and reused when present. A leaf
    already set to a different value is overwritten (last write wins) with a
    diagnostic, as is a leaf that has to become an object or vice versa.
    """
    keys = [key for key in path.split(".") if key]
    if not keys:
        raise ValueError(f"Invalid variable path: {path!r}")

    node = tree
    for depth, key in enumerate(keys[:-1]):
        child = node.get(key)
        if not isinstance(child, dict):
            if child is not None:
                logger.warning(
                    "Variable %r redeclared as an object (was %r)", ".".join(keys[: depth + 1]), child
                )
            child = node[key] = {}
        node = child

    leaf = keys[-1]
    previous = node.get(leaf)
    if isinstance(value, dict):
        if not isinstance(previous, dict):
            node[leaf] = {}
        for key, nested in value.items():
            dot_assign(node[leaf], key, nested)
        return tree
    if previous is not None and previous != value:
        logger.warning("Variable %r redeclared: %r replaces %r", path, value, previous)
    node[leaf] = value
    return tree


def interface_descriptor(type_map: dict[str, Any]) -> str:
    """Type-shape descriptor string: ``{uuid:number;colors:{fill:string}}``."""
    members = []
    for key, value in type_map.items():
        rendered = interface_descriptor(value) if isinstance(value, dict) else value
        members.append(f"{key}:{rendered}")
    return "{" + ";".join(members) + "}"


def _flatten(tree: dict[str, Any], prefix: str = "") -> dict[str, Any]:
    flat: dict[str, Any] = {}
    for key, value in tree.items():
        path = f"{prefix}.{key}" if prefix else key
        if isinstance(value, dict):
            flat.update(_flatten(value, path))
        else:
            flat[path] = value
    return flat


def parse_interface_descriptor(descriptor: str) -> dict[str, Any]:
    """Inverse of interface_descriptor: ``{a:number;b:{c:string}}`` -> nested dict."""
    tree, end = _parse_descriptor_object(descriptor.strip(), 0)
    if end != len(descriptor.strip()):
        raise ValueError(f"Trailing content in descriptor: {descriptor!r}")
    return tree


def _parse_descriptor_object(text: str, pos: int) -> tuple[dict[str, Any], int]:
    if not text.startswith("{", pos):
        raise ValueError(f"Expected '{{' at offset {pos} in {text!r}")
    pos += 1
    tree: dict[str, Any] = {}
    while pos < len(text) and text[pos] != "}":
        colon = text.find(":", pos)
        if colon == -1:
            raise ValueError(f"Missing ':' after offset {pos} in {text!r}")
        key = text[pos:colon]
        pos = colon + 1
        if text.startswith("{", pos):
            tree[key], pos = _parse_descriptor_object(text, pos)
        else:
            ends = [i for i in (text.find(";", pos), text.find("}", pos)) if i != -1]
            if not ends:
                raise ValueError(f"Unterminated member {key!r} in {text!r}")
            tree[key] = text[pos:min(ends)]
            pos = min(ends)
        if text.startswith(";", pos):
            pos += 1
    if pos >= len(text):
        raise ValueError(f"Unclosed descriptor: {text!r}")
    return tree, pos + 1
