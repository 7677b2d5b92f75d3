"""Identifier casing helpers used to derive generated symbol and selector names."""

from __future__ import annotations

import re

_SEPARATOR_RE = re.compile(r"[\s_\-.]+(.)?")
_CAMEL_BOUNDARY_RE = re.compile(r"([a-z0-9])([A-Z])")
_NON_ALNUM_RE = re.compile(r"[^a-zA-Z0-9]+")
_UNSAFE_NAME_RE = re.compile(r"[^\w-]+")


def camel_case(text: str) -> str:
    """``"my-icon_name"`` -> ``"myIconName"``."""
    result = _SEPARATOR_RE.sub(lambda m: (m.group(1) or "").upper(), text.strip())
    return result[:1].lower() + result[1:]


def pascal_case(text: str) -> str:
    result = camel_case(text)
    return result[:1].upper() + result[1:]


def kebab_case(text: str) -> str:
    """``"myIcon name"`` -> ``"my-icon-name"``."""
    result = _CAMEL_BOUNDARY_RE.sub(r"\1-\2", text)
    result = _NON_ALNUM_RE.sub("-", result)
    return result.strip("-").lower()


def safe_name(stem: str) -> str:
    """Filesystem- and symbol-safe name from a file stem."""
    name = _UNSAFE_NAME_RE.sub("-", stem).strip("-")
    return name or "svg"


def symbol_name(name: str) -> str:
    """PascalCase identifier that is valid in TypeScript (never starts with a digit)."""
    result = pascal_case(name)
    if not result or result[0].isdigit():
        result = f"Svg{result}"
    return result
