"""Validation gate: cheap checks that decide whether a file enters the pipeline."""

from __future__ import annotations

import os
import re
import xml.etree.ElementTree as ET

_SIGNATURE_RE = re.compile(r"<svg(?:\s[^>]*)?>", re.IGNORECASE)


def is_svg_path(path: str) -> bool:
    """Extension check: ``*.svg`` files only (case-insensitive)."""
    return os.path.splitext(path)[1].lower() == ".svg"


def is_svg_content(text: str) -> bool:
    """Signature check: the text carries an ``<svg ...>`` open tag."""
    return bool(_SIGNATURE_RE.search(text))


def well_formed_error(text: str) -> str | None:
    """Parser message when ``text`` is not well-formed XML with an <svg> root, else None."""
    try:
        root = ET.fromstring(text)
    except ET.ParseError as e:
        return str(e)
    tag = root.tag.split("}")[-1] if "}" in root.tag else root.tag
    if tag != "svg":
        return f"root element is <{tag}>, not <svg>"
    return None
