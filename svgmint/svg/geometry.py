"""Geometry extractor: width/height/viewBox inference from the root <svg> tag.

Only the first ``<svg ...>`` open tag is inspected; nested <svg> elements in the
content are never treated as the root.
"""

from __future__ import annotations

import logging
import math
import re

from svgmint.models.record import SvgMetadata, ViewBox

logger = logging.getLogger(__name__)

_ROOT_RE = re.compile(r"<svg\s[^>]*>", re.IGNORECASE)
# The lookbehind keeps stroke-width / data-height from matching
_WIDTH_RE = re.compile(r"""(?<![\w:-])width\s*=\s*(["'])(.*?)\1""")
_HEIGHT_RE = re.compile(r"""(?<![\w:-])height\s*=\s*(["'])(.*?)\1""")
_VIEWBOX_RE = re.compile(r"""(?<![\w:-])viewBox\s*=\s*(["'])(.*?)\1""")
_LENGTH_RE = re.compile(r"^\s*([-+]?(?:\d+\.?\d*|\.\d+))\s*(?:px)?\s*$")
_VIEWBOX_SPLIT_RE = re.compile(r"[\s,]+")

PERCENT = "100%"


def root_tag(svg_text: str) -> str | None:
    match = _ROOT_RE.search(svg_text)
    return match.group(0) if match else None


def parse_length(value: str | None) -> int | float | None:
    """Literal numeric length (unitless or px). Percentages and other units yield None."""
    if value is None or "%" in value:
        return None
    match = _LENGTH_RE.match(value)
    if not match:
        return None
    return _number(match.group(1))


def parse_viewbox(value: str | None) -> ViewBox | None:
    """``"0 0 100 50"`` (space and/or comma separated) -> ViewBox; None if not four numbers."""
    if not value:
        return None
    parts = [p for p in _VIEWBOX_SPLIT_RE.split(value.strip()) if p]
    if len(parts) != 4:
        return None
    try:
        minx, miny, width, height = (_number(p) for p in parts)
    except ValueError:
        return None
    return ViewBox(minx=minx, miny=miny, width=width, height=height)


def parse_root_attributes(root: str) -> tuple[str | None, str | None, ViewBox | None]:
    width = _WIDTH_RE.search(root)
    height = _HEIGHT_RE.search(root)
    view_box = _VIEWBOX_RE.search(root)
    return (
        width.group(2) if width else None,
        height.group(2) if height else None,
        parse_viewbox(view_box.group(2)) if view_box else None,
    )


def infer_geometry(svg_text: str, percent_fallback: bool = True) -> SvgMetadata | None:
    """Infer the canonical width/height/viewBox triple of an SVG document.

    1. Literal ``width`` and ``height`` win, unchanged; viewBox is kept if present.
    2. Otherwise a viewBox drives the result: a single literal side derives the
       other one through the viewBox aspect ratio (floored). With no literal side
       at all the result is ``100%`` x ``100%`` plus the viewBox, or the bare
       viewBox when ``percent_fallback`` is off.
    3. Nothing resolvable returns None.
    """
    root = root_tag(svg_text)
    if root is None:
        return None

    raw_width, raw_height, view_box = parse_root_attributes(root)
    width = parse_length(raw_width)
    height = parse_length(raw_height)

    if width is not None and height is not None:
        return SvgMetadata(width=width, height=height, view_box=view_box)

    if view_box is None or not view_box.width or not view_box.height:
        return None

    if width is not None:
        return SvgMetadata(
            width=width,
            height=math.floor(width * view_box.height / view_box.width),
            view_box=view_box,
        )
    if height is not None:
        return SvgMetadata(
            width=math.floor(height * view_box.width / view_box.height),
            height=height,
            view_box=view_box,
        )

    if percent_fallback:
        return SvgMetadata(width=PERCENT, height=PERCENT, view_box=view_box)
    return SvgMetadata(view_box=view_box)


def _number(text: str) -> int | float:
    value = float(text)
    if math.isnan(value) or math.isinf(value):
        raise ValueError(f"Not a finite number: {text}")
    return int(value) if value.is_integer() else value
