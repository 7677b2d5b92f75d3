"""Markup compactor: minimal SVG fragment for embedding as a string literal.

Best effort, not a validating parser: malformed input gives malformed (but never
crashing) output. Idempotent: ``compact(compact(x)) == compact(x)``. Removing the
root wrapper is a separate, one-shot step (``strip_wrapper``) because a fragment
may legitimately start with a nested <svg>.
"""

from __future__ import annotations

import re

_SVG_OPEN_RE = re.compile(r"<svg(?:\s[^>]*)?>", re.IGNORECASE)
_SVG_CLOSE_RE = re.compile(r"</svg\s*>", re.IGNORECASE)
_XML_PROLOG_RE = re.compile(r"<\?xml[\s\S]*?\?>", re.IGNORECASE)
_DOCTYPE_RE = re.compile(r"<!DOCTYPE[^>]*>", re.IGNORECASE)
_COMMENT_RE = re.compile(r"<!--[\s\S]*?-->")
_BETWEEN_TAGS_RE = re.compile(r">\s+<")
_TAG_RE = re.compile(r"<([^<>]+)>")

_QUOTED_RE = re.compile(r"""("[^"]*"|'[^']*')""")
_SLASH_SPACES_RE = re.compile(r" *\/ +| +\/ *")
_EQUALS_SPACES_RE = re.compile(r" *= *")
_TAG_WHITESPACE_RE = re.compile(r"\s+")


def compact(svg_text: str) -> str:
    """Drop comments, prolog and doctype; collapse whitespace between and inside tags."""
    svg_text = _COMMENT_RE.sub("", svg_text)
    svg_text = _XML_PROLOG_RE.sub("", svg_text)
    svg_text = _DOCTYPE_RE.sub("", svg_text)
    svg_text = _BETWEEN_TAGS_RE.sub("><", svg_text)
    svg_text = _TAG_RE.sub(lambda m: f"<{_compact_tag(m.group(1))}>", svg_text)
    return svg_text.strip()


def strip_wrapper(svg_text: str) -> str:
    """Remove a leading ``<svg ...>`` and the last ``</svg>``.

    Expects compacted text. The root wrapper is regenerated by the blueprints with
    bound attributes, so this runs exactly once per document.
    """
    svg_text = svg_text.lstrip()
    opening = _SVG_OPEN_RE.match(svg_text)
    if not opening:
        return svg_text
    svg_text = svg_text[opening.end():]
    closes = list(_SVG_CLOSE_RE.finditer(svg_text))
    if closes:
        last = closes[-1]
        svg_text = svg_text[: last.start()] + svg_text[last.end():]
    return svg_text.strip()


def _compact_tag(inner: str) -> str:
    # Odd indices are quoted attribute values, which stay byte-identical
    parts = _QUOTED_RE.split(inner)
    for index in range(0, len(parts), 2):
        part = _TAG_WHITESPACE_RE.sub(" ", parts[index])
        # </ p> and <br /> lose their slash padding
        part = _SLASH_SPACES_RE.sub("/", part)
        parts[index] = _EQUALS_SPACES_RE.sub("=", part)
    return "".join(parts).strip(" ")
