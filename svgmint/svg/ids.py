"""Identifier namespacer: make every DOM id unique per generated asset and instance.

``id="a"`` becomes ``id="<prefix>-a-{{uuid}}"`` and every same-document reference
(``href="#a"``, ``url(#a)``, ``#a`` selectors in styles) follows. Matching always
anchors on the full id token, so ``a`` never touches ``a2``.
"""

from __future__ import annotations

import logging
import re

from svgmint.svg.styles import protect_placeholders, restore_placeholders

logger = logging.getLogger(__name__)

_ID_ATTR_RE = re.compile(r"""(?<![\w:-])id\s*=\s*(["'])(.*?)\1""")
_QUOTED_REF_RE = re.compile(r"""(?<![\w:-])([\w:-]+)(\s*=\s*)(["'])#([^"'\s]+)\3""")
_URL_REF_RE = re.compile(r"""url\(\s*(["']?)#([^"')\s]+)\1\s*\)""")
# Selector preludes: text right before a "{" that is not a declaration body
_CSS_PRELUDE_RE = re.compile(r"(^|[{}])([^{}]+)(?=\{)")
_CSS_ID_SELECTOR_RE = re.compile(r"#(-?[_a-zA-Z][\w-]*)")

# "#abc" in these is a hex color, not a reference
_PAINT_ATTRIBUTES = {"fill", "stroke", "color", "stop-color", "flood-color", "lighting-color"}


def collect_ids(svg_text: str) -> list[str]:
    """Distinct id attribute values, in document order."""
    seen: dict[str, None] = {}
    for match in _ID_ATTR_RE.finditer(svg_text):
        value = match.group(2).strip()
        if value:
            seen.setdefault(value, None)
    return list(seen)


def namespaced_id(id_value: str, prefix: str, instance_variable: str = "uuid") -> str:
    return f"{prefix}-{id_value}-{{{{{instance_variable}}}}}"


def namespace_ids(
    svg_text: str,
    prefix: str,
    instance_variable: str = "uuid",
    ids: list[str] | None = None,
) -> str:
    """Rewrite id definitions and every internal reference to them.

    ``ids`` defaults to ``collect_ids(svg_text)``; pass it when the ids were
    collected before an earlier rewrite of the text.
    """
    id_map = _id_map(collect_ids(svg_text) if ids is None else ids, prefix, instance_variable)
    if not id_map:
        return svg_text

    def replace_definition(m: re.Match) -> str:
        quote, value = m.group(1), m.group(2).strip()
        if value not in id_map:
            return m.group(0)
        return f"id={quote}{id_map[value]}{quote}"

    def replace_reference(m: re.Match) -> str:
        attribute, equals, quote, value = m.groups()
        if value not in id_map or attribute.lower() in _PAINT_ATTRIBUTES:
            return m.group(0)
        return f"{attribute}{equals}{quote}#{id_map[value]}{quote}"

    svg_text = _ID_ATTR_RE.sub(replace_definition, svg_text)
    svg_text = _QUOTED_REF_RE.sub(replace_reference, svg_text)
    svg_text = _rewrite_urls(svg_text, id_map)
    logger.debug("Namespaced %d ids with prefix %s", len(id_map), prefix)
    return svg_text


def namespace_style_refs(css: str, ids: list[str], prefix: str, instance_variable: str = "uuid") -> str:
    """Rewrite ``#id`` selectors and ``url(#id)`` values in extracted styles."""
    id_map = _id_map(ids, prefix, instance_variable)
    if not css or not id_map:
        return css

    def replace_selector(m: re.Match) -> str:
        value = m.group(1)
        if value not in id_map:
            return m.group(0)
        return f"#{id_map[value]}"

    def replace_prelude(m: re.Match) -> str:
        return m.group(1) + _CSS_ID_SELECTOR_RE.sub(replace_selector, m.group(2))

    css = restore_placeholders(_CSS_PRELUDE_RE.sub(replace_prelude, protect_placeholders(css)))
    return _rewrite_urls(css, id_map)


def _id_map(ids: list[str], prefix: str, instance_variable: str) -> dict[str, str]:
    return {value: namespaced_id(value, prefix, instance_variable) for value in ids}


def _rewrite_urls(text: str, id_map: dict[str, str]) -> str:
    def replace(m: re.Match) -> str:
        quote, value = m.group(1), m.group(2)
        if value not in id_map:
            return m.group(0)
        return f"url({quote}#{id_map[value]}{quote})"

    return _URL_REF_RE.sub(replace, text)
