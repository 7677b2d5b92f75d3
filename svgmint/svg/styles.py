"""Style isolator: pull inline <style> blocks out of SVG markup and scope them.

Minification and scoping are targeted regex/brace-depth passes, not a CSS parser.
At-rules are handled as opaque blocks: conditional groups (@media, @supports, ...)
have their inner rules scoped, everything else (@keyframes, @font-face, ...) is
left untouched.
"""

from __future__ import annotations

import re

_STYLE_BLOCK_RE = re.compile(r"<style(?:\s[^>]*)?(?<!/)>([\s\S]*?)</style\s*>", re.IGNORECASE)
_SCRIPT_BLOCK_RE = re.compile(r"<script(?:\s[^>]*)?(?<!/)>[\s\S]*?</script\s*>", re.IGNORECASE)
_EMPTY_STYLE_RE = re.compile(r"<style(?:\s[^>]*)?/>", re.IGNORECASE)
_EMPTY_SCRIPT_RE = re.compile(r"<script(?:\s[^>]*)?/>", re.IGNORECASE)
_CDATA_RE = re.compile(r"<!\[CDATA\[([\s\S]*?)\]\]>")

_CSS_COMMENT_RE = re.compile(r"/\*[\s\S]*?\*/")
_CSS_PUNCTUATION_RE = re.compile(r"\s*([{}:;,~>+!])\s*")
_CSS_WHITESPACE_RE = re.compile(r"\s+")
_CSS_ZERO_UNIT_RE = re.compile(r"(?<=[:\s])0(?:px|em|pt)\b", re.IGNORECASE)

# Template markers would otherwise be read as block delimiters. Only whole
# tokens are swapped: compact CSS closes nested blocks with a bare "}}".
PLACEHOLDER_OPEN = "{{"
PLACEHOLDER_CLOSE = "}}"
_MARKER_OPEN = "_oo_"
_MARKER_CLOSE = "_OO_"
_PLACEHOLDER_TOKEN_RE = re.compile(r"\{\{([^{}]*)\}\}")

# At-rules whose body holds ordinary rules that must be scoped too
_GROUPING_AT_RULES = {"media", "supports", "document", "layer", "container"}
_ROOT_SELECTOR_RE = re.compile(r"^(?::root|svg)(?![\w-])", re.IGNORECASE)


class CssSyntaxError(ValueError):
    """Style content the minifier/scoper cannot process (unbalanced braces, stray text)."""


def get_inline_styles(svg_text: str) -> str:
    """Concatenated content of every <style> block, CDATA wrappers removed."""
    blocks = _STYLE_BLOCK_RE.findall(svg_text)
    return "".join(_CDATA_RE.sub(r"\1", block) for block in blocks)


def remove_styles(svg_text: str) -> str:
    return _EMPTY_STYLE_RE.sub("", _STYLE_BLOCK_RE.sub("", svg_text))


def remove_scripts(svg_text: str) -> str:
    return _EMPTY_SCRIPT_RE.sub("", _SCRIPT_BLOCK_RE.sub("", svg_text))


def protect_placeholders(css: str) -> str:
    return _PLACEHOLDER_TOKEN_RE.sub(rf"{_MARKER_OPEN}\1{_MARKER_CLOSE}", css)


def restore_placeholders(css: str) -> str:
    return css.replace(_MARKER_OPEN, PLACEHOLDER_OPEN).replace(_MARKER_CLOSE, PLACEHOLDER_CLOSE)


def minify_css(css: str) -> str:
    """Strip comments and collapse whitespace around ``{ } : ; , ~ > + !``."""
    css = _CSS_COMMENT_RE.sub("", css)
    css = _CSS_WHITESPACE_RE.sub(" ", css)
    css = _CSS_PUNCTUATION_RE.sub(r"\1", css)
    css = css.replace(";}", "}")
    css = _CSS_ZERO_UNIT_RE.sub("0", css)
    return css.strip()


def scope_css(css: str, scope: str) -> str:
    """Prefix every selector of every ordinary rule with ``scope``.

    ``css`` must already be minified. Raises CssSyntaxError on unbalanced braces
    or on text that is neither a rule nor an at-rule.
    """
    return "".join(_scope_block(css, scope))


def extract_scoped_styles(svg_text: str, scope_id: str, instance_variable: str = "uuid") -> str:
    """Extract, minify and scope the inline styles of ``svg_text``.

    Every selector gets the prefix ``.<scope_id>-{{<instance_variable>}}`` so each
    mounted instance of the generated asset carries its own style scope. Template
    placeholders inside declarations survive untouched.
    """
    raw = get_inline_styles(svg_text)
    if not raw.strip():
        return ""
    protected = protect_placeholders(raw)
    scope = f".{scope_id}-{_MARKER_OPEN}{instance_variable}{_MARKER_CLOSE}"
    scoped = scope_css(minify_css(protected), scope)
    return restore_placeholders(scoped)


def _scope_block(css: str, scope: str, pos: int = 0, end: int | None = None) -> list[str]:
    end = len(css) if end is None else end
    out: list[str] = []
    while pos < end:
        if css[pos].isspace():
            pos += 1
            continue
        brace = css.find("{", pos, end)
        semicolon = css.find(";", pos, end)
        closing = css.find("}", pos, end)
        if closing != -1 and (brace == -1 or closing < brace):
            raise CssSyntaxError(f"Unexpected '}}' at offset {closing}")

        # Statement at-rules: @import url(x); @charset "utf-8";
        if css.startswith("@", pos) and semicolon != -1 and (brace == -1 or semicolon < brace):
            out.append(css[pos:semicolon + 1])
            pos = semicolon + 1
            continue

        if brace == -1:
            trailing = css[pos:end].strip()
            raise CssSyntaxError(f"Dangling content without a block: {trailing[:40]!r}")

        prelude = css[pos:brace].strip()
        if not prelude:
            raise CssSyntaxError(f"Block without selector at offset {brace}")
        block_end = _matching_brace(css, brace, end)
        body_start = brace + 1

        if prelude.startswith("@"):
            name = prelude[1:].split(" ", 1)[0].split("(", 1)[0].lower()
            if name in _GROUPING_AT_RULES:
                inner = "".join(_scope_block(css, scope, body_start, block_end))
                out.append(f"{prelude}{{{inner}}}")
            else:
                out.append(css[pos:block_end + 1])
        else:
            if ";" in prelude:
                raise CssSyntaxError(f"Unterminated declaration before {prelude!r}")
            _check_declarations(css[body_start:block_end], prelude)
            selectors = ",".join(_scope_selector(sel, scope) for sel in prelude.split(","))
            out.append(f"{selectors}{{{css[body_start:block_end]}}}")
        pos = block_end + 1
    return out


def _matching_brace(css: str, start: int, end: int) -> int:
    depth = 0
    for index in range(start, end):
        char = css[index]
        if char == "{":
            depth += 1
        elif char == "}":
            depth -= 1
            if depth == 0:
                return index
    raise CssSyntaxError(f"Unclosed '{{' at offset {start}")


def _check_declarations(body: str, selector: str) -> None:
    if "{" in body:
        raise CssSyntaxError(f"Nested block inside rule {selector!r}")


def _scope_selector(selector: str, scope: str) -> str:
    selector = selector.strip()
    if not selector:
        raise CssSyntaxError("Empty selector")
    # The scope class lives on the root <svg>, so :root and svg collapse into it
    root = _ROOT_SELECTOR_RE.match(selector)
    if root:
        return scope + selector[root.end():]
    return f"{scope} {selector}"
