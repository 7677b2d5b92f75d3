"""S0.01: SVG signature.

Reject files whose content carries no ``<svg ...>`` open tag.
"""

from __future__ import annotations

from svgmint.engine.context import FileContext
from svgmint.engine.registry import Layer, stage
from svgmint.errors import NotAnSvgError
from svgmint.svg.validation import is_svg_content


@stage(
    id="S0.01",
    layer=Layer.VALIDATION,
    description="Require an <svg> open tag",
)
def svg_signature(ctx: FileContext) -> None:
    if not is_svg_content(ctx.source.svg):
        raise NotAnSvgError(ctx.path)
