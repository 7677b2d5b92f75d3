"""S2.02: Placeholder normalization."""

from __future__ import annotations

from svgmint.engine.context import FileContext
from svgmint.engine.registry import Layer, stage
from svgmint.svg.variables import normalize_placeholders


@stage(
    id="S2.02",
    layer=Layer.TEMPLATING,
    dependencies=["S2.01", "S1.03"],
    description="Rewrite {{default|name}} to {{name}}",
)
def normalization(ctx: FileContext) -> None:
    ctx.source.svg = normalize_placeholders(ctx.source.svg)
    ctx.source.css = normalize_placeholders(ctx.source.css)
