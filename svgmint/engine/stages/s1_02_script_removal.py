"""S1.02: Script removal."""

from __future__ import annotations

from svgmint.engine.context import FileContext
from svgmint.engine.registry import Layer, stage
from svgmint.svg.styles import remove_scripts


@stage(
    id="S1.02",
    layer=Layer.EXTRACTION,
    dependencies=["S1.01"],
    description="Drop inline <script> blocks",
)
def script_removal(ctx: FileContext) -> None:
    ctx.source.svg = remove_scripts(ctx.source.svg)
