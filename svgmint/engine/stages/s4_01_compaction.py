"""S4.01: Markup compaction and root unwrapping."""

from __future__ import annotations

from svgmint.engine.context import FileContext
from svgmint.engine.registry import Layer, stage
from svgmint.svg.compactor import compact, strip_wrapper


@stage(
    id="S4.01",
    layer=Layer.ASSEMBLY,
    dependencies=["S3.01"],
    description="Collapse whitespace and strip the root wrapper",
)
def compaction(ctx: FileContext) -> None:
    ctx.source.svg = strip_wrapper(compact(ctx.source.svg))
