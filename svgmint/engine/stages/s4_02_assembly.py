"""S4.02: Record assembly."""

from __future__ import annotations

from svgmint.engine.assembler import assemble
from svgmint.engine.context import FileContext
from svgmint.engine.registry import Layer, stage


@stage(
    id="S4.02",
    layer=Layer.ASSEMBLY,
    dependencies=["S4.01"],
    description="Assemble the output record",
)
def assembly(ctx: FileContext) -> None:
    ctx.record = assemble(ctx)
