"""S2.01: Template variable scan.

Markup is scanned first and styles second, so a style declaration overrides a
markup declaration of the same path.
"""

from __future__ import annotations

from svgmint.engine.context import FileContext
from svgmint.engine.registry import Layer, stage
from svgmint.svg.variables import VariableScan, scan_variables


@stage(
    id="S2.01",
    layer=Layer.TEMPLATING,
    dependencies=["S1.01"],
    description="Build type and default maps from {{default|name}} placeholders",
)
def variable_scan(ctx: FileContext) -> None:
    scan = VariableScan(type_map=ctx.type_map, default_map=ctx.default_map)
    scan.merge(scan_variables(ctx.source.svg))
    scan.merge(scan_variables(ctx.source.css))
    ctx.type_map = scan.type_map
    ctx.default_map = scan.default_map
