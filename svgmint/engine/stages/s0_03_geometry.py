"""S0.03: Geometry inference.

Resolve width/height/viewBox from the root tag. A file that yields neither
literal dimensions nor a usable viewBox cannot be rendered and is skipped.
"""

from __future__ import annotations

from svgmint.engine.context import FileContext
from svgmint.engine.registry import Layer, stage
from svgmint.errors import UnresolvableGeometryError
from svgmint.svg.geometry import infer_geometry


@stage(
    id="S0.03",
    layer=Layer.VALIDATION,
    dependencies=["S0.01"],
    description="Infer width, height and viewBox",
)
def geometry(ctx: FileContext) -> None:
    metadata = infer_geometry(ctx.source.svg, percent_fallback=ctx.config.percent_fallback)
    if metadata is None:
        raise UnresolvableGeometryError(ctx.path)
    ctx.metadata = metadata
