"""S1.03: Id collection.

Record every id before placeholder normalization rewrites attribute values, so
templated ids keep matching their references in S3.01.
"""

from __future__ import annotations

from svgmint.engine.context import FileContext
from svgmint.engine.registry import Layer, stage
from svgmint.svg.ids import collect_ids


@stage(
    id="S1.03",
    layer=Layer.EXTRACTION,
    dependencies=["S1.02"],
    description="Collect document ids",
)
def id_collection(ctx: FileContext) -> None:
    ctx.ids = collect_ids(ctx.source.svg)
