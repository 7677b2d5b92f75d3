"""S3.01: Id namespacing.

Every id becomes ``<hash>-<id>-{{uuid}}``; references in the markup and in the
extracted styles follow.
"""

from __future__ import annotations

from svgmint.engine.context import FileContext
from svgmint.engine.registry import Layer, stage
from svgmint.svg.ids import namespace_ids, namespace_style_refs
from svgmint.svg.variables import normalize_placeholders


@stage(
    id="S3.01",
    layer=Layer.NAMESPACING,
    dependencies=["S2.02"],
    description="Namespace ids and their references",
)
def id_namespacing(ctx: FileContext) -> None:
    if not ctx.ids:
        return
    source = ctx.source
    instance_variable = ctx.config.instance_variable
    # Ids were collected before normalization
    ids = [normalize_placeholders(value) for value in ctx.ids]
    source.svg = namespace_ids(source.svg, source.hash, instance_variable, ids=ids)
    source.css = namespace_style_refs(source.css, ids, source.hash, instance_variable)
