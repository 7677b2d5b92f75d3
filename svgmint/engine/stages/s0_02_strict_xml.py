"""S0.02: Strict XML well-formedness.

Only planned when the run is configured with ``strict_xml``.
"""

from __future__ import annotations

from svgmint.engine.context import FileContext
from svgmint.engine.registry import Layer, stage
from svgmint.errors import MalformedXmlError
from svgmint.svg.validation import well_formed_error


@stage(
    id="S0.02",
    layer=Layer.VALIDATION,
    dependencies=["S0.01"],
    description="Reject markup that is not well-formed XML",
    enabled_if=lambda config: config.strict_xml,
)
def strict_xml(ctx: FileContext) -> None:
    error = well_formed_error(ctx.source.svg)
    if error:
        raise MalformedXmlError(ctx.path, error)
