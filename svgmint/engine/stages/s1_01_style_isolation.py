"""S1.01: Style isolation.

Move inline <style> content out of the markup into ``source.css``, minified and
scoped to ``.<scope>-{{uuid}}``.
"""

from __future__ import annotations

import logging

from svgmint.engine.context import FileContext
from svgmint.engine.registry import Layer, stage
from svgmint.errors import InvalidStyleError
from svgmint.svg.styles import CssSyntaxError, extract_scoped_styles, remove_styles

logger = logging.getLogger(__name__)


@stage(
    id="S1.01",
    layer=Layer.EXTRACTION,
    dependencies=["S0.03"],
    description="Extract, minify and scope inline styles",
)
def style_isolation(ctx: FileContext) -> None:
    source = ctx.source
    try:
        source.css = extract_scoped_styles(
            source.svg, ctx.scope_id, instance_variable=ctx.config.instance_variable
        )
    except CssSyntaxError as e:
        # Partially processed markup must never reach a blueprint
        source.svg = ""
        source.css = ""
        raise InvalidStyleError(ctx.path, str(e)) from e
    source.svg = remove_styles(source.svg)
    if source.css:
        logger.debug("Scoped %d bytes of css for %s", len(source.css), ctx.path)
