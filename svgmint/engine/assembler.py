"""Output assembler: merge the products of every stage into one OutputRecord."""

from __future__ import annotations

import copy

from svgmint.engine.context import FileContext
from svgmint.models.record import OutputRecord
from svgmint.svg.variables import NUMBER, interface_descriptor


def assemble(ctx: FileContext) -> OutputRecord:
    """Build the blueprint-facing record for a fully processed file.

    Dynamic files (at least one declared variable besides the reserved instance
    variable) carry ``contextInterface`` and ``contextDefaults``; static files
    carry neither. The instance variable is always synthesized as number / 0.
    """
    source = ctx.source
    metadata = ctx.metadata
    reserved = ctx.config.instance_variable

    context_interface = None
    context_defaults = None
    if ctx.is_dynamic:
        type_map = {reserved: NUMBER}
        type_map.update((k, v) for k, v in ctx.type_map.items() if k != reserved)
        context_interface = interface_descriptor(type_map)

        context_defaults = {k: v for k, v in copy.deepcopy(ctx.default_map).items() if k != reserved}
        context_defaults[reserved] = 0

    view_box = None
    if metadata is not None and metadata.view_box is not None:
        if metadata.view_box.width and metadata.view_box.height:
            view_box = metadata.view_box

    return OutputRecord(
        name=source.name,
        path=source.path,
        svg_hash=source.hash,
        svg=source.svg,
        css=source.css or None,
        width=metadata.width if metadata else None,
        height=metadata.height if metadata else None,
        view_box=view_box,
        context_interface=context_interface,
        context_defaults=context_defaults,
    )
