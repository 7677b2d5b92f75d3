"""Plain TypeScript data modules: one ``<name>.ts`` per asset plus an ``index.ts`` barrel."""

from __future__ import annotations

import logging

from svgmint.blueprints import templates
from svgmint.blueprints.base import Blueprint, blueprint
from svgmint.models.record import OutputRecord
from svgmint.svg.variables import parse_interface_descriptor
from svgmint.utils.serialize import ts_interface_body, ts_literal
from svgmint.utils.strings import symbol_name

logger = logging.getLogger(__name__)

# Build-time only; never shipped in generated modules
_EXCLUDED_FIELDS = {"path", "context_interface"}


def render_module(record: OutputRecord) -> str:
    """``export interface XContext`` (dynamic assets only) followed by ``export const X``."""
    symbol = symbol_name(record.name)
    parts = []
    if record.context_interface:
        body = ts_interface_body(parse_interface_descriptor(record.context_interface))
        parts.append(templates.TS_INTERFACE_TEMPLATE.format(symbol=symbol, body=body))
    literal = ts_literal(record.to_dict(exclude=_EXCLUDED_FIELDS))
    parts.append(templates.TS_CONST_TEMPLATE.format(symbol=symbol, literal=literal))
    return "".join(parts)


def render_barrel(records: list[OutputRecord]) -> str:
    lines = []
    for record in records:
        symbol = symbol_name(record.name)
        names = f"{symbol}, {symbol}Context" if record.is_dynamic else symbol
        lines.append(templates.TS_EXPORT_TEMPLATE.format(names=names, module=record.name))
    return "\n".join(lines) + "\n" if lines else ""


@blueprint("typescript")
class TypeScriptBlueprint(Blueprint):
    def render(self, record: OutputRecord) -> str:
        return render_module(record)

    def save_file(self, record: OutputRecord) -> list[str]:
        return [self.write(self.join(f"{record.name}.ts"), self.render(record))]

    def generate_index_file(self, records: list[OutputRecord]) -> list[str]:
        path = self.write(self.join("index.ts"), render_barrel(records))
        logger.debug("Indexed %d assets in %s", len(records), path)
        return [path]
