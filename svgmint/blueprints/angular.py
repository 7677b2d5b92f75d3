"""Angular blueprint: TypeScript assets plus an OnPush component per dynamic asset.

Layout under ``<output>/<module>/``:

    assets/<name>.ts                  every asset (same shape as the typescript blueprint)
    assets/index.ts                   barrel plus getNgSvgTemplate / getSVGViewbox helpers
    components/<name>.component.ts    dynamic assets only
    components/index.ts
    <module>.module.ts                NgModule declaring and exporting every component
"""

from __future__ import annotations

import logging

from svgmint.blueprints import templates
from svgmint.blueprints.base import Blueprint, blueprint
from svgmint.blueprints.typescript import render_barrel, render_module
from svgmint.models.record import OutputRecord
from svgmint.utils.serialize import ts_literal
from svgmint.utils.strings import kebab_case, symbol_name

logger = logging.getLogger(__name__)


@blueprint("angular")
class AngularBlueprint(Blueprint):
    @property
    def module(self) -> str:
        return self.settings.module

    def selector(self, record: OutputRecord) -> str:
        return f"{kebab_case(self.module)}-{kebab_case(record.name)}"

    def render(self, record: OutputRecord) -> str:
        """Component source for a dynamic asset."""
        symbol = symbol_name(record.name)
        return templates.NG_COMPONENT_TEMPLATE.format(
            symbol=symbol,
            selector=self.selector(record),
            width=ts_literal(record.width if record.width is not None else "100%"),
            height=ts_literal(record.height if record.height is not None else "100%"),
            view_box=f"{symbol}.viewBox" if record.view_box else "null",
        )

    def save_file(self, record: OutputRecord) -> list[str]:
        written = [self.write(self.join(self.module, "assets", f"{record.name}.ts"), render_module(record))]
        if record.is_dynamic:
            path = self.join(self.module, "components", f"{record.name}.component.ts")
            written.append(self.write(path, self.render(record)))
        return written

    def generate_index_file(self, records: list[OutputRecord]) -> list[str]:
        components = [r for r in records if r.is_dynamic]
        symbols = [symbol_name(r.name) for r in components]

        # Scoped styles use the module name or the per-asset hash as class prefix
        class_prefix = kebab_case(self.module) if self.settings.scope_by_module else "${svg.svgHash}"
        assets_index = render_barrel(records) + templates.NG_ASSET_HELPERS_TEMPLATE.format(
            class_prefix=class_prefix
        )

        components_index = "\n".join(
            templates.NG_COMPONENT_EXPORT_TEMPLATE.format(symbol=symbol, name=r.name)
            for symbol, r in zip(symbols, components)
        )
        if components_index:
            components_index += "\n"

        imports = ""
        if symbols:
            imports = templates.NG_MODULE_IMPORT_TEMPLATE.format(
                components=",\n  ".join(f"{s}Component" for s in symbols)
            )
        module_source = templates.NG_MODULE_TEMPLATE.format(
            imports=imports,
            components=", ".join(f"{s}Component" for s in symbols),
            module_symbol=symbol_name(self.module),
        )

        written = [
            self.write(self.join(self.module, "assets", "index.ts"), assets_index),
            self.write(self.join(self.module, "components", "index.ts"), components_index),
            self.write(self.join(self.module, f"{kebab_case(self.module)}.module.ts"), module_source),
        ]
        logger.debug("Generated %d angular components for module %s", len(components), self.module)
        return written
