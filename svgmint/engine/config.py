"""Pipeline configuration: controls per-run engine behavior."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from svgmint.config import Settings


@dataclass
class PipelineConfig:
    """Knobs shared by every stage of one conversion run."""

    # Namespacing hash
    hash_length: int = 6

    # Reserved template variable holding the runtime instance id
    instance_variable: str = "uuid"

    # viewBox-only files get 100% x 100% dimensions instead of bare viewBox values
    percent_fallback: bool = True

    # Scope CSS with the kebab-cased module name instead of the per-file hash
    scope_by_module: bool = False
    module: str = "svgmint"

    # Reject files that are not well-formed XML (S0.02)
    strict_xml: bool = False

    @classmethod
    def from_settings(cls, settings: "Settings") -> "PipelineConfig":
        return cls(
            percent_fallback=settings.percent_fallback,
            scope_by_module=settings.scope_by_module,
            module=settings.module,
            strict_xml=settings.strict_xml,
        )
