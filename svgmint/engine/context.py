"""FileContext: the single mutable state object flowing through all stages.

Per-file text lives on SourceFile and is rewritten in place stage by stage.
Derived products (geometry, variable maps, the final record) live on FileContext.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from svgmint.engine.config import PipelineConfig
from svgmint.models.record import OutputRecord, SvgMetadata
from svgmint.utils.strings import kebab_case


@dataclass
class SourceFile:
    """One input SVG on disk."""

    path: str
    # Filesystem-safe identifier derived from the basename
    name: str
    # Raw markup, line breaks removed; inline <style> blocks are stripped by S1.01
    svg: str
    # Unique per-run namespacing identifier
    hash: str
    # Scoped, minified inline styles (empty until S1.01 runs)
    css: str = ""


@dataclass
class FileContext:
    """Shared state for one file while it moves through the pipeline."""

    source: SourceFile
    config: PipelineConfig = field(default_factory=PipelineConfig)

    # --- Derived products ---
    metadata: SvgMetadata | None = None
    # variable -> "number" | "string", nested by dot path
    type_map: dict[str, Any] = field(default_factory=dict)
    # variable -> default literal, nested by dot path
    default_map: dict[str, Any] = field(default_factory=dict)
    # Ids found in the document, in first-seen order
    ids: list[str] = field(default_factory=list)
    record: OutputRecord | None = None

    # --- Pipeline metadata ---
    completed_stages: set[str] = field(default_factory=set)
    errors: dict[str, str] = field(default_factory=dict)
    skipped: bool = False

    @property
    def path(self) -> str:
        return self.source.path

    @property
    def is_dynamic(self) -> bool:
        """True when the file declares at least one variable besides the reserved one."""
        return any(key != self.config.instance_variable for key in self.type_map)

    @property
    def scope_id(self) -> str:
        if self.config.scope_by_module:
            return kebab_case(self.config.module)
        return self.source.hash
