"""Pipeline orchestrator: runs stages in dependency order, one file at a time."""

from __future__ import annotations

import importlib
import logging
import pkgutil
import time

from svgmint.engine.config import PipelineConfig
from svgmint.engine.context import FileContext, SourceFile
from svgmint.engine.registry import Layer, StageRegistry, StageSpec, get_registry
from svgmint.errors import FileSkipError
from svgmint.models.record import OutputRecord

logger = logging.getLogger(__name__)


class Pipeline:
    """Orchestrates the per-file stage pipeline."""

    def __init__(
        self,
        registry: StageRegistry | None = None,
        config: PipelineConfig | None = None,
    ) -> None:
        self.registry = registry or get_registry()
        self.config = config or PipelineConfig()

    def context_for(self, source: SourceFile) -> FileContext:
        return FileContext(source=source, config=self.config)

    def run(self, ctx: FileContext) -> FileContext:
        """Run every stage on ``ctx``. The first failing stage stops the file."""
        start = time.perf_counter()

        ordered = self.registry.plan(ctx.config)

        for spec in ordered:
            if not self._run_stage(ctx, spec):
                break

        total = (time.perf_counter() - start) * 1000
        logger.debug(
            "Pipeline %s: %d/%d stages in %.1fms",
            ctx.path,
            len(ctx.completed_stages),
            len(ordered),
            total,
        )
        return ctx

    def process(self, source: SourceFile) -> OutputRecord | None:
        """Run the pipeline for one file; None when the file was skipped."""
        ctx = self.run(self.context_for(source))
        return None if ctx.skipped else ctx.record

    def run_layer(self, ctx: FileContext, layer: Layer) -> FileContext:
        """Run only the enabled stages of one layer."""
        for spec in self.registry.plan(ctx.config, layer=layer):
            if not self._run_stage(ctx, spec):
                break
        return ctx

    def _run_stage(self, ctx: FileContext, spec: StageSpec) -> bool:
        t0 = time.perf_counter()
        try:
            spec.fn(ctx)
        except FileSkipError as e:
            ctx.errors[spec.id] = str(e)
            ctx.skipped = True
            logger.warning("[%s] %s", spec.id, e)
            return False
        except Exception as e:
            ctx.errors[spec.id] = str(e)
            ctx.skipped = True
            logger.exception("[%s] FAILED on %s: %s", spec.id, ctx.path, e)
            return False
        ctx.completed_stages.add(spec.id)
        logger.debug("  %s completed in %.1fms", spec.id, (time.perf_counter() - t0) * 1000)
        return True


def register_stages() -> None:
    """Import all stage modules so @stage decorators fire."""
    package = importlib.import_module("svgmint.engine.stages")
    for _, module_name, _ in pkgutil.iter_modules(package.__path__):
        importlib.import_module(f"{package.__name__}.{module_name}")


def create_pipeline(config: PipelineConfig | None = None) -> Pipeline:
    """Factory function for creating a pipeline instance with every stage registered."""
    register_stages()
    return Pipeline(config=config)
