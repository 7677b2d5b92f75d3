"""Stage registry.

A stage is a function of one FileContext, registered with ``@stage`` in its own
module under ``svgmint.engine.stages``:

    @stage(id="S0.02", layer=Layer.VALIDATION, dependencies=["S0.01"],
           enabled_if=lambda config: config.strict_xml)
    def strict_xml(ctx: FileContext) -> None:
        ...

A run asks the registry for a plan: the stages enabled by its PipelineConfig, in
dependency order. Stages that are free to run at the same point go by layer, then
by id, so every run of the same configuration executes the same sequence.
"""

from __future__ import annotations

import enum
import heapq
import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Callable

if TYPE_CHECKING:
    from svgmint.engine.config import PipelineConfig
    from svgmint.engine.context import FileContext

logger = logging.getLogger(__name__)


class Layer(enum.IntEnum):
    VALIDATION = 0
    EXTRACTION = 1
    TEMPLATING = 2
    NAMESPACING = 3
    ASSEMBLY = 4


@dataclass
class StageSpec:
    id: str
    layer: Layer
    fn: Callable[["FileContext"], None]
    dependencies: list[str] = field(default_factory=list)
    description: str = ""
    enabled_if: Callable[["PipelineConfig"], bool] | None = None

    def enabled(self, config: "PipelineConfig") -> bool:
        return self.enabled_if is None or bool(self.enabled_if(config))


class StageRegistry:
    """Registered stages, keyed by id."""

    def __init__(self) -> None:
        self._stages: dict[str, StageSpec] = {}

    def register(self, spec: StageSpec) -> None:
        if spec.id in self._stages:
            raise ValueError(f"Duplicate stage ID: {spec.id}")
        self._stages[spec.id] = spec
        logger.debug("Registered stage %s (%s)", spec.id, spec.layer.name)

    def plan(self, config: "PipelineConfig", layer: Layer | None = None) -> list[StageSpec]:
        """Enabled stages (optionally of one layer) in execution order.

        A dependency on a disabled stage, or on a stage outside ``layer``, counts
        as satisfied. A dependency on a stage that was never registered, or a
        cycle, raises ValueError.
        """
        self._check_dependencies()
        selected = {
            sid: spec
            for sid, spec in self._stages.items()
            if spec.enabled(config) and (layer is None or spec.layer == layer)
        }
        return _dependency_order(selected)

    def _check_dependencies(self) -> None:
        for spec in self._stages.values():
            unknown = [dep for dep in spec.dependencies if dep not in self._stages]
            if unknown:
                raise ValueError(f"Stage {spec.id} depends on unknown stage(s): {', '.join(unknown)}")


def _dependency_order(stages: dict[str, StageSpec]) -> list[StageSpec]:
    waiting_on = {sid: {dep for dep in spec.dependencies if dep in stages} for sid, spec in stages.items()}
    ready = [(spec.layer, sid) for sid, spec in stages.items() if not waiting_on[sid]]
    heapq.heapify(ready)

    ordered: list[StageSpec] = []
    while ready:
        _, sid = heapq.heappop(ready)
        ordered.append(stages[sid])
        for other, deps in waiting_on.items():
            if sid in deps:
                deps.discard(sid)
                if not deps:
                    heapq.heappush(ready, (stages[other].layer, other))

    if len(ordered) != len(stages):
        stuck = sorted(set(stages) - {spec.id for spec in ordered})
        raise ValueError(f"Circular dependency detected among: {', '.join(stuck)}")
    return ordered


_registry = StageRegistry()


def get_registry() -> StageRegistry:
    return _registry


def stage(
    *,
    id: str,
    layer: Layer,
    dependencies: list[str] | None = None,
    description: str = "",
    enabled_if: Callable[["PipelineConfig"], bool] | None = None,
):
    """Register the decorated function as a pipeline stage."""

    def decorator(fn: Callable[["FileContext"], None]):
        _registry.register(
            StageSpec(
                id=id,
                layer=layer,
                fn=fn,
                dependencies=list(dependencies or []),
                description=description,
                enabled_if=enabled_if,
            )
        )
        return fn

    return decorator
