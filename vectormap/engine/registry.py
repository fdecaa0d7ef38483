"""Stage registry — each normalization stage is a function registered by decorator.

Usage:
    @stage(id="T1.01", layer=Stage.BOUNDS, dependencies=["T0.02"])
    def region_bounds(ctx: MapContext) -> None:
        ctx.map_regions(lambda r: {"bounds": outline_bounds(r.raw_outline)})

Stage modules register on import; ``vectormap.engine.load_stages`` imports them.
"""

from __future__ import annotations

import enum
import heapq
import logging
from dataclasses import dataclass, field
from graphlib import CycleError, TopologicalSorter
from typing import TYPE_CHECKING, Callable, Iterable

if TYPE_CHECKING:
    from vectormap.engine.context import MapContext

logger = logging.getLogger(__name__)


class Stage(enum.IntEnum):
    """Pass a stage belongs to. Bounds need every outline; fitting needs every bound."""

    PARSING = 0
    BOUNDS = 1
    NORMALIZATION = 2


@dataclass(frozen=True)
class StageSpec:
    id: str
    layer: Stage
    fn: Callable[["MapContext"], None]
    dependencies: tuple[str, ...] = ()
    tags: frozenset[str] = field(default_factory=frozenset)
    description: str = ""

    def __post_init__(self) -> None:
        # Accept lists and sets from callers, store hashable values
        object.__setattr__(self, "dependencies", tuple(self.dependencies))
        object.__setattr__(self, "tags", frozenset(self.tags))

    @property
    def sort_key(self) -> tuple[int, str]:
        return (int(self.layer), self.id)


class StageRegistry:
    """Stage functions keyed by id."""

    def __init__(self) -> None:
        self._stages: dict[str, StageSpec] = {}

    def register(self, spec: StageSpec) -> None:
        if spec.id in self._stages:
            raise ValueError(f"Duplicate stage ID: {spec.id}")
        self._stages[spec.id] = spec
        logger.debug("Registered stage %s in %s", spec.id, spec.layer.name)

    def get(self, stage_id: str) -> StageSpec:
        return self._stages[stage_id]

    def get_layer(self, layer: Stage) -> list[StageSpec]:
        return [s for s in self.all() if s.layer == layer]

    def tagged(self, tag: str) -> list[StageSpec]:
        return [s for s in self.all() if tag in s.tags]

    def all(self) -> list[StageSpec]:
        return sorted(self._stages.values(), key=lambda s: s.sort_key)

    def _closure(self, requested_ids: Iterable[str]) -> dict[str, StageSpec]:
        """Requested stages plus everything they depend on, transitively."""
        selected: dict[str, StageSpec] = {}
        pending = list(requested_ids)
        while pending:
            sid = pending.pop()
            if sid in selected:
                continue
            if sid not in self._stages:
                raise ValueError(f"Unknown stage: {sid}")
            selected[sid] = self._stages[sid]
            pending.extend(selected[sid].dependencies)
        return selected

    def resolve_order(self, requested_ids: set[str] | None = None) -> list[StageSpec]:
        """Run order for the requested stages (all when ``None``).

        Dependencies come first; among stages that are ready together the
        earlier layer, then the lower id, runs first.
        """
        selected = self._closure(self._stages if requested_ids is None else requested_ids)

        sorter: TopologicalSorter[str] = TopologicalSorter()
        for sid, spec in selected.items():
            sorter.add(sid, *spec.dependencies)
        try:
            sorter.prepare()
        except CycleError as exc:
            raise ValueError(f"Circular dependency between stages: {exc.args[1]}") from exc

        ready = [selected[sid].sort_key for sid in sorter.get_ready()]
        heapq.heapify(ready)
        ordered: list[StageSpec] = []
        while ready:
            _, sid = heapq.heappop(ready)
            ordered.append(selected[sid])
            sorter.done(sid)
            for nxt in sorter.get_ready():
                heapq.heappush(ready, selected[nxt].sort_key)
        return ordered

    @property
    def count(self) -> int:
        return len(self._stages)


# Filled at import time, read-only afterwards
_registry = StageRegistry()


def get_registry() -> StageRegistry:
    return _registry


def stage(
    *,
    id: str,
    layer: Stage,
    dependencies: Iterable[str] = (),
    tags: Iterable[str] = (),
    description: str = "",
):
    """Register the decorated function as a stage and return it unchanged."""

    def decorator(fn: Callable[["MapContext"], None]):
        _registry.register(StageSpec(id, layer, fn, tuple(dependencies), frozenset(tags), description))
        return fn

    return decorator
