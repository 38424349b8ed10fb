"""Phase timings for context resolution.

:func:`phase` does nothing unless a collector is active for the current
context (see :func:`record_phases`), so the resolver wraps its phases in it
unconditionally.

Usage:
    with record_phases() as timings:
        resolver.resolve(store)
    timings.names()  # ["context.resolve.extra", "context.resolve.stage", ...]
"""
from __future__ import annotations

from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, field
from time import perf_counter
from typing import Any, Dict, Iterator, List, Optional

_ACTIVE_TIMINGS: ContextVar[Optional["ResolutionTimings"]] = ContextVar(
    "_ACTIVE_TIMINGS", default=None
)


@dataclass(frozen=True)
class PhaseTiming:
    name: str
    depth: int
    elapsed_ms: float
    meta: Dict[str, Any] = field(default_factory=dict)


class ResolutionTimings:
    """Completed phases, innermost first."""

    def __init__(self) -> None:
        self.phases: List[PhaseTiming] = []
        self._depth = 0

    def names(self) -> List[str]:
        return [p.name for p in self.phases]

    def get(self, name: str) -> Optional[PhaseTiming]:
        """Most recent phase called ``name``."""
        for p in reversed(self.phases):
            if p.name == name:
                return p
        return None

    def total_ms(self) -> float:
        """Time spent in outermost phases."""
        return sum(p.elapsed_ms for p in self.phases if p.depth == 0)


@contextmanager
def record_phases(timings: Optional[ResolutionTimings] = None) -> Iterator[ResolutionTimings]:
    """Collect phases run in this context into ``timings`` (a new one if None)."""
    collector = timings if timings is not None else ResolutionTimings()
    token = _ACTIVE_TIMINGS.set(collector)
    try:
        yield collector
    finally:
        _ACTIVE_TIMINGS.reset(token)


@contextmanager
def phase(name: str, **meta: Any) -> Iterator[None]:
    collector = _ACTIVE_TIMINGS.get()
    if collector is None:
        yield
        return

    depth = collector._depth
    collector._depth += 1
    start = perf_counter()
    try:
        yield
    finally:
        collector._depth -= 1
        collector.phases.append(
            PhaseTiming(name, depth, (perf_counter() - start) * 1000.0, dict(meta))
        )


__all__ = ["PhaseTiming", "ResolutionTimings", "phase", "record_phases"]
