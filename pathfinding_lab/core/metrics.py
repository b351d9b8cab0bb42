# pathfinding_lab/core/metrics.py
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Callable, List, Optional
import logging
import time, tracemalloc

from .exceptions import TargetUnreachableError
from .utils import path_cost
from .weights import WeightFunction

logger = logging.getLogger(__name__)


@dataclass
class SearchResult:
    algo: str
    success: bool
    path: List[Any] = field(default_factory=list)
    cost: Optional[Any] = None
    time_s: float = 0.0
    peak_kb: int = 0
    error: Optional[str] = None

    @property
    def path_length(self) -> int:
        return len(self.path)


class MeasuredRun:
    """
    Context manager for timing and (approximate) peak memory.
    Safe to query .elapsed and .peak_kb *inside* the with-block.
    """
    def __init__(self) -> None:
        self.t0: Optional[float] = None
        self.t1: Optional[float] = None
        self._peak_kb: int = 0
        self._tracing: bool = False

    def __enter__(self) -> "MeasuredRun":
        self._tracing = True
        tracemalloc.start()
        self.t0 = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        self.t1 = time.perf_counter()
        current, peak = tracemalloc.get_traced_memory()
        tracemalloc.stop()
        self._tracing = False
        self._peak_kb = max(self._peak_kb, peak // 1024)
        return False  # don't suppress exceptions

    @property
    def elapsed(self) -> float:
        """Seconds elapsed. Works before and after __exit__."""
        if self.t0 is None:
            return 0.0
        if self.t1 is None:
            return time.perf_counter() - self.t0
        return self.t1 - self.t0

    @property
    def peak_kb(self) -> int:
        """Approx peak KB. Works before and after __exit__."""
        if self._tracing:
            current, peak = tracemalloc.get_traced_memory()
            return max(self._peak_kb, peak // 1024)
        return self._peak_kb


def measure_search(name: str,
                   search: Callable[[], List[Any]],
                   weights: WeightFunction,
                   trace_memory: bool = True) -> SearchResult:
    """
    Runs `search` (a zero-argument callable returning a path) under MeasuredRun.

    An unreachable target becomes an unsuccessful SearchResult; every other
    exception propagates. tracemalloc slows searches down noticeably, so
    `trace_memory=False` keeps only the timing.
    """
    if trace_memory:
        meter = MeasuredRun()
    else:
        meter = _TimerOnly()
    try:
        with meter:
            path = search()
    except TargetUnreachableError as e:
        logger.debug(f"{name}: {e.message}")
        return SearchResult(name, False, [], None, meter.elapsed, meter.peak_kb, e.message)
    return SearchResult(name, True, path, path_cost(path, weights), meter.elapsed, meter.peak_kb)


class _TimerOnly(MeasuredRun):
    def __enter__(self) -> "MeasuredRun":
        self.t0 = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        self.t1 = time.perf_counter()
        return False
