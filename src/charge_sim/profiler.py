# MIT License (see LICENSE)
"""
Simple profiling utilities for recomputation timing.

Measures how long the simulator spends tracing field lines and extracting
equipotentials, without external dependencies.

Example:
    profiler = Profiler()
    with profiler.section("field_lines"):
        simulator.recompute()
    print(profiler.stats.summary())
"""
from __future__ import annotations
import time
from dataclasses import dataclass, field


@dataclass
class ProfileStats:
    """
    Accumulates timing samples for named sections.

    Stores raw timing data and provides summary statistics (count, mean, max).
    """
    samples: dict[str, list[float]] = field(default_factory=dict)

    def add(self, name: str, dt: float) -> None:
        """Record a timing sample (in seconds) for a named section."""
        self.samples.setdefault(name, []).append(dt)

    def summary(self) -> dict[str, dict[str, float]]:
        """
        Compute summary statistics for all recorded sections.

        Returns:
            Dict mapping section name to stats dict with keys:
            - 'n': sample count
            - 'mean_ms': average time in milliseconds
            - 'max_ms': maximum time in milliseconds
        """
        out = {}
        for name, times in self.samples.items():
            n = len(times)
            out[name] = {
                "n": n,
                "mean_ms": 1e3 * (sum(times) / n),
                "max_ms": 1e3 * max(times),
            }
        return out


class _Section:
    def __init__(self, stats: ProfileStats, name: str) -> None:
        self._stats = stats
        self._name = name
        self._t0 = 0.0

    def __enter__(self) -> "_Section":
        self._t0 = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self._stats.add(self._name, time.perf_counter() - self._t0)


class Profiler:
    """
    Context-manager based profiler for timing code sections.

    Usage:
        profiler = Profiler()
        with profiler.section("equipotentials"):
            extract_equipotentials(charges, bounds)
        stats = profiler.stats.summary()
    """

    def __init__(self) -> None:
        self.stats = ProfileStats()

    def section(self, name: str) -> _Section:
        """
        Return a context manager that times the enclosed code.

        Args:
            name: Identifier for this timed section.
        """
        return _Section(self.stats, name)
