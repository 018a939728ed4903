from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, Tuple

from TourBench.solvers import SOLVER_REGISTRY


@dataclass(frozen=True)
class BenchmarkConfig:
    """Run-level settings shared by the pipeline and the benchmark scripts."""

    start_city: int = 0
    brute_force_max_cities: int = 11
    min_weight: int = 1
    max_weight: int = 100
    seed: int = 42
    time_limit: float = 60.0
    # is_metric is O(n^3); larger instances are not annotated.
    metric_check_max_cities: int = 200
    instances: Tuple[str, ...] = ("si535.tsp", "pa561.tsp", "si1032.tsp")
    solvers: Tuple[str, ...] = field(default_factory=lambda: tuple(SOLVER_REGISTRY))

    def __post_init__(self) -> None:
        if self.start_city < 0:
            raise ValueError("start_city must be non-negative")
        if self.metric_check_max_cities < 0:
            raise ValueError("metric_check_max_cities must be non-negative")
        if self.min_weight < 0 or self.max_weight < self.min_weight:
            raise ValueError("weight range must satisfy 0 <= min_weight <= max_weight")
        unknown = [name for name in self.solvers if name not in SOLVER_REGISTRY]
        if unknown:
            raise ValueError(f"Unknown solvers: {', '.join(unknown)}")

    def with_overrides(self, **overrides: Any) -> "BenchmarkConfig":
        """Copy with every non-None override applied (argparse namespaces pass None for unset options)."""
        return replace(self, **{key: value for key, value in overrides.items() if value is not None})


DEFAULT_CONFIG = BenchmarkConfig()


__all__ = ["BenchmarkConfig", "DEFAULT_CONFIG"]
