#!/usr/bin/env python3
from __future__ import annotations

import argparse
import logging
import pathlib
import sys
from typing import Iterable

PROJECT_ROOT = pathlib.Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from TourBench import TourBench, TourBenchError
from TourBench.config import DEFAULT_CONFIG
from TourBench.solvers import MSTApproximationSolver, NearestNeighborSolver

logger = logging.getLogger("compare_instances")


def parse_args(raw_args: Iterable[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Compare nearest-neighbour and MST-approximation tours on explicit-weight TSPLIB files."
    )
    parser.add_argument(
        "instances",
        nargs="*",
        default=list(DEFAULT_CONFIG.instances),
        help="TSPLIB files to read (default: the configured benchmark instances).",
    )
    parser.add_argument(
        "--data-dir",
        type=pathlib.Path,
        default=pathlib.Path("data"),
        help="Directory relative instance names are resolved against.",
    )
    parser.add_argument("--start-city", type=int, default=DEFAULT_CONFIG.start_city, help="Tour start city.")
    parser.add_argument("--log-level", default="WARNING", help="Logging level (default: WARNING).")
    return parser.parse_args(raw_args)


def resolve(name: str, data_dir: pathlib.Path) -> pathlib.Path:
    path = pathlib.Path(name)
    if path.is_absolute() or path.exists():
        return path
    return data_dir / path


def main(raw_args: Iterable[str] | None = None) -> int:
    args = parse_args(raw_args)
    logging.basicConfig(level=args.log_level.upper(), format="%(levelname)s %(name)s: %(message)s")
    bench = TourBench(DEFAULT_CONFIG.with_overrides(start_city=args.start_city))
    solvers = [NearestNeighborSolver.name, MSTApproximationSolver.name]
    failures = 0

    header = f"{'instance':<12} | {'cities':>6} | {'nearest neighbour':>20} | {'mst approximation':>20}"
    print(header)
    print("-" * len(header))
    for name in args.instances:
        path = resolve(name, args.data_dir)
        try:
            results = bench.compare({"tsplib_path": path}, solvers=solvers)
        except (OSError, TourBenchError) as exc:
            failures += 1
            logger.error("failed to process %s: %s", path, exc)
            print(f"{path.name:<12} | error: {exc}")
            continue
        heuristic = results[NearestNeighborSolver.name]
        approx = results[MSTApproximationSolver.name]
        n = heuristic.metadata.get("num_cities")
        print(
            f"{path.name:<12} | {n:>6} | "
            f"{heuristic.cost:>12,.0f} ({heuristic.elapsed * 1000:5.1f}ms) | "
            f"{approx.cost:>12,.0f} ({approx.elapsed * 1000:5.1f}ms)"
        )
    return 1 if failures else 0


if __name__ == "__main__":
    raise SystemExit(main())
