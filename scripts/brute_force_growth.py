#!/usr/bin/env python3
from __future__ import annotations

import argparse
import json
import logging
import pathlib
import sys
from typing import Iterable

import numpy as np

PROJECT_ROOT = pathlib.Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from TourBench.config import DEFAULT_CONFIG
from TourBench.generate import random_weight_matrix
from TourBench.solvers import BruteForceSolver

logger = logging.getLogger("brute_force_growth")


def parse_args(raw_args: Iterable[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Time the exact solver on random instances of growing size.")
    parser.add_argument("--min-cities", type=int, default=2, help="Smallest instance size (default: 2).")
    parser.add_argument(
        "--max-cities",
        type=int,
        default=DEFAULT_CONFIG.brute_force_max_cities,
        help="Largest instance size; runtime grows as (n-1)!.",
    )
    parser.add_argument("--seed", type=int, default=DEFAULT_CONFIG.seed, help="Random seed (default: 42).")
    parser.add_argument(
        "--output",
        type=pathlib.Path,
        default=None,
        help="Optional JSONL file receiving one row per instance size.",
    )
    parser.add_argument("--log-level", default="INFO", help="Logging level (default: INFO).")
    return parser.parse_args(raw_args)


def main(raw_args: Iterable[str] | None = None) -> int:
    args = parse_args(raw_args)
    logging.basicConfig(level=args.log_level.upper(), format="%(levelname)s %(name)s: %(message)s")
    if args.min_cities < 1 or args.max_cities < args.min_cities:
        raise SystemExit("Require 1 <= --min-cities <= --max-cities")

    rng = np.random.default_rng(args.seed)
    solver = BruteForceSolver()
    rows: list[dict] = []

    print("Size (N) | Elapsed (ms) | Optimal cost")
    print("-" * 40)
    for n in range(args.min_cities, args.max_cities + 1):
        matrix = random_weight_matrix(n, rng, low=DEFAULT_CONFIG.min_weight, high=DEFAULT_CONFIG.max_weight)
        try:
            result = solver.solve(matrix, start=DEFAULT_CONFIG.start_city)
        except MemoryError:
            print(f"{n:<8} | aborted (out of memory)")
            break
        elapsed_ms = result.elapsed * 1000.0
        print(f"{n:<8} | {elapsed_ms:12.3f} | {result.cost:g}")
        rows.append(
            {
                "num_cities": n,
                "elapsed": result.elapsed,
                "cost": result.cost,
                "permutations_evaluated": result.metadata.get("permutations_evaluated"),
            }
        )

    if args.output is not None:
        args.output.parent.mkdir(parents=True, exist_ok=True)
        with args.output.open("a", encoding="utf-8") as out:
            for row in rows:
                out.write(json.dumps(row))
                out.write("\n")
        logger.info("appended %d rows to %s", len(rows), args.output)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
