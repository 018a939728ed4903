#!/usr/bin/env python3
from __future__ import annotations

import argparse
import json
import logging
import pathlib
import sys
from datetime import datetime, timezone
from typing import Iterable

import numpy as np

PROJECT_ROOT = pathlib.Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from TourBench.config import DEFAULT_CONFIG
from TourBench.generate import create_euclidean_instance, create_instance

logger = logging.getLogger("generate_problems")


def parse_args(raw_args: Iterable[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Generate random symmetric TSP problem instances.")
    parser.add_argument(
        "--counts",
        nargs="+",
        type=int,
        default=[4, 6, 8, 9, 10, 50, 100, 200, 500],
        help="City counts to generate.",
    )
    parser.add_argument(
        "--instances-per-count",
        type=int,
        default=5,
        help="How many instances to generate per city count.",
    )
    parser.add_argument(
        "--kind",
        choices=("weights", "euclidean"),
        default="weights",
        help="Random integer weights (default) or euclidean points, which satisfy the triangle inequality.",
    )
    parser.add_argument("--min-weight", type=int, default=DEFAULT_CONFIG.min_weight, help="Smallest random weight.")
    parser.add_argument("--max-weight", type=int, default=DEFAULT_CONFIG.max_weight, help="Largest random weight.")
    parser.add_argument(
        "--scale",
        type=float,
        default=100.0,
        help="Euclidean coordinates drawn uniformly in [0, scale).",
    )
    parser.add_argument(
        "--output",
        type=pathlib.Path,
        default=pathlib.Path("data/problems.jsonl"),
        help="Destination JSONL file.",
    )
    parser.add_argument("--seed", type=int, default=DEFAULT_CONFIG.seed, help="Random seed (default: 42).")
    parser.add_argument("--log-level", default="INFO", help="Logging level (default: INFO).")
    return parser.parse_args(raw_args)


def main(raw_args: Iterable[str] | None = None) -> None:
    args = parse_args(raw_args)
    logging.basicConfig(level=args.log_level.upper(), format="%(levelname)s %(name)s: %(message)s")
    rng = np.random.default_rng(args.seed)

    timestamp = datetime.now(timezone.utc).isoformat()
    args.output.parent.mkdir(parents=True, exist_ok=True)

    written = 0
    with args.output.open("w", encoding="utf-8") as fh:
        for count in args.counts:
            for _ in range(args.instances_per_count):
                if args.kind == "euclidean":
                    instance = create_euclidean_instance(count, rng, args.scale)
                else:
                    instance = create_instance(count, rng, low=args.min_weight, high=args.max_weight)
                record = {
                    "created_at": timestamp,
                    "seed": args.seed,
                    "kind": args.kind,
                    **instance,
                }
                fh.write(json.dumps(record))
                fh.write("\n")
                written += 1
    logger.info("wrote %d instances to %s", written, args.output)


if __name__ == "__main__":
    main()
