#!/usr/bin/env python3
from __future__ import annotations

import argparse
import hashlib
import json
import logging
import multiprocessing as mp
import pathlib
import sys
from dataclasses import asdict
from typing import Iterable, Iterator

import numpy as np

PROJECT_ROOT = pathlib.Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from TourBench import TourBench, get_solver
from TourBench.config import DEFAULT_CONFIG
from TourBench.solvers import SOLVER_REGISTRY

logger = logging.getLogger("run_algorithms")


def parse_args(raw_args: Iterable[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run TSP solvers on generated problem instances.")
    parser.add_argument(
        "--problems",
        type=pathlib.Path,
        default=pathlib.Path("data/problems.jsonl"),
        help="JSONL file written by generate_problems.py.",
    )
    parser.add_argument(
        "--results",
        type=pathlib.Path,
        default=pathlib.Path("data/results.jsonl"),
        help="JSONL file results are appended to.",
    )
    parser.add_argument(
        "--algorithms",
        nargs="+",
        choices=sorted(SOLVER_REGISTRY.keys()),
        help="Subset of solvers to execute (default: all).",
    )
    parser.add_argument("--start-city", type=int, default=DEFAULT_CONFIG.start_city, help="Tour start city.")
    parser.add_argument(
        "--time-limit",
        type=float,
        default=DEFAULT_CONFIG.time_limit,
        help="Seconds before a solver's worker process is terminated.",
    )
    parser.add_argument("--overwrite", action="store_true", help="Re-run solvers that already have a result.")
    parser.add_argument("--log-level", default="INFO", help="Logging level (default: INFO).")
    return parser.parse_args(raw_args)


def iter_jsonl(path: pathlib.Path) -> Iterator[dict]:
    with path.open("r", encoding="utf-8") as fh:
        for line in fh:
            line = line.strip()
            if line:
                yield json.loads(line)


def problem_id(problem: dict) -> str:
    if "problem_id" not in problem:
        payload = problem.get("distance_matrix", problem.get("coordinates"))
        problem["problem_id"] = hashlib.sha1(np.asarray(payload, dtype=float).tobytes()).hexdigest()
    return problem["problem_id"]


def _worker(algo_name: str, problem: dict, start_city: int, queue: mp.Queue) -> None:
    try:
        matrix = TourBench.to_distance_matrix(problem)
        queue.put(("ok", asdict(get_solver(algo_name).solve(matrix, start=start_city))))
    except Exception as exc:  # noqa: BLE001
        queue.put(("error", {"reason": type(exc).__name__, "error": str(exc)}))


def run_isolated(problem: dict, algo_name: str, start_city: int, time_limit: float) -> dict:
    """Run one solver in a child process; the solvers have no internal time budget."""
    queue: mp.Queue = mp.Queue()
    process = mp.Process(target=_worker, args=(algo_name, problem, start_city, queue))
    process.start()
    process.join(timeout=time_limit)
    if process.is_alive():
        process.terminate()
        process.join()
        return {"status": "infeasible", "reason": "timeout"}
    if queue.empty():
        return {"status": "infeasible", "reason": "worker_exit", "exitcode": process.exitcode}
    kind, payload = queue.get()
    if kind == "error":
        return {"status": "infeasible", **payload}
    if payload["status"] != "complete":
        payload["reason"] = payload["status"]
        payload["status"] = "infeasible"
    return payload


def main(raw_args: Iterable[str] | None = None) -> int:
    args = parse_args(raw_args)
    logging.basicConfig(level=args.log_level.upper(), format="%(levelname)s %(name)s: %(message)s")
    if not args.problems.exists():
        raise SystemExit(f"Problem file not found: {args.problems}")

    algorithms = args.algorithms or list(SOLVER_REGISTRY.keys())
    done: dict[tuple[str, str], dict] = {}
    if args.results.exists():
        done = {(row["problem_id"], row["algorithm"]): row for row in iter_jsonl(args.results)}

    # Smallest city count each solver already failed on; larger instances are not attempted.
    failed_at: dict[str, int] = {}
    for (_, algo_name), row in done.items():
        if row.get("status") == "infeasible" and isinstance(row.get("num_cities"), int):
            failed_at[algo_name] = min(failed_at.get(algo_name, row["num_cities"]), row["num_cities"])

    appended = reused = 0
    args.results.parent.mkdir(parents=True, exist_ok=True)
    with args.results.open("a", encoding="utf-8") as out:
        for problem in iter_jsonl(args.problems):
            pid = problem_id(problem)
            n = problem.get("num_cities")
            for algo_name in algorithms:
                key = (pid, algo_name)
                if key in done and not args.overwrite:
                    reused += 1
                    continue
                if isinstance(n, int) and n >= failed_at.get(algo_name, n + 1):
                    outcome = {"status": "infeasible", "reason": "failed_on_smaller_instance"}
                else:
                    outcome = run_isolated(problem, algo_name, args.start_city, args.time_limit)
                record = {**outcome, "algorithm": algo_name, "problem_id": pid, "num_cities": n}
                if record["status"] == "infeasible" and isinstance(n, int):
                    failed_at[algo_name] = min(failed_at.get(algo_name, n), n)
                out.write(json.dumps(record))
                out.write("\n")
                done[key] = record
                appended += 1
                print(f"{algo_name} on {pid[:12]} (cities={n}) -> {record['status']} cost={record.get('cost')}")

    logger.info("completed %d new runs, reused %d cached results", appended, reused)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
