#!/usr/bin/env python3
from __future__ import annotations

import argparse
import json
import pathlib
from typing import Iterable, List

import matplotlib.pyplot as plt
import pandas as pd
import seaborn as sns


def parse_args(raw_args: Iterable[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Plot solver runtime and tour quality against city count.")
    parser.add_argument(
        "--results",
        type=pathlib.Path,
        default=pathlib.Path("data/results.jsonl"),
        help="Input JSONL file written by run_algorithms.py.",
    )
    parser.add_argument(
        "--figure",
        type=pathlib.Path,
        default=pathlib.Path("data/results.png"),
        help="Destination for rendered plot (PNG).",
    )
    return parser.parse_args(raw_args)


def load_records(path: pathlib.Path) -> List[dict]:
    records: List[dict] = []
    with path.open("r", encoding="utf-8") as fh:
        for line in fh:
            line = line.strip()
            if not line:
                continue
            records.append(json.loads(line))
    return records


def build_dataframe(records: List[dict]) -> pd.DataFrame:
    df = pd.DataFrame(records)
    for col in ("num_cities", "elapsed", "cost"):
        if col in df.columns:
            df[col] = pd.to_numeric(df[col], errors="coerce")
    completed = df[df["status"] == "complete"].copy()
    if completed.empty:
        return completed
    # Reference cost per problem: the exact optimum when it finished, otherwise the best tour seen.
    best_seen = completed.groupby("problem_id")["cost"].transform("min")
    exact = completed[completed["algorithm"] == "brute_force"].set_index("problem_id")["cost"]
    reference = completed["problem_id"].map(exact).fillna(best_seen)
    completed["ratio"] = completed["cost"] / reference.where(reference > 0)
    completed["ratio"] = completed["ratio"].fillna(1.0)
    return completed


def print_summary(df: pd.DataFrame) -> None:
    summary = (
        df.groupby("algorithm")
        .agg(
            runs=("elapsed", "count"),
            avg_elapsed=("elapsed", "mean"),
            avg_ratio=("ratio", "mean"),
            worst_ratio=("ratio", "max"),
        )
        .reset_index()
    )
    for _, row in summary.iterrows():
        print(
            f"{row['algorithm']}: runs={int(row['runs'])} avg_elapsed={row['avg_elapsed']:.4f}s "
            f"avg_ratio={row['avg_ratio']:.3f} worst_ratio={row['worst_ratio']:.3f}"
        )


def render(df: pd.DataFrame, output: pathlib.Path) -> None:
    sns.set_theme(style="whitegrid")
    fig, axes = plt.subplots(1, 2, figsize=(16, 6))

    sns.lineplot(data=df, x="num_cities", y="elapsed", hue="algorithm", errorbar="sd", marker="o", ax=axes[0])
    axes[0].set_title("Runtime by City Count")
    axes[0].set_xlabel("Number of Cities")
    axes[0].set_ylabel("Elapsed Time (s)")
    axes[0].set_yscale("log")

    sns.lineplot(data=df, x="num_cities", y="ratio", hue="algorithm", errorbar="sd", marker="o", ax=axes[1])
    axes[1].axhline(2.0, color="grey", linestyle="--", linewidth=1)
    axes[1].set_title("Tour Cost / Reference Cost")
    axes[1].set_xlabel("Number of Cities")
    axes[1].set_ylabel("Cost Ratio")

    handles, labels = axes[0].get_legend_handles_labels()
    axes[0].get_legend().remove()
    axes[1].get_legend().remove()
    fig.legend(handles, labels, loc="upper center", ncol=max(1, len(labels)))
    fig.tight_layout(rect=(0, 0, 1, 0.95))

    output.parent.mkdir(parents=True, exist_ok=True)
    fig.savefig(output, dpi=200)
    print(f"Saved figure to {output}")


def main(raw_args: Iterable[str] | None = None) -> None:
    args = parse_args(raw_args)
    if not args.results.exists():
        raise SystemExit(f"No results file found at {args.results}")
    records = load_records(args.results)
    if not records:
        raise SystemExit("Results file is empty.")
    df = build_dataframe(records)
    if df.empty:
        raise SystemExit("No completed runs to plot.")
    print_summary(df)
    render(df, args.figure)


if __name__ == "__main__":
    main()
