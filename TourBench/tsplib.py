"""
Reader for explicit-weight TSPLIB documents (``EDGE_WEIGHT_TYPE: EXPLICIT``).
Only the triangular row layouts and FULL_MATRIX are understood; the weights
are mirrored into a symmetric DistanceMatrix.
"""

from __future__ import annotations

import logging
import pathlib
from typing import Callable, Dict, Iterator, List, Tuple

import numpy as np

from TourBench.matrix import DistanceMatrix
from TourBench.utils.errors import MalformedInput

logger = logging.getLogger(__name__)


def _upper_row(n: int) -> Iterator[Tuple[int, int]]:
    for i in range(n):
        for j in range(i + 1, n):
            yield i, j


def _upper_diag_row(n: int) -> Iterator[Tuple[int, int]]:
    for i in range(n):
        for j in range(i, n):
            yield i, j


def _lower_row(n: int) -> Iterator[Tuple[int, int]]:
    for i in range(1, n):
        for j in range(i):
            yield i, j


def _lower_diag_row(n: int) -> Iterator[Tuple[int, int]]:
    for i in range(n):
        for j in range(i + 1):
            yield i, j


def _full_matrix(n: int) -> Iterator[Tuple[int, int]]:
    for i in range(n):
        for j in range(n):
            yield i, j


LAYOUTS: Dict[str, Callable[[int], Iterator[Tuple[int, int]]]] = {
    "UPPER_ROW": _upper_row,
    "UPPER_DIAG_ROW": _upper_diag_row,
    "LOWER_ROW": _lower_row,
    "LOWER_DIAG_ROW": _lower_diag_row,
    "FULL_MATRIX": _full_matrix,
}


def expected_weight_count(layout: str, n: int) -> int:
    if layout == "FULL_MATRIX":
        return n * n
    if layout.endswith("DIAG_ROW"):
        return n * (n + 1) // 2
    return n * (n - 1) // 2


def _header_value(line: str) -> str:
    if ":" in line:
        return line.split(":", 1)[1].strip()
    parts = line.split(None, 1)
    return parts[1].strip() if len(parts) > 1 else ""


def _parse_weights(line: str, line_no: int) -> List[float]:
    values: List[float] = []
    for token in line.split():
        try:
            values.append(float(token))
        except ValueError as exc:
            raise MalformedInput(f"Non-numeric weight {token!r} on line {line_no}") from exc
    return values


def parse_tsplib(text: str) -> DistanceMatrix:
    """Build a DistanceMatrix from the text of an explicit-weight TSPLIB file."""
    n = 0
    layout = ""
    weights: List[float] = []
    reading = False

    for line_no, raw in enumerate(text.splitlines(), start=1):
        line = raw.strip()
        if not line:
            continue
        head = line.split(":", 1)[0].split()
        keyword = head[0].upper() if head else ""
        if keyword == "EOF":
            break
        if keyword.endswith("_SECTION"):
            reading = keyword == "EDGE_WEIGHT_SECTION"
            continue
        if reading:
            weights.extend(_parse_weights(line, line_no))
            continue
        if keyword == "DIMENSION":
            value = _header_value(line)
            try:
                n = int(value)
            except ValueError as exc:
                raise MalformedInput(f"Invalid DIMENSION {value!r}") from exc
        elif keyword == "EDGE_WEIGHT_FORMAT":
            layout = _header_value(line).upper()

    if n <= 0:
        raise MalformedInput("Missing or non-positive DIMENSION")
    if not weights:
        raise MalformedInput("No weights found in EDGE_WEIGHT_SECTION")
    if layout not in LAYOUTS:
        raise MalformedInput(f"Unsupported EDGE_WEIGHT_FORMAT {layout!r}")

    required = expected_weight_count(layout, n)
    if len(weights) < required:
        raise MalformedInput(f"{layout} with DIMENSION {n} needs {required} weights, found {len(weights)}")
    if len(weights) > required:
        logger.warning("ignoring %d trailing weights after %s section", len(weights) - required, layout)

    matrix = np.zeros((n, n), dtype=float)
    for (i, j), weight in zip(LAYOUTS[layout](n), weights):
        if i == j:
            if weight != 0:
                raise MalformedInput(f"Non-zero diagonal weight {weight:g} for city {i}")
            continue
        matrix[i, j] = weight
        if layout != "FULL_MATRIX":
            matrix[j, i] = weight
    logger.debug("parsed %s matrix with %d cities", layout, n)
    return DistanceMatrix(matrix)


def load_tsplib(path: str | pathlib.Path) -> DistanceMatrix:
    path = pathlib.Path(path)
    return parse_tsplib(path.read_text(encoding="utf-8"))


__all__ = ["LAYOUTS", "expected_weight_count", "load_tsplib", "parse_tsplib"]
