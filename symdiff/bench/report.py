"""Text and JSON renderings of benchmark results."""

from __future__ import annotations

import dataclasses
import json
import math
from typing import Any, Sequence

import numpy as np

from symdiff.bench.driver import BenchmarkRun, Comparison

_WIDTH = 78


def _fmt(value: float, digits: int = 3) -> str:
    if math.isnan(value):
        return "n/a"
    if math.isinf(value):
        return "inf"
    return f"{value:.{digits}f}"


def _finite(value: float) -> float | None:
    return float(value) if math.isfinite(value) else None


def format_algorithm_report(name: str, steps: Sequence[int], table: np.ndarray) -> str:
    """One line per (count, size) cell: name, repeat count, input size, elapsed ms."""
    lines = [f"{'=' * _WIDTH}", f"  {name}", f"{'=' * _WIDTH}"]
    lines.append(f"  {'Algorithm':<12} {'Count':>8} {'Size':>8} {'Elapsed (ms)':>14}")
    lines.append(f"{'-' * _WIDTH}")
    for ci, count in enumerate(steps):
        for si, size in enumerate(steps):
            lines.append(f"  {name:<12} {count:>8} {size:>8} {_fmt(table[ci, si]):>14}")
    return "\n".join(lines)


def format_comparison(comparison: Comparison) -> str:
    """Grouped by repeat count: raw times, per-iteration costs and speedup factor."""
    c = comparison
    lines = [
        f"{'=' * _WIDTH}",
        f"  {c.baseline} vs {c.candidate}",
        f"{'=' * _WIDTH}",
    ]
    for ci, count in enumerate(c.steps):
        lines.append(f"count: {count}")
        lines.append(
            f"  {'Size':>8} {c.baseline[:10] + ' ms':>14} {'per iter':>10}"
            f" {c.candidate[:10] + ' ms':>14} {'per iter':>10} {'Factor':>10}"
        )
        for si, size in enumerate(c.steps):
            lines.append(
                f"  {size:>8}"
                f" {_fmt(c.baseline_elapsed[ci, si]):>14}"
                f" {_fmt(c.baseline_per_iteration[ci, si]):>10}"
                f" {_fmt(c.candidate_elapsed[ci, si]):>14}"
                f" {_fmt(c.candidate_per_iteration[ci, si]):>10}"
                f" {_fmt(c.factor[ci, si]):>10}"
            )
    return "\n".join(lines)


def format_run(run: BenchmarkRun) -> str:
    parts = [
        format_algorithm_report(name, run.config.steps, table)
        for name, table in run.tables.items()
    ]
    if run.comparison is not None:
        parts.append(format_comparison(run.comparison))
    return "\n\n".join(parts)


def to_dict(run: BenchmarkRun) -> dict[str, Any]:
    """Same fields as the text report; non-finite numbers become ``None``."""
    steps = list(run.config.steps)
    out: dict[str, Any] = {
        "config": dataclasses.asdict(run.config),
        "algorithms": {},
    }
    for name, table in run.tables.items():
        out["algorithms"][name] = [
            {"count": count, "size": size, "elapsed_ms": _finite(table[ci, si])}
            for ci, count in enumerate(steps)
            for si, size in enumerate(steps)
        ]

    c = run.comparison
    if c is not None:
        out["comparison"] = {
            "baseline": c.baseline,
            "candidate": c.candidate,
            "cells": [
                {
                    "count": count,
                    "size": size,
                    "baseline_elapsed_ms": _finite(c.baseline_elapsed[ci, si]),
                    "baseline_per_iteration_ms": _finite(c.baseline_per_iteration[ci, si]),
                    "candidate_elapsed_ms": _finite(c.candidate_elapsed[ci, si]),
                    "candidate_per_iteration_ms": _finite(c.candidate_per_iteration[ci, si]),
                    "factor": _finite(c.factor[ci, si]),
                }
                for ci, count in enumerate(steps)
                for si, size in enumerate(steps)
            ],
        }
    return out


def to_json(run: BenchmarkRun, indent: int | None = 2) -> str:
    return json.dumps(to_dict(run), indent=indent)
