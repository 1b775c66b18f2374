"""
Data quality metrics across a month of parameter rows: stability from the coefficient of variation and completeness of daily readings.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from engine.qaf.normalize import NormalizedRow
from engine.stats.descriptive import StatsSummary, compute_stats


@dataclass(frozen=True)
class QualityMetrics:
    overall_stability: float
    average_completeness: float
    parameter_count: int
    total_data_points: int
    valid_data_points: int


def _stability(stats: StatsSummary) -> float:
    if stats.std_dev and stats.mean:
        cv = stats.std_dev / abs(stats.mean) * 100
    else:
        cv = 100.0
    return max(0.0, 100.0 - cv)


def quality_metrics(rows: Sequence[NormalizedRow]) -> QualityMetrics:
    if not rows:
        return QualityMetrics(
            overall_stability=0.0,
            average_completeness=0.0,
            parameter_count=0,
            total_data_points=0,
            valid_data_points=0,
        )

    stability = 0.0
    completeness = 0.0
    total_points = 0
    valid_points = 0
    for row in rows:
        raw = row.raw_values
        stats = compute_stats(raw)
        stability += _stability(stats)
        completeness += stats.completeness
        total_points += len(raw)
        valid_points += stats.count

    return QualityMetrics(
        overall_stability=stability / len(rows),
        average_completeness=completeness / len(rows),
        parameter_count=len(rows),
        total_data_points=total_points,
        valid_data_points=valid_points,
    )
