"""
Descriptive statistics over a month of optional daily samples: mean, median, population standard deviation, extremes, completeness, and a least-squares trend classification over the positional index of present values.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Sequence

import numpy as np

from engine.enums import Trend
from engine.stats.series import Sample, clean, present_values
from config import settings


@dataclass(frozen=True)
class StatsSummary:
    mean: Optional[float]
    median: Optional[float]
    std_dev: Optional[float]
    min: Optional[float]
    max: Optional[float]
    count: int
    completeness: float
    trend: Trend


def linear_slope(values: Sequence[float]) -> Optional[float]:
    """Ordinary least-squares slope of ``values`` against 0..n-1.

    Computed from the closed-form sums over the positional index; returns
    None for fewer than two points.
    """
    n = len(values)
    if n < 2:
        return None
    y = np.asarray(values, dtype=float)
    x = np.arange(n, dtype=float)
    sum_x = n * (n - 1) / 2
    with np.errstate(over="ignore", invalid="ignore"):
        sum_y = float(np.sum(y))
        sum_xy = float(np.dot(x, y))
    sum_xx = n * (n - 1) * (2 * n - 1) / 6
    denom = n * sum_xx - sum_x * sum_x
    if denom == 0:
        return None
    return clean((n * sum_xy - sum_x * sum_y) / denom)


def classify_trend(values: Sequence[float]) -> Trend:
    if len(values) < settings.trend_min_samples:
        return Trend.insufficient
    slope = linear_slope(values)
    if slope is None:
        return Trend.insufficient
    if abs(slope) < settings.trend_stable_slope:
        return Trend.stable
    return Trend.increasing if slope > 0 else Trend.decreasing


def _empty() -> StatsSummary:
    return StatsSummary(
        mean=None,
        median=None,
        std_dev=None,
        min=None,
        max=None,
        count=0,
        completeness=0.0,
        trend=Trend.insufficient,
    )


def compute_stats(samples: Sequence[Sample]) -> StatsSummary:
    values: List[float] = present_values(samples)
    if not values:
        return _empty()

    arr = np.asarray(values, dtype=float)
    # sums of very large readings can overflow; report those as missing
    with np.errstate(over="ignore", invalid="ignore"):
        mean = clean(np.mean(arr))
        median = clean(np.median(arr))
        std_dev = clean(np.std(arr)) if mean is not None else None
    return StatsSummary(
        mean=mean,
        median=median,
        std_dev=std_dev,
        min=float(np.min(arr)),
        max=float(np.max(arr)),
        count=len(values),
        completeness=len(values) / len(samples) * 100,
        trend=classify_trend(values),
    )
