"""
Pearson correlation between two daily parameter series, pairing readings by day and using population standard deviations over the valid pairs only.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import math
from typing import Optional, Sequence

import numpy as np

from engine.enums import CorrelationStrength
from engine.exceptions import SeriesLengthMismatch
from engine.stats.series import Sample, iter_pairs
from config import settings


def correlate(series_a: Sequence[Sample], series_b: Sequence[Sample]) -> Optional[float]:
    if len(series_a) != len(series_b):
        raise SeriesLengthMismatch(
            f"cannot correlate series of length {len(series_a)} and {len(series_b)}"
        )

    pairs = list(iter_pairs(series_a, series_b))
    n = len(pairs)
    if n < settings.correlation_min_pairs:
        return None

    a = np.array([p[1] for p in pairs], dtype=float)
    b = np.array([p[2] for p in pairs], dtype=float)
    with np.errstate(over="ignore", invalid="ignore"):
        da = a - a.mean()
        db = b - b.mean()
        std_a = float(np.sqrt(np.sum(da * da) / n))
        std_b = float(np.sqrt(np.sum(db * db) / n))
        if not (math.isfinite(std_a) and math.isfinite(std_b)) or std_a == 0 or std_b == 0:
            return None
        # product of the two stds first keeps correlate(a, b) == correlate(b, a) exactly
        denom = n * (std_a * std_b)
        if not math.isfinite(denom):
            return None
        r = float(np.sum(da * db)) / denom

    # overflowed intermediates count as no result, never as a clamped 1.0
    if not math.isfinite(r):
        return None
    return max(-1.0, min(1.0, r))


def classify_correlation(correlation: Optional[float]) -> CorrelationStrength:
    return CorrelationStrength.from_value(correlation)
