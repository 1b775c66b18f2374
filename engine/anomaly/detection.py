"""
Outlier detection for monthly parameter series using the 3-sigma rule, reporting outlier values with their day positions and a severity derived from how many days were flagged.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from engine.enums import Severity
from engine.stats.series import Sample, iter_present
from config import settings


@dataclass(frozen=True)
class AnomalyReport:
    outliers: Tuple[float, ...]
    outlier_indices: Tuple[int, ...]
    severity: Severity
    total_days: int = 0


def _empty(total_days: int) -> AnomalyReport:
    return AnomalyReport(outliers=(), outlier_indices=(), severity=Severity.low, total_days=total_days)


def detect_anomalies(
    samples: Sequence[Sample],
    mean: Optional[float],
    std_dev: Optional[float],
    sigma: float | None = None,
) -> AnomalyReport:
    if sigma is None:
        sigma = settings.anomaly_sigma

    total_days = len(samples)
    present = list(iter_present(samples))
    if mean is None or std_dev is None:
        return _empty(total_days)
    if len(present) < settings.anomaly_min_samples or std_dev == 0:
        return _empty(total_days)

    limit = sigma * std_dev
    flagged: List[Tuple[int, float]] = [
        (idx, value) for idx, value in present if abs(value - mean) > limit
    ]
    return AnomalyReport(
        outliers=tuple(v for _, v in flagged),
        outlier_indices=tuple(i for i, _ in flagged),
        severity=Severity.from_outlier_count(len(flagged)),
        total_days=total_days,
    )
