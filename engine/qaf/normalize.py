"""
Normalization of raw daily parameter readings into percentage-of-target values, with independent monthly means for the percentages and the raw readings.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from engine.qaf.bounds import ParameterSpec, resolve_bounds, valid_bounds
from engine.stats.series import Sample, clean


@dataclass(frozen=True)
class ParameterSeries:
    parameter: ParameterSpec
    daily_values: Tuple[Sample, ...]


@dataclass(frozen=True)
class DailyValue:
    value: Optional[float]
    raw: Optional[float]


@dataclass(frozen=True)
class NormalizedRow:
    parameter: ParameterSpec
    daily_values: Tuple[DailyValue, ...]
    monthly_average: Optional[float]
    monthly_average_raw: Optional[float]
    min_value: Optional[float] = None
    max_value: Optional[float] = None

    @property
    def raw_values(self) -> List[Optional[float]]:
        return [d.raw for d in self.daily_values]

    @property
    def percentages(self) -> List[Optional[float]]:
        return [d.value for d in self.daily_values]


def _normalize_day(
    raw: Sample,
    min_value: Optional[float],
    max_value: Optional[float],
) -> DailyValue:
    # non-finite readings count as no reading at all
    if raw is not None and clean(raw) is None:
        return DailyValue(value=None, raw=None)
    avg = clean(raw)

    if not valid_bounds(min_value, max_value):
        return DailyValue(value=None, raw=avg)
    if avg is None:
        return DailyValue(value=None, raw=None)

    percentage = (avg - min_value) / (max_value - min_value) * 100
    if not math.isfinite(percentage):
        return DailyValue(value=None, raw=avg)
    return DailyValue(value=percentage, raw=avg)


def _mean(values: List[float]) -> Optional[float]:
    if not values:
        return None
    return sum(values) / len(values)


def normalize(
    parameter: ParameterSpec,
    daily_raw: Sequence[Sample],
    cement_type: Optional[str] = None,
) -> NormalizedRow:
    min_value, max_value = resolve_bounds(parameter, cement_type)
    days = tuple(_normalize_day(raw, min_value, max_value) for raw in daily_raw)

    percentages = [d.value for d in days if d.value is not None]
    raws = [d.raw for d in days if d.raw is not None]

    return NormalizedRow(
        parameter=parameter,
        daily_values=days,
        monthly_average=_mean(percentages),
        monthly_average_raw=_mean(raws),
        min_value=min_value,
        max_value=max_value,
    )


def normalize_series(series: ParameterSeries, cement_type: Optional[str] = None) -> NormalizedRow:
    return normalize(series.parameter, series.daily_values, cement_type)
