"""
Quality attainment factor (QAF) aggregation: per-day and per-month share of parameter readings whose normalized value falls inside the nominal target band.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from engine.exceptions import SeriesLengthMismatch
from engine.qaf.normalize import NormalizedRow
from engine.stats.series import clean
from config import settings


@dataclass(frozen=True)
class DailyQaf:
    value: Optional[float]
    in_range: int
    total: int


@dataclass(frozen=True)
class MonthlyQaf:
    value: Optional[float]
    in_range: int
    total: int


@dataclass(frozen=True)
class QafSummary:
    daily: Tuple[DailyQaf, ...]
    monthly: MonthlyQaf


def _ratio(in_range: int, total: int) -> Optional[float]:
    if total <= 0:
        return None
    return in_range / total * 100


def _in_range(value: float) -> bool:
    return settings.qaf_range_low <= value <= settings.qaf_range_high


def compute_qaf(rows: Sequence[NormalizedRow]) -> QafSummary:
    if not rows:
        return QafSummary(daily=(), monthly=MonthlyQaf(value=None, in_range=0, total=0))

    days_in_month = len(rows[0].daily_values)
    for row in rows:
        if len(row.daily_values) != days_in_month:
            raise SeriesLengthMismatch(
                f"parameter {row.parameter.id!r} has {len(row.daily_values)} daily values, "
                f"expected {days_in_month}"
            )

    daily: List[DailyQaf] = []
    month_in_range = 0
    month_total = 0

    for day in range(days_in_month):
        in_range = 0
        total = 0
        for row in rows:
            value = clean(row.daily_values[day].value)
            if value is None:
                continue
            total += 1
            if _in_range(value):
                in_range += 1

        # empty days add (0, 0) so they leave the monthly ratio untouched
        month_in_range += in_range
        month_total += total
        if total > 0:
            daily.append(DailyQaf(value=_ratio(in_range, total), in_range=in_range, total=total))
        else:
            daily.append(DailyQaf(value=None, in_range=0, total=0))

    return QafSummary(
        daily=tuple(daily),
        monthly=MonthlyQaf(
            value=_ratio(month_in_range, month_total),
            in_range=month_in_range,
            total=month_total,
        ),
    )
