"""
Period-over-period comparison of monthly parameter means, matching parameters by id and reporting the percentage change against the previous period.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence

from engine.enums import ChangeDirection
from engine.qaf.normalize import NormalizedRow
from engine.stats.descriptive import compute_stats


@dataclass(frozen=True)
class PeriodSnapshot:
    mean: Optional[float]
    completeness: float


@dataclass(frozen=True)
class PeriodComparison:
    parameter_id: str
    parameter: str
    current: PeriodSnapshot
    previous: PeriodSnapshot
    delta: Optional[float]
    direction: ChangeDirection


def _direction(delta: Optional[float]) -> ChangeDirection:
    if delta is None:
        return ChangeDirection.unknown
    if delta > 0:
        return ChangeDirection.increased
    if delta < 0:
        return ChangeDirection.decreased
    return ChangeDirection.stable


def compare_periods(
    current_rows: Sequence[NormalizedRow],
    previous_rows: Sequence[NormalizedRow],
) -> List[PeriodComparison]:
    previous_by_id: Dict[str, NormalizedRow] = {r.parameter.id: r for r in previous_rows}
    comparisons: List[PeriodComparison] = []

    for row in current_rows:
        current = compute_stats(row.raw_values)
        prev_row = previous_by_id.get(row.parameter.id)
        if prev_row is not None:
            prev_stats = compute_stats(prev_row.raw_values)
            previous = PeriodSnapshot(mean=prev_stats.mean, completeness=prev_stats.completeness)
        else:
            previous = PeriodSnapshot(mean=None, completeness=0.0)

        delta: Optional[float] = None
        if current.mean is not None and previous.mean:
            delta = (current.mean - previous.mean) / previous.mean * 100

        comparisons.append(PeriodComparison(
            parameter_id=row.parameter.id,
            parameter=row.parameter.name,
            current=PeriodSnapshot(mean=current.mean, completeness=current.completeness),
            previous=previous,
            delta=delta,
            direction=_direction(delta),
        ))

    return comparisons
