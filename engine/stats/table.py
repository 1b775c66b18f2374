"""
Rounded per-parameter summary rows for the monthly COP table footer.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional

from engine.stats.descriptive import compute_stats
from config import settings

if TYPE_CHECKING:
    from engine.qaf.normalize import NormalizedRow


@dataclass(frozen=True)
class ParameterTableRow:
    parameter_id: str
    parameter: str
    unit: str
    avg: Optional[float]
    median: Optional[float]
    min: Optional[float]
    max: Optional[float]
    stdev: Optional[float]
    qaf: Optional[float]


def _round(value: Optional[float]) -> Optional[float]:
    if value is None:
        return None
    return round(value, settings.summary_round_digits)


def summarize_row(row: NormalizedRow) -> ParameterTableRow:
    stats = compute_stats(row.raw_values)
    return ParameterTableRow(
        parameter_id=row.parameter.id,
        parameter=row.parameter.name,
        unit=row.parameter.unit,
        avg=_round(stats.mean),
        median=_round(stats.median),
        min=_round(stats.min),
        max=_round(stats.max),
        stdev=_round(stats.std_dev),
        qaf=_round(row.monthly_average),
    )
