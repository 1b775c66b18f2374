"""
Predictive insights for monthly parameter rows, projecting the latest reading forward along the month's least-squares slope and rating the risk of leaving the target range.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from engine.enums import Severity, Trend
from engine.qaf.normalize import NormalizedRow
from engine.stats.descriptive import compute_stats, linear_slope
from engine.stats.series import present_values
from config import settings


@dataclass(frozen=True)
class PredictiveInsight:
    parameter_id: str
    parameter: str
    unit: str
    current_value: Optional[float]
    forecast: Optional[float]
    target_min: Optional[float]
    target_max: Optional[float]
    risk: Severity
    trend: Trend


def _risk(forecast: Optional[float], target_min: Optional[float], target_max: Optional[float]) -> Severity:
    if forecast is None or target_min is None or target_max is None:
        return Severity.low
    if forecast < target_min or forecast > target_max:
        return Severity.high
    margin = settings.forecast_risk_margin
    if forecast < target_min * (1 + margin) or forecast > target_max * (1 - margin):
        return Severity.medium
    return Severity.low


def predict(row: NormalizedRow, horizon_days: int | None = None) -> PredictiveInsight:
    if horizon_days is None:
        horizon_days = settings.forecast_horizon_days

    raw = row.raw_values
    stats = compute_stats(raw)
    values = present_values(raw)

    forecast: Optional[float] = None
    if len(values) >= settings.forecast_min_samples:
        slope = linear_slope(values)
        if slope is not None:
            forecast = values[-1] + slope * horizon_days

    return PredictiveInsight(
        parameter_id=row.parameter.id,
        parameter=row.parameter.name,
        unit=row.parameter.unit,
        current_value=stats.mean,
        forecast=forecast,
        target_min=row.min_value,
        target_max=row.max_value,
        risk=_risk(forecast, row.min_value, row.max_value),
        trend=stats.trend,
    )
