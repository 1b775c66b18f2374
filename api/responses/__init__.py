"""
Response models for API endpoints and internal data structures.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from typing import Any, List, Optional

import numpy as np
from pydantic import BaseModel, Field, model_serializer

from engine.anomaly import AnomalyReport
from engine.comparison import PeriodComparison
from engine.correlation import CorrelationResult
from engine.enums import CorrelationStrength, QafBand, RangeStatus
from engine.forecast import PredictiveInsight
from engine.qaf import NormalizedRow, QafSummary
from engine.quality import QualityMetrics
from engine.stats import ParameterTableRow, StatsSummary


def _coerce(obj: Any) -> Any:
    if isinstance(obj, dict):
        return {k: _coerce(v) for k, v in obj.items()}
    if isinstance(obj, (list, tuple)):
        return [_coerce(v) for v in obj]
    if isinstance(obj, np.integer):
        return int(obj)
    if isinstance(obj, np.floating):
        return float(obj)
    if isinstance(obj, np.ndarray):
        return obj.tolist()
    return obj


class NpModel(BaseModel):

    @model_serializer(mode="wrap")
    def _serialize(self, handler: Any) -> Any:
        return _coerce(handler(self))


class AnomalyResponse(NpModel):

    stats: StatsSummary
    report: AnomalyReport


class CorrelationResponse(NpModel):

    correlation: Optional[float]
    strength: CorrelationStrength
    valid: bool


class QafResponse(NpModel):

    rows: List[NormalizedRow]
    qaf: QafSummary
    daily_bands: List[QafBand] = Field(default_factory=list)
    monthly_band: QafBand = QafBand.na


class ParameterAnalysis(NpModel):

    parameter_id: str
    parameter: str
    unit: str
    target_min: Optional[float] = None
    target_max: Optional[float] = None
    stats: StatsSummary
    anomalies: AnomalyReport
    daily_status: List[RangeStatus] = Field(default_factory=list)


class CopAnalysisReport(NpModel):

    category: str
    unit: str
    year: int
    month: int
    cement_type: Optional[str] = None
    cache_hit: bool = False
    rows: List[NormalizedRow]
    qaf: QafSummary
    daily_bands: List[QafBand] = Field(default_factory=list)
    monthly_band: QafBand = QafBand.na
    parameters: List[ParameterAnalysis] = Field(default_factory=list)
    table: List[ParameterTableRow] = Field(default_factory=list)
    correlations: List[CorrelationResult] = Field(default_factory=list)
    quality: QualityMetrics
    insights: List[PredictiveInsight] = Field(default_factory=list)
    comparison: List[PeriodComparison] = Field(default_factory=list)
    summary: str = ""


class CacheStats(NpModel):

    total_entries: int
    active_entries: int
    expired_entries: int
    total_size: int
