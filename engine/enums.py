"""
Enumerations for Severity, Trend, Correlation Strength, Range Status and QAF Bands

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from enum import Enum
from typing import Optional


class Severity(str, Enum):
    low = "low"
    medium = "medium"
    high = "high"

    @classmethod
    def from_outlier_count(cls, count: int) -> Severity:
        from config import settings

        if count <= 0:
            return cls.low
        if count <= settings.anomaly_medium_max_outliers:
            return cls.medium
        return cls.high


class Trend(str, Enum):
    increasing = "increasing"
    decreasing = "decreasing"
    stable = "stable"
    insufficient = "insufficient"


class CorrelationStrength(str, Enum):
    none = "none"
    weak = "weak"
    moderate = "moderate"
    strong = "strong"

    @classmethod
    def from_value(cls, correlation: Optional[float]) -> CorrelationStrength:
        from config import settings

        if correlation is None:
            return cls.none
        magnitude = abs(correlation)
        if magnitude >= settings.correlation_strong:
            return cls.strong
        if magnitude >= settings.correlation_moderate:
            return cls.moderate
        if magnitude >= settings.correlation_weak:
            return cls.weak
        return cls.none


class RangeStatus(str, Enum):
    na = "na"
    low = "low"
    normal = "normal"
    high = "high"

    @classmethod
    def from_percentage(cls, percentage: Optional[float]) -> RangeStatus:
        from config import settings

        if percentage is None or percentage != percentage:
            return cls.na
        if percentage < settings.qaf_range_low:
            return cls.low
        if percentage > settings.qaf_range_high:
            return cls.high
        return cls.normal


class QafBand(str, Enum):
    na = "na"
    good = "good"
    warning = "warning"
    poor = "poor"

    @classmethod
    def from_value(cls, qaf: Optional[float]) -> QafBand:
        from config import settings

        if qaf is None or qaf != qaf:
            return cls.na
        if qaf >= settings.qaf_band_good:
            return cls.good
        if qaf >= settings.qaf_band_warning:
            return cls.warning
        return cls.poor


class ChangeDirection(str, Enum):
    increased = "increased"
    decreased = "decreased"
    stable = "stable"
    unknown = "unknown"
