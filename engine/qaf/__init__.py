"""
Normalization and QAF aggregation for monthly COP parameter data, converting raw readings to percentage-of-target and rolling them up into daily and monthly quality attainment factors.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from engine.qaf.aggregate import DailyQaf, MonthlyQaf, QafSummary, compute_qaf
from engine.qaf.bounds import ParameterSpec, resolve_bounds, valid_bounds
from engine.qaf.normalize import DailyValue, NormalizedRow, ParameterSeries, normalize, normalize_series

__all__ = [
    "DailyQaf", "MonthlyQaf", "QafSummary", "compute_qaf",
    "ParameterSpec", "resolve_bounds", "valid_bounds",
    "DailyValue", "NormalizedRow", "ParameterSeries", "normalize", "normalize_series",
]
