"""
Statistics engine for monthly parameter series, providing descriptive summaries, trend classification and the rounded per-parameter summary table.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from engine.stats.descriptive import StatsSummary, classify_trend, compute_stats, linear_slope
from engine.stats.series import iter_pairs, iter_present, present_values
from engine.stats.table import ParameterTableRow, summarize_row

__all__ = [
    "StatsSummary", "classify_trend", "compute_stats", "linear_slope",
    "iter_pairs", "iter_present", "present_values",
    "ParameterTableRow", "summarize_row",
]
