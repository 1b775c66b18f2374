"""
Test Suite for month-level data quality metrics.
"""

import pytest

from engine.qaf import ParameterSpec, normalize
from engine.quality import quality_metrics


def _row(pid, values):
    return normalize(ParameterSpec(id=pid, name=pid, min_value=0, max_value=100), values)


def test_stability_and_completeness():
    rows = [_row("a", [10, 20, 30, None]), _row("b", [50, 50, 50, 50])]
    q = quality_metrics(rows)
    # a: cv = 8.165 / 20 -> stability ~59.18; b: zero spread counts as unstable
    assert q.overall_stability == pytest.approx((100 - 40.8248) / 2, abs=1e-3)
    assert q.average_completeness == pytest.approx((75.0 + 100.0) / 2)
    assert q.parameter_count == 2
    assert q.total_data_points == 8
    assert q.valid_data_points == 7


def test_stability_floor_is_zero():
    q = quality_metrics([_row("a", [1, 1, 1, 100])])
    assert q.overall_stability == 0.0


def test_no_rows():
    q = quality_metrics([])
    assert q.parameter_count == 0
    assert q.overall_stability == 0.0 and q.average_completeness == 0.0
