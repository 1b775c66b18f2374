"""
Test Suite for descriptive statistics, trend classification and the rounded parameter table.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

import math

import pytest

from engine.enums import Trend
from engine.qaf import ParameterSpec, normalize
from engine.stats import (
    classify_trend,
    compute_stats,
    iter_pairs,
    iter_present,
    linear_slope,
    present_values,
    summarize_row,
)


def test_stats_with_missing_day():
    s = compute_stats([10, 20, None, 30])
    assert s.mean == pytest.approx(20.0)
    assert s.median == pytest.approx(20.0)
    assert s.std_dev == pytest.approx(math.sqrt(200 / 3))
    assert s.min == 10.0 and s.max == 30.0
    assert s.count == 3
    assert s.completeness == pytest.approx(75.0)
    assert s.trend == Trend.increasing


def test_stats_empty_and_all_missing():
    for samples in ([], [None, None, None]):
        s = compute_stats(samples)
        assert s.mean is None and s.median is None and s.std_dev is None
        assert s.min is None and s.max is None
        assert s.count == 0
        assert s.completeness == 0.0
        assert s.trend == Trend.insufficient


def test_stats_treats_non_finite_as_missing():
    s = compute_stats([1.0, float("nan"), 3.0, float("inf")])
    assert s.count == 2
    assert s.mean == pytest.approx(2.0)
    assert s.completeness == pytest.approx(50.0)


def test_stats_idempotent_and_bounded():
    samples = [4.0, None, 8.5, 2.25, None, 7.0, 7.0]
    first = compute_stats(samples)
    second = compute_stats(samples)
    assert first == second
    assert first.min <= first.median <= first.max
    assert first.min <= first.mean <= first.max
    assert first.std_dev >= 0
    assert 0 <= first.completeness <= 100
    assert first.completeness == pytest.approx(first.count / len(samples) * 100)


def test_population_std_dev():
    # divisor n, not n - 1
    s = compute_stats([2, 4, 4, 4, 5, 5, 7, 9])
    assert s.std_dev == pytest.approx(2.0)


def test_linear_slope():
    assert linear_slope([1, 2, 3, 4]) == pytest.approx(1.0)
    assert linear_slope([9, 6, 3]) == pytest.approx(-3.0)
    assert linear_slope([5]) is None
    assert linear_slope([]) is None


def test_trend_classification():
    assert classify_trend([1, 2, 3]) == Trend.increasing
    assert classify_trend([3, 2, 1]) == Trend.decreasing
    assert classify_trend([5, 5, 5]) == Trend.stable
    assert classify_trend([5.0, 5.005, 5.01]) == Trend.stable
    assert classify_trend([10, 20]) == Trend.insufficient


def test_trend_ignores_gaps_in_position():
    # slope is over the index of present values, missing days are skipped
    assert compute_stats([1, None, None, 2, 3]).trend == Trend.increasing


def test_trend_threshold_configurable(monkeypatch):
    from config import settings

    monkeypatch.setattr(settings, "trend_stable_slope", 2.0)
    assert classify_trend([1, 2, 3]) == Trend.stable


def test_series_helpers():
    samples = [None, 1.5, True, "x", 2]
    assert list(iter_present(samples)) == [(1, 1.5), (4, 2.0)]
    assert present_values(samples) == [1.5, 2.0]
    assert list(iter_pairs([1, None, 3, 4], [5, 6, None, 8])) == [(0, 1.0, 5.0), (3, 4.0, 8.0)]


def test_summarize_row_rounds_values():
    param = ParameterSpec(id="p1", name="Blaine", unit="cm2/g", min_value=0, max_value=3)
    row = normalize(param, [1.0, 2.0, None, 2.0])
    table = summarize_row(row)
    assert table.parameter_id == "p1"
    assert table.parameter == "Blaine"
    assert table.unit == "cm2/g"
    assert table.avg == 1.67
    assert table.median == 2.0
    assert table.min == 1.0
    assert table.max == 2.0
    assert table.stdev == 0.47
    assert table.qaf == 55.56


def test_summarize_row_without_readings():
    row = normalize(ParameterSpec(id="p", name="P", min_value=0, max_value=1), [None, None])
    table = summarize_row(row)
    assert table.avg is None and table.stdev is None and table.qaf is None


def test_overflowing_intermediates_are_missing():
    s = compute_stats([1e200, -1e200, 1e200])
    assert s.std_dev is None
    assert s.mean == pytest.approx(1e200 / 3)
    assert s.min == -1e200 and s.max == 1e200
    assert s.count == 3

    huge = compute_stats([1.7e308, 1.7e308])
    assert huge.mean is None
    assert huge.std_dev is None
    assert huge.median is None
    assert huge.max == 1.7e308


def test_overflowing_slope_is_insufficient():
    values = [1.7e308, -1.7e308, 1.7e308, -1.7e308]
    assert linear_slope(values) is None
    assert classify_trend(values) == Trend.insufficient
