"""
Test Suite for Pearson correlation and the pairwise correlation matrix.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

import pytest

from engine.correlation import classify_correlation, correlate, correlation_matrix
from engine.enums import CorrelationStrength
from engine.exceptions import AnalyticsError, SeriesLengthMismatch


def test_perfect_positive_correlation():
    r = correlate([1, 2, 3], [2, 4, 6])
    assert r == pytest.approx(1.0)
    assert classify_correlation(r) == CorrelationStrength.strong


def test_perfect_negative_correlation():
    r = correlate([1, 2, 3, 4], [8, 6, 4, 2])
    assert r == pytest.approx(-1.0)
    assert classify_correlation(r) == CorrelationStrength.strong


def test_correlation_is_symmetric_and_bounded():
    a = [3.1, None, 4.7, 5.0, 2.2, 8.9, 1.0]
    b = [1.0, 2.0, 0.5, None, 3.3, 2.8, 4.4]
    r_ab = correlate(a, b)
    r_ba = correlate(b, a)
    assert r_ab is not None
    assert r_ab == r_ba
    assert -1.0 <= r_ab <= 1.0


def test_only_days_with_both_readings_count():
    # day 2 has an outlier in b but no reading in a, so it is ignored
    r = correlate([1, 2, None, 3], [2, 4, 1000, 6])
    assert r == pytest.approx(1.0)


def test_too_few_pairs():
    assert correlate([1, 2, None], [1, 2, 3]) is None
    assert correlate([], []) is None


def test_constant_series_is_undefined():
    assert correlate([5, 5, 5], [1, 2, 3]) is None
    assert classify_correlation(None) == CorrelationStrength.none


def test_length_mismatch_raises():
    with pytest.raises(SeriesLengthMismatch):
        correlate([1, 2, 3], [1, 2])
    assert issubclass(SeriesLengthMismatch, AnalyticsError)
    assert issubclass(SeriesLengthMismatch, ValueError)


def test_matrix_sorted_by_magnitude_with_undefined_last():
    series = [
        ("a", [1, 2, 3, 4]),
        ("b", [2, 4, 6, 8]),
        ("c", [5, 5, 5, 5]),
        ("d", [1, 3, 2, 4]),
    ]
    results = correlation_matrix(series)
    assert len(results) == 6
    assert (results[0].parameter_a, results[0].parameter_b) == ("a", "b")
    assert results[0].strength == CorrelationStrength.strong
    defined = [r for r in results if r.correlation is not None]
    undefined = [r for r in results if r.correlation is None]
    assert results == defined + undefined
    assert {(r.parameter_a, r.parameter_b) for r in undefined} == {("a", "c"), ("b", "c"), ("c", "d")}
    magnitudes = [abs(r.correlation) for r in defined]
    assert magnitudes == sorted(magnitudes, reverse=True)


def test_matrix_of_single_series_is_empty():
    assert correlation_matrix([("a", [1, 2, 3])]) == []


def test_overflowing_spread_is_undefined_not_clamped():
    # squared deviations overflow; the clamp must never turn that into 1.0
    assert correlate([1e200, 2e200, 3e200], [3e200, 2e200, 1e200]) is None
    assert correlate([1e200, 2e200, 3e200], [1, 2, 3]) is None
    assert classify_correlation(correlate([1e200, 2e200, 3e200], [3e200, 2e200, 1e200])) == CorrelationStrength.none


def test_large_but_safe_magnitudes_still_correlate():
    assert correlate([1e100, 2e100, 3e100], [3e100, 2e100, 1e100]) == pytest.approx(-1.0)
