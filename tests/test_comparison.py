"""
Test Suite for period-over-period comparison of parameter means.
"""

import pytest

from engine.comparison import compare_periods
from engine.enums import ChangeDirection
from engine.qaf import ParameterSpec, normalize


def _row(pid, values):
    return normalize(ParameterSpec(id=pid, name=pid.upper(), min_value=0, max_value=100), values)


def test_delta_against_previous_month():
    current = [_row("a", [10, 20, 30]), _row("b", [5, 5, None])]
    previous = [_row("b", [10, 10, 10]), _row("a", [8, 10, 12])]
    out = compare_periods(current, previous)
    assert [c.parameter_id for c in out] == ["a", "b"]

    a, b = out
    assert a.parameter == "A"
    assert a.current.mean == pytest.approx(20.0)
    assert a.previous.mean == pytest.approx(10.0)
    assert a.delta == pytest.approx(100.0)
    assert a.direction == ChangeDirection.increased

    assert b.delta == pytest.approx(-50.0)
    assert b.direction == ChangeDirection.decreased
    assert b.current.completeness == pytest.approx(200 / 3)


def test_missing_or_zero_previous_mean():
    current = [_row("a", [1, 2, 3]), _row("b", [1, 1, 1]), _row("c", [None, None, None])]
    previous = [_row("b", [0, 0, 0]), _row("c", [1, 1, 1])]
    a, b, c = compare_periods(current, previous)

    assert a.previous.mean is None and a.previous.completeness == 0.0
    assert a.delta is None and a.direction == ChangeDirection.unknown
    assert b.previous.mean == 0.0
    assert b.delta is None
    assert c.current.mean is None and c.delta is None


def test_unchanged_mean_is_stable():
    (only,) = compare_periods([_row("a", [4, 6])], [_row("a", [5, 5])])
    assert only.delta == 0.0
    assert only.direction == ChangeDirection.stable
