from __future__ import annotations

import math

import pytest

from mapty.workout.validation import (
    InvalidMetric,
    check_cycling_metrics,
    check_running_metrics,
    parse_number,
)


def test_parse_number_follows_browser_coercion() -> None:
    assert parse_number("5") == 5.0
    assert parse_number(" 2.5 ") == 2.5
    assert parse_number("") == 0.0
    assert parse_number("   ") == 0.0
    assert parse_number(7) == 7.0
    assert math.isnan(parse_number("abc"))
    assert math.isnan(parse_number(None))


def test_running_requires_positive_cadence() -> None:
    check_running_metrics(5.0, 25.0, 180.0)
    with pytest.raises(InvalidMetric):
        check_running_metrics(5.0, 25.0, -1.0)


def test_cycling_only_checks_elevation_for_finiteness() -> None:
    check_cycling_metrics(20.0, 50.0, -30.0)
    with pytest.raises(InvalidMetric):
        check_cycling_metrics(20.0, 50.0, math.inf)
    with pytest.raises(InvalidMetric):
        check_cycling_metrics(20.0, 0.0, 10.0)


def test_parse_number_rejects_python_only_spellings() -> None:
    assert math.isnan(parse_number("1_000"))
    assert math.isnan(parse_number("inf"))
    assert math.isnan(parse_number("nan"))
    assert math.isnan(parse_number("-0x10"))
    assert parse_number("Infinity") == math.inf
    assert parse_number("-Infinity") == -math.inf


def test_parse_number_accepts_browser_number_forms() -> None:
    assert parse_number("0x10") == 16.0
    assert parse_number("0o17") == 15.0
    assert parse_number("0b101") == 5.0
    assert parse_number(".5") == 0.5
    assert parse_number("5.") == 5.0
    assert parse_number("+1e3") == 1000.0
