"""Tests for month keys and result variants."""

import dataclasses

import pytest

from meterdelta import exceptions
from meterdelta.types import (
    Empty,
    FirstMeasurement,
    MonthKey,
    NoChange,
    Numeric,
    Sample,
    SingleSample,
)


def test_previous_month_wraps_year():
    assert MonthKey(2025, 0).previous() == MonthKey(2024, 11)
    assert MonthKey(2025, 2).previous() == MonthKey(2025, 1)


@pytest.mark.parametrize("month", [-1, 12])
def test_month_out_of_range_raises(month):
    with pytest.raises(exceptions.MonthKeyError):
        MonthKey(2025, month)
    # also a ValueError for callers that don't know the hierarchy
    with pytest.raises(ValueError):
        MonthKey(2025, month)


def test_from_calendar_and_label():
    key = MonthKey.from_calendar(2025, 3)
    assert key == MonthKey(2025, 2)
    assert key.label == "2025-03"


def test_variant_kinds_are_distinct():
    kinds = {
        Numeric(1.0).kind,
        SingleSample(1.0, 0).kind,
        FirstMeasurement(1.0).kind,
        NoChange().kind,
        Empty().kind,
    }
    assert len(kinds) == 5


def test_no_numeric_payload_on_no_change_and_empty():
    assert dataclasses.fields(NoChange()) == ()
    assert dataclasses.fields(Empty()) == ()
    assert NoChange().value_or_zero() == 0.0


def test_results_and_samples_are_frozen():
    with pytest.raises(dataclasses.FrozenInstanceError):
        Numeric(1.0).value = 2.0  # type: ignore[misc]
    with pytest.raises(dataclasses.FrozenInstanceError):
        Sample(0, 1.0).value = 2.0  # type: ignore[misc]
