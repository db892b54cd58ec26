from datetime import datetime, timezone

import pytest

from coworking_pricing.errors import DurationOutOfRange, InvalidTimeFormat
from coworking_pricing.pricing.duration import (
    elapsed_duration,
    parse_time_to_minutes,
    scheduled_duration,
    try_scheduled_duration,
    validate_duration,
    validate_workspace_duration,
)
from coworking_pricing.result import Err, Ok


def test_parse_time_to_minutes():
    assert parse_time_to_minutes("00:00") == 0
    assert parse_time_to_minutes("09:30") == 570
    assert parse_time_to_minutes("23:59") == 1439


@pytest.mark.parametrize("value", ["9:30", "09:3", "0930", "24:00", "12:60", "ab:cd", "", None, "09:30:00"])
def test_parse_time_rejects_malformed(value):
    with pytest.raises(InvalidTimeFormat):
        parse_time_to_minutes(value)


def test_scheduled_duration_same_day():
    assert scheduled_duration("09:00", "12:00") == 3
    assert scheduled_duration("09:30", "11:45") == 2.25
    assert scheduled_duration("13:00", "17:30") == 4.5


def test_scheduled_duration_wraps_past_midnight():
    assert scheduled_duration("23:00", "02:00") == 3
    assert scheduled_duration("22:30", "01:15") == 2.75


def test_try_scheduled_duration_returns_err_instead_of_raising():
    assert try_scheduled_duration("09:00", "10:30") == Ok(1.5)
    result = try_scheduled_duration("9am", "10:30")
    assert isinstance(result, Err)
    assert isinstance(result.error, InvalidTimeFormat)


def test_elapsed_duration_from_iso_strings():
    assert elapsed_duration("2025-09-29T09:00:00Z", "2025-09-29T12:00:00Z") == 3
    assert elapsed_duration("2025-09-29T09:00:00Z", "2025-09-29T11:45:00Z") == 2.75


def test_elapsed_duration_rounds_to_two_decimals():
    assert elapsed_duration("2025-09-29T09:00:00Z", "2025-09-29T10:20:00Z") == 1.33


def test_elapsed_duration_does_not_wrap():
    # Check-out before check-in stays negative; no midnight assumption here.
    assert elapsed_duration("2025-09-29T23:00:00Z", "2025-09-29T02:00:00Z") == -21


def test_elapsed_duration_across_dates_and_mixed_inputs():
    check_in = datetime(2025, 9, 29, 23, 0, tzinfo=timezone.utc)
    assert elapsed_duration(check_in, "2025-09-30T02:00:00+00:00") == 3
    # naive timestamps are read as UTC
    assert elapsed_duration("2025-09-29T23:00:00", check_in) == 0


def test_validate_duration_ok():
    assert validate_duration(4, 1, 8) == Ok(4)
    assert validate_duration(1, 1, 8) == Ok(1)
    assert validate_duration(8, 1, 8) == Ok(8)


def test_validate_duration_below_minimum():
    result = validate_duration(0.5, 1, 8)
    assert isinstance(result, Err)
    assert isinstance(result.error, DurationOutOfRange)
    assert result.error.reason == "below minimum"
    assert str(result.error) == "Minimum booking duration is 1 hours"


def test_validate_duration_above_maximum(hot_desk):
    result = validate_workspace_duration(hot_desk, 9)
    assert isinstance(result, Err)
    assert result.error.reason == "above maximum"
    assert result.error.maximum == 8
    assert "Maximum booking duration is 8 hours" in str(result.error)


@pytest.mark.parametrize("value", [float("nan"), float("inf"), float("-inf")])
def test_validate_duration_rejects_non_finite(value):
    result = validate_duration(value, 1, 8)
    assert isinstance(result, Err)
    assert result.error.reason == DurationOutOfRange.NOT_FINITE
    assert "finite" in str(result.error)
