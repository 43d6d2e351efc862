#!/usr/bin/env python3
"""Tests for calculation helper functions."""
import pytest
from datetime import date, datetime

from vehicle_status import age_in_days, calc_due_date, parse_anchor, resolve_now
from vehicle_status.calculations import days_until, days_until_ceil, plural


class TestParseAnchor:
    """Tests for parse_anchor."""

    def test_iso_date_string_is_midnight(self):
        assert parse_anchor("2024-01-01") == datetime(2024, 1, 1)

    def test_iso_datetime_string(self):
        assert parse_anchor("2024-01-01T10:30:00") == datetime(2024, 1, 1, 10, 30)

    def test_date_object(self):
        assert parse_anchor(date(2024, 1, 1)) == datetime(2024, 1, 1)

    def test_datetime_object_unchanged(self):
        value = datetime(2024, 1, 1, 8, 15)
        assert parse_anchor(value) == value

    def test_absent_values(self):
        """None and blank strings mean no date recorded."""
        assert parse_anchor(None) is None
        assert parse_anchor("") is None
        assert parse_anchor("   ") is None

    def test_surrounding_whitespace_ignored(self):
        assert parse_anchor(" 2024-01-01 ") == datetime(2024, 1, 1)

    def test_malformed_string_raises(self):
        with pytest.raises(ValueError):
            parse_anchor("not a date")
        with pytest.raises(ValueError):
            parse_anchor("2024-13-45")

    def test_unsupported_type_raises(self):
        with pytest.raises(ValueError):
            parse_anchor(20240101)


class TestResolveNow:
    """Tests for resolve_now."""

    def test_date_is_midnight(self):
        assert resolve_now(date(2024, 1, 15)) == datetime(2024, 1, 15)

    def test_datetime_passthrough(self):
        now = datetime(2024, 1, 15, 9, 30)
        assert resolve_now(now) == now

    def test_none_reads_clock(self):
        before = datetime.now()
        result = resolve_now()
        assert before <= result <= datetime.now()


class TestDayCounts:
    """Tests for age_in_days, days_until and days_until_ceil."""

    def test_age_whole_days(self):
        assert age_in_days(datetime(2024, 1, 1), datetime(2024, 1, 15)) == 14

    def test_age_rounds_down_partial_days(self):
        assert age_in_days(datetime(2024, 1, 1), datetime(2024, 1, 15, 23)) == 14

    def test_age_negative_for_future_reference(self):
        """Half a day ahead floors to -1."""
        assert age_in_days(datetime(2024, 1, 16), datetime(2024, 1, 15, 12)) == -1

    def test_days_until_floor(self):
        assert days_until(datetime(2024, 2, 1), datetime(2024, 1, 15)) == 17
        assert days_until(datetime(2024, 2, 1), datetime(2024, 2, 1, 9)) == -1

    def test_days_until_ceil(self):
        assert days_until_ceil(datetime(2024, 1, 16), datetime(2024, 1, 15, 12)) == 1
        assert days_until_ceil(datetime(2024, 1, 15), datetime(2024, 1, 15, 10)) == 0


class TestCalcDueDate:
    """Tests for calc_due_date, including month-end rollover."""

    def test_whole_months(self):
        assert calc_due_date(datetime(2024, 1, 1), 6) == datetime(2024, 7, 1)

    def test_fractional_months(self):
        """Fractional part converted at 30 days per month."""
        assert calc_due_date(datetime(2024, 1, 1), 1.5) == datetime(2024, 2, 16)

    def test_jan_31_plus_one_month_leap_year(self):
        """Feb 31 does not exist, so the extra days roll into March."""
        assert calc_due_date(datetime(2024, 1, 31), 1) == datetime(2024, 3, 2)

    def test_jan_31_plus_one_month_common_year(self):
        assert calc_due_date(datetime(2023, 1, 31), 1) == datetime(2023, 3, 3)

    def test_month_end_into_shorter_month(self):
        assert calc_due_date(datetime(2024, 3, 31), 1) == datetime(2024, 5, 1)
        assert calc_due_date(datetime(2024, 8, 31), 6) == datetime(2025, 3, 3)

    def test_day_that_exists_is_kept(self):
        assert calc_due_date(datetime(2024, 1, 30), 1) == datetime(2024, 3, 1)
        assert calc_due_date(datetime(2024, 1, 29), 1) == datetime(2024, 2, 29)
        assert calc_due_date(datetime(2024, 1, 28), 13) == datetime(2025, 2, 28)

    def test_leap_day_plus_year(self):
        assert calc_due_date(datetime(2024, 2, 29), 12) == datetime(2025, 3, 1)

    def test_rollover_then_fraction(self):
        assert calc_due_date(datetime(2024, 1, 31), 1.5) == datetime(2024, 3, 17)

    def test_preserves_time_of_day(self):
        assert calc_due_date(datetime(2024, 1, 1, 9), 1) == datetime(2024, 2, 1, 9)


class TestPlural:
    """Tests for plural."""

    def test_singular_only_for_one(self):
        assert plural(1, "day") == "1 day"

    def test_zero_and_many(self):
        assert plural(0, "day") == "0 days"
        assert plural(2, "day") == "2 days"
        assert plural(12, "month") == "12 months"
