"""Unit tests for the due date/time resolver."""

from datetime import datetime, timedelta, timezone
from zoneinfo import ZoneInfo

import pytest

from src.parser import DateTimeResult, resolve_datetime
from src.parser.datetime_resolver import (
    days_until_bare,
    days_until_end_of_week,
    days_until_next,
    days_until_this,
    resolve_date,
    resolve_time,
    start_of_day,
)

# Wednesday
NOW = datetime(2026, 3, 4, 10, 30)
TODAY = datetime(2026, 3, 4)


def _days(n: int) -> datetime:
    return TODAY + timedelta(days=n)


# ==================== Time of day ====================


class TestResolveTime:
    """Tests for time-of-day extraction."""

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("call mom at 5pm", "17:00"),
            ("call mom at 5 pm", "17:00"),
            ("call mom at 5:45pm", "17:45"),
            ("call mom at 9:15 am", "09:15"),
            ("call mom at 12pm", "12:00"),
            ("call mom at 12am", "00:00"),
            ("call mom at 12:30am", "00:30"),
            ("call mom at 14:30", "14:30"),
            ("call mom at 7:05", "07:05"),
        ],
    )
    def test_clock_times(self, text, expected):
        """Test 12-hour and 24-hour clock phrases."""
        result = resolve_time(text)
        assert result.value == expected
        assert result.text == "call mom"

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("run in the morning", "09:00"),
            ("run this morning", "09:00"),
            ("run in the afternoon", "14:00"),
            ("run this evening", "18:00"),
            ("run at night", "21:00"),
            ("run tonight", "21:00"),
            ("run at noon", "12:00"),
            ("run by noon", "12:00"),
            ("run morning", "09:00"),
            ("run afternoon", "14:00"),
            ("run evening", "18:00"),
            ("run noon", "12:00"),
        ],
    )
    def test_named_periods(self, text, expected):
        """Test named periods of the day."""
        result = resolve_time(text)
        assert result.value == expected
        assert result.text == "run"

    def test_am_pm_checked_before_24_hour(self):
        """Test that a trailing am/pm is honored over the literal clock."""
        assert resolve_time("at 7:30 pm").value == "19:30"

    def test_first_matching_pattern_wins(self):
        """Test clock times beat named periods."""
        result = resolve_time("gym in the morning at 6am")
        assert result.value == "06:00"
        assert result.text == "gym in the morning"

    def test_out_of_range_clock_is_ignored(self):
        """Test impossible clock values are not extracted."""
        assert resolve_time("meet at 13pm").value is None
        assert resolve_time("meet at 25:00").value is None
        assert resolve_time("meet at 10:75").value is None

    def test_no_time(self):
        """Test text without a time passes through unchanged."""
        result = resolve_time("buy milk")
        assert result.value is None
        assert result.text == "buy milk"

    def test_case_insensitive(self):
        """Test phrases are matched regardless of case."""
        result = resolve_time("Call Bob At 5PM")
        assert result.value == "17:00"
        assert result.text == "Call Bob"


# ==================== Weekday arithmetic ====================


class TestWeekdayArithmetic:
    """Tests for the weekday offset helpers (Monday=0 ... Sunday=6)."""

    def test_next_weekday_is_always_second_occurrence_window(self):
        """Test "next X" lands 7 to 13 days out."""
        for current in range(7):
            for target in range(7):
                assert 7 <= days_until_next(target, current) <= 13

    def test_next_monday_from_wednesday(self):
        """Test "next Monday" said on a Wednesday is 12 days away."""
        assert days_until_next(0, 2) == 12

    def test_next_same_weekday(self):
        """Test "next Wednesday" said on a Wednesday is a week away."""
        assert days_until_next(2, 2) == 7

    def test_this_weekday_includes_today(self):
        """Test "this X" ranges over today and the next six days."""
        assert days_until_this(2, 2) == 0
        assert days_until_this(4, 2) == 2
        assert days_until_this(0, 2) == 5

    def test_bare_weekday_is_strictly_future(self):
        """Test a bare weekday never resolves to today."""
        assert days_until_bare(2, 2) == 7
        assert days_until_bare(3, 2) == 1
        assert days_until_bare(0, 2) == 5

    def test_end_of_week(self):
        """Test end of week is the upcoming Friday."""
        assert days_until_end_of_week(0) == 4  # Monday
        assert days_until_end_of_week(2) == 2  # Wednesday
        assert days_until_end_of_week(4) == 7  # Friday rolls over
        assert days_until_end_of_week(5) == 6  # Saturday
        assert days_until_end_of_week(6) == 5  # Sunday

    def test_start_of_day(self):
        """Test start_of_day drops the time of day."""
        assert start_of_day(NOW) == TODAY


# ==================== Date cascade ====================


class TestResolveDate:
    """Tests for due date extraction."""

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("next monday", _days(12)),
            ("next wednesday", _days(7)),
            ("next thursday", _days(8)),
            ("by next friday", _days(9)),
            ("next sunday", _days(11)),
        ],
    )
    def test_next_weekday(self, text, expected):
        """Test "next <weekday>" resolves to the second future occurrence."""
        result = resolve_date(f"renew passport {text}", NOW)
        assert result.value == expected
        assert result.text == "renew passport"

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("today", _days(0)),
            ("by today", _days(0)),
            ("tonight", _days(0)),
            ("tomorrow", _days(1)),
            ("by tomorrow", _days(1)),
            ("day after tomorrow", _days(2)),
            ("the day after tomorrow", _days(2)),
            ("next week", _days(7)),
            ("next month", _days(30)),
            ("in 3 days", _days(3)),
            ("in 1 day", _days(1)),
            ("within 10 days", _days(10)),
            ("in 2 weeks", _days(14)),
            ("in 1 week", _days(7)),
            ("end of day", _days(0)),
            ("by the end of the day", _days(0)),
            ("end of week", _days(2)),
            ("by end of the week", _days(2)),
        ],
    )
    def test_relative_offsets(self, text, expected):
        """Test relative phrases resolve from the start of today."""
        result = resolve_date(f"file taxes {text}", NOW)
        assert result.value == expected
        assert result.text == "file taxes"

    def test_in_hours_is_exact_instant(self):
        """Test "in N hours" keeps the time of the reference instant."""
        result = resolve_date("call back in 2 hours", NOW)
        assert result.value == NOW + timedelta(hours=2)
        assert result.text == "call back"

    def test_in_hours_crosses_midnight(self):
        """Test "in N hours" ignores calendar-day boundaries."""
        late = datetime(2026, 3, 4, 23, 15)
        result = resolve_date("check oven in 3 hours", late)
        assert result.value == datetime(2026, 3, 5, 2, 15)

    def test_in_hours_across_dst_change(self):
        """Test "in N hours" is exact elapsed time across a DST switch."""
        tz = ZoneInfo("America/New_York")
        before_switch = datetime(2026, 3, 8, 1, 30, tzinfo=tz)
        result = resolve_date("in 2 hours", before_switch).value
        elapsed = result.astimezone(timezone.utc) - before_switch.astimezone(timezone.utc)
        assert elapsed == timedelta(hours=2)
        assert result.hour == 4

    def test_end_of_week_on_friday_rolls_over(self):
        """Test "end of week" said on a Friday is the following Friday."""
        friday = datetime(2026, 3, 6, 9, 0)
        result = resolve_date("end of week", friday)
        assert result.value == datetime(2026, 3, 13)

    def test_next_month_is_flat_thirty_days(self):
        """Test "next month" ignores month lengths."""
        jan_31 = datetime(2026, 1, 31, 8, 0)
        assert resolve_date("next month", jan_31).value == datetime(2026, 3, 2)

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("this monday", _days(5)),
            ("this wednesday", _days(0)),
            ("by this friday", _days(2)),
            ("on this sunday", _days(4)),
            ("monday", _days(5)),
            ("on wednesday", _days(7)),
            ("by thursday", _days(1)),
            ("saturday", _days(3)),
        ],
    )
    def test_weekdays(self, text, expected):
        """Test "this <weekday>" and bare weekday phrases."""
        result = resolve_date(f"water plants {text}", NOW)
        assert result.value == expected
        assert result.text == "water plants"

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("3/14", datetime(2026, 3, 14)),
            ("on 12/25/27", datetime(2027, 12, 25)),
            ("by 1/2/2028", datetime(2028, 1, 2)),
            ("march 3rd", datetime(2026, 3, 3)),
            ("on April 15th, 2027", datetime(2027, 4, 15)),
            ("by december 1", datetime(2026, 12, 1)),
            ("14th of july", datetime(2026, 7, 14)),
            ("on 2nd of February 2027", datetime(2027, 2, 2)),
            ("21 june", datetime(2026, 6, 21)),
        ],
    )
    def test_explicit_dates(self, text, expected):
        """Test numeric and month-name dates."""
        result = resolve_date(f"submit form {text}", NOW)
        assert result.value == expected
        assert result.text == "submit form"

    def test_impossible_date_is_ignored(self):
        """Test calendar-invalid dates do not match."""
        result = resolve_date("submit form 2/30", NOW)
        assert result.value is None
        assert result.text == "submit form 2/30"

    @pytest.mark.parametrize("text", ["pay bill on 3/14/202", "renew visa 12/1/20251"])
    def test_malformed_numeric_date_is_not_split(self, text):
        """Test a numeric date with extra digit groups is left whole."""
        result = resolve_date(text, NOW)
        assert result.value is None
        assert result.text == text

    def test_impossible_date_falls_through_to_later_pattern(self):
        """Test the cascade keeps looking past an impossible date."""
        result = resolve_date("submit 13/45 or march 3", NOW)
        assert result.value == datetime(2026, 3, 3)
        assert result.text == "submit 13/45 or"

    def test_cascade_order_next_weekday_first(self):
        """Test "next <weekday>" beats relative offsets in the same text."""
        result = resolve_date("tomorrow or next monday", NOW)
        assert result.value == _days(12)
        assert result.text == "tomorrow or"

    def test_relative_before_bare_weekday(self):
        """Test relative offsets beat bare weekdays."""
        result = resolve_date("friday or tomorrow", NOW)
        assert result.value == _days(1)
        assert result.text == "friday or"

    def test_keeps_timezone_of_reference(self):
        """Test calendar days are midnight in the reference timezone."""
        tz = ZoneInfo("Europe/Berlin")
        now = datetime(2026, 3, 4, 10, 30, tzinfo=tz)
        result = resolve_date("tomorrow", now).value
        assert result == datetime(2026, 3, 5, tzinfo=tz)
        assert result.tzinfo is tz

    def test_no_date(self):
        """Test text without a date passes through unchanged."""
        result = resolve_date("buy milk", NOW)
        assert result.value is None
        assert result.text == "buy milk"


# ==================== Combined resolver ====================


class TestResolveDatetime:
    """Tests for resolve_datetime()."""

    def test_date_and_time(self):
        """Test both fields are extracted independently."""
        result = resolve_datetime("buy milk tomorrow at 5pm", NOW)
        assert isinstance(result, DateTimeResult)
        assert result.date == _days(1)
        assert result.time == "17:00"
        assert result.text == "buy milk"

    def test_time_without_date(self):
        """Test a time may be present without a date."""
        result = resolve_datetime("stretch at 7:30 am", NOW)
        assert result.date is None
        assert result.time == "07:30"

    def test_date_without_time(self):
        """Test a date may be present without a time."""
        result = resolve_datetime("stretch on friday", NOW)
        assert result.date == _days(2)
        assert result.time is None

    def test_tonight_is_consumed_as_time(self):
        """Test "tonight" is taken by the time pass before the date pass."""
        result = resolve_datetime("call mom tonight", NOW)
        assert result.time == "21:00"
        assert result.date is None
        assert result.text == "call mom"

    def test_time_extracted_before_date(self):
        """Test a time phrase is never swallowed by a date phrase."""
        result = resolve_datetime("meeting on march 3 at 10:15", NOW)
        assert result.time == "10:15"
        assert result.date == datetime(2026, 3, 3)
        assert result.text == "meeting"

    def test_only_first_occurrence_removed(self):
        """Test later repeats of a phrase stay in the text."""
        result = resolve_datetime("tomorrow plan tomorrow", NOW)
        assert result.date == _days(1)
        assert result.text == "plan tomorrow"

    def test_empty_text(self):
        """Test empty text resolves nothing."""
        result = resolve_datetime("", NOW)
        assert result == DateTimeResult(text="")
