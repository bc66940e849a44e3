"""Resolve spoken due dates and times against a reference instant.

Time of day is extracted first so that a date phrase can never swallow a
time-bearing phrase ("tonight", "at 5pm"). The date is then resolved through
a fixed cascade where only the first matching rule fires:

    1. "next <weekday>"
    2. relative offsets ("tomorrow", "in 3 days", "end of week", ...)
    3. "this <weekday>" and bare "<weekday>"
    4. explicit calendar dates ("3/14", "March 14th", "14th of March")

Calendar days resolve to local midnight of the reference instant's timezone.
"in N hours" is the one phrase that resolves to an exact instant.
"""

import logging
import re
from datetime import datetime, timedelta, timezone
from typing import Optional

from .config import reference_now
from .models import DateTimeResult, Extraction
from .patterns import Rule, compile_phrase, run_cascade

logger = logging.getLogger(__name__)

WEEKDAYS = (
    "monday",
    "tuesday",
    "wednesday",
    "thursday",
    "friday",
    "saturday",
    "sunday",
)

MONTHS = (
    "january",
    "february",
    "march",
    "april",
    "may",
    "june",
    "july",
    "august",
    "september",
    "october",
    "november",
    "december",
)

FRIDAY = WEEKDAYS.index("friday")

_WEEKDAY = "(" + "|".join(WEEKDAYS) + ")"
_MONTH = "(" + "|".join(MONTHS) + ")"
_ORDINAL = r"(?:st|nd|rd|th)?"
_YEAR = r"(?:\s*,?\s*(\d{4}))?"


def format_time(hours: int, minutes: int) -> str:
    """Format a 24-hour clock value as HH:MM."""
    return f"{hours:02d}:{minutes:02d}"


# -------------------- Time of day --------------------


def _twelve_hour(match: re.Match) -> Optional[str]:
    hours = int(match.group(1))
    minutes = int(match.group(2)) if match.group(2) else 0
    if not 1 <= hours <= 12 or minutes > 59:
        return None

    period = match.group(3).lower()
    if period == "pm" and hours != 12:
        hours += 12
    if period == "am" and hours == 12:
        hours = 0
    return format_time(hours, minutes)


def _twenty_four_hour(match: re.Match) -> Optional[str]:
    hours = int(match.group(1))
    minutes = int(match.group(2))
    if hours > 23 or minutes > 59:
        return None
    return format_time(hours, minutes)


def _fixed_time(value: str):
    return lambda match: value


TIME_RULES: tuple[Rule, ...] = (
    (compile_phrase(r"\bat\s+(\d{1,2})(?::(\d{2}))?\s*(am|pm)\b"), _twelve_hour),
    (compile_phrase(r"\bat\s+(\d{1,2}):(\d{2})\b"), _twenty_four_hour),
    (compile_phrase(r"\b(?:in\s+the|this)\s+morning\b"), _fixed_time("09:00")),
    (compile_phrase(r"\b(?:in\s+the|this)\s+afternoon\b"), _fixed_time("14:00")),
    (compile_phrase(r"\b(?:in\s+the|this)\s+evening\b"), _fixed_time("18:00")),
    (compile_phrase(r"\b(?:at\s+night|tonight)\b"), _fixed_time("21:00")),
    (compile_phrase(r"\b(?:at|by)\s+noon\b"), _fixed_time("12:00")),
    (compile_phrase(r"\bmorning\b"), _fixed_time("09:00")),
    (compile_phrase(r"\bafternoon\b"), _fixed_time("14:00")),
    (compile_phrase(r"\bevening\b"), _fixed_time("18:00")),
    (compile_phrase(r"\bnoon\b"), _fixed_time("12:00")),
)


def resolve_time(text: str) -> Extraction[Optional[str]]:
    """Extract the first recognized time of day from text.

    Args:
        text: The working text.

    Returns:
        Extraction with the "HH:MM" value (or None) and the residual text.
    """
    hit = run_cascade(text, TIME_RULES)
    if hit is None:
        return Extraction(value=None, text=text)
    value, residual = hit
    return Extraction(value=value, text=residual)


# -------------------- Calendar arithmetic --------------------


def start_of_day(now: datetime) -> datetime:
    """Return local midnight of the reference instant's day."""
    return now.replace(hour=0, minute=0, second=0, microsecond=0)


def _days_ahead(now: datetime, days: int) -> datetime:
    return start_of_day(now) + timedelta(days=days)


def _hours_ahead(now: datetime, hours: int) -> datetime:
    # Aware instants are shifted in UTC so DST transitions cannot stretch
    # or shrink the offset.
    if now.tzinfo is None:
        return now + timedelta(hours=hours)
    shifted = now.astimezone(timezone.utc) + timedelta(hours=hours)
    return shifted.astimezone(now.tzinfo)


def days_until_next(target: int, current: int) -> int:
    """Days until "next <weekday>": always 7 to 13 days out.

    The nearest occurrence (0 when target is today) is pushed one more
    week whenever it falls inside the coming seven days, so "next Monday"
    said on a Wednesday is 12 days away, not 5.
    """
    days = (target - current) % 7
    if days < 7:
        days += 7
    return days


def days_until_this(target: int, current: int) -> int:
    """Days until "this <weekday>": 0 to 6, today included."""
    days = target - current
    if days < 0:
        days += 7
    return days


def days_until_bare(target: int, current: int) -> int:
    """Days until a bare "<weekday>": 1 to 7, strictly in the future."""
    days = target - current
    if days <= 0:
        days += 7
    return days


def days_until_end_of_week(current: int) -> int:
    """Days until the upcoming Friday, rolling over a full week on Fridays."""
    return (FRIDAY - current) % 7 or 7


# -------------------- Date rules --------------------


def _weekday_rule(offset):
    def handler(match: re.Match, now: datetime) -> datetime:
        target = WEEKDAYS.index(match.group(1).lower())
        return _days_ahead(now, offset(target, now.weekday()))

    return handler


def _fixed_days(days: int):
    return lambda match, now: _days_ahead(now, days)


def _counted_days(multiplier: int):
    def handler(match: re.Match, now: datetime) -> Optional[datetime]:
        try:
            return _days_ahead(now, int(match.group(1)) * multiplier)
        except (OverflowError, ValueError):
            return None

    return handler


def _counted_hours(match: re.Match, now: datetime) -> Optional[datetime]:
    try:
        return _hours_ahead(now, int(match.group(1)))
    except (OverflowError, ValueError):
        return None


def _end_of_week(match: re.Match, now: datetime) -> datetime:
    return _days_ahead(now, days_until_end_of_week(now.weekday()))


def _calendar_date(
    now: datetime, year: int, month: int, day: int
) -> Optional[datetime]:
    try:
        return datetime(year, month, day, tzinfo=now.tzinfo)
    except ValueError:
        logger.debug("Ignoring impossible date %d-%d-%d", year, month, day)
        return None


def _numeric_date(match: re.Match, now: datetime) -> Optional[datetime]:
    month = int(match.group(1))
    day = int(match.group(2))
    year_text = match.group(3)
    if not year_text:
        year = now.year
    elif len(year_text) == 2:
        year = 2000 + int(year_text)
    else:
        year = int(year_text)
    return _calendar_date(now, year, month, day)


def _month_day(match: re.Match, now: datetime) -> Optional[datetime]:
    month = MONTHS.index(match.group(1).lower()) + 1
    year = int(match.group(3)) if match.group(3) else now.year
    return _calendar_date(now, year, month, int(match.group(2)))


def _day_month(match: re.Match, now: datetime) -> Optional[datetime]:
    month = MONTHS.index(match.group(2).lower()) + 1
    year = int(match.group(3)) if match.group(3) else now.year
    return _calendar_date(now, year, month, int(match.group(1)))


NEXT_WEEKDAY_RULES: tuple[Rule, ...] = (
    (
        compile_phrase(rf"\b(?:by\s+)?next\s+{_WEEKDAY}\b"),
        _weekday_rule(days_until_next),
    ),
)

RELATIVE_RULES: tuple[Rule, ...] = (
    (compile_phrase(r"\b(?:by\s+)?today\b"), _fixed_days(0)),
    (compile_phrase(r"\b(?:by\s+)?tonight\b"), _fixed_days(0)),
    (
        compile_phrase(r"\b(?:by\s+)?(?:the\s+)?day\s+after\s+tomorrow\b"),
        _fixed_days(2),
    ),
    (compile_phrase(r"\b(?:by\s+)?tomorrow\b"), _fixed_days(1)),
    (compile_phrase(r"\b(?:by\s+)?next\s+week\b"), _fixed_days(7)),
    (compile_phrase(r"\b(?:by\s+)?next\s+month\b"), _fixed_days(30)),
    (compile_phrase(r"\b(?:with)?in\s+(\d+)\s+days?\b"), _counted_days(1)),
    (compile_phrase(r"\b(?:with)?in\s+(\d+)\s+weeks?\b"), _counted_days(7)),
    (compile_phrase(r"\b(?:with)?in\s+(\d+)\s+hours?\b"), _counted_hours),
    (
        compile_phrase(r"\b(?:by\s+)?(?:the\s+)?end\s+of\s+(?:the\s+)?day\b"),
        _fixed_days(0),
    ),
    (
        compile_phrase(r"\b(?:by\s+)?(?:the\s+)?end\s+of\s+(?:the\s+)?week\b"),
        _end_of_week,
    ),
)

WEEKDAY_RULES: tuple[Rule, ...] = (
    (
        compile_phrase(rf"\b(?:by\s+|on\s+)?this\s+{_WEEKDAY}\b"),
        _weekday_rule(days_until_this),
    ),
    (
        compile_phrase(rf"\b(?:by\s+|on\s+)?{_WEEKDAY}\b"),
        _weekday_rule(days_until_bare),
    ),
)

EXPLICIT_DATE_RULES: tuple[Rule, ...] = (
    (
        compile_phrase(r"\b(?:by\s+|on\s+)?(\d{1,2})/(\d{1,2})(?:/(\d{4}|\d{2}))?(?!/\d)\b"),
        _numeric_date,
    ),
    (
        compile_phrase(rf"\b(?:by\s+|on\s+)?{_MONTH}\s+(\d{{1,2}}){_ORDINAL}{_YEAR}\b"),
        _month_day,
    ),
    (
        compile_phrase(
            rf"\b(?:by\s+|on\s+)?(\d{{1,2}}){_ORDINAL}\s+(?:of\s+)?{_MONTH}{_YEAR}\b"
        ),
        _day_month,
    ),
)

DATE_CASCADE: tuple[tuple[Rule, ...], ...] = (
    NEXT_WEEKDAY_RULES,
    RELATIVE_RULES,
    WEEKDAY_RULES,
    EXPLICIT_DATE_RULES,
)


def resolve_date(text: str, now: datetime) -> Extraction[Optional[datetime]]:
    """Extract the first recognized due date from text.

    Each rule family is tried in full before falling through to the next;
    the first rule that fires anywhere in the cascade wins.

    Args:
        text: The working text.
        now: Reference instant for relative phrases.

    Returns:
        Extraction with the resolved datetime (or None) and residual text.
    """
    for rules in DATE_CASCADE:
        hit = run_cascade(text, rules, now)
        if hit is not None:
            value, residual = hit
            return Extraction(value=value, text=residual)
    return Extraction(value=None, text=text)


def resolve_datetime(text: str, now: Optional[datetime] = None) -> DateTimeResult:
    """Extract at most one time of day and one due date from text.

    Args:
        text: The working text.
        now: Reference instant. Defaults to the configured wall clock.

    Returns:
        DateTimeResult with the resolved fields and the residual text.
    """
    now = reference_now(now)

    time_part = resolve_time(text)
    date_part = resolve_date(time_part.text, now)

    if time_part.value or date_part.value:
        logger.debug(
            "Resolved due date=%s time=%s",
            date_part.value.isoformat() if date_part.value else None,
            time_part.value,
        )

    return DateTimeResult(
        text=date_part.text,
        date=date_part.value,
        time=time_part.value,
    )
