"""Helper functions for date-derived status calculations."""

import math
from datetime import date, datetime, time, timedelta
from typing import Optional, Union

from dateutil.parser import isoparse
from dateutil.relativedelta import relativedelta

DateInput = Union[str, date, datetime, None]

ONE_DAY = timedelta(days=1)


def _naive_local(value: datetime) -> datetime:
    if value.tzinfo is not None:
        return value.astimezone().replace(tzinfo=None)
    return value


def resolve_now(now: Union[date, datetime, None] = None) -> datetime:
    """
    Normalize the caller's notion of "now".

    - None: read the wall clock
    - date: local midnight of that day
    - datetime: used as-is (aware values converted to local time)
    """
    if now is None:
        return datetime.now()
    if isinstance(now, datetime):
        return _naive_local(now)
    return datetime.combine(now, time.min)


def parse_anchor(value: DateInput) -> Optional[datetime]:
    """
    Parse a stored date into a naive local datetime.

    Returns None when no date is recorded (None or a blank string).
    Raises ValueError when a date is present but cannot be parsed.
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        return _naive_local(value)
    if isinstance(value, date):
        return datetime.combine(value, time.min)
    if not isinstance(value, str):
        raise ValueError(f"Unsupported date value: {value!r}")

    text = value.strip()
    if not text:
        return None
    try:
        return _naive_local(isoparse(text))
    except (ValueError, OverflowError) as e:
        raise ValueError(f"Invalid date: {value!r}") from e


def age_in_days(reference: datetime, now: datetime) -> int:
    """Whole days elapsed since reference (negative if reference is ahead)."""
    return math.floor((now - reference) / ONE_DAY)


def days_until(target: datetime, now: datetime) -> int:
    """Whole days remaining until target, rounded down."""
    return math.floor((target - now) / ONE_DAY)


def days_until_ceil(target: datetime, now: datetime) -> int:
    """Days remaining until target, rounded up (a partial day counts)."""
    return math.ceil((target - now) / ONE_DAY)


def calc_due_date(last: datetime, interval_months: float) -> datetime:
    """
    Calculate next due date: last + interval months.

    Whole months use calendar arithmetic. A day that does not exist in the
    target month rolls over into the next one (Jan 31 + 1 month = Mar 2 in
    2024, Mar 3 in 2023). A fractional part is added as days at 30 days
    per month.
    """
    months = int(interval_months)
    days = int((interval_months - months) * 30)
    start = last.replace(day=1) + relativedelta(months=months)
    return start + timedelta(days=last.day - 1 + days)


def plural(count: int, unit: str) -> str:
    """Format a count with its unit, e.g. '1 day', '0 days', '2 days'."""
    return f"{count} {unit}" if count == 1 else f"{count} {unit}s"
