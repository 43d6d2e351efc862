"""Short relative labels for dates ("Today", "3 days ago", "2 months")."""

from datetime import date, datetime
from typing import Union

from .calculations import DateInput, days_until_ceil, parse_anchor, plural, resolve_now


def relative_label(target: DateInput, now: Union[date, datetime, None] = None) -> str:
    """
    Describe how far target lies from now.

    Partial days round up: a date-only target of today reads "Today" for
    the whole day. Raises ValueError if target is missing or unparseable.
    """
    anchor = parse_anchor(target)
    if anchor is None:
        raise ValueError("relative_label requires a date")

    diff_days = days_until_ceil(anchor, resolve_now(now))

    if diff_days < 0:
        return f"{plural(abs(diff_days), 'day')} ago"
    if diff_days == 0:
        return "Today"
    if diff_days == 1:
        return "Tomorrow"
    if diff_days < 30:
        return plural(diff_days, "day")
    if diff_days < 365:
        return plural(diff_days // 30, "month")
    return plural(diff_days // 365, "year")
