"""
Date status classifiers.

Each classifier turns one stored date into a status bucket with long and
short display text:

- issue_status: how long ago a document was issued
- service_status: how long ago the vehicle was last serviced
- next_service_due: when the next service falls due, on an urgency ladder
- renewal_status: how close a document is to its expiry date

None of them raise for missing or unparseable dates; those map to the
UNKNOWN and INVALID buckets.
"""

import logging
import math
from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional, Union

from .calculations import (
    DateInput,
    age_in_days,
    calc_due_date,
    days_until,
    days_until_ceil,
    parse_anchor,
    plural,
    resolve_now,
)
from .relative import relative_label
from .results import NextServiceDue, StatusResult
from .status import Color, Status

logger = logging.getLogger(__name__)

Now = Union[date, datetime, None]

DAYS_PER_MONTH = 30
DAYS_PER_YEAR = 365
RECENT_DAYS = 30
DUE_SOON_DAYS = 7
DUE_MONTH_DAYS = 30
EXPIRING_DAYS = 30


@dataclass(frozen=True)
class AgePhrases:
    """Wording for an age classifier. `template` receives the age, e.g. '3 days'."""

    template: str
    missing_text: str
    missing_short: str = "Not set"
    invalid_text: str = "Invalid date"
    invalid_short: str = "Invalid"


ISSUE_PHRASES = AgePhrases(template="Issued {} ago", missing_text="Not set")
SERVICE_PHRASES = AgePhrases(
    template="Last serviced {} ago",
    missing_text="No service date recorded",
    invalid_text="Invalid service date",
)


def _parse_logged(value: DateInput) -> Optional[datetime]:
    """parse_anchor, logging unparseable input before re-raising."""
    try:
        return parse_anchor(value)
    except ValueError:
        logger.debug("Unparseable date %r", value)
        raise


def _describe_age(days: int):
    """Return (long, short) age descriptions for a non-negative day count."""
    if days <= RECENT_DAYS:
        return plural(days, "day"), f"{days}d"
    if days <= DAYS_PER_YEAR:
        months = days // DAYS_PER_MONTH
        return plural(months, "month"), f"{months}m"

    years = days // DAYS_PER_YEAR
    remaining_months = (days % DAYS_PER_YEAR) // DAYS_PER_MONTH
    if remaining_months > 0:
        return (
            f"{plural(years, 'year')} {plural(remaining_months, 'month')}",
            f"{years}y {remaining_months}m",
        )
    return plural(years, "year"), f"{years}y"


def classify_age(value: DateInput, phrases: AgePhrases, now: Now = None) -> StatusResult:
    """
    Bucket the age of an anchor date.

    - No date: UNKNOWN
    - Unparseable date: INVALID
    - Date in the future: VALID, "Future date" (data-entry anomaly)
    - 0-30 days: days; 31-365 days: months; beyond: years (+ months)
    """
    try:
        anchor = _parse_logged(value)
    except ValueError:
        return StatusResult(
            Status.INVALID, phrases.invalid_text, phrases.invalid_short, Color.SECONDARY
        )
    if anchor is None:
        return StatusResult(
            Status.UNKNOWN, phrases.missing_text, phrases.missing_short, Color.SECONDARY
        )

    days = age_in_days(anchor, resolve_now(now))
    if days < 0:
        return StatusResult(Status.VALID, "Future date", "Future", Color.SECONDARY)

    long_age, short_age = _describe_age(days)
    return StatusResult(
        Status.VALID,
        phrases.template.format(long_age),
        f"{short_age} ago",
        Color.SUCCESS,
    )


def issue_status(issue_date: DateInput, now: Now = None) -> StatusResult:
    """
    Status of a document by issue date.

    Only reports how long ago the document was issued; it never flags a
    document as expired. Use renewal_status with the expiry date for that.
    """
    return classify_age(issue_date, ISSUE_PHRASES, now)


def service_status(last_service: DateInput, now: Now = None) -> StatusResult:
    """Status of the vehicle by its last service date."""
    return classify_age(last_service, SERVICE_PHRASES, now)


def next_service_due(
    last_service: DateInput,
    interval_months: Optional[float],
    now: Now = None,
) -> NextServiceDue:
    """
    Calculate the next service date and classify it.

    Logic:
    - Missing date or interval: UNKNOWN (interval not inspected without a date)
    - Unparseable date, non-positive or non-finite interval: INVALID
    - Otherwise due = last service + interval months, then by days left:
      overdue (< 0), due_soon (0-7), due_month (8-30), future (> 30)
    """
    unknown = NextServiceDue(
        date=None,
        status=Status.UNKNOWN,
        text="Service info not available",
        short_text="Not set",
    )
    invalid = NextServiceDue(
        date=None,
        status=Status.INVALID,
        text="Invalid service date",
        short_text="Invalid",
    )

    if last_service is None or interval_months is None:
        return unknown
    try:
        last = _parse_logged(last_service)
    except ValueError:
        return invalid
    if last is None:
        return unknown
    if not math.isfinite(interval_months) or interval_months <= 0:
        logger.debug("Unusable service interval %r", interval_months)
        return invalid

    due = calc_due_date(last, interval_months)
    days = days_until(due, resolve_now(now))

    if days < 0:
        overdue = abs(days)
        return NextServiceDue(
            date=due.date(),
            status=Status.OVERDUE,
            text=f"Service overdue by {plural(overdue, 'day')}",
            short_text=f"{overdue}d overdue",
        )
    if days <= DUE_MONTH_DAYS:
        status = Status.DUE_SOON if days <= DUE_SOON_DAYS else Status.DUE_MONTH
        return NextServiceDue(
            date=due.date(),
            status=status,
            text=f"Service due in {plural(days, 'day')}",
            short_text=f"{days}d left",
        )

    months = days // DAYS_PER_MONTH
    return NextServiceDue(
        date=due.date(),
        status=Status.FUTURE,
        text=f"Service due in {plural(months, 'month')}",
        short_text=f"{months}m left",
    )


def renewal_status(expiry_date: DateInput, now: Now = None) -> StatusResult:
    """
    Status of a document by expiry date.

    - Past expiry: EXPIRED
    - Within 30 days (partial days round up): EXPIRING
    - Otherwise VALID, described with relative_label
    """
    try:
        expiry = _parse_logged(expiry_date)
    except ValueError:
        return StatusResult(Status.INVALID, "Invalid date", "Invalid", Color.SECONDARY)
    if expiry is None:
        return StatusResult(Status.UNKNOWN, "Not set", "N/A", Color.SECONDARY)

    current = resolve_now(now)
    days = days_until_ceil(expiry, current)

    if days < 0:
        ago = abs(days)
        return StatusResult(
            Status.EXPIRED,
            f"Expired {plural(ago, 'day')} ago",
            f"{ago}d ago",
            Color.DESTRUCTIVE,
        )
    if days <= EXPIRING_DAYS:
        return StatusResult(
            Status.EXPIRING,
            f"Expires in {plural(days, 'day')}",
            f"{days}d",
            Color.WARNING,
        )

    label = relative_label(expiry, current)
    return StatusResult(
        Status.VALID, label, " ".join(label.split(" ")[:2]), Color.SUCCESS
    )
