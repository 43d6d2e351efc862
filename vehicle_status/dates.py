"""Display date formatting: dd/mm/yyyy and dd-Mon-yyyy."""

import re
from datetime import date
from typing import Optional

from .calculations import DateInput, parse_anchor

DDMMYYYY = re.compile(r"^(\d{1,2})/(\d{1,2})/(\d{4})$")


def parse_ddmmyyyy(text: Optional[str]) -> Optional[date]:
    """Parse 'dd/mm/yyyy'. Returns None for blank or impossible dates."""
    if not text or not text.strip():
        return None
    match = DDMMYYYY.match(text.strip())
    if not match:
        return None
    day, month, year = (int(part) for part in match.groups())
    try:
        return date(year, month, day)
    except ValueError:
        return None


def _to_date(value: DateInput) -> Optional[date]:
    if isinstance(value, str) and "/" in value:
        return parse_ddmmyyyy(value)
    try:
        parsed = parse_anchor(value)
    except ValueError:
        return None
    return parsed.date() if parsed else None


def format_ddmmyyyy(value: DateInput) -> str:
    """Format for display as dd/mm/yyyy, or "" if there is nothing to show."""
    parsed = _to_date(value)
    return parsed.strftime("%d/%m/%Y") if parsed else ""


def format_dd_mon_yyyy(value: DateInput) -> str:
    """Format for display as dd-Mon-yyyy (e.g. 05-Jan-2024)."""
    parsed = _to_date(value)
    if parsed is None:
        return ""
    # Month names fixed to English regardless of locale
    months = "Jan Feb Mar Apr May Jun Jul Aug Sep Oct Nov Dec".split()
    return f"{parsed.day:02d}-{months[parsed.month - 1]}-{parsed.year}"


def to_iso_date(text: Optional[str]) -> str:
    """Normalize 'yyyy-mm-dd' or 'dd/mm/yyyy' input to 'yyyy-mm-dd'."""
    if not text or not text.strip():
        return ""
    parsed = _to_date(text.strip())
    return parsed.isoformat() if parsed else ""
