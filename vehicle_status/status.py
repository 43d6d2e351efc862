"""Status and color enums for date-derived classifications."""

from enum import Enum


class Status(Enum):
    """Status buckets. Values are the strings callers display or serialize."""

    OVERDUE = "overdue"
    EXPIRED = "expired"
    DUE_SOON = "due_soon"
    EXPIRING = "expiring"
    DUE_MONTH = "due_month"
    FUTURE = "future"
    VALID = "valid"
    UNKNOWN = "unknown"  # No date recorded
    INVALID = "invalid"  # Date recorded but unparseable

    @property
    def urgency(self) -> int:
        """Lower = more urgent."""
        return _URGENCY[self]


_URGENCY = {
    Status.OVERDUE: 1,
    Status.EXPIRED: 1,
    Status.DUE_SOON: 2,
    Status.EXPIRING: 2,
    Status.DUE_MONTH: 3,
    Status.FUTURE: 4,
    Status.VALID: 5,
    Status.UNKNOWN: 6,
    Status.INVALID: 7,
}


class Color(Enum):
    """Presentation hint attached to a status result."""

    SECONDARY = "secondary"
    SUCCESS = "success"
    WARNING = "warning"
    DESTRUCTIVE = "destructive"
