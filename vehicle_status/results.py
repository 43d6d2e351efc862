"""Result records returned by the classifiers."""

from dataclasses import dataclass
from datetime import date
from typing import Any, Dict, Optional

from .status import Color, Status


@dataclass(frozen=True)
class StatusResult:
    """Classification of a single date: bucket, long and short text, color hint."""

    status: Status
    text: str
    short_text: str
    color: Color

    def to_dict(self) -> Dict[str, Any]:
        return {
            "status": self.status.value,
            "text": self.text,
            "shortText": self.short_text,
            "color": self.color.value,
        }


_NEXT_SERVICE_COLORS = {
    Status.OVERDUE: Color.DESTRUCTIVE,
    Status.DUE_SOON: Color.WARNING,
    Status.DUE_MONTH: Color.WARNING,
    Status.FUTURE: Color.SUCCESS,
}


@dataclass(frozen=True)
class NextServiceDue:
    """Computed next service date and where it falls on the urgency ladder."""

    date: Optional[date]
    status: Status
    text: str
    short_text: str

    @property
    def color(self) -> Color:
        """Suggested color for the status; not part of the serialized result."""
        return _NEXT_SERVICE_COLORS.get(self.status, Color.SECONDARY)

    @property
    def is_due(self) -> bool:
        return self.status in (Status.OVERDUE, Status.DUE_SOON)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "date": self.date.isoformat() if self.date else None,
            "status": self.status.value,
            "text": self.text,
            "shortText": self.short_text,
        }
