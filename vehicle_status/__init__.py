"""
Vehicle document and service status tracking.

This package turns stored dates into display-ready status buckets:
- Status / Color: Bucket and presentation hint enums
- StatusResult / NextServiceDue: Classifier results
- issue_status, service_status, next_service_due, renewal_status: Classifiers
- relative_label: Short "3 days ago" / "Tomorrow" style labels
- Car, Document, Vehicle, DocumentReport: Vehicle record aggregate
"""

from .status import Status, Color
from .results import StatusResult, NextServiceDue
from .calculations import age_in_days, calc_due_date, parse_anchor, resolve_now
from .relative import relative_label
from .classifiers import (
    AgePhrases,
    classify_age,
    issue_status,
    service_status,
    next_service_due,
    renewal_status,
)
from .car import Car
from .document import Document
from .report import DocumentReport
from .vehicle import Vehicle
from .loader import load_vehicle, save_document, save_service

__all__ = [
    "Status",
    "Color",
    "StatusResult",
    "NextServiceDue",
    "age_in_days",
    "calc_due_date",
    "parse_anchor",
    "resolve_now",
    "relative_label",
    "AgePhrases",
    "classify_age",
    "issue_status",
    "service_status",
    "next_service_due",
    "renewal_status",
    "Car",
    "Document",
    "DocumentReport",
    "Vehicle",
    "load_vehicle",
    "save_document",
    "save_service",
]
