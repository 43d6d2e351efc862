"""Vehicle class - the main aggregate for vehicle documents and service info."""

from datetime import date, datetime
from typing import List, Optional, Union

from .car import Car
from .classifiers import issue_status, next_service_due, renewal_status, service_status
from .document import Document
from .report import DocumentReport
from .results import NextServiceDue, StatusResult

Now = Union[date, datetime, None]


class Vehicle:
    """Complete vehicle record with car info, documents and service schedule."""

    def __init__(
        self,
        car: Car,
        documents: Optional[List[Document]] = None,
        last_service_date: Optional[str] = None,
        service_interval_months: Optional[float] = None,
    ):
        self.car = car
        self.documents = documents or []
        self.last_service_date = last_service_date
        self.service_interval_months = service_interval_months

    def get_document(self, kind: str) -> Optional[Document]:
        """Find a document by kind (case-insensitive)."""
        for doc in self.documents:
            if doc.kind.lower() == kind.lower():
                return doc
        return None

    def document_reports(self, now: Now = None) -> List[DocumentReport]:
        """
        Calculate issue and renewal status for every document.

        Sorted by renewal urgency (expired first), then by kind.
        """
        reports = [
            DocumentReport(
                document=doc,
                issued=issue_status(doc.issue_date, now),
                renewal=renewal_status(doc.expiry_date, now),
            )
            for doc in self.documents
        ]
        reports.sort(key=lambda r: (r.renewal.status.urgency, r.document.kind))
        return reports

    def renewals_due(self, now: Now = None) -> List[DocumentReport]:
        """Documents that are expired or expiring within 30 days."""
        return [r for r in self.document_reports(now) if r.is_due]

    def service_status(self, now: Now = None) -> StatusResult:
        """How long ago the vehicle was last serviced."""
        return service_status(self.last_service_date, now)

    def next_service(self, now: Now = None) -> NextServiceDue:
        """When the next service is due, from the last service and interval."""
        return next_service_due(self.last_service_date, self.service_interval_months, now)
