"""DocumentReport dataclass for a document's calculated statuses."""

from dataclasses import dataclass
from typing import TYPE_CHECKING

from .results import StatusResult
from .status import Status

if TYPE_CHECKING:
    from .document import Document


@dataclass
class DocumentReport:
    """Issue-date and expiry-date status for one document."""

    document: "Document"
    issued: StatusResult
    renewal: StatusResult

    @property
    def is_due(self) -> bool:
        return self.renewal.status in (Status.EXPIRED, Status.EXPIRING)
