"""Document class for vehicle paperwork (insurance, registration, emission...)."""
from typing import Optional


class Document:
    """A vehicle document with the dates it was issued and expires."""

    def __init__(
            self,
            kind: str,
            issue_date: Optional[str] = None,
            expiry_date: Optional[str] = None,
            number: Optional[str] = None,
            notes: Optional[str] = None,
    ):
        self.kind = kind
        self.issue_date = issue_date
        self.expiry_date = expiry_date
        self.number = number
        self.notes = notes

    @property
    def display_name(self) -> str:
        """Kind formatted for display, e.g. 'road_tax' -> 'Road tax'."""
        return self.kind.replace("_", " ").capitalize()
