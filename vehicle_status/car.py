"""Car class for vehicle identification."""

from typing import Optional


class Car:
    """Vehicle identification."""

    def __init__(
        self,
        make: str,
        model: str,
        year: Optional[int] = None,
        license_plate: Optional[str] = None,
    ):
        self.make = make
        self.model = model
        self.year = year
        self.license_plate = license_plate

    @property
    def name(self) -> str:
        """Human-readable vehicle name."""
        base = f"{self.make} {self.model}"
        if self.year:
            base = f"{self.year} {base}"
        return f"{base} ({self.license_plate})" if self.license_plate else base
