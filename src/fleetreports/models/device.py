"""Device model."""

from __future__ import annotations

from pydantic import Field

from fleetreports.models._base import ReportBaseModel


class Device(ReportBaseModel):
    """A trackable asset.

    Devices are resolved by report generation and never mutated by it.
    """

    id: int
    """Persistent identifier."""
    unique_id: str = ""
    """Identifier reported by the tracker hardware (IMEI, serial, ...)."""
    name: str = ""
    """Display name."""
    description: str | None = Field(default=None)
    """Free-form description."""

    @property
    def display_name(self) -> str:
        """Name to show in reports, falling back to the hardware identifier."""
        return self.name or self.unique_id or str(self.id)
