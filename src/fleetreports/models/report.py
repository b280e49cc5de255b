"""Report descriptor model."""

from __future__ import annotations

from datetime import datetime

from pydantic import Field, model_validator

from fleetreports.models._base import ReportBaseModel, ReportEnum


class ReportType(ReportEnum):
    """Kinds of report a caller may request."""

    GENERAL_INFORMATION = "generalInformation"
    DRIVES_AND_STOPS = "drivesAndStops"
    OVERSPEEDS = "overspeeds"
    GEO_FENCE_IN_OUT = "geoFenceInOut"
    EVENTS = "events"
    MILEAGE_DETAIL = "mileageDetail"


class Report(ReportBaseModel):
    """What to generate: type, device scope, and time range.

    An empty ``device_ids`` means "every device visible to the user".
    The descriptor is owned by the caller and immutable for the duration
    of generation.
    """

    id: int | None = None
    name: str = ""
    type: ReportType
    device_ids: tuple[int, ...] = Field(default_factory=tuple)
    from_date: datetime
    to_date: datetime
    include_map: bool = False
    """Passed through to report bodies that can embed a map."""
    disable_filter: bool = False
    """Passed through to report bodies that filter positions."""

    @model_validator(mode="after")
    def _check_period(self) -> Report:
        if self.from_date > self.to_date:
            raise ValueError("from_date must not be after to_date")
        return self

    @property
    def title(self) -> str:
        return self.name or self.type.value
