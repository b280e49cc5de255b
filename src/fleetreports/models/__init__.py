"""Value models consumed by report generation."""

from fleetreports.models._base import ReportBaseModel, ReportEnum
from fleetreports.models.device import Device
from fleetreports.models.report import Report, ReportType
from fleetreports.models.styles import CellStyle, TableStyle
from fleetreports.models.user import DistanceUnit, MapType, SpeedUnit, User, UserSettings

__all__ = [
    "CellStyle",
    "Device",
    "DistanceUnit",
    "MapType",
    "Report",
    "ReportBaseModel",
    "ReportEnum",
    "ReportType",
    "SpeedUnit",
    "TableStyle",
    "User",
    "UserSettings",
]
