"""fleetreports - HTML report generation for vehicle-tracking telemetry."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("fleetreports")
except PackageNotFoundError:
    __version__ = "0+local"
from fleetreports.config import ReportingConfig
from fleetreports.context import ReportContext
from fleetreports.devices import DeviceDirectory, DeviceResolver, InMemoryDeviceDirectory, resolve_devices
from fleetreports.exceptions import (
    ReportConfigError,
    ReportError,
    ReportRenderError,
    ReportSessionStateError,
    ReportTypeNotSupportedError,
)
from fleetreports.formatting import UnitFormatter
from fleetreports.generator import ReportGenerator
from fleetreports.i18n import CatalogMessages, MessageSource
from fleetreports.maplink import MapLink, build_map_link
from fleetreports.models import (
    CellStyle,
    Device,
    DistanceUnit,
    MapType,
    Report,
    ReportType,
    SpeedUnit,
    TableStyle,
    User,
    UserSettings,
)
from fleetreports.render import HtmlReportRenderer, RenderingSink
from fleetreports.session import ReportBody, ReportSession, SessionState

__all__ = [
    "__version__",
    "CatalogMessages",
    "CellStyle",
    "Device",
    "DeviceDirectory",
    "DeviceResolver",
    "DistanceUnit",
    "HtmlReportRenderer",
    "InMemoryDeviceDirectory",
    "MapLink",
    "MapType",
    "MessageSource",
    "RenderingSink",
    "Report",
    "ReportBody",
    "ReportConfigError",
    "ReportContext",
    "ReportError",
    "ReportGenerator",
    "ReportRenderError",
    "ReportSession",
    "ReportSessionStateError",
    "ReportType",
    "ReportTypeNotSupportedError",
    "ReportingConfig",
    "SessionState",
    "SpeedUnit",
    "TableStyle",
    "UnitFormatter",
    "User",
    "UserSettings",
    "build_map_link",
    "resolve_devices",
]
