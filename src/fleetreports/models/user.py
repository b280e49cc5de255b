"""User and per-user display settings.

Telemetry is stored in canonical units (speed in knots, distance in
kilometers).  :class:`SpeedUnit` and :class:`DistanceUnit` carry the
factor that converts a canonical value into the display unit.  A user
only ever picks a speed unit; the distance unit is derived from it.
"""

from __future__ import annotations

from pydantic import Field, field_validator

from fleetreports.models._base import ReportBaseModel, ReportEnum
from fleetreports.models.device import Device

__all__ = [
    "DistanceUnit",
    "MapType",
    "SpeedUnit",
    "User",
    "UserSettings",
]


class DistanceUnit(ReportEnum):
    """Distance display unit."""

    KILOMETER = "kilometer"
    MILE = "mile"
    NAUTICAL_MILE = "nauticalMile"

    @property
    def symbol(self) -> str:
        return _DISTANCE_SYMBOLS[self]

    @property
    def factor(self) -> float:
        """Multiplier from kilometers to this unit."""
        return _DISTANCE_FACTORS[self]


_DISTANCE_SYMBOLS: dict[DistanceUnit, str] = {
    DistanceUnit.KILOMETER: "km",
    DistanceUnit.MILE: "mi",
    DistanceUnit.NAUTICAL_MILE: "nmi",
}

_DISTANCE_FACTORS: dict[DistanceUnit, float] = {
    DistanceUnit.KILOMETER: 1.0,
    DistanceUnit.MILE: 0.621371192,
    DistanceUnit.NAUTICAL_MILE: 0.539956803,
}


class SpeedUnit(ReportEnum):
    """Speed display unit. Each one implies exactly one :class:`DistanceUnit`."""

    KNOTS = "knots"
    KILOMETERS_PER_HOUR = "kilometersPerHour"
    MILES_PER_HOUR = "milesPerHour"

    @classmethod
    def _fallback(cls) -> SpeedUnit:
        return cls.KNOTS

    @property
    def symbol(self) -> str:
        return _SPEED_SYMBOLS[self]

    @property
    def factor(self) -> float:
        """Multiplier from knots to this unit."""
        return _SPEED_FACTORS[self]

    @property
    def distance_unit(self) -> DistanceUnit:
        return _PAIRED_DISTANCE_UNITS[self]


_SPEED_SYMBOLS: dict[SpeedUnit, str] = {
    SpeedUnit.KNOTS: "kn",
    SpeedUnit.KILOMETERS_PER_HOUR: "km/h",
    SpeedUnit.MILES_PER_HOUR: "mph",
}

_SPEED_FACTORS: dict[SpeedUnit, float] = {
    SpeedUnit.KNOTS: 1.0,
    SpeedUnit.KILOMETERS_PER_HOUR: 1.852,
    SpeedUnit.MILES_PER_HOUR: 1.150779,
}

_PAIRED_DISTANCE_UNITS: dict[SpeedUnit, DistanceUnit] = {
    SpeedUnit.KNOTS: DistanceUnit.NAUTICAL_MILE,
    SpeedUnit.KILOMETERS_PER_HOUR: DistanceUnit.KILOMETER,
    SpeedUnit.MILES_PER_HOUR: DistanceUnit.MILE,
}


class MapType(ReportEnum):
    """Preferred map provider. Unknown stored values resolve to ``OSM``."""

    OSM = "osm"
    GOOGLE_HYBRID = "googleHybrid"
    GOOGLE_NORMAL = "googleNormal"
    GOOGLE_SATELLITE = "googleSatellite"
    GOOGLE_TERRAIN = "googleTerrain"
    BING_ROAD = "bingRoad"
    BING_HYBRID = "bingHybrid"
    BING_AERIAL = "bingAerial"
    MAPQUEST_ROAD = "mapquestRoad"
    MAPQUEST_AERIAL = "mapquestAerial"
    STAMEN_TONER = "stamenToner"

    @classmethod
    def _fallback(cls) -> MapType:
        return cls.OSM

    @property
    def is_google(self) -> bool:
        return self in _GOOGLE_MAP_TYPES


_GOOGLE_MAP_TYPES: frozenset[MapType] = frozenset(
    {
        MapType.GOOGLE_HYBRID,
        MapType.GOOGLE_NORMAL,
        MapType.GOOGLE_SATELLITE,
        MapType.GOOGLE_TERRAIN,
    }
)


class UserSettings(ReportBaseModel):
    """Display preferences of a user.

    Parameters
    ----------
    speed_unit : SpeedUnit
        Speed display unit; also selects the distance unit.
    map_type : MapType
        Map provider targeted by generated position links.
    zoom_level : int
        Default map zoom used in OpenStreetMap links.
    """

    speed_unit: SpeedUnit = SpeedUnit.KNOTS
    map_type: MapType = MapType.OSM
    zoom_level: int = Field(default=1, ge=0, le=22)


class User(ReportBaseModel):
    """The principal requesting a report."""

    id: int
    login: str = ""
    admin: bool = False
    manager: bool = False
    device_ids: frozenset[int] = Field(default_factory=frozenset)
    """Devices assigned directly to this user."""
    managed_users: list[User] = Field(default_factory=list)
    """Users a manager administers; their devices are visible to the manager."""
    settings: UserSettings = Field(default_factory=UserSettings)

    @field_validator("login", mode="before")
    @classmethod
    def _strip_login(cls, value: object) -> object:
        if isinstance(value, str):
            return value.strip()
        return value

    def can_access(self, device: Device | None) -> bool:
        """Whether this user has visibility rights to *device*.

        ``None`` (a device that could not be found) is never accessible.
        """
        if device is None:
            return False
        if self.admin:
            return True
        if device.id in self.device_ids:
            return True
        if self.manager:
            return any(managed.can_access(device) for managed in self.managed_users)
        return False
