"""Links from a position to an external map service."""

from __future__ import annotations

from pydantic import Field

from fleetreports.config import ReportingConfig
from fleetreports.models._base import ReportBaseModel
from fleetreports.models.user import UserSettings

#: Link target that opens the map in a new browsing context.
NEW_WINDOW_TARGET = "_blank"

_COORDINATE_DIGITS = 6


class MapLink(ReportBaseModel):
    """A rendered position link."""

    url: str
    label: str
    target: str = Field(default=NEW_WINDOW_TARGET)


def format_coordinate(value: float) -> str:
    """Up to six fraction digits, ``.`` as decimal mark, no grouping.

    The output never depends on the active locale so it stays valid
    inside URLs.
    """
    # Keeps the leading zero (``0.5``, not ``.5``); both parse as URL coordinates.
    text = f"{value:.{_COORDINATE_DIGITS}f}".rstrip("0").rstrip(".")
    if text == "-0":
        return "0"
    return text


def build_map_link(
    latitude: float,
    longitude: float,
    settings: UserSettings,
    *,
    config: ReportingConfig | None = None,
) -> MapLink:
    """Build a link to the user's preferred map provider.

    Google variants link to a Google Maps query; every other provider
    (including ones added later) links to an OpenStreetMap permalink
    centred at the user's default zoom level.
    """
    config = config or ReportingConfig()
    lat = format_coordinate(latitude)
    lon = format_coordinate(longitude)
    label = f"{lat} °, {lon} °"

    if settings.map_type.is_google:
        url = f"{config.google_maps_url}?q={lat},{lon}&t=m"
    else:
        url = f"{config.osm_url}?mlat={lat}&mlon={lon}#map={settings.zoom_level}/{lat}/{lon}"
    return MapLink(url=url, label=label)
