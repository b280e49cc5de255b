"""Reporting configuration for fleetreports."""

from __future__ import annotations

import dataclasses
import os
from typing import Any

from fleetreports.exceptions import ReportConfigError


@dataclasses.dataclass(frozen=True)
class ReportingConfig:
    """Application-level reporting configuration.

    Parameters
    ----------
    language : str
        Default language code used when a request carries no
        ``locale`` parameter (e.g. ``"en"``).
    locale_param : str
        Name of the request parameter holding the requested locale.
    google_maps_url : str
        Base URL for Google Maps position links.
    osm_url : str
        Base URL for OpenStreetMap position links.
    bootstrap_css_url : str
        Stylesheet linked from rendered HTML reports.
    """

    language: str = "en"
    locale_param: str = "locale"
    google_maps_url: str = "https://maps.google.com/maps"
    osm_url: str = "https://www.openstreetmap.org/"
    bootstrap_css_url: str = "https://cdn.jsdelivr.net/npm/bootstrap@3.4.1/dist/css/bootstrap.min.css"

    def __post_init__(self) -> None:
        if not self.language.strip():
            raise ReportConfigError("language must be non-empty")
        if not self.locale_param.strip():
            raise ReportConfigError("locale_param must be non-empty")

    @classmethod
    def from_env(cls, **overrides: Any) -> ReportingConfig:
        """Create configuration from environment variables.

        Reads optional ``FLEETREPORTS_*`` variables. Explicit keyword
        arguments override environment values.

        Parameters
        ----------
        **overrides
            Explicit field values that take precedence over env vars.

        Returns
        -------
        ReportingConfig
            Populated configuration.
        """
        env = os.environ

        _ENV_CONFIG_MAP = {
            "FLEETREPORTS_LANGUAGE": "language",
            "FLEETREPORTS_LOCALE_PARAM": "locale_param",
            "FLEETREPORTS_GOOGLE_MAPS_URL": "google_maps_url",
            "FLEETREPORTS_OSM_URL": "osm_url",
            "FLEETREPORTS_BOOTSTRAP_CSS_URL": "bootstrap_css_url",
        }
        config_kwargs: dict[str, Any] = {}
        for env_key, field_name in _ENV_CONFIG_MAP.items():
            val = env.get(env_key)
            if val is not None:
                config_kwargs[field_name] = val

        config_kwargs.update(overrides)

        return cls(**config_kwargs)
