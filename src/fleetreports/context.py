"""Per-request report context.

Everything a report needs from the surrounding request (the current
user, device directory, message catalog, configuration and request
parameters) is carried explicitly in a :class:`ReportContext` built
once per request.  There is no process-wide state.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from fleetreports.config import ReportingConfig
from fleetreports.i18n import CatalogMessages, MessageSource
from fleetreports.models.user import User, UserSettings

if TYPE_CHECKING:
    from fleetreports.devices import DeviceDirectory


@dataclass(frozen=True, slots=True)
class ReportContext:
    """Request-scoped collaborators of report generation."""

    user: User
    directory: DeviceDirectory
    messages: MessageSource = field(default_factory=CatalogMessages)
    config: ReportingConfig = field(default_factory=ReportingConfig)
    params: Mapping[str, str] = field(default_factory=dict)
    """Inbound request parameters."""

    @property
    def settings(self) -> UserSettings:
        return self.user.settings

    @property
    def locale(self) -> str:
        """Requested locale, or the configured default language."""
        requested = self.params.get(self.config.locale_param)
        if requested:
            return requested
        return self.config.language

    def message(self, key: str) -> str:
        return self.messages.message(self.locale, key)
