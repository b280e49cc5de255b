"""Access-filtered device resolution.

A report either names its devices explicitly or means "all of them".
Explicit references are looked up one by one and kept only when the
requesting user may see them; everything else is dropped without an
error, so a report never leaks a device the user has no rights to.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from typing import TYPE_CHECKING, Protocol

from fleetreports.models.device import Device
from fleetreports.models.report import Report
from fleetreports.models.user import User

if TYPE_CHECKING:
    from fleetreports.context import ReportContext

_logger = logging.getLogger(__name__)


class DeviceDirectory(Protocol):
    """Device lookups provided by the persistence layer.

    ``get_all_visible_devices`` is already scoped to the current
    session's user.
    """

    def get_all_visible_devices(self) -> Sequence[Device]: ...

    def find_device_by_id(self, device_id: int) -> Device | None: ...


class InMemoryDeviceDirectory:
    """:class:`DeviceDirectory` over a fixed set of devices.

    ``get_all_visible_devices`` returns the devices *user* can access, in
    insertion order.
    """

    def __init__(self, devices: Iterable[Device], user: User) -> None:
        self._devices: dict[int, Device] = {device.id: device for device in devices}
        self._user = user

    def get_all_visible_devices(self) -> list[Device]:
        return [device for device in self._devices.values() if self._user.can_access(device)]

    def find_device_by_id(self, device_id: int) -> Device | None:
        return self._devices.get(device_id)


class DeviceResolver:
    """Resolves the devices a report may include for one user."""

    def __init__(self, directory: DeviceDirectory, user: User) -> None:
        self._directory = directory
        self._user = user

    def resolve(self, report: Report) -> list[Device]:
        if not report.device_ids:
            return list(self._directory.get_all_visible_devices())

        devices: list[Device] = []
        for device_id in report.device_ids:
            device = self._directory.find_device_by_id(device_id)
            if device is None:
                _logger.debug("Report %r: device %s not found, skipped", report.title, device_id)
                continue
            if not self._user.can_access(device):
                _logger.debug(
                    "Report %r: user %s has no access to device %s, skipped",
                    report.title,
                    self._user.id,
                    device_id,
                )
                continue
            devices.append(device)
        return devices


def resolve_devices(report: Report, context: ReportContext) -> list[Device]:
    """Resolve *report*'s devices for the user of *context*."""
    return DeviceResolver(context.directory, context.user).resolve(report)
