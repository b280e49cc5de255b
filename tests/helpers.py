"""Shared builders for the test suite."""

from __future__ import annotations

from collections.abc import Iterable
from datetime import datetime
from typing import Any

from fleetreports.config import ReportingConfig
from fleetreports.context import ReportContext
from fleetreports.devices import InMemoryDeviceDirectory
from fleetreports.i18n import CatalogMessages
from fleetreports.models.device import Device
from fleetreports.models.report import Report, ReportType
from fleetreports.models.styles import CellStyle, TableStyle
from fleetreports.models.user import User


def make_context(
    *,
    user: User | None = None,
    devices: Iterable[Device] = (),
    params: dict[str, str] | None = None,
    config: ReportingConfig | None = None,
) -> ReportContext:
    user = user or User(id=1, login="admin", admin=True)
    return ReportContext(
        user=user,
        directory=InMemoryDeviceDirectory(devices, user),
        messages=CatalogMessages(),
        config=config or ReportingConfig(),
        params=params or {},
    )


def make_report(**overrides: Any) -> Report:
    values: dict[str, Any] = {
        "name": "Daily trips",
        "type": ReportType.DRIVES_AND_STOPS,
        "from_date": datetime(2026, 1, 1),
        "to_date": datetime(2026, 1, 2),
    }
    values.update(overrides)
    return Report(**values)


class RecordingSink:
    """Rendering sink that records every call as ``(name, *args)``."""

    def __init__(self, *, fail_on: str | None = None) -> None:
        self.calls: list[tuple[Any, ...]] = []
        self._fail_on = fail_on

    def _record(self, name: str, *args: Any) -> None:
        self.calls.append((name, *args))
        if name == self._fail_on:
            raise OSError(f"sink failure in {name}")

    def count(self, name: str) -> int:
        return sum(1 for call in self.calls if call[0] == name)

    def start(self, report: Report) -> None:
        self._record("start", report)

    def end(self, report: Report) -> None:
        self._record("end", report)

    def h1(self, text: str) -> None:
        self._record("h1", text)

    def h2(self, text: str) -> None:
        self._record("h2", text)

    def h3(self, text: str) -> None:
        self._record("h3", text)

    def table_start(self, style: TableStyle | None = None) -> None:
        self._record("table_start", style)

    def table_end(self) -> None:
        self._record("table_end")

    def table_head_start(self) -> None:
        self._record("table_head_start")

    def table_head_end(self) -> None:
        self._record("table_head_end")

    def table_head_cell_start(self, style: CellStyle | None = None) -> None:
        self._record("table_head_cell_start", style)

    def table_head_cell_end(self) -> None:
        self._record("table_head_cell_end")

    def table_body_start(self) -> None:
        self._record("table_body_start")

    def table_body_end(self) -> None:
        self._record("table_body_end")

    def table_row_start(self) -> None:
        self._record("table_row_start")

    def table_row_end(self) -> None:
        self._record("table_row_end")

    def table_cell_start(self, style: CellStyle | None = None) -> None:
        self._record("table_cell_start", style)

    def table_cell_end(self) -> None:
        self._record("table_cell_end")

    def paragraph_start(self) -> None:
        self._record("paragraph_start")

    def paragraph_end(self) -> None:
        self._record("paragraph_end")

    def panel_start(self) -> None:
        self._record("panel_start")

    def panel_end(self) -> None:
        self._record("panel_end")

    def panel_heading_start(self) -> None:
        self._record("panel_heading_start")

    def panel_heading_end(self) -> None:
        self._record("panel_heading_end")

    def panel_body_start(self) -> None:
        self._record("panel_body_start")

    def panel_body_end(self) -> None:
        self._record("panel_body_end")

    def text(self, text: str) -> None:
        self._record("text", text)

    def bold(self, text: str) -> None:
        self._record("bold", text)

    def link(self, url: str, target: str, text: str) -> None:
        self._record("link", url, target, text)
