"""Lifecycle of a single report generation.

A :class:`ReportSession` binds one report to one rendering sink and
moves through ``NOT_STARTED -> IN_PROGRESS -> ENDED``.  The sink is
ended exactly once on every exit path, including when the report body
raises; the exception still propagates to the caller.

Between start and end, a :class:`ReportBody` emits content through the
session's pass-through methods and uses its formatting helpers.
"""

from __future__ import annotations

import enum
import logging
from datetime import datetime
from types import TracebackType
from typing import Protocol

from fleetreports.context import ReportContext
from fleetreports.devices import DeviceResolver
from fleetreports.exceptions import ReportSessionStateError
from fleetreports.formatting import UnitFormatter
from fleetreports.maplink import MapLink, build_map_link
from fleetreports.models.device import Device
from fleetreports.models.report import Report
from fleetreports.models.styles import CellStyle, TableStyle
from fleetreports.render import RenderingSink

_logger = logging.getLogger(__name__)


class SessionState(enum.Enum):
    NOT_STARTED = "not_started"
    IN_PROGRESS = "in_progress"
    ENDED = "ended"


class ReportBody(Protocol):
    """Report-type specific content generation."""

    def generate(self, session: ReportSession, report: Report) -> None: ...


class ReportSession:
    """Drives one report through a rendering sink.

    Usage::

        session = ReportSession(context, report, HtmlReportRenderer(stream))
        session.generate(body)
    """

    def __init__(self, context: ReportContext, report: Report, sink: RenderingSink) -> None:
        self._context = context
        self._report = report
        self._sink = sink
        self._state = SessionState.NOT_STARTED
        self._formatter = UnitFormatter.for_context(context)
        self._resolver = DeviceResolver(context.directory, context.user)

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def report(self) -> Report:
        return self._report

    @property
    def context(self) -> ReportContext:
        return self._context

    @property
    def formatter(self) -> UnitFormatter:
        return self._formatter

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def start(self) -> None:
        if self._state is not SessionState.NOT_STARTED:
            raise ReportSessionStateError(f"cannot start a report session that is {self._state.value}")
        _logger.debug("Starting report %r (%s)", self._report.title, self._report.type.value)
        self._state = SessionState.IN_PROGRESS
        self._sink.start(self._report)

    def end(self) -> None:
        if self._state is not SessionState.IN_PROGRESS:
            raise ReportSessionStateError(f"cannot end a report session that is {self._state.value}")
        # Marked ended before the sink call so a failing end is never retried.
        self._state = SessionState.ENDED
        self._sink.end(self._report)
        _logger.debug("Finished report %r", self._report.title)

    def generate(self, body: ReportBody) -> None:
        """Start the sink, run *body*, and end the sink even if *body* raises."""
        self.start()
        try:
            body.generate(self, self._report)
        finally:
            self.end()

    def __enter__(self) -> ReportSession:
        self.start()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.end()

    def _emit(self) -> RenderingSink:
        if self._state is not SessionState.IN_PROGRESS:
            raise ReportSessionStateError(f"cannot emit content while the report session is {self._state.value}")
        return self._sink

    # ------------------------------------------------------------------
    # Structural emission
    # ------------------------------------------------------------------

    def h1(self, text: str) -> None:
        self._emit().h1(text)

    def h2(self, text: str) -> None:
        self._emit().h2(text)

    def h3(self, text: str) -> None:
        self._emit().h3(text)

    def table_start(self, style: TableStyle | None = None) -> None:
        self._emit().table_start(style)

    def table_end(self) -> None:
        self._emit().table_end()

    def table_head_start(self) -> None:
        self._emit().table_head_start()

    def table_head_end(self) -> None:
        self._emit().table_head_end()

    def table_head_cell_start(self, style: CellStyle | None = None) -> None:
        self._emit().table_head_cell_start(style)

    def table_head_cell_end(self) -> None:
        self._emit().table_head_cell_end()

    def table_body_start(self) -> None:
        self._emit().table_body_start()

    def table_body_end(self) -> None:
        self._emit().table_body_end()

    def table_row_start(self) -> None:
        self._emit().table_row_start()

    def table_row_end(self) -> None:
        self._emit().table_row_end()

    def table_cell_start(self, style: CellStyle | None = None) -> None:
        self._emit().table_cell_start(style)

    def table_cell_end(self) -> None:
        self._emit().table_cell_end()

    def table_cell(self, text: str, style: CellStyle | None = None) -> None:
        self.table_cell_start(style)
        self.text(text)
        self.table_cell_end()

    def paragraph_start(self) -> None:
        self._emit().paragraph_start()

    def paragraph_end(self) -> None:
        self._emit().paragraph_end()

    def panel_start(self) -> None:
        self._emit().panel_start()

    def panel_end(self) -> None:
        self._emit().panel_end()

    def panel_heading_start(self) -> None:
        self._emit().panel_heading_start()

    def panel_heading_end(self) -> None:
        self._emit().panel_heading_end()

    def panel_body_start(self) -> None:
        self._emit().panel_body_start()

    def panel_body_end(self) -> None:
        self._emit().panel_body_end()

    def text(self, text: str) -> None:
        self._emit().text(text)

    def bold(self, text: str) -> None:
        self._emit().bold(text)

    def link(self, url: str, target: str, text: str) -> None:
        self._emit().link(url, target, text)

    def map_link(self, latitude: float, longitude: float) -> MapLink:
        """Emit a link to the user's map provider and return it."""
        link = build_map_link(latitude, longitude, self._context.settings, config=self._context.config)
        self.link(link.url, link.target, link.label)
        return link

    # ------------------------------------------------------------------
    # Style helpers
    # ------------------------------------------------------------------

    @staticmethod
    def hover() -> TableStyle:
        return TableStyle(hover=True)

    @staticmethod
    def condensed() -> TableStyle:
        return TableStyle(condensed=True)

    @staticmethod
    def colspan(colspan: int) -> CellStyle:
        return CellStyle(colspan=colspan)

    @staticmethod
    def rowspan(rowspan: int) -> CellStyle:
        return CellStyle(rowspan=rowspan)

    # ------------------------------------------------------------------
    # Formatting and data helpers
    # ------------------------------------------------------------------

    def format_duration(self, duration_ms: int) -> str:
        return self._formatter.format_duration(duration_ms)

    def format_speed(self, speed: float | None) -> str:
        return self._formatter.format_speed(speed)

    def format_distance(self, distance: float | None) -> str:
        return self._formatter.format_distance(distance)

    def format_date(self, date: datetime) -> str:
        return self._formatter.format_date(date)

    def message(self, key: str) -> str:
        return self._context.message(key)

    def devices(self) -> list[Device]:
        """Devices of the bound report the current user may see."""
        return self._resolver.resolve(self._report)
