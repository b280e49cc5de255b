"""Dispatch from report type to report body."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import TextIO

from fleetreports.context import ReportContext
from fleetreports.exceptions import ReportTypeNotSupportedError
from fleetreports.models.report import Report, ReportType
from fleetreports.render import HtmlReportRenderer
from fleetreports.session import ReportBody, ReportSession

_logger = logging.getLogger(__name__)


class ReportGenerator:
    """Registry of report bodies keyed by :class:`ReportType`.

    Usage::

        generator = ReportGenerator({ReportType.EVENTS: EventsReport()})
        generator.generate(report, context, response_stream)
    """

    def __init__(self, bodies: Mapping[ReportType, ReportBody] | None = None) -> None:
        self._bodies: dict[ReportType, ReportBody] = dict(bodies or {})

    def register(self, report_type: ReportType, body: ReportBody) -> None:
        if report_type in self._bodies:
            _logger.debug("Replacing report body for %s", report_type.value)
        self._bodies[report_type] = body

    def supports(self, report_type: ReportType) -> bool:
        return report_type in self._bodies

    def body_for(self, report_type: ReportType) -> ReportBody:
        try:
            return self._bodies[report_type]
        except KeyError:
            raise ReportTypeNotSupportedError(
                f"No report body registered for {report_type.value}",
                report_type=report_type.value,
            ) from None

    def generate(self, report: Report, context: ReportContext, stream: TextIO) -> None:
        """Render *report* as HTML into *stream*.

        Raises :class:`ReportTypeNotSupportedError` before any output is
        written when no body is registered for the report's type.
        """
        body = self.body_for(report.type)
        renderer = HtmlReportRenderer(stream, config=context.config)
        ReportSession(context, report, renderer).generate(body)
