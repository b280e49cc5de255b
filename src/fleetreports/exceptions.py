"""Custom exception hierarchy for fleetreports."""

from __future__ import annotations


class ReportError(Exception):
    """Base exception for all fleetreports errors."""


class ReportConfigError(ReportError):
    """Invalid or missing configuration."""


class ReportSessionStateError(ReportError, RuntimeError):
    """Report session lifecycle used out of order.

    Raised when ``start``/``end`` are called in the wrong state, or when
    content is emitted before ``start`` or after ``end``.  This signals a
    programming error in the calling report, not a runtime condition to
    recover from.
    """


class ReportRenderError(ReportError):
    """Writing report output failed (e.g. the response stream is closed)."""

    def __init__(self, message: str, *, report_name: str = "") -> None:
        self.report_name = report_name
        super().__init__(message)


class ReportTypeNotSupportedError(ReportError):
    """No report body is registered for the requested report type."""

    def __init__(self, message: str, *, report_type: str = "") -> None:
        self.report_type = report_type
        super().__init__(message)
