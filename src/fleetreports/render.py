"""Rendering sinks: where report markup goes.

:class:`RenderingSink` is the contract a report session drives.
:class:`HtmlReportRenderer` is the stock implementation that writes a
self-contained Bootstrap-styled HTML document to a text stream.
"""

from __future__ import annotations

from typing import Protocol, TextIO

from markupsafe import escape

from fleetreports.config import ReportingConfig
from fleetreports.exceptions import ReportRenderError
from fleetreports.models.report import Report
from fleetreports.models.styles import CellStyle, TableStyle


class RenderingSink(Protocol):
    """Append-only markup target bound to one report.

    ``start`` and ``end`` are each called exactly once, in that order;
    emission calls happen only between them.
    """

    def start(self, report: Report) -> None: ...

    def end(self, report: Report) -> None: ...

    def h1(self, text: str) -> None: ...

    def h2(self, text: str) -> None: ...

    def h3(self, text: str) -> None: ...

    def table_start(self, style: TableStyle | None = None) -> None: ...

    def table_end(self) -> None: ...

    def table_head_start(self) -> None: ...

    def table_head_end(self) -> None: ...

    def table_head_cell_start(self, style: CellStyle | None = None) -> None: ...

    def table_head_cell_end(self) -> None: ...

    def table_body_start(self) -> None: ...

    def table_body_end(self) -> None: ...

    def table_row_start(self) -> None: ...

    def table_row_end(self) -> None: ...

    def table_cell_start(self, style: CellStyle | None = None) -> None: ...

    def table_cell_end(self) -> None: ...

    def paragraph_start(self) -> None: ...

    def paragraph_end(self) -> None: ...

    def panel_start(self) -> None: ...

    def panel_end(self) -> None: ...

    def panel_heading_start(self) -> None: ...

    def panel_heading_end(self) -> None: ...

    def panel_body_start(self) -> None: ...

    def panel_body_end(self) -> None: ...

    def text(self, text: str) -> None: ...

    def bold(self, text: str) -> None: ...

    def link(self, url: str, target: str, text: str) -> None: ...


def _cell_attributes(style: CellStyle | None) -> str:
    if style is None:
        return ""
    return "".join(f' {name}="{value}"' for name, value in style.attributes().items())


class HtmlReportRenderer:
    """Writes report markup to *stream*.

    All text is HTML-escaped.  ``OSError`` from the stream (a client that
    hung up) and ``ValueError`` (a stream that is already closed) are
    raised as :class:`ReportRenderError`.
    """

    def __init__(self, stream: TextIO, *, config: ReportingConfig | None = None) -> None:
        self._stream = stream
        self._config = config or ReportingConfig()
        self._report_name = ""

    def _write(self, markup: str) -> None:
        try:
            self._stream.write(markup)
        except (OSError, ValueError) as exc:
            raise ReportRenderError(
                f"Failed to write report output: {exc}",
                report_name=self._report_name,
            ) from exc

    def start(self, report: Report) -> None:
        self._report_name = report.title
        self._write(
            "<!DOCTYPE html>\n"
            "<html>\n<head>\n"
            '<meta charset="utf-8">\n'
            f"<title>{escape(report.title)}</title>\n"
            f'<link rel="stylesheet" href="{escape(self._config.bootstrap_css_url)}">\n'
            "</head>\n<body>\n"
            '<div class="container">\n'
        )

    def end(self, report: Report) -> None:
        self._write("</div>\n</body>\n</html>\n")
        try:
            self._stream.flush()
        except (OSError, ValueError) as exc:
            raise ReportRenderError(
                f"Failed to flush report output: {exc}",
                report_name=report.title,
            ) from exc

    def h1(self, text: str) -> None:
        self._write(f"<h1>{escape(text)}</h1>\n")

    def h2(self, text: str) -> None:
        self._write(f"<h2>{escape(text)}</h2>\n")

    def h3(self, text: str) -> None:
        self._write(f"<h3>{escape(text)}</h3>\n")

    def table_start(self, style: TableStyle | None = None) -> None:
        classes = (style or TableStyle()).css_classes()
        self._write(f'<table class="{" ".join(classes)}">\n')

    def table_end(self) -> None:
        self._write("</table>\n")

    def table_head_start(self) -> None:
        self._write("<thead>\n<tr>\n")

    def table_head_end(self) -> None:
        self._write("</tr>\n</thead>\n")

    def table_head_cell_start(self, style: CellStyle | None = None) -> None:
        self._write(f"<th{_cell_attributes(style)}>")

    def table_head_cell_end(self) -> None:
        self._write("</th>\n")

    def table_body_start(self) -> None:
        self._write("<tbody>\n")

    def table_body_end(self) -> None:
        self._write("</tbody>\n")

    def table_row_start(self) -> None:
        self._write("<tr>\n")

    def table_row_end(self) -> None:
        self._write("</tr>\n")

    def table_cell_start(self, style: CellStyle | None = None) -> None:
        self._write(f"<td{_cell_attributes(style)}>")

    def table_cell_end(self) -> None:
        self._write("</td>\n")

    def paragraph_start(self) -> None:
        self._write("<p>")

    def paragraph_end(self) -> None:
        self._write("</p>\n")

    def panel_start(self) -> None:
        self._write('<div class="panel panel-default">\n')

    def panel_end(self) -> None:
        self._write("</div>\n")

    def panel_heading_start(self) -> None:
        self._write('<div class="panel-heading">\n')

    def panel_heading_end(self) -> None:
        self._write("</div>\n")

    def panel_body_start(self) -> None:
        self._write('<div class="panel-body">\n')

    def panel_body_end(self) -> None:
        self._write("</div>\n")

    def text(self, text: str) -> None:
        self._write(str(escape(text)))

    def bold(self, text: str) -> None:
        self._write(f"<strong>{escape(text)}</strong>")

    def link(self, url: str, target: str, text: str) -> None:
        self._write(f'<a href="{escape(url)}" target="{escape(target)}">{escape(text)}</a>')
