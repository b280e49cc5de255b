"""Table and cell style modifiers passed to the rendering sink."""

from __future__ import annotations

from pydantic import Field

from fleetreports.models._base import ReportBaseModel


class TableStyle(ReportBaseModel):
    """Visual variants of a report table."""

    hover: bool = False
    condensed: bool = False

    def css_classes(self) -> list[str]:
        classes = ["table", "table-bordered"]
        if self.hover:
            classes.append("table-hover")
        if self.condensed:
            classes.append("table-condensed")
        return classes


class CellStyle(ReportBaseModel):
    """Span modifiers of a table cell. ``None`` leaves the attribute out."""

    colspan: int | None = Field(default=None, ge=1)
    rowspan: int | None = Field(default=None, ge=1)

    def attributes(self) -> dict[str, int]:
        attrs: dict[str, int] = {}
        if self.colspan is not None:
            attrs["colspan"] = self.colspan
        if self.rowspan is not None:
            attrs["rowspan"] = self.rowspan
        return attrs
