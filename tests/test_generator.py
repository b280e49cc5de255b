"""Tests for report type dispatch."""

from __future__ import annotations

import io

import pytest

from fleetreports.exceptions import ReportTypeNotSupportedError
from fleetreports.generator import ReportGenerator
from fleetreports.models.device import Device
from fleetreports.models.report import Report, ReportType
from fleetreports.models.user import MapType, User, UserSettings
from fleetreports.session import ReportSession
from tests.helpers import make_context, make_report


class _PositionsBody:
    def generate(self, session: ReportSession, report: Report) -> None:
        session.h1(report.title)
        session.table_start(session.condensed())
        session.table_body_start()
        for device in session.devices():
            session.table_row_start()
            session.table_cell(device.display_name)
            session.table_cell_start()
            session.map_link(52.5, 13.4)
            session.table_cell_end()
            session.table_cell(session.format_duration(3_600_000))
            session.table_row_end()
        session.table_body_end()
        session.table_end()


def test_generate_writes_full_document() -> None:
    user = User(id=2, device_ids=frozenset({1}), settings=UserSettings(map_type=MapType.OSM, zoom_level=12))
    context = make_context(user=user, devices=[Device(id=1, name="Truck"), Device(id=2, name="Hidden")])
    generator = ReportGenerator({ReportType.DRIVES_AND_STOPS: _PositionsBody()})
    stream = io.StringIO()

    generator.generate(make_report(name="Positions", device_ids=(1, 2)), context, stream)

    html = stream.getvalue()
    assert "<h1>Positions</h1>" in html
    assert '<table class="table table-bordered table-condensed">' in html
    assert "<td>Truck</td>" in html
    assert "Hidden" not in html
    assert 'href="https://www.openstreetmap.org/?mlat=52.5&amp;mlon=13.4#map=12/52.5/13.4"' in html
    assert "<td>1h </td>" in html
    assert html.rstrip().endswith("</html>")


def test_unregistered_type_raises_before_output() -> None:
    stream = io.StringIO()
    generator = ReportGenerator()

    with pytest.raises(ReportTypeNotSupportedError) as excinfo:
        generator.generate(make_report(type=ReportType.EVENTS), make_context(), stream)

    assert excinfo.value.report_type == "events"
    assert stream.getvalue() == ""


def test_register_and_supports() -> None:
    generator = ReportGenerator()
    assert not generator.supports(ReportType.OVERSPEEDS)

    body = _PositionsBody()
    generator.register(ReportType.OVERSPEEDS, body)

    assert generator.supports(ReportType.OVERSPEEDS)
    assert generator.body_for(ReportType.OVERSPEEDS) is body
