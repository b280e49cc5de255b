"""Tests for the report session lifecycle."""

from __future__ import annotations

import io
import math

import pytest

from fleetreports.exceptions import ReportRenderError, ReportSessionStateError
from fleetreports.models.device import Device
from fleetreports.models.report import Report
from fleetreports.models.styles import CellStyle, TableStyle
from fleetreports.models.user import MapType, SpeedUnit, User, UserSettings
from fleetreports.render import HtmlReportRenderer
from fleetreports.session import ReportSession, SessionState
from tests.helpers import RecordingSink, make_context, make_report


class _FailingBody:
    def generate(self, session: ReportSession, report: Report) -> None:
        session.h1(report.title)
        raise ValueError("boom")


class _CountingRenderer(HtmlReportRenderer):
    def __init__(self, stream: io.StringIO) -> None:
        super().__init__(stream)
        self.end_calls = 0

    def end(self, report: Report) -> None:
        self.end_calls += 1
        super().end(report)


class _ClosingBody:
    def __init__(self, stream: io.StringIO) -> None:
        self._stream = stream

    def generate(self, session: ReportSession, report: Report) -> None:
        self._stream.close()
        session.h1(report.title)


class _TableBody:
    def generate(self, session: ReportSession, report: Report) -> None:
        session.h2(report.title)
        session.table_start(session.hover())
        session.table_head_start()
        session.table_head_cell_start(session.colspan(2))
        session.text("Device")
        session.table_head_cell_end()
        session.table_head_end()
        session.table_body_start()
        for device in session.devices():
            session.table_row_start()
            session.table_cell(device.display_name)
            session.table_cell_start(session.rowspan(1))
            session.bold(session.format_speed(10.0))
            session.table_cell_end()
            session.table_row_end()
        session.table_body_end()
        session.table_end()


def _session(sink: RecordingSink, **context_kwargs: object) -> ReportSession:
    return ReportSession(make_context(**context_kwargs), make_report(), sink)  # type: ignore[arg-type]


# ------------------------------------------------------------------
# Lifecycle
# ------------------------------------------------------------------


class TestLifecycle:
    def test_generate_starts_and_ends_once(self) -> None:
        sink = RecordingSink()
        session = _session(sink)

        session.generate(_TableBody())

        assert sink.calls[0][0] == "start"
        assert sink.calls[-1][0] == "end"
        assert sink.count("start") == 1
        assert sink.count("end") == 1
        assert session.state is SessionState.ENDED

    def test_failing_body_still_ends_sink_once(self) -> None:
        sink = RecordingSink()
        session = _session(sink)

        with pytest.raises(ValueError, match="boom"):
            session.generate(_FailingBody())

        assert sink.count("end") == 1
        assert [call[0] for call in sink.calls] == ["start", "h1", "end"]
        assert session.state is SessionState.ENDED

    def test_sink_failure_propagates_and_end_is_attempted(self) -> None:
        sink = RecordingSink(fail_on="h2")
        session = _session(sink)

        with pytest.raises(OSError, match="h2"):
            session.generate(_TableBody())

        assert sink.count("end") == 1

    def test_closed_stream_surfaces_render_error(self) -> None:
        stream = io.StringIO()
        renderer = _CountingRenderer(stream)
        session = ReportSession(make_context(), make_report(), renderer)

        with pytest.raises(ReportRenderError):
            session.generate(_ClosingBody(stream))

        assert renderer.end_calls == 1
        assert session.state is SessionState.ENDED

    def test_failing_end_is_not_retried(self) -> None:
        sink = RecordingSink(fail_on="end")
        session = _session(sink)

        with pytest.raises(OSError):
            session.generate(_TableBody())
        with pytest.raises(ReportSessionStateError):
            session.end()

        assert sink.count("end") == 1

    def test_start_twice_is_rejected(self) -> None:
        session = _session(RecordingSink())
        session.start()
        with pytest.raises(ReportSessionStateError):
            session.start()

    def test_end_before_start_is_rejected(self) -> None:
        sink = RecordingSink()
        with pytest.raises(ReportSessionStateError):
            _session(sink).end()
        assert sink.calls == []

    def test_emission_outside_session_is_rejected(self) -> None:
        sink = RecordingSink()
        session = _session(sink)
        with pytest.raises(ReportSessionStateError):
            session.text("too early")

        session.generate(_TableBody())
        with pytest.raises(ReportSessionStateError):
            session.text("too late")

    def test_state_error_is_runtime_error(self) -> None:
        assert issubclass(ReportSessionStateError, RuntimeError)

    def test_context_manager_ends_on_error(self) -> None:
        sink = RecordingSink()
        session = _session(sink)

        with pytest.raises(KeyError), session:
            session.paragraph_start()
            raise KeyError("missing")

        assert [call[0] for call in sink.calls] == ["start", "paragraph_start", "end"]


# ------------------------------------------------------------------
# Delegation
# ------------------------------------------------------------------


def test_table_body_emits_through_sink() -> None:
    sink = RecordingSink()
    devices = [Device(id=1, name="Truck 1"), Device(id=2, unique_id="IMEI-2")]
    user = User(id=5, admin=True, settings=UserSettings(speed_unit=SpeedUnit.KILOMETERS_PER_HOUR))

    _session(sink, user=user, devices=devices).generate(_TableBody())

    assert ("table_start", TableStyle(hover=True)) in sink.calls
    assert ("table_head_cell_start", CellStyle(colspan=2)) in sink.calls
    assert ("table_cell_start", CellStyle(rowspan=1)) in sink.calls
    assert [call[1] for call in sink.calls if call[0] == "text"] == ["Device", "Truck 1", "IMEI-2"]
    assert sink.count("bold") == 2
    assert ("bold", "18.52 km/h") in sink.calls


def test_panel_and_paragraph_delegation() -> None:
    sink = RecordingSink()
    with _session(sink) as session:
        session.panel_start()
        session.panel_heading_start()
        session.h3("Summary")
        session.panel_heading_end()
        session.panel_body_start()
        session.paragraph_start()
        session.bold("Total")
        session.paragraph_end()
        session.panel_body_end()
        session.panel_end()
        session.h1("Done")

    assert [call[0] for call in sink.calls] == [
        "start",
        "panel_start",
        "panel_heading_start",
        "h3",
        "panel_heading_end",
        "panel_body_start",
        "paragraph_start",
        "bold",
        "paragraph_end",
        "panel_body_end",
        "panel_end",
        "h1",
        "end",
    ]


def test_map_link_is_emitted_with_new_window_target() -> None:
    sink = RecordingSink()
    user = User(id=5, admin=True, settings=UserSettings(map_type=MapType.GOOGLE_TERRAIN))
    with _session(sink, user=user, params={"locale": "de"}) as session:
        link = session.map_link(48.137154, 11.576124)

    assert link.label == "48.137154 °, 11.576124 °"
    assert ("link", link.url, "_blank", link.label) in sink.calls
    assert link.url.startswith("https://maps.google.com/maps?q=48.137154,11.576124")


def test_formatting_helpers_use_request_locale() -> None:
    user = User(id=5, admin=True, settings=UserSettings(speed_unit=SpeedUnit.KILOMETERS_PER_HOUR))
    session = _session(RecordingSink(), user=user, params={"locale": "ru"})

    assert session.format_duration(90_061_000) == "1д 1ч 1мин 1с "
    assert session.format_distance(math.nan) == "0 km"
    assert session.message("speed") == "Скорость"


def test_locale_falls_back_to_configured_language() -> None:
    session = _session(RecordingSink())
    assert session.format_duration(61_000) == "1min 1s "
