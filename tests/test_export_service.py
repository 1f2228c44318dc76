import csv
import io
from datetime import date, datetime

import pytest

from medoffice.errors import ExportFailure, InvalidArgument
from medoffice.services import export_service
from medoffice.services.export_service import ExportService


@pytest.fixture
def week(appt):
    return [
        appt("2024-12-14", "09:00"),
        appt("2024-12-20", "10:30", reason='Follow-up, "urgent"'),
        appt("2024-12-20", "09:00"),
        appt("2024-12-21", "14:00"),
        appt("2024-12-22", "11:15"),
    ]


def test_export_csv_artifact(week):
    artifact = ExportService().export_csv(week, date(2024, 12, 21), "week")

    assert artifact.filename == "appointments-week-2024-12-21.csv"
    assert artifact.media_type.startswith("text/csv")
    assert artifact.count == 3

    rows = list(csv.reader(io.StringIO(artifact.content.decode("utf-8"))))
    assert len(rows) == 4
    assert [(r[0], r[1]) for r in rows[1:]] == [
        ("2024-12-20", "09:00"),
        ("2024-12-20", "10:30"),
        ("2024-12-21", "14:00"),
    ]
    assert rows[2][3] == 'Follow-up, "urgent"'


def test_export_csv_empty_window_is_header_only(week):
    artifact = ExportService().export_csv(week, date(2025, 6, 1), "day")

    assert artifact.count == 0
    assert artifact.content == b"Date,Time,Patient,Reason,Status,Notes,Patient ID"


def test_export_pdf_artifact(week):
    artifact = ExportService().export_pdf(
        week, date(2024, 12, 21), "week", generated_at=datetime(2024, 12, 21, 9, 0)
    )

    assert artifact.filename == "calendar-week-2024-12-21.pdf"
    assert artifact.media_type == "application/pdf"
    assert artifact.count == 3
    assert artifact.content.startswith(b"%PDF")


def test_unknown_view_is_invalid_argument_not_export_failure(week):
    with pytest.raises(InvalidArgument):
        ExportService().export_csv(week, date(2024, 12, 21), "fortnight")
    with pytest.raises(InvalidArgument):
        ExportService().export_pdf(week, date(2024, 12, 21), "fortnight")


def test_pdf_engine_failure_becomes_export_failure(week, monkeypatch):
    def broken(document, *, font_path=None):
        raise RuntimeError("engine crashed")

    monkeypatch.setattr(export_service, "render_pdf", broken)

    with pytest.raises(ExportFailure) as excinfo:
        ExportService().export_pdf(week, date(2024, 12, 21), "week")

    assert excinfo.value.retryable
    assert "engine crashed" in excinfo.value.message


def test_truncated_pdf_output_is_rejected(week, monkeypatch):
    monkeypatch.setattr(export_service, "render_pdf", lambda document, *, font_path=None: b"")

    with pytest.raises(ExportFailure):
        ExportService().export_pdf(week, date(2024, 12, 21), "week")


def test_incomplete_csv_is_rejected(week, monkeypatch):
    monkeypatch.setattr(
        export_service,
        "to_csv",
        lambda appointments, presorted=False: "Date,Time,Patient,Reason,Status,Notes,Patient ID",
    )

    with pytest.raises(ExportFailure):
        ExportService().export_csv(week, date(2024, 12, 21), "week")


def test_export_pdf_with_typographic_punctuation(appt):
    appointments = [appt("2024-12-20", "09:00", reason="Patient’s follow-up — urgent")]

    artifact = ExportService().export_pdf(appointments, "2024-12-20", "day")

    assert artifact.count == 1
    assert artifact.content.startswith(b"%PDF")
