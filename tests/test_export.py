import csv
import io
from datetime import date, datetime

import pytest

from medoffice.calendar.export import (
    CONTENT_BOTTOM,
    CSV_HEADER,
    MAX_NOTE_LINES,
    core_font_text,
    csv_filename,
    pdf_filename,
    render_pdf,
    to_csv,
    to_printable_document,
    wrap_notes,
)
from medoffice.errors import ExportFailure, InvalidArgument

GENERATED = datetime(2024, 12, 21, 14, 30)


def _rows(text):
    return list(csv.reader(io.StringIO(text)))


def test_csv_header_order():
    assert to_csv([]) == "Date,Time,Patient,Reason,Status,Notes,Patient ID"
    assert tuple(_rows(to_csv([]))[0]) == CSV_HEADER


def test_csv_quotes_and_doubles_embedded_quotes(appt):
    reason = 'Follow-up, "urgent"'
    text = to_csv([appt("2024-12-20", reason=reason)])

    assert '"Follow-up, ""urgent"""' in text
    assert _rows(text)[1][3] == reason


def test_csv_row_layout(appt):
    text = to_csv([appt("2024-12-20", "09:00", patient_name='Ann "Nan" Lee', notes="BP check", patient_id="p-9")])

    assert text.splitlines()[1] == '2024-12-20,09:00,"Ann ""Nan"" Lee","Routine checkup",confirmed,"BP check",p-9'


def test_csv_missing_notes_is_empty_quoted_field(appt):
    line = to_csv([appt("2024-12-20", notes=None)]).splitlines()[1]

    assert ',"",' in line
    assert "None" not in line
    assert "null" not in line
    assert _rows(to_csv([appt("2024-12-20", notes=None)]))[1][5] == ""


def test_csv_notes_with_newlines_round_trip(appt):
    notes = 'Line one\nLine "two", with comma'
    rows = _rows(to_csv([appt("2024-12-20", notes=notes)]))

    assert len(rows) == 2
    assert rows[1][5] == notes


def test_csv_sorts_by_date_then_time(appt):
    appointments = [appt("2024-12-20", "09:00"), appt("2024-12-20", "08:30"), appt("2024-12-19", "16:00")]

    rows = _rows(to_csv(appointments))

    assert [(r[0], r[1]) for r in rows[1:]] == [
        ("2024-12-19", "16:00"),
        ("2024-12-20", "08:30"),
        ("2024-12-20", "09:00"),
    ]


def test_csv_presorted_keeps_caller_order(appt):
    appointments = [appt("2024-12-20", "09:00"), appt("2024-12-20", "08:30")]

    rows = _rows(to_csv(appointments, presorted=True))

    assert [r[1] for r in rows[1:]] == ["09:00", "08:30"]


def test_csv_has_one_row_per_appointment(appt):
    appointments = [appt(f"2024-12-{day:02d}", notes="a, b") for day in range(1, 32)]

    rows = _rows(to_csv(appointments))

    assert len(rows) == 32
    assert all(len(row) == 7 for row in rows)


def test_csv_enum_status_renders_value(appt):
    from medoffice.models.appointment import AppointmentStatus

    rows = _rows(to_csv([appt("2024-12-20", status=AppointmentStatus.PENDING)]))

    assert rows[1][4] == "pending"


def test_filenames():
    assert csv_filename("week", date(2024, 12, 21)) == "appointments-week-2024-12-21.csv"
    assert pdf_filename("month", "2024-02-15") == "calendar-month-2024-02-15.pdf"
    with pytest.raises(InvalidArgument):
        csv_filename("fortnight", date(2024, 12, 21))


def test_printable_document_header_and_order(appt):
    appointments = [appt("2024-12-20", "09:00"), appt("2024-12-20", "08:30"), appt("2024-11-30")]

    document = to_printable_document(appointments, date(2024, 12, 20), "month", generated_at=GENERATED)

    assert document.title == "Doctor's Calendar"
    assert document.window_label == "December 2024"
    assert document.view_label == "Month View"
    assert [e.time.strftime("%H:%M") for e in document.entries] == ["08:30", "09:00"]
    assert document.pages[0].footer == "Generated on 2024-12-21 14:30 - Page 1 of 1"


def test_printable_document_paginates_without_splitting_entries(appt):
    appointments = [appt(f"2024-12-{day:02d}", "09:00", id=f"a{day}") for day in range(1, 11)]

    document = to_printable_document(appointments, date(2024, 12, 1), "month", generated_at=GENERATED)

    assert document.page_count == 3
    assert [len(page.entries) for page in document.pages] == [3, 5, 2]
    assert [e.date.day for e in document.entries] == list(range(1, 11))
    for page in document.pages:
        assert page.footer.endswith(f"Page {page.number} of 3")
        for entry in page.entries:
            assert entry.y + entry.height <= CONTENT_BOTTOM


def test_printable_document_long_notes(appt):
    long_notes = "word " * 2000
    appointments = [appt("2024-12-02", notes=long_notes), appt("2024-12-03", notes="short")]

    document = to_printable_document(appointments, date(2024, 12, 2), "week", generated_at=GENERATED)

    assert len(document.entries) == 2
    first = document.entries[0]
    assert len(first.note_lines) == MAX_NOTE_LINES
    assert first.note_lines[-1].endswith("...")
    assert document.pages[0].entries == []
    for page in document.pages:
        for entry in page.entries:
            assert entry.y + entry.height <= CONTENT_BOTTOM


def test_wrap_notes_empty():
    assert wrap_notes(None) == ()
    assert wrap_notes("") == ()
    assert wrap_notes("Check BP") == ("Notes: Check BP",)


def test_empty_document_has_single_page():
    document = to_printable_document([], date(2024, 12, 21), "day", generated_at=GENERATED)

    assert document.page_count == 1
    assert document.entries == []
    assert document.window_label == "December 21, 2024"
    assert document.pages[0].footer.endswith("Page 1 of 1")


def test_render_pdf_produces_pdf_bytes(appt):
    appointments = [appt(f"2024-12-{day:02d}", notes="Blood pressure check") for day in range(1, 20)]
    document = to_printable_document(appointments, date(2024, 12, 1), "month", generated_at=GENERATED)

    content = render_pdf(document)

    assert content.startswith(b"%PDF")
    assert document.page_count > 1


def test_render_pdf_with_typographic_and_non_latin_text(appt):
    document = to_printable_document(
        [
            appt(
                "2024-12-20",
                patient_name="王小明",
                reason="Patient’s follow-up — “urgent”",
                notes="Review results… bring inhaler",
            )
        ],
        date(2024, 12, 20),
        "day",
        generated_at=GENERATED,
    )

    content = render_pdf(document)

    assert content.startswith(b"%PDF")
    # the document itself keeps the original text
    assert document.entries[0].reason == "Patient’s follow-up — “urgent”"


def test_core_font_text():
    assert core_font_text("Patient’s follow-up — “urgent”…") == "Patient's follow-up - \"urgent\"..."
    assert core_font_text("王小明") == "???"
    assert core_font_text("Café Müller") == "Café Müller"


def test_render_pdf_missing_font_is_export_failure():
    document = to_printable_document([], date(2024, 12, 20), "day", generated_at=GENERATED)

    with pytest.raises(ExportFailure):
        render_pdf(document, font_path="/nonexistent/font.ttf")
