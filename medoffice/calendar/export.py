"""CSV and print/PDF rendering of a calendar window."""

import textwrap
from dataclasses import dataclass, field, replace
from datetime import date, datetime, time
from typing import Iterable, Sequence

from fpdf import FPDF

from medoffice.calendar.window import (
    ViewWindow,
    parse_date,
    parse_time,
    select_window,
    sort_appointments,
)
from medoffice.errors import ExportFailure

CSV_HEADER = ("Date", "Time", "Patient", "Reason", "Status", "Notes", "Patient ID")

# Page geometry in millimetres (A4 portrait)
PAGE_HEIGHT = 297
MARGIN_X = 20
FIRST_PAGE_TOP = 90  # below title, window label, view label and list heading
PAGE_TOP = 30
CONTENT_BOTTOM = 285
FOOTER_Y = PAGE_HEIGHT - 10

ENTRY_HEIGHT = 50  # date, time/patient, reason, status rows plus spacing
NOTE_LINE_HEIGHT = 5
NOTE_WRAP_CHARS = 95
MAX_NOTE_LINES = (CONTENT_BOTTOM - PAGE_TOP - ENTRY_HEIGHT) // NOTE_LINE_HEIGHT

TEAL = (20, 184, 166)
BLACK = (0, 0, 0)
GREY = (100, 100, 100)
LIGHT_GREY = (150, 150, 150)
STATUS_COLORS = {
    "confirmed": (34, 197, 94),
    "completed": (20, 184, 166),
    "cancelled": (239, 68, 68),
    "pending": (249, 115, 22),
}

DOCUMENT_TITLE = "Doctor's Calendar"
EMPTY_MESSAGE = "No appointments found for this period."

# Typographic punctuation the core fonts lack, mapped to Latin-1 look-alikes
CORE_FONT_SUBSTITUTES = str.maketrans({
    "\u2018": "'",
    "\u2019": "'",
    "\u201a": ",",
    "\u201c": '"',
    "\u201d": '"',
    "\u201e": '"',
    "\u2013": "-",
    "\u2014": "-",
    "\u2212": "-",
    "\u2026": "...",
    "\u2022": "*",
})


def _text(value) -> str:
    if value is None:
        return ""
    if hasattr(value, "value"):  # enums
        return str(value.value)
    return str(value)


def _quote(value) -> str:
    return '"' + _text(value).replace('"', '""') + '"'


def _plain(value) -> str:
    """Leave a field bare unless it would break the row."""
    text = _text(value)
    if any(ch in text for ch in ',"\r\n'):
        return _quote(text)
    return text


def csv_row(appointment) -> list[str]:
    return [
        parse_date(appointment.date).isoformat(),
        parse_time(appointment.time).strftime("%H:%M"),
        _quote(getattr(appointment, "patient_name", "")),
        _quote(appointment.reason),
        _plain(appointment.status),
        _quote(getattr(appointment, "notes", None)),
        _plain(getattr(appointment, "patient_id", "")),
    ]


def to_csv(appointments: Iterable, *, presorted: bool = False) -> str:
    """Render appointments as CSV text with a fixed header row.

    Patient, reason and notes are always quoted with embedded quotes doubled.
    Rows are sorted by date then time unless ``presorted`` is set. An empty
    input gives the header alone.
    """
    rows = list(appointments) if presorted else sort_appointments(appointments)
    lines = [",".join(CSV_HEADER)]
    lines.extend(",".join(csv_row(appt)) for appt in rows)
    return "\n".join(lines)


def csv_filename(granularity, reference_date) -> str:
    window = ViewWindow.of(reference_date, granularity)
    return f"appointments-{window.granularity.value}-{window.reference_date.isoformat()}.csv"


def pdf_filename(granularity, reference_date) -> str:
    window = ViewWindow.of(reference_date, granularity)
    return f"calendar-{window.granularity.value}-{window.reference_date.isoformat()}.pdf"


def wrap_notes(notes: str | None) -> tuple[str, ...]:
    if not notes:
        return ()
    lines = textwrap.wrap(f"Notes: {notes}", NOTE_WRAP_CHARS) or [f"Notes: {notes}"]
    if len(lines) > MAX_NOTE_LINES:
        lines = lines[:MAX_NOTE_LINES]
        lines[-1] = lines[-1][: NOTE_WRAP_CHARS - 3] + "..."
    return tuple(lines)


@dataclass(frozen=True)
class PrintEntry:
    """One appointment as it appears on a printed page."""

    date: date
    time: time
    patient_name: str
    reason: str
    status: str
    note_lines: tuple[str, ...] = ()
    y: float = 0

    @property
    def height(self) -> float:
        return ENTRY_HEIGHT + NOTE_LINE_HEIGHT * len(self.note_lines)

    @classmethod
    def from_appointment(cls, appointment) -> "PrintEntry":
        return cls(
            date=parse_date(appointment.date),
            time=parse_time(appointment.time),
            patient_name=_text(getattr(appointment, "patient_name", "")),
            reason=_text(appointment.reason),
            status=_text(appointment.status),
            note_lines=wrap_notes(getattr(appointment, "notes", None)),
        )


@dataclass
class PrintPage:
    number: int
    entries: list[PrintEntry] = field(default_factory=list)
    footer: str = ""


@dataclass
class PrintableDocument:
    title: str
    window_label: str
    view_label: str
    generated_at: datetime
    pages: list[PrintPage]

    @property
    def entries(self) -> list[PrintEntry]:
        return [entry for page in self.pages for entry in page.entries]

    @property
    def page_count(self) -> int:
        return len(self.pages)


def paginate(entries: Sequence[PrintEntry]) -> list[PrintPage]:
    """Place entries top to bottom, starting a new page when one would not fit.

    An entry is never split across pages; the first page starts lower to
    leave room for the document header, so an entry too tall for what is left
    of it moves to the next page even when the first page is still empty.
    """
    pages = [PrintPage(number=1)]
    y = FIRST_PAGE_TOP
    for entry in entries:
        if y + entry.height > CONTENT_BOTTOM and y > PAGE_TOP:
            pages.append(PrintPage(number=len(pages) + 1))
            y = PAGE_TOP
        pages[-1].entries.append(replace(entry, y=y))
        y += entry.height
    return pages


def to_printable_document(
    appointments: Iterable,
    reference_date,
    granularity,
    *,
    generated_at: datetime,
) -> PrintableDocument:
    """Lay out the appointments of a calendar window as printable pages.

    Appointments outside the window are left out; the rest appear once each in
    date/time order. Every page gets a ``Generated on ... - Page i of n``
    footer stamped with ``generated_at``.
    """
    window = ViewWindow.of(reference_date, granularity)
    members = sort_appointments(select_window(appointments, window.reference_date, window.granularity))
    pages = paginate([PrintEntry.from_appointment(appt) for appt in members])

    stamp = f"{generated_at:%Y-%m-%d %H:%M}"
    for page in pages:
        page.footer = f"Generated on {stamp} - Page {page.number} of {len(pages)}"

    return PrintableDocument(
        title=DOCUMENT_TITLE,
        window_label=window.label,
        view_label=f"{window.granularity.value.capitalize()} View",
        generated_at=generated_at,
        pages=pages,
    )


def _short_date(day: date) -> str:
    return f"{day.month}/{day.day}/{day.year}"


def core_font_text(text: str) -> str:
    """Make ``text`` drawable with the built-in Latin-1 fonts.

    Curly quotes, dashes and ellipses become their plain equivalents; any
    other character outside Latin-1 is replaced with ``?``.
    """
    return text.translate(CORE_FONT_SUBSTITUTES).encode("latin-1", "replace").decode("latin-1")


def _for_core_font(document: PrintableDocument) -> PrintableDocument:
    pages = [
        PrintPage(
            number=page.number,
            footer=core_font_text(page.footer),
            entries=[
                replace(
                    entry,
                    patient_name=core_font_text(entry.patient_name),
                    reason=core_font_text(entry.reason),
                    status=core_font_text(entry.status),
                    note_lines=tuple(core_font_text(line) for line in entry.note_lines),
                )
                for entry in page.entries
            ],
        )
        for page in document.pages
    ]
    return replace(
        document,
        title=core_font_text(document.title),
        window_label=core_font_text(document.window_label),
        view_label=core_font_text(document.view_label),
        pages=pages,
    )


def render_pdf(document: PrintableDocument, *, font_path: str | None = None) -> bytes:
    """Draw a printable document with fpdf2 and return the PDF bytes.

    Without ``font_path`` the core Helvetica font is used and text is passed
    through ``core_font_text`` first. With a TTF font the text is drawn as is.
    Any engine error (missing or unreadable font) is raised as
    ``ExportFailure``; no partial output is returned.
    """
    try:
        pdf = FPDF(orientation="P", unit="mm", format="A4")
        pdf.set_auto_page_break(False)
        family = "Helvetica"
        if font_path:
            pdf.add_font("Body", "", font_path)
            family = "Body"
        else:
            document = _for_core_font(document)

        for page in document.pages:
            pdf.add_page()
            if page.number == 1:
                _draw_header(pdf, family, document)
            for entry in page.entries:
                _draw_entry(pdf, family, entry)
            pdf.set_font(family, size=8)
            pdf.set_text_color(*LIGHT_GREY)
            pdf.text(MARGIN_X, FOOTER_Y, page.footer)

        return bytes(pdf.output())
    except ExportFailure:
        raise
    except Exception as e:
        raise ExportFailure(f"PDF generation failed: {e}") from e


def _draw_header(pdf: FPDF, family: str, document: PrintableDocument) -> None:
    pdf.set_font(family, size=20)
    pdf.set_text_color(*TEAL)
    pdf.text(MARGIN_X, 30, document.title)

    pdf.set_font(family, size=12)
    pdf.set_text_color(*BLACK)
    pdf.text(MARGIN_X, 45, document.window_label)

    pdf.set_font(family, size=10)
    pdf.set_text_color(*GREY)
    pdf.text(MARGIN_X, 55, document.view_label)

    if document.entries:
        pdf.set_font(family, size=14)
        pdf.set_text_color(*BLACK)
        pdf.text(MARGIN_X, 75, "Appointments:")
    else:
        pdf.set_font(family, size=12)
        pdf.set_text_color(*GREY)
        pdf.text(MARGIN_X, FIRST_PAGE_TOP, EMPTY_MESSAGE)


def _draw_entry(pdf: FPDF, family: str, entry: PrintEntry) -> None:
    y = entry.y
    pdf.set_font(family, size=10)
    pdf.set_text_color(*TEAL)
    pdf.text(MARGIN_X, y, _short_date(entry.date))

    pdf.set_font(family, size=12)
    pdf.set_text_color(*BLACK)
    pdf.text(MARGIN_X, y + 10, f"{entry.time:%H:%M} - {entry.patient_name}")

    pdf.set_font(family, size=10)
    pdf.set_text_color(*GREY)
    pdf.text(MARGIN_X, y + 20, f"Reason: {entry.reason}")

    pdf.set_text_color(*STATUS_COLORS.get(entry.status, GREY))
    pdf.text(MARGIN_X, y + 30, f"Status: {entry.status.upper()}")

    if entry.note_lines:
        pdf.set_font(family, size=9)
        pdf.set_text_color(*GREY)
        for i, line in enumerate(entry.note_lines):
            pdf.text(MARGIN_X, y + 40 + i * NOTE_LINE_HEIGHT, line)
