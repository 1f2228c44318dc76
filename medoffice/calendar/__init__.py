"""Calendar window selection, dashboard summaries and export rendering."""

from medoffice.calendar.window import (
    CalendarDay,
    Granularity,
    ViewWindow,
    month_grid,
    select_sorted,
    select_window,
    shift,
    sort_appointments,
)
from medoffice.calendar.dashboard import DashboardSummary, summarize
from medoffice.calendar.export import (
    PrintableDocument,
    csv_filename,
    pdf_filename,
    render_pdf,
    to_csv,
    to_printable_document,
)

__all__ = [
    "CalendarDay",
    "DashboardSummary",
    "Granularity",
    "PrintableDocument",
    "ViewWindow",
    "csv_filename",
    "month_grid",
    "pdf_filename",
    "render_pdf",
    "select_sorted",
    "select_window",
    "shift",
    "sort_appointments",
    "summarize",
    "to_csv",
    "to_printable_document",
]
