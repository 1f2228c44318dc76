"""Calendar routes - window views, month grid and print/export downloads."""

import datetime as dt
from datetime import timedelta

from fastapi import APIRouter, HTTPException, Response
from fastapi.concurrency import run_in_threadpool

from medoffice.api.deps import Appointments, Exports
from medoffice.calendar.window import (
    GRID_CELLS,
    ViewWindow,
    month_grid,
    select_sorted,
    shift,
    week_start,
)
from medoffice.schemas.appointment import AppointmentResponse
from medoffice.schemas.calendar import (
    CalendarDayResponse,
    CalendarWindowResponse,
    MonthGridResponse,
)

router = APIRouter()

NOTHING_TO_EXPORT = "No appointments to export for the selected period."


def _window(date: dt.date | None, view: str) -> ViewWindow:
    # "today" is decided here, never inside the calendar core
    return ViewWindow.of(date or dt.date.today(), view)


def _attachment(content: bytes, media_type: str, filename: str) -> Response:
    return Response(
        content=content,
        media_type=media_type,
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )


@router.get("/", response_model=CalendarWindowResponse)
async def get_calendar_window(
    service: Appointments,
    date: dt.date | None = None,
    view: str = "month",
):
    """Get the appointments of a day, week or month window in date/time order."""
    window = _window(date, view)
    appointments = await service.list_appointments(window.start, window.end)
    members = select_sorted(appointments, window.reference_date, window.granularity)

    return CalendarWindowResponse(
        reference_date=window.reference_date,
        view=window.granularity,
        label=window.label,
        start_date=window.start,
        end_date=window.end,
        previous_date=shift(window.reference_date, window.granularity, -1),
        next_date=shift(window.reference_date, window.granularity, 1),
        appointments=[AppointmentResponse.model_validate(a) for a in members],
    )


@router.get("/month-grid", response_model=MonthGridResponse)
async def get_month_grid(service: Appointments, date: dt.date | None = None):
    """Get the six-week Sunday-first grid for the month containing ``date``."""
    today = dt.date.today()
    window = _window(date or today, "month")
    first_cell = week_start(window.start)
    appointments = await service.list_appointments(
        first_cell, first_cell + timedelta(days=GRID_CELLS - 1)
    )

    days = month_grid(appointments, window.reference_date, today=today)
    return MonthGridResponse(
        reference_date=window.reference_date,
        label=window.label,
        days=[
            CalendarDayResponse(
                date=day.date,
                is_current_month=day.is_current_month,
                is_today=day.is_today,
                appointments=[AppointmentResponse.model_validate(a) for a in day.appointments],
            )
            for day in days
        ],
    )


@router.get("/export.csv")
async def export_csv(
    service: Appointments,
    exports: Exports,
    date: dt.date | None = None,
    view: str = "month",
):
    """Download the window's appointments as CSV."""
    window = _window(date, view)
    appointments = await service.list_appointments(window.start, window.end)
    artifact = exports.export_csv(appointments, window.reference_date, window.granularity)

    if artifact.count == 0:
        raise HTTPException(status_code=404, detail=NOTHING_TO_EXPORT)

    return _attachment(artifact.content, artifact.media_type, artifact.filename)


@router.get("/export.pdf")
async def export_pdf(
    service: Appointments,
    exports: Exports,
    date: dt.date | None = None,
    view: str = "month",
):
    """Download the window's appointments as a printable PDF."""
    window = _window(date, view)
    appointments = await service.list_appointments(window.start, window.end)
    artifact = await run_in_threadpool(
        exports.export_pdf, appointments, window.reference_date, window.granularity
    )
    return _attachment(artifact.content, artifact.media_type, artifact.filename)
