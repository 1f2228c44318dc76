"""Dashboard routes - schedule summary for the landing page."""

import datetime as dt

from fastapi import APIRouter

from medoffice.api.deps import Appointments, Patients
from medoffice.calendar.dashboard import summarize
from medoffice.config import settings
from medoffice.schemas.appointment import AppointmentResponse
from medoffice.schemas.calendar import DashboardResponse

router = APIRouter()


@router.get("/", response_model=DashboardResponse)
async def get_dashboard(
    appointments: Appointments,
    patients: Patients,
    date: dt.date | None = None,
):
    """Counts for today, this week and this month plus the next upcoming visits."""
    reference_date = date or dt.date.today()
    summary = summarize(
        await appointments.list_appointments(),
        reference_date,
        total_patients=await patients.count_patients(),
        upcoming_limit=settings.upcoming_limit,
    )

    return DashboardResponse(
        reference_date=reference_date,
        todays_appointments=summary.todays_appointments,
        this_week_appointments=summary.this_week_appointments,
        this_month_appointments=summary.this_month_appointments,
        pending_this_month=summary.pending_this_month,
        total_patients=summary.total_patients,
        upcoming=[AppointmentResponse.model_validate(a) for a in summary.upcoming],
    )
