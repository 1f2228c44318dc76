from pydantic import BaseModel, Field
import datetime as dt
from medoffice.calendar.window import Granularity
from medoffice.schemas.appointment import AppointmentResponse


class CalendarWindowResponse(BaseModel):
    """Appointments of one day, week or month window."""
    reference_date: dt.date
    view: Granularity
    label: str = Field(..., description="Human-readable window label")
    start_date: dt.date
    end_date: dt.date
    previous_date: dt.date = Field(..., description="Reference date one view unit back")
    next_date: dt.date = Field(..., description="Reference date one view unit ahead")
    appointments: list[AppointmentResponse]


class CalendarDayResponse(BaseModel):
    """One cell of the month grid."""
    date: dt.date
    is_current_month: bool
    is_today: bool
    appointments: list[AppointmentResponse]

    class Config:
        from_attributes = True


class MonthGridResponse(BaseModel):
    """Sunday-first 6x7 month grid."""
    reference_date: dt.date
    label: str
    days: list[CalendarDayResponse]


class DashboardResponse(BaseModel):
    """Schedule summary around a reference date."""
    reference_date: dt.date
    todays_appointments: int
    this_week_appointments: int
    this_month_appointments: int
    pending_this_month: int
    total_patients: int
    upcoming: list[AppointmentResponse]

    class Config:
        from_attributes = True
