"""Dashboard summary counts derived from calendar windows."""

from dataclasses import dataclass
from typing import Iterable, Sequence

from medoffice.calendar.window import (
    Granularity,
    parse_date,
    select_window,
    sort_appointments,
)


@dataclass(frozen=True)
class DashboardSummary:
    todays_appointments: int
    this_week_appointments: int
    this_month_appointments: int
    pending_this_month: int
    total_patients: int
    upcoming: Sequence


def _status(appointment) -> str:
    status = appointment.status
    return getattr(status, "value", status)


def summarize(
    appointments: Iterable,
    reference_date,
    *,
    total_patients: int = 0,
    upcoming_limit: int = 5,
) -> DashboardSummary:
    """Summarize the schedule around ``reference_date``.

    Upcoming appointments are those on or after the reference date that are
    not cancelled, in date/time order.
    """
    appointments = list(appointments)
    ref = parse_date(reference_date)
    month = select_window(appointments, ref, Granularity.MONTH)

    upcoming = [
        appt
        for appt in sort_appointments(appointments)
        if parse_date(appt.date) >= ref and _status(appt) != "cancelled"
    ]

    return DashboardSummary(
        todays_appointments=len(select_window(appointments, ref, Granularity.DAY)),
        this_week_appointments=len(select_window(appointments, ref, Granularity.WEEK)),
        this_month_appointments=len(month),
        pending_this_month=sum(1 for appt in month if _status(appt) == "pending"),
        total_patients=total_patients,
        upcoming=tuple(upcoming[:upcoming_limit]),
    )
