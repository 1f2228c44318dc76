from medoffice.schemas.doctor import DoctorCreate, DoctorResponse
from medoffice.schemas.patient import PatientCreate, PatientUpdate, PatientResponse
from medoffice.schemas.appointment import (
    AppointmentCreate,
    AppointmentUpdate,
    AppointmentResponse,
)
from medoffice.schemas.calendar import (
    CalendarWindowResponse,
    CalendarDayResponse,
    MonthGridResponse,
    DashboardResponse,
)

__all__ = [
    "DoctorCreate",
    "DoctorResponse",
    "PatientCreate",
    "PatientUpdate",
    "PatientResponse",
    "AppointmentCreate",
    "AppointmentUpdate",
    "AppointmentResponse",
    "CalendarWindowResponse",
    "CalendarDayResponse",
    "MonthGridResponse",
    "DashboardResponse",
]
