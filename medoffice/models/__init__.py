from medoffice.models.doctor import Doctor
from medoffice.models.patient import Patient
from medoffice.models.appointment import Appointment, AppointmentStatus

__all__ = ["Doctor", "Patient", "Appointment", "AppointmentStatus"]
