"""Services package - Business logic layer."""

from medoffice.services.doctor_service import DoctorService
from medoffice.services.patient_service import PatientService
from medoffice.services.appointment_service import AppointmentService
from medoffice.services.export_service import ExportService, ExportArtifact
from medoffice.services.demo import (
    DemoStore,
    DemoDoctorService,
    DemoPatientService,
    DemoAppointmentService,
)

__all__ = [
    "DoctorService",
    "PatientService",
    "AppointmentService",
    "ExportService",
    "ExportArtifact",
    "DemoStore",
    "DemoDoctorService",
    "DemoPatientService",
    "DemoAppointmentService",
]
