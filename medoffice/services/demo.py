"""Demo mode - in-memory stand-ins for the database services.

The store keeps transient ORM objects so the API serializes them exactly
like rows loaded from the database. One store lives on the application
state for the lifetime of the process; the services below mirror the
method names of their database counterparts.
"""

import logging
import uuid
from datetime import date, datetime, time

from medoffice.models import Appointment, AppointmentStatus, Doctor, Patient
from medoffice.schemas.appointment import AppointmentCreate, AppointmentUpdate
from medoffice.schemas.doctor import DoctorCreate
from medoffice.schemas.patient import PatientCreate, PatientUpdate
from medoffice.services.appointment_service import appointment_changes
from medoffice.session import SessionContext

logger = logging.getLogger(__name__)

DEMO_DOCTOR_ID = "demo-user-123"


class DemoStore:
    """Doctors, patients and appointments held in plain dicts."""

    def __init__(self):
        self.doctors: dict[str, Doctor] = {}
        self.patients: dict[str, Patient] = {}
        self.appointments: dict[str, Appointment] = {}

    @classmethod
    def seeded(cls, doctor_id: str = DEMO_DOCTOR_ID) -> "DemoStore":
        """A store pre-filled with the demo practice."""
        store = cls()
        store.doctors[doctor_id] = Doctor(
            id=doctor_id,
            name="Dr. Demo User",
            email="demo@doctor.com",
            created_at=datetime(2024, 1, 1),
        )
        for i, (name, dob, phone, email, history) in enumerate(DEMO_PATIENTS, start=1):
            store.patients[f"demo-patient-{i}"] = Patient(
                id=f"demo-patient-{i}",
                doctor_id=doctor_id,
                name=name,
                dob=date.fromisoformat(dob),
                phone=phone,
                email=email,
                medical_history=history,
                created_at=datetime(2024, 1, i),
            )
        for i, (patient_no, day, at, reason, notes, status) in enumerate(DEMO_APPOINTMENTS, start=1):
            patient = store.patients[f"demo-patient-{patient_no}"]
            store.appointments[f"demo-appointment-{i}"] = Appointment(
                id=f"demo-appointment-{i}",
                doctor_id=doctor_id,
                patient_id=patient.id,
                patient=patient,
                date=date.fromisoformat(day),
                time=time.fromisoformat(at),
                reason=reason,
                notes=notes,
                status=status.value,
                created_at=datetime(2024, 12, 15),
            )
        logger.info(
            f"Demo store seeded with {len(store.patients)} patients "
            f"and {len(store.appointments)} appointments"
        )
        return store


DEMO_PATIENTS = [
    (
        "John Smith",
        "1985-03-15",
        "(555) 123-4567",
        "john.smith@email.com",
        "Hypertension, managed with medication. Regular checkups every 6 months.",
    ),
    (
        "Sarah Johnson",
        "1990-07-22",
        "(555) 987-6543",
        "sarah.johnson@email.com",
        "Asthma, uses inhaler as needed. Allergic to penicillin.",
    ),
    (
        "Michael Brown",
        "1978-11-08",
        "(555) 456-7890",
        "michael.brown@email.com",
        "Diabetes Type 2, controlled with diet and exercise. Regular HbA1c monitoring.",
    ),
]

# (patient number, date, time, reason, notes, status)
DEMO_APPOINTMENTS = [
    (1, "2024-12-20", "09:00", "Routine checkup",
     "Blood pressure check, medication review", AppointmentStatus.CONFIRMED),
    (2, "2024-12-20", "10:30", "Asthma follow-up",
     "Lung function test, inhaler technique review", AppointmentStatus.CONFIRMED),
    (3, "2024-12-21", "14:00", "Diabetes consultation",
     "HbA1c results review, diet counseling", AppointmentStatus.PENDING),
    (1, "2024-12-22", "11:15", "Follow-up visit",
     "Review test results", AppointmentStatus.PENDING),
]


def _new_id(prefix: str) -> str:
    return f"{prefix}-{uuid.uuid4().hex[:12]}"


class DemoDoctorService:
    def __init__(self, store: DemoStore, context: SessionContext):
        self.store = store
        self.context = context

    async def get_profile(self) -> Doctor | None:
        return self.store.doctors.get(self.context.doctor_id)

    async def create_profile(self, doctor_data: DoctorCreate) -> Doctor:
        # Demo mode lets the profile be replaced, unlike the database
        doctor = Doctor(
            id=self.context.doctor_id,
            created_at=datetime.utcnow(),
            **doctor_data.model_dump(),
        )
        self.store.doctors[doctor.id] = doctor
        return doctor


class DemoPatientService:
    def __init__(self, store: DemoStore, context: SessionContext):
        self.store = store
        self.context = context

    def _mine(self) -> list[Patient]:
        return [p for p in self.store.patients.values() if p.doctor_id == self.context.doctor_id]

    async def list_patients(self) -> list[Patient]:
        return sorted(self._mine(), key=lambda p: p.created_at, reverse=True)

    async def count_patients(self) -> int:
        return len(self._mine())

    async def get_patient(self, patient_id: str) -> Patient | None:
        patient = self.store.patients.get(patient_id)
        if patient is None or patient.doctor_id != self.context.doctor_id:
            return None
        return patient

    async def create_patient(self, patient_data: PatientCreate) -> Patient:
        patient = Patient(
            id=_new_id("demo-patient"),
            doctor_id=self.context.doctor_id,
            created_at=datetime.utcnow(),
            **patient_data.model_dump(),
        )
        self.store.patients[patient.id] = patient
        return patient

    async def update_patient(self, patient: Patient, patient_data: PatientUpdate) -> Patient:
        for field, value in patient_data.model_dump(exclude_unset=True).items():
            if field == "name" and value is None:
                continue
            setattr(patient, field, value)
        return patient

    async def delete_patient(self, patient: Patient) -> None:
        self.store.patients.pop(patient.id, None)
        for appointment_id in [
            a.id for a in self.store.appointments.values() if a.patient_id == patient.id
        ]:
            del self.store.appointments[appointment_id]


class DemoAppointmentService:
    def __init__(self, store: DemoStore, context: SessionContext):
        self.store = store
        self.context = context

    async def list_appointments(
        self, start_date: date | None = None, end_date: date | None = None
    ) -> list[Appointment]:
        appointments = [
            a for a in self.store.appointments.values()
            if a.doctor_id == self.context.doctor_id
            and (start_date is None or a.date >= start_date)
            and (end_date is None or a.date <= end_date)
        ]
        return sorted(appointments, key=lambda a: (a.date, a.time))

    async def get_appointment_by_id(self, appointment_id: str) -> Appointment | None:
        appointment = self.store.appointments.get(appointment_id)
        if appointment is None or appointment.doctor_id != self.context.doctor_id:
            return None
        return appointment

    async def patient_exists(self, patient_id: str) -> bool:
        patient = self.store.patients.get(patient_id)
        return patient is not None and patient.doctor_id == self.context.doctor_id

    async def create_appointment(self, appointment_data: AppointmentCreate) -> Appointment:
        data = appointment_data.model_dump()
        data["status"] = appointment_data.status.value
        appointment = Appointment(
            id=_new_id("demo-appointment"),
            doctor_id=self.context.doctor_id,
            patient=self.store.patients[appointment_data.patient_id],
            created_at=datetime.utcnow(),
            **data,
        )
        self.store.appointments[appointment.id] = appointment
        return appointment

    async def update_appointment(
        self, appointment: Appointment, appointment_data: AppointmentUpdate
    ) -> Appointment:
        update_data = appointment_changes(appointment_data)
        for field, value in update_data.items():
            setattr(appointment, field, value)
        if "patient_id" in update_data:
            appointment.patient = self.store.patients[appointment.patient_id]
        return appointment

    async def delete_appointment(self, appointment: Appointment) -> None:
        self.store.appointments.pop(appointment.id, None)
