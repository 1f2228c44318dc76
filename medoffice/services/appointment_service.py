"""Appointment service - Business logic for appointment operations."""

from datetime import date

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from medoffice.models.appointment import Appointment
from medoffice.models.patient import Patient
from medoffice.schemas.appointment import AppointmentCreate, AppointmentUpdate
from medoffice.session import SessionContext


def appointment_changes(appointment_data: AppointmentUpdate) -> dict:
    """Fields to apply from a partial update; only notes may be cleared."""
    update_data = {
        field: value
        for field, value in appointment_data.model_dump(exclude_unset=True).items()
        if value is not None or field == "notes"
    }
    if "status" in update_data:
        update_data["status"] = update_data["status"].value
    return update_data


class AppointmentService:
    """Service class for appointment operations, scoped to one doctor.

    Every appointment returned has its patient loaded so ``patient_name`` can
    be read outside the session.
    """

    def __init__(self, db: AsyncSession, context: SessionContext):
        self.db = db
        self.context = context

    def _query(self):
        return (
            select(Appointment)
            .options(selectinload(Appointment.patient))
            .where(Appointment.doctor_id == self.context.doctor_id)
        )

    async def list_appointments(
        self, start_date: date | None = None, end_date: date | None = None
    ) -> list[Appointment]:
        """Get appointments ordered by date and time, optionally within an inclusive range."""
        query = self._query()

        if start_date:
            query = query.where(Appointment.date >= start_date)
        if end_date:
            query = query.where(Appointment.date <= end_date)

        query = query.order_by(Appointment.date, Appointment.time)

        result = await self.db.execute(query)
        return list(result.scalars().all())

    async def get_appointment_by_id(self, appointment_id: str) -> Appointment | None:
        """Get an appointment by ID."""
        result = await self.db.execute(
            self._query()
            .where(Appointment.id == appointment_id)
            .execution_options(populate_existing=True)
        )
        return result.scalar_one_or_none()

    async def patient_exists(self, patient_id: str) -> bool:
        """Check if a patient exists for this doctor."""
        patient = await self.db.get(Patient, patient_id)
        return patient is not None and patient.doctor_id == self.context.doctor_id

    async def create_appointment(self, appointment_data: AppointmentCreate) -> Appointment:
        """Create a new appointment."""
        data = appointment_data.model_dump()
        data["status"] = appointment_data.status.value
        appointment = Appointment(doctor_id=self.context.doctor_id, **data)
        self.db.add(appointment)
        await self.db.flush()
        return await self.get_appointment_by_id(appointment.id)

    async def update_appointment(
        self, appointment: Appointment, appointment_data: AppointmentUpdate
    ) -> Appointment:
        """Update an appointment."""
        update_data = appointment_changes(appointment_data)
        for field, value in update_data.items():
            setattr(appointment, field, value)
        await self.db.flush()
        return await self.get_appointment_by_id(appointment.id)

    async def delete_appointment(self, appointment: Appointment) -> None:
        """Delete an appointment."""
        await self.db.delete(appointment)
        await self.db.flush()
