"""Patient service - Business logic for patient records."""

from sqlalchemy import select, func
from sqlalchemy.ext.asyncio import AsyncSession

from medoffice.models.patient import Patient
from medoffice.schemas.patient import PatientCreate, PatientUpdate
from medoffice.session import SessionContext


class PatientService:
    """Service class for patient operations, scoped to one doctor."""

    def __init__(self, db: AsyncSession, context: SessionContext):
        self.db = db
        self.context = context

    async def list_patients(self) -> list[Patient]:
        """Get all patients, newest first."""
        result = await self.db.execute(
            select(Patient)
            .where(Patient.doctor_id == self.context.doctor_id)
            .order_by(Patient.created_at.desc())
        )
        return list(result.scalars().all())

    async def count_patients(self) -> int:
        result = await self.db.execute(
            select(func.count(Patient.id)).where(Patient.doctor_id == self.context.doctor_id)
        )
        return result.scalar_one()

    async def get_patient(self, patient_id: str) -> Patient | None:
        """Get a patient by ID."""
        patient = await self.db.get(Patient, patient_id)
        if patient is None or patient.doctor_id != self.context.doctor_id:
            return None
        return patient

    async def create_patient(self, patient_data: PatientCreate) -> Patient:
        """Create a new patient."""
        patient = Patient(doctor_id=self.context.doctor_id, **patient_data.model_dump())
        self.db.add(patient)
        await self.db.flush()
        await self.db.refresh(patient)
        return patient

    async def update_patient(self, patient: Patient, patient_data: PatientUpdate) -> Patient:
        """Update a patient."""
        update_data = patient_data.model_dump(exclude_unset=True)
        for field, value in update_data.items():
            if field == "name" and value is None:
                continue
            setattr(patient, field, value)
        await self.db.flush()
        await self.db.refresh(patient)
        return patient

    async def delete_patient(self, patient: Patient) -> None:
        """Delete a patient together with their appointments."""
        await self.db.delete(patient)
        await self.db.flush()
