"""Doctor service - Business logic for the signed-in doctor's profile."""

from sqlalchemy.ext.asyncio import AsyncSession

from medoffice.models.doctor import Doctor
from medoffice.schemas.doctor import DoctorCreate
from medoffice.session import SessionContext


class DoctorService:
    """Service class for doctor profile operations."""

    def __init__(self, db: AsyncSession, context: SessionContext):
        self.db = db
        self.context = context

    async def get_profile(self) -> Doctor | None:
        """Get the signed-in doctor's profile."""
        return await self.db.get(Doctor, self.context.doctor_id)

    async def create_profile(self, doctor_data: DoctorCreate) -> Doctor:
        """Create the profile for the signed-in doctor."""
        doctor = Doctor(id=self.context.doctor_id, **doctor_data.model_dump())
        self.db.add(doctor)
        await self.db.flush()
        await self.db.refresh(doctor)
        return doctor
