from pydantic import BaseModel, Field
import datetime as dt
from medoffice.models.appointment import AppointmentStatus


class AppointmentBase(BaseModel):
    """Base appointment schema."""
    patient_id: str = Field(..., description="Patient ID")
    date: dt.date = Field(..., description="Appointment date (YYYY-MM-DD)")
    time: dt.time = Field(..., description="Appointment time (HH:MM)")
    reason: str = Field(..., min_length=1, description="Reason for the visit")
    notes: str | None = Field(None, description="Optional notes")


class AppointmentCreate(AppointmentBase):
    """Schema for creating an appointment."""
    status: AppointmentStatus = AppointmentStatus.PENDING


class AppointmentUpdate(BaseModel):
    """Schema for updating an appointment."""
    patient_id: str | None = None
    date: dt.date | None = None
    time: dt.time | None = None
    reason: str | None = Field(None, min_length=1)
    notes: str | None = None
    status: AppointmentStatus | None = None


class AppointmentResponse(AppointmentBase):
    """Schema for appointment response."""
    id: str
    doctor_id: str
    patient_name: str
    status: AppointmentStatus
    created_at: dt.datetime

    class Config:
        from_attributes = True
