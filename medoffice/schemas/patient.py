from pydantic import BaseModel, Field
import datetime as dt


class PatientBase(BaseModel):
    """Base patient schema."""
    name: str = Field(..., min_length=1, max_length=100, description="Patient full name")
    dob: dt.date | None = Field(None, description="Date of birth (YYYY-MM-DD)")
    phone: str | None = Field(None, max_length=30)
    email: str | None = Field(None, max_length=255)
    medical_history: str | None = Field(None, description="Free-text medical history")


class PatientCreate(PatientBase):
    """Schema for creating a patient."""
    pass


class PatientUpdate(BaseModel):
    """Schema for updating a patient."""
    name: str | None = Field(None, min_length=1, max_length=100)
    dob: dt.date | None = None
    phone: str | None = Field(None, max_length=30)
    email: str | None = Field(None, max_length=255)
    medical_history: str | None = None


class PatientResponse(PatientBase):
    """Schema for patient response."""
    id: str
    doctor_id: str
    created_at: dt.datetime

    class Config:
        from_attributes = True
