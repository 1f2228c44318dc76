from pydantic import BaseModel, Field
from datetime import datetime


class DoctorCreate(BaseModel):
    """Schema for creating the signed-in doctor's profile."""
    name: str = Field(..., min_length=1, max_length=100, description="Display name")
    email: str = Field(..., min_length=3, max_length=255, description="Contact email")


class DoctorResponse(BaseModel):
    """Schema for doctor response."""
    id: str
    name: str
    email: str
    created_at: datetime

    class Config:
        from_attributes = True
