"""Doctor routes - the signed-in doctor's profile."""

from fastapi import APIRouter, HTTPException

from medoffice.api.deps import Doctors
from medoffice.schemas.doctor import DoctorCreate, DoctorResponse

router = APIRouter()


@router.get("/me", response_model=DoctorResponse)
async def get_my_profile(service: Doctors):
    """Get the signed-in doctor's profile."""
    doctor = await service.get_profile()

    if not doctor:
        raise HTTPException(status_code=404, detail="Doctor profile not found")

    return doctor


@router.post("/me", response_model=DoctorResponse, status_code=201)
async def create_my_profile(doctor_data: DoctorCreate, service: Doctors):
    """Create the signed-in doctor's profile."""
    if not service.context.demo_mode and await service.get_profile():
        raise HTTPException(status_code=409, detail="Doctor profile already exists")

    return await service.create_profile(doctor_data)
