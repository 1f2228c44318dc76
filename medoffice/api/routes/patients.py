"""Patient routes - API endpoints for patient records."""

from fastapi import APIRouter, HTTPException

from medoffice.api.deps import Patients
from medoffice.schemas.patient import PatientCreate, PatientUpdate, PatientResponse

router = APIRouter()


@router.get("/", response_model=list[PatientResponse])
async def list_patients(service: Patients):
    """Get all patients, newest first."""
    return await service.list_patients()


@router.post("/", response_model=PatientResponse, status_code=201)
async def create_patient(patient_data: PatientCreate, service: Patients):
    """Create a new patient."""
    return await service.create_patient(patient_data)


@router.get("/{patient_id}", response_model=PatientResponse)
async def get_patient(patient_id: str, service: Patients):
    """Get a patient by ID."""
    patient = await service.get_patient(patient_id)

    if not patient:
        raise HTTPException(status_code=404, detail="Patient not found")

    return patient


@router.patch("/{patient_id}", response_model=PatientResponse)
async def update_patient(patient_id: str, patient_data: PatientUpdate, service: Patients):
    """Update a patient."""
    patient = await service.get_patient(patient_id)

    if not patient:
        raise HTTPException(status_code=404, detail="Patient not found")

    return await service.update_patient(patient, patient_data)


@router.delete("/{patient_id}", status_code=204)
async def delete_patient(patient_id: str, service: Patients):
    """Delete a patient and their appointments."""
    patient = await service.get_patient(patient_id)

    if not patient:
        raise HTTPException(status_code=404, detail="Patient not found")

    await service.delete_patient(patient)
