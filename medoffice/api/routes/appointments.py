"""Appointment routes - API endpoints for appointment operations."""

import datetime as dt

from fastapi import APIRouter, HTTPException

from medoffice.api.deps import Appointments
from medoffice.schemas.appointment import (
    AppointmentCreate,
    AppointmentUpdate,
    AppointmentResponse,
)

router = APIRouter()


@router.get("/", response_model=list[AppointmentResponse])
async def list_appointments(
    service: Appointments,
    start_date: dt.date | None = None,
    end_date: dt.date | None = None,
):
    """Get appointments ordered by date and time, optionally within a date range."""
    if start_date and end_date and start_date > end_date:
        raise HTTPException(status_code=422, detail="start_date must not be after end_date")
    return await service.list_appointments(start_date, end_date)


@router.post("/", response_model=AppointmentResponse, status_code=201)
async def create_appointment(appointment_data: AppointmentCreate, service: Appointments):
    """Create a new appointment."""
    if not await service.patient_exists(appointment_data.patient_id):
        raise HTTPException(status_code=404, detail="Patient not found")

    return await service.create_appointment(appointment_data)


@router.get("/{appointment_id}", response_model=AppointmentResponse)
async def get_appointment(appointment_id: str, service: Appointments):
    """Get an appointment by ID."""
    appointment = await service.get_appointment_by_id(appointment_id)

    if not appointment:
        raise HTTPException(status_code=404, detail="Appointment not found")

    return appointment


@router.patch("/{appointment_id}", response_model=AppointmentResponse)
async def update_appointment(
    appointment_id: str,
    appointment_data: AppointmentUpdate,
    service: Appointments,
):
    """Update an appointment (reschedule, change status or notes)."""
    appointment = await service.get_appointment_by_id(appointment_id)

    if not appointment:
        raise HTTPException(status_code=404, detail="Appointment not found")

    if appointment_data.patient_id and not await service.patient_exists(appointment_data.patient_id):
        raise HTTPException(status_code=404, detail="Patient not found")

    return await service.update_appointment(appointment, appointment_data)


@router.delete("/{appointment_id}", status_code=204)
async def delete_appointment(appointment_id: str, service: Appointments):
    """Delete an appointment."""
    appointment = await service.get_appointment_by_id(appointment_id)

    if not appointment:
        raise HTTPException(status_code=404, detail="Appointment not found")

    await service.delete_appointment(appointment)
