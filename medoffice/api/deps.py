"""Shared FastAPI dependencies."""

from typing import Annotated, AsyncIterator

from fastapi import Depends, Header, HTTPException, Request

from medoffice.config import settings
from medoffice.database import session_scope
from medoffice.services import (
    AppointmentService,
    DemoAppointmentService,
    DemoDoctorService,
    DemoPatientService,
    DoctorService,
    ExportService,
    PatientService,
)
from medoffice.session import SessionContext


def get_session_context(
    x_doctor_id: Annotated[str | None, Header()] = None,
) -> SessionContext:
    """Build the session context from the auth gateway's doctor header."""
    if settings.demo_mode:
        return SessionContext(doctor_id=x_doctor_id or settings.demo_doctor_id, demo_mode=True)
    if not x_doctor_id:
        raise HTTPException(status_code=401, detail="User not authenticated")
    return SessionContext(doctor_id=x_doctor_id)


Context = Annotated[SessionContext, Depends(get_session_context)]


async def get_doctor_service(
    request: Request, context: Context
) -> AsyncIterator[DoctorService | DemoDoctorService]:
    if context.demo_mode:
        yield DemoDoctorService(request.app.state.demo_store, context)
        return
    async with session_scope() as db:
        yield DoctorService(db, context)


async def get_patient_service(
    request: Request, context: Context
) -> AsyncIterator[PatientService | DemoPatientService]:
    if context.demo_mode:
        yield DemoPatientService(request.app.state.demo_store, context)
        return
    async with session_scope() as db:
        yield PatientService(db, context)


async def get_appointment_service(
    request: Request, context: Context
) -> AsyncIterator[AppointmentService | DemoAppointmentService]:
    if context.demo_mode:
        yield DemoAppointmentService(request.app.state.demo_store, context)
        return
    async with session_scope() as db:
        yield AppointmentService(db, context)


def get_export_service() -> ExportService:
    return ExportService(font_path=settings.pdf_font_path)


Doctors = Annotated[DoctorService | DemoDoctorService, Depends(get_doctor_service)]
Patients = Annotated[PatientService | DemoPatientService, Depends(get_patient_service)]
Appointments = Annotated[
    AppointmentService | DemoAppointmentService, Depends(get_appointment_service)
]
Exports = Annotated[ExportService, Depends(get_export_service)]
