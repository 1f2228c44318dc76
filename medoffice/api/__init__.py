from fastapi import APIRouter
from medoffice.api.routes import doctors, patients, appointments, calendar, dashboard

api_router = APIRouter()

api_router.include_router(doctors.router, prefix="/doctors", tags=["Doctors"])
api_router.include_router(patients.router, prefix="/patients", tags=["Patients"])
api_router.include_router(appointments.router, prefix="/appointments", tags=["Appointments"])
api_router.include_router(calendar.router, prefix="/calendar", tags=["Calendar"])
api_router.include_router(dashboard.router, prefix="/dashboard", tags=["Dashboard"])
