from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
import logfire

from medoffice.config import settings
from medoffice.database import init_db, close_db
from medoffice.errors import DataAccessError, ExportFailure, InvalidArgument
from medoffice.api import api_router
from medoffice.services.demo import DemoStore

# Initialize Logfire - auto-instruments FastAPI
if settings.logfire_token:
    logfire.configure(
        token=settings.logfire_token,
        service_name="medoffice-calendar",
        environment=settings.app_env,
        console=False,  # Disable console logging (too verbose)
    )
    print("✅ Logfire initialized")
else:
    print("⚠️ Logfire token not set - observability disabled")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    # Startup
    print("🚀 Starting MedOffice Calendar API...")
    if settings.demo_mode:
        app.state.demo_store = DemoStore.seeded(settings.demo_doctor_id)
        print("🧪 Demo mode - using in-memory data")
    else:
        await init_db()
        print("✅ Database initialized")

    yield

    # Shutdown
    print("👋 Shutting down...")
    if not settings.demo_mode:
        await close_db()
        print("✅ Database connections closed")


app = FastAPI(
    title=settings.app_name,
    description="Patient records, appointment scheduling and calendar export for a medical office",
    version="1.0.0",
    lifespan=lifespan,
)

# Instrument FastAPI with Logfire
if settings.logfire_token:
    logfire.instrument_fastapi(app)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(InvalidArgument)
async def handle_invalid_argument(request: Request, exc: InvalidArgument):
    return JSONResponse(status_code=422, content={"detail": exc.message})


@app.exception_handler(ExportFailure)
async def handle_export_failure(request: Request, exc: ExportFailure):
    logfire.error("export_failure_response", path=request.url.path, error=exc.message)
    return JSONResponse(
        status_code=500,
        content={"detail": "Export failed, please retry.", "retryable": True},
    )


@app.exception_handler(DataAccessError)
async def handle_data_access(request: Request, exc: DataAccessError):
    logfire.error("data_access_error", path=request.url.path, error=exc.message)
    return JSONResponse(
        status_code=503,
        content={"detail": "The data service is unavailable, please retry.", "retryable": True},
    )


# Include API routes
app.include_router(api_router, prefix="/api")


@app.get("/")
async def root():
    """Health check endpoint."""
    return {
        "status": "healthy",
        "app": settings.app_name,
        "version": "1.0.0",
    }


@app.get("/health")
async def health_check():
    """Detailed health check."""
    return {
        "status": "healthy",
        "data_backend": "demo" if settings.demo_mode else "database",
    }
