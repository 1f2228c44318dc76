import os

# Settings are read at import time; run the app against the demo store
os.environ.setdefault("DEMO_MODE", "1")
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite://")
os.environ.setdefault("LOGFIRE_TOKEN", "")

from datetime import date, time
from types import SimpleNamespace

import pytest
from fastapi.testclient import TestClient

from medoffice.main import app


def make_appointment(day, at="09:00", **fields):
    """A plain appointment record, as the calendar core sees it."""
    defaults = {
        "id": f"appt-{day}-{at}",
        "patient_id": "p-1",
        "patient_name": "John Smith",
        "reason": "Routine checkup",
        "notes": None,
        "status": "confirmed",
    }
    defaults.update(fields)
    return SimpleNamespace(
        date=date.fromisoformat(day) if isinstance(day, str) else day,
        time=time.fromisoformat(at) if isinstance(at, str) else at,
        **defaults,
    )


@pytest.fixture
def appt():
    return make_appointment


@pytest.fixture
def client():
    # Entering the client runs the lifespan, which seeds a fresh demo store
    with TestClient(app) as test_client:
        yield test_client
