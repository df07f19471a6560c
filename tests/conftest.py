"""
Shared test fixtures.

The engine is in-memory, so nothing needs replacing except how the HTTP
app finds it:
- HTTP server → httpx.AsyncClient with ASGI transport (no network)
- app.state.scheduler → a fresh PrinterScheduler per test, injected via
  dependency_overrides (ASGITransport does not run the lifespan)
"""

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

from api.main import create_app
from api.dependencies import get_scheduler
from scheduler.engine import PrinterScheduler


@pytest.fixture
def scheduler():
    """A fresh engine with auto-fill on and a fixed default owner."""
    return PrinterScheduler(auto_fill=True, default_owner="Console User")


@pytest.fixture
def abc_scheduler(scheduler):
    """
    Engine with A(priority=3), B(priority=1), C(priority=2) submitted in
    that order, so ids are A=1, B=2, C=3 and the ready queue is [B, C, A].
    """
    scheduler.submit("A", 3, 5)
    scheduler.submit("B", 1, 5)
    scheduler.submit("C", 2, 5)
    return scheduler


@pytest_asyncio.fixture
async def client(scheduler):
    """
    Create a test HTTP client that talks directly to the FastAPI app.

    dependency_overrides tells FastAPI: "instead of the engine on
    app.state, use this test's engine." Tests can then assert on the
    engine directly as well as through the API.
    """
    app = create_app()
    app.dependency_overrides[get_scheduler] = lambda: scheduler

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c
