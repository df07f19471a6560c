"""
FastAPI dependency injection.

How this works:
- An endpoint declares `scheduler: PrinterScheduler = Depends(get_scheduler)`
- FastAPI calls get_scheduler() before your endpoint runs
- Your endpoint receives the one engine instance created at startup

The engine is NOT a module-level global: the lifespan in api/main.py builds
it and stores it on app.state, so each app (and each test client) gets its
own printer.
"""

from fastapi import Request

from scheduler.engine import PrinterScheduler


def get_scheduler(request: Request) -> PrinterScheduler:
    """Returns the engine stored on the app during startup."""
    return request.app.state.scheduler
