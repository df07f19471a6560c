"""
FastAPI application factory.

This file:
1. Creates the FastAPI app
2. Builds the printer's scheduler on startup and attaches it to app.state
3. Registers all routers (jobs, scheduler, health)

The `lifespan` context manager is FastAPI's way of handling startup/shutdown.

To run:  uvicorn api.main:app --host 0.0.0.0 --port 8000
    or:  python -m api.main    (host/port from settings)
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from config.settings import settings
from scheduler.engine import PrinterScheduler
from api.routers import jobs, scheduler, health

logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Startup: one fresh engine per app. Nothing is persisted, so shutdown
    only logs what was still queued.
    """
    app.state.scheduler = PrinterScheduler()
    logger.info(f"API ready (auto-fill on vacancy: {settings.AUTO_FILL_ON_VACANCY})")

    yield

    snap = app.state.scheduler.snapshot()
    logger.info(
        f"API shut down with {len(snap.ready)} ready, {len(snap.blocked)} blocked, "
        f"executing={snap.executing}"
    )


def create_app() -> FastAPI:
    """Factory function that builds and configures the FastAPI application."""
    app = FastAPI(
        title="Printer Scheduler",
        description="Single-printer job scheduler: priority ready queue, blocked queue, one executing slot",
        version="1.0.0",
        lifespan=lifespan,
    )

    app.include_router(health.router)
    app.include_router(jobs.router)
    app.include_router(scheduler.router)

    return app


# This is what uvicorn imports: `uvicorn api.main:app`
app = create_app()


if __name__ == "__main__":
    uvicorn.run(app, host=settings.API_HOST, port=settings.API_PORT)
