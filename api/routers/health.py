"""
Health check endpoint.

The engine is in-process, so "healthy" only means the app started and the
scheduler is attached to it.
"""

from fastapi import APIRouter, Depends

from api.dependencies import get_scheduler
from scheduler.engine import PrinterScheduler

router = APIRouter(tags=["health"])


@router.get("/health")
def health_check(
    scheduler: PrinterScheduler = Depends(get_scheduler),
) -> dict:
    return {"status": "healthy", "tick": scheduler.tick}
