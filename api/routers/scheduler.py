"""
Scheduler control endpoints.

POST /scheduler/execute → dispatch the next ready job onto the printer
POST /scheduler/block   → park the executing job (then auto-fill)
POST /scheduler/unblock → release every blocked job back to the ready queue
POST /scheduler/done    → complete the executing job (then auto-fill)
GET  /scheduler/status  → ready / blocked / executing ids

A transition that doesn't apply right now (nothing executing, nothing
blocked, nothing ready, printer busy) is a 409 Conflict: the request was
well-formed, the printer's state just doesn't allow it.
"""

from fastapi import APIRouter, Depends, HTTPException

from api.dependencies import get_scheduler
from api.schemas.job import JobResponse
from api.schemas.scheduler import SchedulerStatus
from scheduler.engine import PrinterScheduler
from scheduler.errors import SchedulerError

router = APIRouter(prefix="/scheduler", tags=["scheduler"])


def _conflict(e: SchedulerError) -> HTTPException:
    return HTTPException(status_code=409, detail=str(e))


@router.post("/execute", response_model=JobResponse)
def execute_next(
    scheduler: PrinterScheduler = Depends(get_scheduler),
) -> JobResponse:
    try:
        job = scheduler.dispatch_next()
    except SchedulerError as e:
        raise _conflict(e)
    return JobResponse.model_validate(job)


@router.post("/block", response_model=JobResponse)
def block_executing(
    scheduler: PrinterScheduler = Depends(get_scheduler),
) -> JobResponse:
    """Returns the job that was blocked, not the one auto-filled in."""
    try:
        job = scheduler.block()
    except SchedulerError as e:
        raise _conflict(e)
    return JobResponse.model_validate(job)


@router.post("/unblock", response_model=list[JobResponse])
def unblock_all(
    scheduler: PrinterScheduler = Depends(get_scheduler),
) -> list[JobResponse]:
    try:
        jobs = scheduler.unblock()
    except SchedulerError as e:
        raise _conflict(e)
    return [JobResponse.model_validate(job) for job in jobs]


@router.post("/done", response_model=JobResponse)
def complete_executing(
    scheduler: PrinterScheduler = Depends(get_scheduler),
) -> JobResponse:
    try:
        job = scheduler.complete()
    except SchedulerError as e:
        raise _conflict(e)
    return JobResponse.model_validate(job)


@router.get("/status", response_model=SchedulerStatus)
def get_scheduler_status(
    scheduler: PrinterScheduler = Depends(get_scheduler),
) -> SchedulerStatus:
    return SchedulerStatus.model_validate(scheduler.snapshot())
