"""
Job endpoints.

POST /jobs/          → Submit a new job (enters the ready queue)
GET  /jobs/{job_id}  → Inspect a tracked job (ready, blocked or executing)

Completed jobs are discarded by the engine, so looking one up gives 404.

Endpoints are plain `def`: FastAPI runs them in its thread pool, and the
engine's lock serializes them.
"""

from fastapi import APIRouter, Depends, HTTPException

from api.dependencies import get_scheduler
from api.schemas.job import JobCreate, JobResponse
from scheduler.engine import PrinterScheduler
from scheduler.errors import InvalidArgument

router = APIRouter(prefix="/jobs", tags=["jobs"])


@router.post("/", response_model=JobResponse, status_code=201)
def create_job(
    job_in: JobCreate,
    scheduler: PrinterScheduler = Depends(get_scheduler),
) -> JobResponse:
    """Submit a new job with status READY."""
    try:
        job = scheduler.submit(
            name=job_in.name,
            priority=job_in.priority,
            estimated_duration=job_in.estimated_duration,
            owner=job_in.owner,
        )
    except InvalidArgument as e:
        raise HTTPException(status_code=422, detail=str(e))
    return JobResponse.model_validate(job)


@router.get("/{job_id}", response_model=JobResponse)
def get_job(
    job_id: int,
    scheduler: PrinterScheduler = Depends(get_scheduler),
) -> JobResponse:
    """Get a single tracked job by id."""
    job = scheduler.inspect(job_id)
    if job is None:
        raise HTTPException(status_code=404, detail=f"Job {job_id} not found")
    return JobResponse.model_validate(job)
