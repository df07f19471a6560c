"""
Pydantic schemas for the /jobs endpoints.

These define the HTTP API contract:
- JobCreate: what the user sends when submitting a job (request body)
- JobResponse: what we send back for a single job (response body)

FastAPI validates incoming data against these automatically.
If someone sends estimated_duration=0, FastAPI returns a 422 error before our code even runs.
"""

from typing import Optional

from pydantic import BaseModel, Field

from models.enums import JobStatus


class JobCreate(BaseModel):
    """Request body for POST /jobs/."""

    name: str = Field(
        ...,
        min_length=1,
        max_length=255,
        examples=["quarterly-report.pdf"],
    )
    priority: int = Field(
        ...,
        strict=True,  # JSON ints only: no 2.0, true or "3"
        description="Lower number = printed earlier",
    )
    estimated_duration: int = Field(
        ...,
        strict=True,
        gt=0,  # must be positive
        description="Estimated logical time units to print",
    )
    owner: Optional[str] = Field(
        default=None,
        min_length=1,
        description="Submitting user; defaults to the configured DEFAULT_OWNER",
    )


class JobResponse(BaseModel):
    """Response body for a single job."""

    id: int
    name: str
    priority: int
    owner: str
    estimated_duration: int
    status: JobStatus
    submitted_at: int

    # from_attributes=True lets Pydantic read straight from the Job dataclass
    model_config = {"from_attributes": True}
