"""
Job entity and the submission model that validates it.

Key design decisions:
- Integer ids handed out by the scheduler from a monotonic counter,
  never reused for the lifetime of the process
- priority: lower number = dispatched earlier
- estimated_duration: logical time units, metadata only (nothing sleeps on it)
- status is written only by the scheduler, when it moves the job between
  the ready queue, the blocked queue and the executing slot
"""

import re
from dataclasses import dataclass

from pydantic import BaseModel, Field, field_validator

from models.enums import JobStatus

_INTEGER_TEXT = re.compile(r"[+-]?\d+")


class JobSubmission(BaseModel):
    """
    Validated arguments for a new job.

    Console arguments arrive as text, so integer text like "3" or "-2" is
    accepted. Anything pydantic would otherwise coerce ("3.0", " 4 ",
    "1_0", 2.0, True) is rejected before it gets the chance.
    """

    name: str = Field(..., min_length=1, max_length=255)
    priority: int
    estimated_duration: int = Field(..., gt=0)
    owner: str = Field(..., min_length=1)

    @field_validator("priority", "estimated_duration", mode="before")
    @classmethod
    def well_formed_integer(cls, value):
        if isinstance(value, bool) or not isinstance(value, (int, str)):
            raise ValueError("must be an integer")
        if isinstance(value, str) and not _INTEGER_TEXT.fullmatch(value):
            raise ValueError(f"{value!r} is not an integer")
        return value


@dataclass
class Job:
    id: int
    name: str
    priority: int
    owner: str
    estimated_duration: int
    status: JobStatus = JobStatus.READY
    submitted_at: int = 0   # logical tick at which the job was accepted

    @property
    def status_label(self) -> str:
        return self.status.label

    def __repr__(self) -> str:
        return f"<Job {self.id} [{self.name}] p={self.priority} {self.status.value}>"
