"""
Pydantic schemas for the /scheduler endpoints.

SchedulerStatus: where every tracked job currently is.
"""

from typing import Optional

from pydantic import BaseModel


class SchedulerStatus(BaseModel):
    """Response body for GET /scheduler/status."""

    ready: list[int]            # job ids, in dispatch order
    blocked: list[int]          # job ids, in blocking order
    executing: Optional[int]    # job id on the printer, if any
    tick: int                   # logical clock, one step per state change

    model_config = {"from_attributes": True}
