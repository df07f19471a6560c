"""
Shared enumerations used across the entire project.

Using Python enums (inheriting from str) means:
- They serialize to JSON automatically ("READY", not "JobStatus.READY")
- They work as FastAPI response fields
- Typos become immediate errors instead of silent bugs
"""

import enum


class JobStatus(str, enum.Enum):
    READY = "READY"            # waiting in the ready queue
    BLOCKED = "BLOCKED"        # parked in the blocked queue until unblock
    EXECUTING = "EXECUTING"    # occupying the printer
    DONE = "DONE"              # finished, no longer tracked

    @property
    def label(self) -> str:
        """Display form used by the console ("Ready", "Blocked", ...)."""
        return self.value.capitalize()
