"""
Error kinds raised by the scheduling engine.

None of these are fatal. Each one means "the requested transition does not
apply right now" and is raised before any state is touched, so the caller
can report it and carry on.
"""


class SchedulerError(Exception):
    """Base class for every error the engine raises."""


class InvalidArgument(SchedulerError):
    """Submission parameters are malformed or out of range."""


class NoExecutingJob(SchedulerError):
    """block/complete requested while the printer is idle."""

    def __init__(self, message: str = "No job is currently executing"):
        super().__init__(message)


class NoBlockedJobs(SchedulerError):
    """unblock requested with an empty blocked queue."""

    def __init__(self, message: str = "No blocked jobs"):
        super().__init__(message)


class NoReadyJob(SchedulerError):
    """dispatch requested with an empty ready queue."""

    def __init__(self, message: str = "No ready jobs to execute"):
        super().__init__(message)


class SlotOccupied(SchedulerError):
    """dispatch requested while another job still holds the printer."""

    def __init__(self, job_id: int):
        super().__init__(f"Job {job_id} is already executing")
        self.job_id = job_id
