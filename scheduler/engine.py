"""
Printer scheduler engine: the core state machine.

The engine owns three places a job can be:

         submit                 dispatch_next
    ─────────────> ready queue ──────────────> executing slot ──complete──> (discarded)
                       ^                          │
                       │ unblock                  │ block
                       └────── blocked queue <────┘

Per job:  READY → EXECUTING → BLOCKED → READY ...  and  EXECUTING → DONE.
There is no edge from BLOCKED straight to EXECUTING or DONE: a blocked job
goes back through the ready queue.

Every operation either applies its whole transition or raises a
SchedulerError before touching state. All of them take the same lock, so
the engine can be shared by the HTTP app's worker threads.

Auto-fill on vacancy: when block() or complete() frees the executing slot,
the engine immediately dispatches the next ready job so the printer never
sits idle while work is waiting. An empty ready queue at that point just
leaves the slot empty; it is not an error for the caller.
"""

import logging
import threading
from dataclasses import dataclass, field
from typing import Callable, Optional

from pydantic import ValidationError

from config.settings import settings
from models.enums import JobStatus
from models.job import Job, JobSubmission
from scheduler.blocked_queue import BlockedQueue
from scheduler.errors import (
    InvalidArgument,
    NoBlockedJobs,
    NoExecutingJob,
    NoReadyJob,
    SlotOccupied,
)
from scheduler.ready_queue import ReadyQueue

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SchedulerSnapshot:
    """Read-only view of where every tracked job is, for display."""
    ready: list[int] = field(default_factory=list)
    blocked: list[int] = field(default_factory=list)
    executing: Optional[int] = None
    tick: int = 0


SnapshotListener = Callable[[SchedulerSnapshot], None]


class PrinterScheduler:
    """
    One printer, one executing slot, two queues.

    Construct one per hosting process (console or HTTP app) and pass it to
    whatever issues commands. Nothing here parses text or prints.
    """

    def __init__(
        self,
        auto_fill: bool = settings.AUTO_FILL_ON_VACANCY,
        default_owner: str = settings.DEFAULT_OWNER,
    ):
        self._ready = ReadyQueue()
        self._blocked = BlockedQueue()
        self._executing: Optional[Job] = None
        self._next_id = 1
        self._tick = 0
        self._auto_fill = auto_fill
        self._default_owner = default_owner
        self._listeners: list[SnapshotListener] = []
        self._lock = threading.RLock()

    # ── Read-only views ─────────────────────────────────────────

    @property
    def executing(self) -> Optional[Job]:
        return self._executing

    @property
    def ready_jobs(self) -> list[Job]:
        return list(self._ready)

    @property
    def blocked_jobs(self) -> list[Job]:
        return list(self._blocked)

    @property
    def tick(self) -> int:
        return self._tick

    def snapshot(self) -> SchedulerSnapshot:
        with self._lock:
            return SchedulerSnapshot(
                ready=self._ready.ids(),
                blocked=self._blocked.ids(),
                executing=self._executing.id if self._executing else None,
                tick=self._tick,
            )

    def subscribe(self, listener: SnapshotListener) -> None:
        """
        Call `listener` with a fresh snapshot after every state change.

        A listener that raises is logged and skipped; the operation that
        triggered it still returns normally.
        """
        self._listeners.append(listener)

    def inspect(self, job_id: int) -> Optional[Job]:
        """
        Find a tracked job by id, wherever it currently is.

        Completed jobs are discarded, so they are never found.
        """
        with self._lock:
            if self._executing is not None and self._executing.id == job_id:
                return self._executing
            return self._ready.find(job_id) or self._blocked.find(job_id)

    # ── Transitions ─────────────────────────────────────────────

    def submit(
        self,
        name: str,
        priority: int | str,
        estimated_duration: int | str,
        owner: Optional[str] = None,
    ) -> Job:
        """
        Create a READY job and place it in the ready queue by priority.

        Raises InvalidArgument (and changes nothing, not even the id
        counter) if priority or estimated_duration is not an integer, or
        the duration is not positive.
        """
        try:
            submission = JobSubmission(
                name=name,
                priority=priority,
                estimated_duration=estimated_duration,
                owner=owner or self._default_owner,
            )
        except ValidationError as e:
            logger.info(f"Rejected submission {name!r}: {e.error_count()} invalid field(s)")
            raise InvalidArgument(_describe(e)) from e

        with self._lock:
            self._tick += 1
            job = Job(
                id=self._next_id,
                name=submission.name,
                priority=submission.priority,
                owner=submission.owner,
                estimated_duration=submission.estimated_duration,
                status=JobStatus.READY,
                submitted_at=self._tick,
            )
            self._next_id += 1
            self._ready.enqueue(job)
            logger.info(f"Submitted job {job.id} ({job.name}) with priority {job.priority}")
            self._publish()
            return job

    def dispatch_next(self) -> Job:
        """
        Move the front of the ready queue into the executing slot.

        Raises NoReadyJob if nothing is ready, SlotOccupied if the printer
        is still busy (block or complete the current job first).
        """
        with self._lock:
            job = self._dispatch()
            self._tick += 1
            self._publish()
            return job

    def block(self) -> Job:
        """
        Park the executing job at the end of the blocked queue.

        Then fill the vacancy from the ready queue if auto-fill is on.
        Returns the job that was blocked.
        """
        with self._lock:
            job = self._release(JobStatus.BLOCKED)
            self._blocked.enqueue(job)
            logger.info(f"Blocked job {job.id} ({job.name})")
            self._fill_vacancy()
            self._tick += 1
            self._publish()
            return job

    def unblock(self) -> list[Job]:
        """
        Release every blocked job back into the ready queue.

        Blocked jobs are ordered by priority, appended behind the current
        ready jobs, and the whole ready queue is re-sorted so both groups
        interleave by priority. Does not dispatch anything.
        """
        with self._lock:
            if self._blocked.size() == 0:
                raise NoBlockedJobs()
            released = self._blocked.drain_by_priority()
            for job in released:
                job.status = JobStatus.READY
            self._ready.extend(released)
            logger.info(f"Unblocked {len(released)} job(s): {[job.id for job in released]}")
            self._tick += 1
            self._publish()
            return released

    def complete(self) -> Job:
        """
        Finish the executing job and stop tracking it.

        Then fill the vacancy from the ready queue if auto-fill is on.
        Returns the finished job (status DONE).
        """
        with self._lock:
            job = self._release(JobStatus.DONE)
            logger.info(f"Completed job {job.id} ({job.name})")
            self._fill_vacancy()
            self._tick += 1
            self._publish()
            return job

    # ── Internals ───────────────────────────────────────────────

    def _dispatch(self) -> Job:
        if self._executing is not None:
            raise SlotOccupied(self._executing.id)
        job = self._ready.dequeue()
        if job is None:
            raise NoReadyJob()
        job.status = JobStatus.EXECUTING
        self._executing = job
        logger.info(f"Executing job {job.id} ({job.name})")
        return job

    def _release(self, status: JobStatus) -> Job:
        """Empty the executing slot, stamping the job with its new status."""
        job = self._executing
        if job is None:
            raise NoExecutingJob()
        job.status = status
        self._executing = None
        return job

    def _fill_vacancy(self) -> None:
        if not self._auto_fill:
            return
        try:
            self._dispatch()
        except NoReadyJob:
            logger.debug("Printer idle: ready queue is empty")

    def _publish(self) -> None:
        snap = self.snapshot()
        for listener in self._listeners:
            try:
                listener(snap)
            except Exception:
                # the transition already happened, so report it as done
                logger.exception(f"Snapshot listener {listener!r} failed at tick {snap.tick}")


def _describe(error: ValidationError) -> str:
    """One line per bad field, e.g. 'estimated_duration: Input should be greater than 0'."""
    return "; ".join(
        f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}"
        for err in error.errors()
    )
