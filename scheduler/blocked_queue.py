"""
Blocked queue: jobs parked by `block` until the next `unblock`.

Order here is not scheduling-significant: blocked jobs are appended as
they arrive (FIFO) and only get ordered when they are released, by
drain_by_priority().

Data structure: collections.deque
- enqueue: append to right → O(1)
- dequeue: pop from left   → O(1)
"""

from collections import deque
from typing import Iterator, Optional

from models.job import Job
from scheduler.base import AbstractJobQueue


class BlockedQueue(AbstractJobQueue):

    def __init__(self):
        self._queue: deque[Job] = deque()

    def enqueue(self, job: Job) -> None:
        self._queue.append(job)

    def dequeue(self) -> Optional[Job]:
        return self._queue.popleft() if self._queue else None

    def drain_by_priority(self) -> list[Job]:
        """
        Empty the queue and return its jobs sorted by priority.

        The sort is stable: blocked jobs with equal priority come back in
        the order they were blocked.
        """
        jobs = sorted(self._queue, key=lambda job: job.priority)
        self._queue.clear()
        return jobs

    def peek(self) -> Optional[Job]:
        return self._queue[0] if self._queue else None

    def size(self) -> int:
        return len(self._queue)

    def __iter__(self) -> Iterator[Job]:
        return iter(list(self._queue))
