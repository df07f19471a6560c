"""
Ready queue: the sole source of the next job to print.

Jobs with the lowest priority NUMBER come out first. Equal priorities keep
their relative order: whoever was inserted (or re-inserted by unblock)
earlier stays ahead.

Data structure: a plain list, fully re-sorted after every insertion.
Python's sort is stable, so re-sorting by priority alone never reorders
two jobs with the same priority. A heap would be faster, but the queue has
to be shown in order after every command, and a heap only keeps its
minimum in place.

- enqueue: append + stable sort → O(n log n)
- dequeue: pop from the front  → O(n)
"""

from typing import Iterable, Iterator, Optional

from models.job import Job
from scheduler.base import AbstractJobQueue


def _by_priority(job: Job) -> int:
    return job.priority


class ReadyQueue(AbstractJobQueue):

    def __init__(self):
        self._jobs: list[Job] = []

    def enqueue(self, job: Job) -> None:
        self._jobs.append(job)
        self._jobs.sort(key=_by_priority)

    def extend(self, jobs: Iterable[Job]) -> None:
        """Append a batch in the given order, then re-sort once."""
        self._jobs.extend(jobs)
        self._jobs.sort(key=_by_priority)

    def dequeue(self) -> Optional[Job]:
        return self._jobs.pop(0) if self._jobs else None

    def peek(self) -> Optional[Job]:
        return self._jobs[0] if self._jobs else None

    def size(self) -> int:
        return len(self._jobs)

    def __iter__(self) -> Iterator[Job]:
        return iter(list(self._jobs))
