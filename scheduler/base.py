"""
Abstract base class for the printer's job queues.

The engine holds two queues (ready and blocked) and only talks to them
through this interface: enqueue() adds a job, dequeue() removes the next
one according to the queue's own ordering rule. The ordering rule is the
only thing that differs between the two implementations.
"""

from abc import ABC, abstractmethod
from typing import Iterator, Optional

from models.job import Job


class AbstractJobQueue(ABC):
    """
    Interface that every job queue implements.

    - enqueue: add a job
    - dequeue: remove and return the next job (according to this queue's rules)
    - peek: look at the next job without removing it
    - size: how many jobs are queued
    - iteration yields jobs in dequeue order without consuming them
    """

    @abstractmethod
    def enqueue(self, job: Job) -> None:
        """Add a job to this queue."""
        ...

    @abstractmethod
    def dequeue(self) -> Optional[Job]:
        """Remove and return the next job, or None if empty."""
        ...

    @abstractmethod
    def peek(self) -> Optional[Job]:
        """View the next job without removing it. Returns None if empty."""
        ...

    @abstractmethod
    def size(self) -> int:
        """Return the number of jobs currently in the queue."""
        ...

    @abstractmethod
    def __iter__(self) -> Iterator[Job]:
        ...

    def __len__(self) -> int:
        return self.size()

    def find(self, job_id: int) -> Optional[Job]:
        return next((job for job in self if job.id == job_id), None)

    def ids(self) -> list[int]:
        return [job.id for job in self]
