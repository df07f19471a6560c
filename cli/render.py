"""
Text rendering for the console.

Pure functions from engine state to lines of text: no printing here, so
the dispatcher decides where output goes and tests can compare strings.
"""

from models.job import Job
from scheduler.engine import SchedulerSnapshot

# ANSI SGR codes
RED = "31"
GREEN = "32"
YELLOW = "33"
BLUE = "34"

HELP_LINES = [
    "Available commands:",
    "  add <name> <priority> <estimatedTime>",
    "  block",
    "  unblock",
    "  execute",
    "  done",
    "  view <processId>",
    "  help",
    "  exit",
]


def paint(text: str, color: str, enabled: bool = True) -> str:
    if not enabled:
        return text
    return f"\033[{color}m{text}\033[0m"


def _ids(ids: list[int]) -> str:
    return ", ".join(str(i) for i in ids)


def render_snapshot(snap: SchedulerSnapshot) -> list[str]:
    executing = snap.executing if snap.executing is not None else "None"
    return [
        f"Ready Queue: {_ids(snap.ready)}",
        f"Blocked Queue: {_ids(snap.blocked)}",
        f"Executing Process: {executing}",
    ]


def render_job(job: Job) -> list[str]:
    return [
        f"Process ID: {job.id}",
        f"Name: {job.name}",
        f"Priority: {job.priority}",
        f"Owner: {job.owner}",
        f"Estimated Time: {job.estimated_duration}",
        f"Status: {job.status_label}",
    ]
