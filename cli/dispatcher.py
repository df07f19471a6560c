"""
Console command dispatcher.

Turns one line of text into one engine call and turns the outcome (a job,
or one of the scheduler's error kinds) into messages for the user.

    add <name> <priority> <estimatedTime>  → submit
    block                                  → block
    unblock                                → unblock
    execute                                → dispatch_next
    done                                   → complete
    view <id>                              → inspect
    help / exit                            → handled here

Whenever a command changes engine state, the three queues are printed
after the command's own message. With color on, successes are green,
errors red, blocking yellow and printer/queue lines blue.
"""

import logging
from typing import Callable, Optional

from cli.render import (
    BLUE,
    GREEN,
    HELP_LINES,
    RED,
    YELLOW,
    paint,
    render_job,
    render_snapshot,
)
from scheduler.engine import PrinterScheduler, SchedulerSnapshot
from scheduler.errors import (
    InvalidArgument,
    NoBlockedJobs,
    NoExecutingJob,
    NoReadyJob,
    SlotOccupied,
)

logger = logging.getLogger(__name__)

ADD_USAGE = "Use add <name> <priority> <estimatedTime>"
INVALID_COMMAND = 'Invalid command. Use "help" for a list of available commands.'
NOT_EXECUTING = "No process is currently executing."


def parse_command(line: str) -> Optional[tuple[str, list[str]]]:
    """Split a line into (verb, args). Blank lines give None."""
    parts = line.split()
    if not parts:
        return None
    return parts[0], parts[1:]


class CommandDispatcher:

    def __init__(
        self,
        scheduler: PrinterScheduler,
        out: Callable[[str], None] = print,
        color: bool = False,
    ):
        self._scheduler = scheduler
        self._out = out
        self._color = color
        self._changed: Optional[SchedulerSnapshot] = None
        scheduler.subscribe(self._on_change)
        self._handlers: dict[str, Callable[[list[str]], None]] = {
            "add": self._add,
            "block": self._block,
            "unblock": self._unblock,
            "execute": self._execute,
            "done": self._done,
            "view": self._view,
            "help": self._help,
        }

    def handle(self, line: str) -> bool:
        """
        Run one command line. Returns False once the user asked to exit.
        """
        parsed = parse_command(line)
        if parsed is None:
            return True

        verb, args = parsed
        if verb == "exit":
            self._out("Exiting...")
            return False

        handler = self._handlers.get(verb)
        if handler is None:
            self._say(INVALID_COMMAND, RED)
            return True

        self._changed = None
        handler(args)
        if self._changed is not None:
            for text in render_snapshot(self._changed):
                self._say(text, BLUE)
        return True

    def _on_change(self, snap: SchedulerSnapshot) -> None:
        self._changed = snap

    def _say(self, text: str, color: str) -> None:
        self._out(paint(text, color, self._color))

    # ── Handlers ────────────────────────────────────────────────

    def _add(self, args: list[str]) -> None:
        if len(args) < 3:
            self._say(f"Invalid number of arguments. {ADD_USAGE}", RED)
            return
        name, priority, estimated_time = args[:3]
        try:
            self._scheduler.submit(name, priority, estimated_time)
        except InvalidArgument as e:
            logger.debug(f"add rejected: {e}")
            self._say(f"Invalid priority or estimatedTime. {ADD_USAGE}", RED)
            return
        self._say("Process added to the ready queue.", GREEN)

    def _block(self, args: list[str]) -> None:
        try:
            self._scheduler.block()
        except NoExecutingJob:
            self._say(NOT_EXECUTING, RED)
            return
        self._say("Process blocked.", YELLOW)
        self._report_auto_fill()

    def _unblock(self, args: list[str]) -> None:
        try:
            self._scheduler.unblock()
        except NoBlockedJobs:
            self._say("No blocked processes.", RED)
            return
        self._say("Process unblocked.", GREEN)

    def _execute(self, args: list[str]) -> None:
        try:
            job = self._scheduler.dispatch_next()
        except NoReadyJob:
            self._say("No processes to execute.", RED)
            return
        except SlotOccupied as e:
            self._say(f'Process {e.job_id} is already executing. Use "done" or "block" first.', RED)
            return
        self._say(f"Process executing: {job.name}", BLUE)

    def _done(self, args: list[str]) -> None:
        try:
            job = self._scheduler.complete()
        except NoExecutingJob:
            self._say(NOT_EXECUTING, RED)
            return
        self._say(f"Process finished: {job.name}", GREEN)
        self._report_auto_fill()

    def _view(self, args: list[str]) -> None:
        job = None
        if args:
            try:
                job = self._scheduler.inspect(int(args[0]))
            except ValueError:
                job = None
        if job is None:
            self._say("Process not found.", RED)
            return
        heading, *details = render_job(job)
        self._say(heading, GREEN)
        for text in details:
            self._out(text)

    def _help(self, args: list[str]) -> None:
        for text in HELP_LINES:
            self._out(text)

    def _report_auto_fill(self) -> None:
        job = self._scheduler.executing
        if job is not None:
            self._say(f"Process executing: {job.name}", BLUE)
