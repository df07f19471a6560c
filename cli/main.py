"""
Console entry point: the interactive "Printer OS" prompt.

Reads commands from stdin, one per line, and hands each to the
CommandDispatcher. Stops on "exit" or end of input.

To run:
    python -m cli.main
    python -m cli.main --log-level INFO    # also show engine transitions
"""

import argparse
import logging
import sys
from typing import Optional

try:
    import readline  # noqa: F401  (line editing for input(); absent on Windows)
except ImportError:
    pass

from config.settings import settings
from cli.dispatcher import CommandDispatcher
from scheduler.engine import PrinterScheduler

logger = logging.getLogger(__name__)

WELCOME = "Welcome to Printer OS. Type help to check available commands."


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Single-printer job scheduler console")
    parser.add_argument(
        "--log-level",
        default=settings.LOG_LEVEL,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Engine log verbosity (logs go to stderr)",
    )
    parser.add_argument(
        "--no-auto-fill",
        action="store_true",
        help="Leave the printer idle after block/done instead of dispatching the next job",
    )
    parser.add_argument(
        "--no-color",
        action="store_true",
        help="Plain output even on a terminal",
    )
    return parser


def _read_line(stdin, stdout) -> str:
    """
    Prompt and read one line; "" means end of input.

    A terminal gets input(), which picks up line editing and history from
    the readline module. Pipes and files are read directly.
    """
    if stdin.isatty():
        try:
            return input(settings.PROMPT) + "\n"
        except EOFError:
            return ""
    stdout.write(settings.PROMPT)
    stdout.flush()
    return stdin.readline()


def run(
    stdin=None,
    stdout=None,
    auto_fill: bool = settings.AUTO_FILL_ON_VACANCY,
    color: Optional[bool] = None,
) -> int:
    """
    Run the prompt loop until exit/EOF. Returns the process exit code.

    Color defaults to on when stdout is a terminal.
    """
    if stdin is None:
        stdin = sys.stdin
    if stdout is None:
        stdout = sys.stdout
    if color is None:
        color = stdout.isatty()

    def out(text: str) -> None:
        print(text, file=stdout)

    scheduler = PrinterScheduler(auto_fill=auto_fill)
    dispatcher = CommandDispatcher(scheduler, out=out, color=color)

    out(WELCOME)
    while True:
        line = _read_line(stdin, stdout)
        if not line:
            # EOF (Ctrl+D or end of piped input)
            out("")
            out("Exiting...")
            break
        if not dispatcher.handle(line):
            break
    return 0


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        stream=sys.stderr,
    )
    logger.info("Printer console starting")
    try:
        return run(
            auto_fill=settings.AUTO_FILL_ON_VACANCY and not args.no_auto_fill,
            color=False if args.no_color else None,
        )
    except KeyboardInterrupt:
        print("\nExiting...")
        return 0


if __name__ == "__main__":
    sys.exit(main())
