"""
Tests for the console command dispatcher.

Output is captured into a list instead of stdout, one entry per line.
"""

import pytest

from cli.dispatcher import INVALID_COMMAND, CommandDispatcher, parse_command


@pytest.fixture
def console(scheduler):
    lines: list[str] = []
    dispatcher = CommandDispatcher(scheduler, out=lines.append)
    return dispatcher, lines


def _run(console, *commands):
    dispatcher, lines = console
    for command in commands:
        dispatcher.handle(command)
    return lines


def test_parse_command():
    assert parse_command("  add doc 1 2 \n") == ("add", ["doc", "1", "2"])
    assert parse_command("done") == ("done", [])
    assert parse_command("   ") is None


def test_add_prints_message_then_queues(console):
    lines = _run(console, "add doc 3 5")

    assert lines == [
        "Process added to the ready queue.",
        "Ready Queue: 1",
        "Blocked Queue: ",
        "Executing Process: None",
    ]


def test_add_with_missing_arguments(console):
    lines = _run(console, "add doc 3")

    assert lines == ["Invalid number of arguments. Use add <name> <priority> <estimatedTime>"]


def test_add_with_bad_numbers_changes_nothing(console, scheduler):
    lines = _run(console, "add doc high 5", "add doc 1 0")

    assert lines == ["Invalid priority or estimatedTime. Use add <name> <priority> <estimatedTime>"] * 2
    assert scheduler.ready_jobs == []


def test_execute_and_done(console):
    lines = _run(console, "add a 2 1", "add b 1 1")
    lines.clear()

    _run(console, "execute")
    assert lines[0] == "Process executing: b"
    assert lines[1:] == ["Ready Queue: 1", "Blocked Queue: ", "Executing Process: 2"]
    lines.clear()

    _run(console, "done")
    assert lines[:2] == ["Process finished: b", "Process executing: a"]
    assert lines[-1] == "Executing Process: 1"


def test_block_reports_auto_filled_job(console):
    lines = _run(console, "add a 1 1", "add b 2 1", "execute")
    lines.clear()

    _run(console, "block")

    assert lines == [
        "Process blocked.",
        "Process executing: b",
        "Ready Queue: ",
        "Blocked Queue: 1",
        "Executing Process: 2",
    ]


def test_unblock(console):
    lines = _run(console, "add a 1 1", "execute", "block")
    lines.clear()

    _run(console, "unblock")

    assert lines == [
        "Process unblocked.",
        "Ready Queue: 1",
        "Blocked Queue: ",
        "Executing Process: None",
    ]


@pytest.mark.parametrize(
    "command, message",
    [
        ("block", "No process is currently executing."),
        ("done", "No process is currently executing."),
        ("unblock", "No blocked processes."),
        ("execute", "No processes to execute."),
        ("view 1", "Process not found."),
        ("view one", "Process not found."),
        ("view", "Process not found."),
        ("print", INVALID_COMMAND),
    ],
)
def test_errors_become_messages(console, command, message):
    assert _run(console, command) == [message]


def test_execute_while_busy(console):
    lines = _run(console, "add a 1 1", "add b 1 1", "execute")
    lines.clear()

    _run(console, "execute")

    assert lines == ['Process 1 is already executing. Use "done" or "block" first.']


def test_view_shows_job_details(console):
    lines = _run(console, "add report 4 9", "execute")
    lines.clear()

    _run(console, "view 1")

    assert lines == [
        "Process ID: 1",
        "Name: report",
        "Priority: 4",
        "Owner: Console User",
        "Estimated Time: 9",
        "Status: Executing",
    ]


def test_help_lists_every_command(console):
    lines = _run(console, "help")

    assert lines[0] == "Available commands:"
    for verb in ("add", "block", "unblock", "execute", "done", "view", "help", "exit"):
        assert any(line.strip().startswith(verb) for line in lines[1:])


def test_exit_stops_the_loop(console):
    dispatcher, lines = console

    assert dispatcher.handle("view 3") is True
    assert dispatcher.handle("exit") is False
    assert lines[-1] == "Exiting..."


def test_blank_line_is_ignored(console):
    dispatcher, lines = console

    assert dispatcher.handle("\n") is True
    assert lines == []


def test_colored_console(scheduler):
    lines: list[str] = []
    dispatcher = CommandDispatcher(scheduler, out=lines.append, color=True)

    dispatcher.handle("add doc 1 1")
    dispatcher.handle("execute")
    dispatcher.handle("block")
    dispatcher.handle("view 1")

    assert lines[0] == "\033[32mProcess added to the ready queue.\033[0m"
    assert "\033[33mProcess blocked.\033[0m" in lines
    assert "\033[32mProcess ID: 1\033[0m" in lines
    assert "Name: doc" in lines
