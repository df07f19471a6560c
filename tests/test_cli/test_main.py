"""Tests for the console prompt loop."""

import io

from cli.main import WELCOME, build_parser, run


def test_runs_commands_until_exit():
    stdin = io.StringIO("add a 2 1\nadd b 1 1\nexecute\nexit\nadd never 1 1\n")
    stdout = io.StringIO()

    assert run(stdin=stdin, stdout=stdout) == 0

    output = stdout.getvalue()
    assert output.startswith(WELCOME)
    assert "Process executing: b" in output
    assert output.rstrip().endswith("Exiting...")
    assert "never" not in output


def test_end_of_input_exits_cleanly():
    stdout = io.StringIO()

    assert run(stdin=io.StringIO(""), stdout=stdout) == 0
    assert "Exiting..." in stdout.getvalue()


def test_auto_fill_can_be_turned_off():
    stdin = io.StringIO("add a 1 1\nadd b 2 1\nexecute\ndone\nexit\n")
    stdout = io.StringIO()

    run(stdin=stdin, stdout=stdout, auto_fill=False)

    assert "Process executing: b" not in stdout.getvalue()


def test_parser_defaults():
    args = build_parser().parse_args([])

    assert args.no_auto_fill is False
    assert args.log_level in {"DEBUG", "INFO", "WARNING", "ERROR"}


def test_color_wraps_messages_in_ansi_codes():
    stdin = io.StringIO("add a 1 1\nblock\nexit\n")
    stdout = io.StringIO()

    run(stdin=stdin, stdout=stdout, color=True)

    output = stdout.getvalue()
    assert "\033[32mProcess added to the ready queue.\033[0m" in output
    assert "\033[34mReady Queue: 1\033[0m" in output
    assert "\033[31mNo process is currently executing.\033[0m" in output


def test_plain_output_when_not_a_terminal():
    stdout = io.StringIO()

    run(stdin=io.StringIO("add a 1 1\nexit\n"), stdout=stdout)

    assert "\033[" not in stdout.getvalue()


class _Terminal(io.StringIO):
    def isatty(self):
        return True


def test_terminal_input_goes_through_input(monkeypatch):
    typed = iter(["add a 1 1", "execute"])
    prompts = []

    def fake_input(prompt):
        prompts.append(prompt)
        try:
            return next(typed)
        except StopIteration:
            raise EOFError

    monkeypatch.setattr("builtins.input", fake_input)
    stdout = io.StringIO()

    assert run(stdin=_Terminal(), stdout=stdout, color=False) == 0

    output = stdout.getvalue()
    assert "Process executing: a" in output
    assert output.rstrip().endswith("Exiting...")
    assert prompts == ["Printer OS> "] * 3


def test_parser_no_color_flag():
    assert build_parser().parse_args(["--no-color"]).no_color is True
