"""Run external commands and return their trimmed standard output."""
from __future__ import annotations

from typing import Sequence

from .command_runner import CommandError, CommandRunner, SubprocessCommandRunner
from .console import Console
from .text import trim

default_runner: CommandRunner = SubprocessCommandRunner()
default_console = Console()


def format_args(args: Sequence[str]) -> str:
    return "[" + " ".join(args) + "]"


def _execute(
    executable: str,
    args: Sequence[str],
    *,
    report_failures: bool,
    runner: CommandRunner | None,
    console: Console | None,
) -> str:
    active_runner = runner or default_runner
    active_console = console or default_console
    command = [executable, *args]

    active_console.debug(f"exec: {active_runner.format_command(command)}")
    try:
        result = active_runner.run(command, check=True)
    except CommandError as exc:
        active_console.error(f"{active_runner.format_command(command)}: {exc}")
        if report_failures:
            print(f"ERROR for '{executable} {format_args(args)}': {exc}")
        raise

    active_console.debug(f"exec finished with exit status {result.returncode}")
    return trim(result.stdout)


def execute_silent(
    executable: str,
    args: Sequence[str] = (),
    *,
    runner: CommandRunner | None = None,
    console: Console | None = None,
) -> str:
    """Run ``executable`` with ``args`` and return its trimmed stdout.

    Nothing is written to the caller's stdout. Failures raise a
    :class:`~core.command_runner.CommandError` subclass whose message is
    the failure text.
    """

    return _execute(executable, args, report_failures=False, runner=runner, console=console)


def execute(
    executable: str,
    args: Sequence[str] = (),
    *,
    runner: CommandRunner | None = None,
    console: Console | None = None,
) -> str:
    """Like :func:`execute_silent`, but print a diagnostic line on failure.

    The line reads ``ERROR for '<executable> [<args>]': <message>`` and the
    original exception is re-raised afterwards.
    """

    return _execute(executable, args, report_failures=True, runner=runner, console=console)


__all__ = ["execute", "execute_silent", "format_args"]
