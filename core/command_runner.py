"""Process runner abstraction with a subprocess backend and a recording fake."""
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Iterable, List, Mapping, Sequence, Tuple
import os
import shlex
import shutil
import signal
import stat
import subprocess


@dataclass
class CommandResult:
    """Represents the outcome of an executed command."""

    command: Sequence[str]
    returncode: int
    stdout: str
    stderr: str
    streamed: bool = False


class CommandError(RuntimeError):
    """Base class for command failures; ``str()`` is the failure text."""

    def __init__(self, message: str, result: CommandResult | None = None):
        super().__init__(message)
        self.result = result


class CommandNotFoundError(CommandError):
    """Raised when an executable cannot be located."""

    def __init__(self, executable: str, reason: str = "executable file not found in $PATH"):
        super().__init__(f'exec: "{executable}": {reason}')
        self.executable = executable


class CommandStartError(CommandError):
    """Raised when a located command cannot be started."""

    def __init__(self, executable: str, error: OSError | ValueError):
        reason = getattr(error, "strerror", None) or str(error)
        super().__init__(f"fork/exec {executable}: {_lower_first(reason)}")
        self.executable = executable
        self.error = error


class CommandFailedError(CommandError):
    """Raised when a command exits with a non-zero status."""

    def __init__(self, result: CommandResult):
        super().__init__(describe_exit(result.returncode), result)


def _lower_first(text: str) -> str:
    return f"{text[:1].lower()}{text[1:]}"


def describe_exit(returncode: int) -> str:
    if returncode >= 0:
        return f"exit status {returncode}"
    signum = -returncode
    try:
        description = signal.strsignal(signum)
    except ValueError:
        description = None
    if not description:
        return f"signal: {signum}"
    return f"signal: {_lower_first(description)}"


def format_command(command: Sequence[str]) -> str:
    return " ".join(shlex.quote(part) for part in command)


class CommandRunner:
    """Abstract command runner interface."""

    def run(
        self,
        command: Sequence[str],
        *,
        cwd: Path | None = None,
        env: Mapping[str, str] | None = None,
        check: bool = True,
        stream: bool = False,
    ) -> CommandResult:
        raise NotImplementedError

    def format_command(self, command: Sequence[str]) -> str:
        return format_command(command)

    @staticmethod
    def _finalize(result: CommandResult, *, check: bool) -> CommandResult:
        if check and result.returncode != 0:
            raise CommandFailedError(result)
        return result


class SubprocessCommandRunner(CommandRunner):
    """Command runner that executes commands via :mod:`subprocess`.

    Bare executable names are looked up on ``PATH`` before spawning, with
    any ``search_path`` directories appended. Names containing a path
    separator are checked directly on disk instead.

    Captured output is decoded as UTF-8; undecodable bytes become U+FFFD
    rather than failing the call.
    """

    def __init__(self, search_path: Sequence[str] | None = None) -> None:
        self.search_path: Tuple[str, ...] = tuple(search_path or ())

    @staticmethod
    def _merge_environment(env: Mapping[str, str] | None) -> Dict[str, str] | None:
        if env is None:
            return None
        merged = os.environ.copy()
        merged.update(env)
        return merged

    def lookup_path(self, env: Mapping[str, str] | None = None) -> str:
        source = env if env is not None else os.environ
        entries = [entry for entry in source.get("PATH", os.defpath).split(os.pathsep) if entry]
        entries.extend(entry for entry in self.search_path if entry not in entries)
        return os.pathsep.join(entries)

    @staticmethod
    def _check_executable(executable: str) -> str:
        try:
            mode = os.stat(executable).st_mode
        except OSError as exc:
            reason = exc.strerror or str(exc)
            raise CommandNotFoundError(executable, f"stat {executable}: {_lower_first(reason)}") from exc
        if stat.S_ISDIR(mode):
            raise CommandNotFoundError(executable, "is a directory")
        if not mode & 0o111:
            raise CommandNotFoundError(executable, "permission denied")
        return executable

    def resolve(self, executable: str, env: Mapping[str, str] | None = None) -> str:
        """Return the program to spawn for ``executable``."""

        if os.sep in executable or (os.altsep and os.altsep in executable):
            return self._check_executable(executable)
        found = shutil.which(executable, path=self.lookup_path(env))
        if found is None:
            raise CommandNotFoundError(executable)
        return found

    def run(
        self,
        command: Sequence[str],
        *,
        cwd: Path | None = None,
        env: Mapping[str, str] | None = None,
        check: bool = True,
        stream: bool = False,
    ) -> CommandResult:
        merged_env = self._merge_environment(env)
        executable = command[0]
        argv = list(command)
        try:
            program = self.resolve(executable, merged_env)
            if not stream:
                process = subprocess.run(
                    argv,
                    executable=program,
                    cwd=str(cwd) if cwd else None,
                    env=merged_env,
                    stdin=subprocess.DEVNULL,
                    capture_output=True,
                    text=True,
                    errors="replace",
                    check=False,
                )
                return self._finalize(
                    CommandResult(
                        command=command,
                        returncode=process.returncode,
                        stdout=process.stdout,
                        stderr=process.stderr,
                    ),
                    check=check,
                )

            process = subprocess.run(
                argv,
                executable=program,
                cwd=str(cwd) if cwd else None,
                env=merged_env,
                check=False,
            )
        except (OSError, ValueError) as exc:
            # NUL bytes in the command or environment surface as ValueError.
            raise CommandStartError(executable, exc) from exc

        return self._finalize(
            CommandResult(
                command=command,
                returncode=process.returncode,
                stdout="",
                stderr="",
                streamed=True,
            ),
            check=check,
        )


@dataclass(slots=True)
class RecordedCommand:
    command: List[str]
    cwd: str | None
    env: Dict[str, str]
    stream: bool


class RecordingCommandRunner(CommandRunner):
    """Command runner that records commands instead of executing them.

    ``responses`` maps an executable name to ``(returncode, stdout, stderr)``;
    unknown executables succeed with no output. Names listed in ``missing``
    behave as if absent from ``PATH``.
    """

    def __init__(
        self,
        responses: Mapping[str, Tuple[int, str, str]] | None = None,
        missing: Iterable[str] = (),
    ) -> None:
        self.commands: List[RecordedCommand] = []
        self.responses: Dict[str, Tuple[int, str, str]] = dict(responses or {})
        self.missing = set(missing)

    def run(
        self,
        command: Sequence[str],
        *,
        cwd: Path | None = None,
        env: Mapping[str, str] | None = None,
        check: bool = True,
        stream: bool = False,
    ) -> CommandResult:
        self.commands.append(
            RecordedCommand(
                command=list(command),
                cwd=str(cwd) if cwd else None,
                env=dict(env) if env else {},
                stream=stream,
            )
        )
        executable = command[0]
        if executable in self.missing:
            raise CommandNotFoundError(executable)
        returncode, stdout, stderr = self.responses.get(executable, (0, "", ""))
        if stream:
            stdout, stderr = "", ""
        return self._finalize(
            CommandResult(
                command=command,
                returncode=returncode,
                stdout=stdout,
                stderr=stderr,
                streamed=stream,
            ),
            check=check,
        )


__all__ = [
    "CommandError",
    "CommandFailedError",
    "CommandNotFoundError",
    "CommandResult",
    "CommandRunner",
    "CommandStartError",
    "RecordedCommand",
    "RecordingCommandRunner",
    "SubprocessCommandRunner",
    "describe_exit",
    "format_command",
]
