"""Subprocess execution for the tf command line client.

Unlike a plain "run and check" wrapper, a non-zero exit code is not an error
here: tf reports benign conditions through its exit code and stderr, and the
command layer decides what they mean. Only failures to run the process at
all (missing executable, timeout) come back as ProcessError.

Usage:
    match execute("tf", ["undo", "-noprompt", "a.txt"], ExecutionOptions(cwd=root)):
        case Ok(execution):
            files = Undo(None, ["a.txt"]).parse_output(execution)
        case Err(error):
            print(f"Could not run tf: {error.stderr}")
"""

from __future__ import annotations

import os
import subprocess
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from pathlib import Path

from tfvc.core.result import Err, Ok, Result

__all__ = ["ExecutionOptions", "ExecutionResult", "ProcessError", "execute"]


@dataclass(frozen=True, slots=True)
class ExecutionResult:
    """Captured outcome of one completed tf invocation.

    Attributes:
        exit_code: Process exit code.
        stdout: Standard output (empty if none).
        stderr: Standard error (empty if none).
    """

    exit_code: int
    stdout: str = ""
    stderr: str = ""


def _empty_env() -> dict[str, str]:
    return {}


@dataclass(frozen=True, slots=True)
class ExecutionOptions:
    """How to launch a command.

    Attributes:
        cwd: Working directory (None keeps the caller's).
        env: Variables overlaid on the current environment.
    """

    cwd: Path | None = None
    env: Mapping[str, str] = field(default_factory=_empty_env)


@dataclass(frozen=True, slots=True)
class ProcessError:
    """The process could not be run to completion.

    Attributes:
        command: The command that was executed.
        returncode: -1 when the process never produced an exit code.
        stdout: Standard output collected before the failure.
        stderr: Failure description.
    """

    command: tuple[str, ...]
    returncode: int
    stdout: str
    stderr: str

    def __str__(self) -> str:
        cmd_str = " ".join(self.command[:2])
        if len(self.command) > 2:
            cmd_str += " ..."
        return f"{cmd_str} failed to run (exit {self.returncode})"


def execute(
    location: str,
    arguments: Sequence[str],
    options: ExecutionOptions,
    *,
    timeout: float | None = None,
) -> Result[ExecutionResult, ProcessError]:
    """Run tf and capture its exit code and output streams.

    Args:
        location: Path or name of the tf executable.
        arguments: Real (unmasked) argument list.
        options: Working directory and extra environment.
        timeout: Maximum seconds to wait (None for no limit).

    Returns:
        Ok(ExecutionResult) whenever the process ran, whatever its exit code.
        Err(ProcessError) if it could not be started or timed out.
    """
    # Only the executable is recorded; the arguments may carry a login.
    command = (location,)
    env = {**os.environ, **options.env} if options.env else None
    try:
        proc = subprocess.run(
            [location, *arguments],
            cwd=str(options.cwd) if options.cwd is not None else None,
            env=env,
            capture_output=True,
            text=True,
            # Localized banners may not match the locale encoding
            errors="replace",
            timeout=timeout,
            check=False,
        )
    except subprocess.TimeoutExpired as e:
        return Err(
            ProcessError(
                command=command,
                returncode=-1,
                stdout=e.stdout if isinstance(e.stdout, str) else "",
                stderr=f"Command timed out after {timeout}s",
            )
        )
    except OSError as e:
        return Err(
            ProcessError(
                command=command,
                returncode=-1,
                stdout="",
                stderr=str(e),
            )
        )

    return Ok(
        ExecutionResult(
            exit_code=proc.returncode,
            stdout=proc.stdout or "",
            stderr=proc.stderr or "",
        )
    )
