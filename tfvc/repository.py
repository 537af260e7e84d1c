"""TFVC workspace abstraction.

Runs command variants through the tf executable and returns their parsed
results.

Usage:
    tfvc = Tfvc.find(config)
    repo = tfvc.unwrap().open(context, Path("/path/to/workspace"))

    match repo.undo(["README.md"]):
        case Ok(files):
            print(f"Undone: {files}")
        case Err(TfvcError() as e):
            print(f"tf failed: {e.pretty()}")
        case Err(e):
            print(f"Could not run tf: {e.stderr}")
"""

from __future__ import annotations

import shutil
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from pathlib import Path, PureWindowsPath

from tfvc.commands import (
    Add,
    ArgumentMissingError,
    Delete,
    GetFileContent,
    GetVersion,
    PendingChange,
    Status,
    TfvcCommand,
    TfvcError,
    Undo,
)
from tfvc.core.config import Config, ConfigError
from tfvc.core.context import ServerContext
from tfvc.core.result import Err, Ok, Result
from tfvc.output.console import ConsoleProtocol, Style
from tfvc.platform.process import ExecutionOptions, ProcessError, execute

__all__ = ["Repository", "Tfvc"]

_EXE_NAME = "tf.exe"


@dataclass(frozen=True, slots=True)
class Tfvc:
    """Location of the tf client and how to drive it.

    Attributes:
        location: Path (or PATH name) of the executable
        timeout: Per-invocation limit in seconds, None for no limit
        on_output: Receives each invocation's raw stdout
    """

    location: str
    timeout: float | None = None
    on_output: Callable[[str], None] | None = None

    @property
    def is_exe(self) -> bool:
        """True for the native Windows executable, False for the managed client."""
        return PureWindowsPath(self.location).name.lower() == _EXE_NAME

    @classmethod
    def find(cls, config: Config) -> Result[Tfvc, ConfigError]:
        """Use the configured location, else look for tf on PATH."""
        location = config.tfvc.location or shutil.which("tf")
        if not location:
            return Err(
                ConfigError(
                    "TFVC command line client not found; set [tfvc] location in tfvc.toml"
                )
            )
        return Ok(cls(location=location, timeout=config.tfvc.timeout))

    def open(
        self,
        server_context: ServerContext | None,
        path: Path,
        console: ConsoleProtocol | None = None,
    ) -> Repository:
        return Repository(self, server_context, path, console)


class Repository:
    """A local TFVC workspace folder.

    All operations return Result: Err(TfvcError) when a required input is
    missing or tf reported a failure, Err(ProcessError) when tf could not be
    run at all.
    """

    def __init__(
        self,
        tfvc: Tfvc,
        server_context: ServerContext | None,
        path: Path,
        console: ConsoleProtocol | None = None,
    ) -> None:
        self.tfvc = tfvc
        self.server_context = server_context
        self.path = path
        self._console = console

    def check_version(self) -> Result[str, TfvcError | ProcessError]:
        """Return the client version, failing if its output is not English."""
        return self._run(GetVersion)

    def add(
        self, item_paths: Sequence[str] | None
    ) -> Result[list[str], TfvcError | ProcessError]:
        return self._run(lambda: Add(self.server_context, item_paths))

    def delete(
        self, item_paths: Sequence[str] | None
    ) -> Result[list[str], TfvcError | ProcessError]:
        return self._run(lambda: Delete(self.server_context, item_paths))

    def undo(
        self, item_paths: Sequence[str] | None
    ) -> Result[list[str], TfvcError | ProcessError]:
        return self._run(lambda: Undo(self.server_context, item_paths))

    def get_status(
        self, local_paths: Sequence[str] | None = None
    ) -> Result[list[PendingChange], TfvcError | ProcessError]:
        return self._run(lambda: Status(self.server_context, local_paths))

    def get_file_content(
        self,
        local_path: str,
        version_spec: str | None = None,
        ignore_file_not_found: bool = False,
    ) -> Result[str, TfvcError | ProcessError]:
        return self._run(
            lambda: GetFileContent(
                self.server_context, local_path, version_spec, ignore_file_not_found
            )
        )

    def _run[T](
        self, build: Callable[[], TfvcCommand[T]]
    ) -> Result[T, TfvcError | ProcessError]:
        """Build and run one command with the strategy matching the executable."""
        try:
            command = build()
        except ArgumentMissingError as e:
            return Err(e.error)

        if self.tfvc.is_exe:
            provider = command.exe_arguments()
            options = command.exe_options()
            parse = command.parse_exe_output
        else:
            provider = command.arguments()
            options = command.options()
            parse = command.parse_output

        if self._console is not None:
            # Display rendering only; the real list holds the login
            self._console.print(f"tf {provider}", Style.DIM)

        result = execute(
            self.tfvc.location,
            provider.arguments,
            ExecutionOptions(cwd=options.cwd or self.path, env=options.env),
            timeout=self.tfvc.timeout,
        )
        if isinstance(result, Err):
            return result

        execution = result.value
        if self.tfvc.on_output is not None and execution.stdout:
            self.tfvc.on_output(execution.stdout)
        return parse(execution)
