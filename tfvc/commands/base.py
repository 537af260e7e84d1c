"""Command protocol.

A command is built once per invocation. It exposes two strategies for the
same logical operation: the managed cross-platform client (``tf``) and the
native Windows executable (``tf.exe``), which differ in subcommand names and
output wording.
"""

from __future__ import annotations

from typing import Protocol

from tfvc.core.result import Result
from tfvc.platform.process import ExecutionOptions, ExecutionResult

from .arguments import ArgumentProvider
from .errors import TfvcError

__all__ = ["TfvcCommand"]


class TfvcCommand[T](Protocol):
    """Argument construction and output parsing for one tf operation."""

    def arguments(self) -> ArgumentProvider: ...

    def options(self) -> ExecutionOptions: ...

    def parse_output(self, execution: ExecutionResult) -> Result[T, TfvcError]: ...

    def exe_arguments(self) -> ArgumentProvider: ...

    def exe_options(self) -> ExecutionOptions: ...

    def parse_exe_output(self, execution: ExecutionResult) -> Result[T, TfvcError]: ...
