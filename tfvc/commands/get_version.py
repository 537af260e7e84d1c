"""Detect the tf version from the banner printed above any help text.

The first line of ``tf add -?`` looks like:

    Team Explorer Everywhere Command Line Client (Version 14.0.3.201603291047)
    Microsoft (R) TF - Team Foundation Version Control Tool, Version 14.102.25619.0

The second form is the native executable. Anything left over after pulling
out the version numeral means the banner is localized, and the text parsers
of every other command would then misread the output.
"""

from __future__ import annotations

import re

from tfvc.core.result import Err, Ok, Result
from tfvc.platform.process import ExecutionOptions, ExecutionResult

from .arguments import ArgumentBuilder, ArgumentProvider
from .errors import NOT_AN_ENU_COMMAND_LINE, TfvcError, TfvcErrorKind
from .helper import process_errors, split_into_lines

_CLC_VERSION = re.compile(r"(.*\(version )([\.\d]*)(\).*)", re.IGNORECASE)
_EXE_VERSION = re.compile(r"(.*version )([\.\d]*)(.*)", re.IGNORECASE)


class GetVersion:
    def arguments(self) -> ArgumentProvider:
        return ArgumentBuilder("add").add_switch("?").build()

    def options(self) -> ExecutionOptions:
        return ExecutionOptions()

    def parse_output(self, execution: ExecutionResult) -> Result[str, TfvcError]:
        return self._get_version(execution, _CLC_VERSION)

    def exe_arguments(self) -> ArgumentProvider:
        return self.arguments()

    def exe_options(self) -> ExecutionOptions:
        return self.options()

    def parse_exe_output(self, execution: ExecutionResult) -> Result[str, TfvcError]:
        return self._get_version(execution, _EXE_VERSION)

    def _get_version(
        self, execution: ExecutionResult, expression: re.Pattern[str]
    ) -> Result[str, TfvcError]:
        command = self.arguments().command
        checked = process_errors(command, execution)
        if isinstance(checked, Err):
            return checked

        lines = split_into_lines(execution.stdout)
        if not lines:
            return Ok("")

        # An unmatched line is left whole and fails the token check below
        value = expression.sub(r"\2", lines[0], count=1).strip()
        if len(value.split()) > 1:
            return Err(
                TfvcError(
                    kind=TfvcErrorKind.NOT_AN_ENU_COMMAND_LINE,
                    message=NOT_AN_ENU_COMMAND_LINE,
                    command=command,
                    exit_code=execution.exit_code,
                    stdout=execution.stdout,
                    stderr=execution.stderr,
                )
            )
        return Ok(value)
