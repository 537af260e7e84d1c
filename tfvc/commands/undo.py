"""undo [/recursive] <itemSpec>...

Output example:

    folder1:
    Undoing edit: file1.txt
    Undoing add: file2.txt
"""

from __future__ import annotations

from collections.abc import Sequence

from tfvc.core.context import ServerContext
from tfvc.core.result import Err, Ok, Result
from tfvc.platform.process import ExecutionOptions, ExecutionResult

from .arguments import ArgumentBuilder, ArgumentProvider
from .errors import ArgumentMissingError, TfvcError
from .helper import has_error, process_errors, resolve_listing, split_into_lines

NO_PENDING_CHANGES = "No pending changes were found for "
_VERB_SEPARATOR = ": "


def _file_from_line(line: str) -> str | None:
    """'Undoing edit: file1.txt' -> 'file1.txt'; None without a verb prefix."""
    idx = line.find(_VERB_SEPARATOR)
    if idx > 0:
        return line[idx + len(_VERB_SEPARATOR) :]
    return None


class Undo:
    def __init__(
        self,
        server_context: ServerContext | None,
        item_paths: Sequence[str] | None,
    ) -> None:
        if not item_paths:
            raise ArgumentMissingError("item_paths")
        self._server_context = server_context
        self._item_paths = tuple(item_paths)

    def arguments(self) -> ArgumentProvider:
        return ArgumentBuilder("undo", self._server_context).add_all(self._item_paths).build()

    def options(self) -> ExecutionOptions:
        return ExecutionOptions()

    def parse_output(self, execution: ExecutionResult) -> Result[list[str], TfvcError]:
        # Nothing to undo is a no-op, whatever the exit code
        if has_error(execution, NO_PENDING_CHANGES):
            return Ok([])

        checked = process_errors(self.arguments().command, execution)
        if isinstance(checked, Err):
            return checked

        lines = split_into_lines(execution.stdout, filter_empty_lines=True)
        return Ok(resolve_listing(lines, _file_from_line))

    def exe_arguments(self) -> ArgumentProvider:
        return self.arguments()

    def exe_options(self) -> ExecutionOptions:
        return self.options()

    def parse_exe_output(self, execution: ExecutionResult) -> Result[list[str], TfvcError]:
        return self.parse_output(execution)
