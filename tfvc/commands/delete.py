"""delete [/lock:none|checkin|checkout] [/recursive] <itemSpec>...

Prints the files marked for deletion as a folder-header listing.
"""

from __future__ import annotations

from collections.abc import Sequence

from tfvc.core.context import ServerContext
from tfvc.core.result import Err, Ok, Result
from tfvc.platform.process import ExecutionOptions, ExecutionResult

from .arguments import ArgumentBuilder, ArgumentProvider
from .errors import ArgumentMissingError, TfvcError
from .helper import process_errors, resolve_listing, split_into_lines

# delete exits 100 when nothing could be deleted
_HARD_FAILURE_EXIT_CODE = 100


class Delete:
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
        return ArgumentBuilder("delete", self._server_context).add_all(self._item_paths).build()

    def options(self) -> ExecutionOptions:
        return ExecutionOptions()

    def parse_output(self, execution: ExecutionResult) -> Result[list[str], TfvcError]:
        # Any other exit code is a partial delete; stdout still lists what was pended
        if execution.exit_code == _HARD_FAILURE_EXIT_CODE:
            checked = process_errors(self.arguments().command, execution, hard_failure=True)
            if isinstance(checked, Err):
                return checked

        lines = split_into_lines(execution.stdout, filter_empty_lines=True)
        # No prefix on file lines for delete
        return Ok(resolve_listing(lines, lambda line: line))

    def exe_arguments(self) -> ArgumentProvider:
        return self.arguments()

    def exe_options(self) -> ExecutionOptions:
        return self.options()

    def parse_exe_output(self, execution: ExecutionResult) -> Result[list[str], TfvcError]:
        return self.parse_output(execution)
