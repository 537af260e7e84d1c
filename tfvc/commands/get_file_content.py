"""Print the content of a file, optionally at a given version.

print -noprompt [-collection:url] <localPath> [-version:<versionSpec>]

The native executable calls the same operation ``view``.
"""

from __future__ import annotations

from tfvc.core.context import ServerContext
from tfvc.core.result import Err, Ok, Result
from tfvc.platform.process import ExecutionOptions, ExecutionResult

from .arguments import ArgumentBuilder, ArgumentProvider
from .errors import ArgumentMissingError, TfvcError
from .helper import has_error, process_errors

# The two clients word "file not found" differently
FILE_NOT_FOUND_ERRORS = (
    "No file matches",
    "does not exist at the specified version",
)


class GetFileContent:
    def __init__(
        self,
        server_context: ServerContext | None,
        local_path: str | None,
        version_spec: str | None = None,
        ignore_file_not_found: bool = False,
    ) -> None:
        if not local_path:
            raise ArgumentMissingError("local_path")
        self._server_context = server_context
        self._local_path = local_path
        self._version_spec = version_spec
        self._ignore_file_not_found = ignore_file_not_found

    def arguments(self) -> ArgumentProvider:
        return self._build("print")

    def options(self) -> ExecutionOptions:
        return ExecutionOptions()

    def parse_output(self, execution: ExecutionResult) -> Result[str, TfvcError]:
        return self._parse(self.arguments().command, execution)

    def exe_arguments(self) -> ArgumentProvider:
        return self._build("view")

    def exe_options(self) -> ExecutionOptions:
        return self.options()

    def parse_exe_output(self, execution: ExecutionResult) -> Result[str, TfvcError]:
        return self._parse(self.exe_arguments().command, execution)

    def _build(self, command: str) -> ArgumentProvider:
        builder = ArgumentBuilder(command, self._server_context).add(self._local_path)
        if self._version_spec:
            builder.add_option("version", self._version_spec)
        return builder.build()

    def _parse(self, command: str, execution: ExecutionResult) -> Result[str, TfvcError]:
        if self._ignore_file_not_found and any(
            has_error(execution, pattern) for pattern in FILE_NOT_FOUND_ERRORS
        ):
            return Ok("")

        checked = process_errors(command, execution)
        if isinstance(checked, Err):
            return checked
        return Ok(execution.stdout)
