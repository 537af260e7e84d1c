"""Pending changes in the workspace.

The managed client is asked for XML:

    <?xml version="1.0" encoding="utf-8"?>
    <status>
    <pending-changes>
    <pending-change server-item="$/proj/file.txt" version="217" owner="user"
        date="2017-02-08T11:12:06.766-0500" lock="none" change-type="edit"
        workspace="ws1" computer="PC1" local-item="/repo/file.txt"/>
    </pending-changes>
    <candidate-pending-changes>...</candidate-pending-changes>
    </status>

The native executable has no XML output, so the detailed text format is
parsed instead: one block per item, starting at its server path.
"""

from __future__ import annotations

import re
import xml.etree.ElementTree as ET
from collections.abc import Sequence
from dataclasses import dataclass

from tfvc.core.context import ServerContext
from tfvc.core.result import Err, Ok, Result
from tfvc.platform.process import ExecutionOptions, ExecutionResult

from .arguments import ArgumentBuilder, ArgumentProvider
from .errors import TfvcError, TfvcErrorKind
from .helper import parse_xml, process_errors, split_into_lines, trim_to_xml

__all__ = ["PendingChange", "Status"]

_SERVER_PATH_PREFIX = "$/"
_DETECTED_CHANGES = "Detected Changes:"
_COMPUTER_PREFIX = re.compile(r"^\[[^\]]*\]\s*")


@dataclass(frozen=True, slots=True)
class PendingChange:
    """One pending (or detected, candidate) change.

    Attributes:
        server_item: Server path ($/project/...)
        local_item: Local path, empty if not mapped
        change_type: e.g. "edit", "add", "delete", "rename"
        is_candidate: True for changes detected on disk but not yet pended
    """

    server_item: str
    local_item: str = ""
    change_type: str = ""
    version: str = ""
    owner: str = ""
    workspace: str = ""
    lock: str = ""
    date: str = ""
    source_item: str = ""
    computer: str = ""
    file_type: str = ""
    is_candidate: bool = False


class Status:
    def __init__(
        self,
        server_context: ServerContext | None,
        local_paths: Sequence[str] | None = None,
    ) -> None:
        self._server_context = server_context
        self._local_paths = tuple(local_paths or ())

    def arguments(self) -> ArgumentProvider:
        return self._build("xml")

    def options(self) -> ExecutionOptions:
        return ExecutionOptions()

    def parse_output(self, execution: ExecutionResult) -> Result[list[PendingChange], TfvcError]:
        command = self.arguments().command
        checked = process_errors(command, execution)
        if isinstance(checked, Err):
            return checked

        xml = trim_to_xml(execution.stdout)
        if not xml.strip():
            return Ok([])

        try:
            root = parse_xml(xml)
        except ET.ParseError as e:
            return Err(
                TfvcError(
                    kind=TfvcErrorKind.COMMAND_EXECUTION_FAILED,
                    message=f"{command} returned invalid XML: {e}",
                    command=command,
                    exit_code=execution.exit_code,
                    stdout=execution.stdout,
                    stderr=execution.stderr,
                )
            )

        changes: list[PendingChange] = []
        for section, is_candidate in (
            ("pendingchanges", False),
            ("candidatependingchanges", True),
        ):
            for element in root.iterfind(f"{section}/pendingchange"):
                changes.append(_from_attributes(element.attrib, is_candidate))
        return Ok(changes)

    def exe_arguments(self) -> ArgumentProvider:
        return self._build("detailed")

    def exe_options(self) -> ExecutionOptions:
        return self.options()

    def parse_exe_output(
        self, execution: ExecutionResult
    ) -> Result[list[PendingChange], TfvcError]:
        checked = process_errors(self.exe_arguments().command, execution)
        if isinstance(checked, Err):
            return checked

        changes: list[PendingChange] = []
        server_item: str | None = None
        fields: dict[str, str] = {}
        is_candidate = False

        for line in split_into_lines(execution.stdout, filter_empty_lines=True):
            if line.startswith(_SERVER_PATH_PREFIX):
                if server_item is not None:
                    changes.append(_from_detailed(server_item, fields, is_candidate))
                server_item = line.strip()
                fields = {}
                continue
            if line.strip() == _DETECTED_CHANGES:
                if server_item is not None:
                    changes.append(_from_detailed(server_item, fields, is_candidate))
                    server_item = None
                is_candidate = True
                continue
            key, sep, value = line.partition(":")
            if server_item is not None and sep and line.startswith(" "):
                fields[key.strip().lower()] = value.strip()

        if server_item is not None:
            changes.append(_from_detailed(server_item, fields, is_candidate))
        return Ok(changes)

    def _build(self, output_format: str) -> ArgumentProvider:
        return (
            ArgumentBuilder("status", self._server_context)
            .add_option("format", output_format)
            .add_switch("recursive")
            .add_all(self._local_paths)
            .build()
        )


def _from_attributes(attrs: dict[str, str], is_candidate: bool) -> PendingChange:
    return PendingChange(
        server_item=attrs.get("serveritem", ""),
        local_item=attrs.get("localitem", ""),
        change_type=attrs.get("changetype", ""),
        version=attrs.get("version", ""),
        owner=attrs.get("owner", ""),
        workspace=attrs.get("workspace", ""),
        lock=attrs.get("lock", ""),
        date=attrs.get("date", ""),
        source_item=attrs.get("sourceitem", ""),
        computer=attrs.get("computer", ""),
        file_type=attrs.get("filetype", ""),
        is_candidate=is_candidate,
    )


def _from_detailed(server_item: str, fields: dict[str, str], is_candidate: bool) -> PendingChange:
    local = fields.get("local item", "")
    computer_match = _COMPUTER_PREFIX.match(local)
    computer = ""
    if computer_match:
        computer = computer_match.group(0).strip()[1:-1]
        local = local[computer_match.end() :]
    return PendingChange(
        server_item=server_item,
        local_item=local,
        change_type=fields.get("change", ""),
        owner=fields.get("user", ""),
        workspace=fields.get("workspace", ""),
        lock=fields.get("lock", ""),
        date=fields.get("date", ""),
        source_item=fields.get("source item", ""),
        computer=computer,
        file_type=fields.get("file type", ""),
        is_candidate=is_candidate,
    )
