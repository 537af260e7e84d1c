"""Shared text processing for tf output.

tf prints human-readable text with no schema. Most listings report a folder
once, as a header line ending in a colon, followed by bare file names that
belong to it:

    folder1:
    file1.txt
    folder1/folder2:
    Undoing edit: file2.txt

The helpers here split that text, recognise the headers, rebuild full paths
and classify exit code + stderr into success or a TfvcError.
"""

from __future__ import annotations

import os
import xml.etree.ElementTree as ET
from collections.abc import Callable, Iterable

from tfvc.core.result import Err, Ok, Result
from tfvc.platform.process import ExecutionResult

from .errors import TF_EXEC_FAILED, TfvcError, TfvcErrorKind

__all__ = [
    "get_file_path",
    "has_error",
    "is_folder_header",
    "parse_xml",
    "process_errors",
    "resolve_listing",
    "split_into_lines",
    "trim_to_xml",
]

_WARNING_PREFIX = "Warning:"

# stderr marker -> hint attached to the error; the kind stays generic
_STDERR_HINTS: tuple[tuple[str, str], ...] = (
    ("Authentication failed", "check the username and password for the collection"),
    ("Access denied connecting", "check the username and password for the collection"),
    (
        "workspace could not be determined",
        "run the command from inside a mapped TFVC workspace",
    ),
    (
        "collection URL to use could not be determined",
        "pass -collection or configure [server] collection_url",
    ),
    ("'java' is not recognized", "the TFVC command line client needs Java on PATH"),
    ("java: command not found", "the TFVC command line client needs Java on PATH"),
)


def split_into_lines(
    text: str | None,
    *,
    skip_warnings: bool = False,
    filter_empty_lines: bool = False,
) -> list[str]:
    """Split tool output on any line ending.

    Args:
        text: Raw stdout/stderr; None or "" gives [].
        skip_warnings: Drop lines starting with "Warning:".
        filter_empty_lines: Drop blank lines instead of keeping them as "".
    """
    if not text:
        return []
    lines = text.splitlines()
    if skip_warnings:
        lines = [ln for ln in lines if not ln.startswith(_WARNING_PREFIX)]
    if filter_empty_lines:
        lines = [ln for ln in lines if ln.strip()]
    return lines


def is_folder_header(line: str) -> bool:
    """True for 'folder1:' or 'folder1/folder2:', False for file lines."""
    return bool(line) and line.endswith(":")


def get_file_path(folder: str, file_name: str, root: str | None = None) -> str:
    """Join a folder header (colon optional) with a bare file name.

    A relative folder is placed under root when root is given.
    """
    folder_path = folder[:-1] if folder.endswith(":") else folder
    if root and not os.path.isabs(folder_path):
        folder_path = os.path.join(root, folder_path)
    return os.path.join(folder_path, file_name)


def resolve_listing(
    lines: Iterable[str],
    file_from_line: Callable[[str], str | None],
    root: str | None = None,
) -> list[str]:
    """Fold a header/file listing into full paths, in output order.

    file_from_line extracts the file name from a non-header line; returning
    None skips the line.
    """
    files: list[str] = []
    folder = ""
    for line in lines:
        if is_folder_header(line):
            folder = line
            continue
        if not line:
            continue
        name = file_from_line(line)
        if name:
            files.append(get_file_path(folder, name, root))
    return files


def has_error(execution: ExecutionResult, pattern: str) -> bool:
    """True if stderr contains pattern (substring match)."""
    return bool(execution.stderr) and pattern in execution.stderr


def _hint_for(stderr: str) -> str | None:
    for marker, hint in _STDERR_HINTS:
        if marker in stderr:
            return hint
    return None


def _first_line(*texts: str) -> str:
    for text in texts:
        for line in split_into_lines(text, filter_empty_lines=True):
            return line.strip()
    return ""


def process_errors(
    command: str,
    execution: ExecutionResult,
    *,
    hard_failure: bool = False,
    success_codes: frozenset[int] = frozenset({0}),
) -> Result[None, TfvcError]:
    """Classify an execution as success or a command_execution_failed error.

    Any exit code outside success_codes, or any stderr text, is a failure.
    With hard_failure the message is the tool's own first line of output
    rather than the generic one.
    """
    failed = execution.exit_code not in success_codes or bool(execution.stderr)
    if not failed:
        return Ok(None)

    detail = _first_line(execution.stderr, execution.stdout)
    if hard_failure and detail:
        message = detail
    else:
        message = f"{TF_EXEC_FAILED} ({command} exited with code {execution.exit_code})"

    return Err(
        TfvcError(
            kind=TfvcErrorKind.COMMAND_EXECUTION_FAILED,
            message=message,
            command=command,
            exit_code=execution.exit_code,
            stdout=execution.stdout,
            stderr=execution.stderr,
            hint=_hint_for(execution.stderr),
        )
    )


def trim_to_xml(text: str) -> str:
    """Drop banner text before '<?xml' and anything after the final '>'."""
    if not text:
        return text
    start = text.find("<?xml")
    end = text.rfind(">")
    if start >= 0 and end > start:
        return text[start : end + 1]
    return text


def _normalize_name(name: str) -> str:
    return name.replace("-", "").lower()


def parse_xml(xml: str) -> ET.Element:
    """Parse XML with tag and attribute names normalized.

    'pending-change' becomes 'pendingchange', 'Local-Item' becomes
    'localitem'. Raises xml.etree.ElementTree.ParseError on bad input.
    """
    root = ET.fromstring(xml)
    for element in root.iter():
        element.tag = _normalize_name(element.tag)
        element.attrib = {_normalize_name(k): v for k, v in element.attrib.items()}
    return root
