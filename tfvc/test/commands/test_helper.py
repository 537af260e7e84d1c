"""Tests for tfvc.commands.helper."""

from __future__ import annotations

import os
import xml.etree.ElementTree as ET

import pytest

from tfvc.commands.errors import TF_EXEC_FAILED, TfvcErrorKind
from tfvc.commands.helper import (
    get_file_path,
    has_error,
    is_folder_header,
    parse_xml,
    process_errors,
    resolve_listing,
    split_into_lines,
    trim_to_xml,
)
from tfvc.core.result import Err, Ok
from tfvc.platform.process import ExecutionResult


class TestSplitIntoLines:
    def test_empty_input(self) -> None:
        assert split_into_lines(None) == []
        assert split_into_lines("") == []

    def test_mixed_line_endings(self) -> None:
        assert split_into_lines("a\r\nb\nc") == ["a", "b", "c"]

    def test_keeps_blank_lines_by_default(self) -> None:
        assert split_into_lines("a\n\nb\n") == ["a", "", "b"]

    def test_filter_empty_lines(self) -> None:
        assert split_into_lines("a\n\n  \nb\n", filter_empty_lines=True) == ["a", "b"]

    def test_skip_warnings(self) -> None:
        text = "Warning: something odd\nfile1.txt\n"
        assert split_into_lines(text, skip_warnings=True) == ["file1.txt"]


class TestIsFolderHeader:
    @pytest.mark.parametrize("line", ["folder1:", "folder1/folder2:", "fold er1:", "C:\\a\\b:"])
    def test_headers(self, line: str) -> None:
        assert is_folder_header(line) is True

    @pytest.mark.parametrize("line", ["", "file1.txt", "Undoing edit: file1.txt"])
    def test_not_headers(self, line: str) -> None:
        assert is_folder_header(line) is False


class TestGetFilePath:
    def test_strips_colon(self) -> None:
        assert get_file_path("folder1:", "file1.txt") == os.path.join("folder1", "file1.txt")

    def test_without_colon(self) -> None:
        assert get_file_path("folder1", "file1.txt") == os.path.join("folder1", "file1.txt")

    def test_empty_folder(self) -> None:
        assert get_file_path("", "README.md") == "README.md"

    def test_relative_folder_gets_root(self) -> None:
        assert get_file_path("folder1:", "a.txt", "/repo") == os.path.join("/repo", "folder1", "a.txt")

    def test_absolute_folder_ignores_root(self) -> None:
        folder = os.path.abspath("ws")
        assert get_file_path(folder + ":", "a.txt", "/other") == os.path.join(folder, "a.txt")


class TestResolveListing:
    def test_header_applies_to_following_files(self) -> None:
        lines = ["folder1:", "a.txt", "b.txt", "folder2:", "c.txt"]
        assert resolve_listing(lines, lambda ln: ln) == [
            os.path.join("folder1", "a.txt"),
            os.path.join("folder1", "b.txt"),
            os.path.join("folder2", "c.txt"),
        ]

    def test_none_skips_line(self) -> None:
        assert resolve_listing(["keep", "skip"], lambda ln: None if ln == "skip" else ln) == ["keep"]

    def test_reentrant(self) -> None:
        lines = ["folder1:", "a.txt"]
        first = resolve_listing(lines, lambda ln: ln)
        assert resolve_listing(["b.txt"], lambda ln: ln) == ["b.txt"]
        assert resolve_listing(lines, lambda ln: ln) == first


class TestHasError:
    def test_substring_match(self) -> None:
        execution = ExecutionResult(1, "", "No pending changes were found for /a/b.txt.")
        assert has_error(execution, "No pending changes were found for ") is True

    def test_empty_stderr(self) -> None:
        assert has_error(ExecutionResult(0), "anything") is False


class TestProcessErrors:
    def test_success(self) -> None:
        assert process_errors("undo", ExecutionResult(0, "out", "")) == Ok(None)

    def test_nonzero_exit_is_failure(self) -> None:
        result = process_errors("print", ExecutionResult(42, "Something bad this way comes.", ""))
        assert isinstance(result, Err)
        error = result.error
        assert error.kind == TfvcErrorKind.COMMAND_EXECUTION_FAILED
        assert error.command == "print"
        assert error.exit_code == 42
        assert error.message.startswith(TF_EXEC_FAILED)
        assert error.stdout == "Something bad this way comes."

    def test_stderr_with_zero_exit_is_failure(self) -> None:
        result = process_errors("undo", ExecutionResult(0, "", "boom"))
        assert isinstance(result, Err)
        assert result.error.exit_code == 0

    def test_streams_are_verbatim(self) -> None:
        stdout = "line1\r\n\n  line3  \n" + "x" * 10_000
        stderr = "\nerr1\nerr2\n"
        result = process_errors("delete", ExecutionResult(7, stdout, stderr))
        assert isinstance(result, Err)
        assert result.error.stdout == stdout
        assert result.error.stderr == stderr

    def test_hard_failure_uses_tool_message(self) -> None:
        stdout = "\nTF203069: $/proj/folder1 could not be deleted.\nNo arguments matched.\n"
        result = process_errors("delete", ExecutionResult(100, stdout, ""), hard_failure=True)
        assert isinstance(result, Err)
        assert result.error.message == "TF203069: $/proj/folder1 could not be deleted."

    def test_alternate_success_code(self) -> None:
        execution = ExecutionResult(1, "partial", "")
        assert process_errors("get", execution, success_codes=frozenset({0, 1})) == Ok(None)

    def test_known_stderr_gets_hint(self) -> None:
        result = process_errors("status", ExecutionResult(100, "", "Authentication failed."))
        assert isinstance(result, Err)
        assert result.error.kind == TfvcErrorKind.COMMAND_EXECUTION_FAILED
        assert result.error.hint is not None
        assert "hint:" in result.error.pretty()


class TestXml:
    def test_trim_to_xml_drops_banner(self) -> None:
        text = 'Banner text\n<?xml version="1.0"?><status/>\ntrailing'
        assert trim_to_xml(text) == '<?xml version="1.0"?><status/>'

    def test_trim_to_xml_without_declaration(self) -> None:
        assert trim_to_xml("no xml here") == "no xml here"
        assert trim_to_xml("") == ""

    def test_parse_xml_normalizes_names(self) -> None:
        root = parse_xml(
            '<?xml version="1.0" encoding="utf-8"?>'
            '<Status><Pending-Changes><pending-change Server-Item="$/a" local-item="/a"/>'
            "</Pending-Changes></Status>"
        )
        assert root.tag == "status"
        change = root.find("pendingchanges/pendingchange")
        assert change is not None
        assert change.attrib == {"serveritem": "$/a", "localitem": "/a"}

    def test_parse_xml_invalid(self) -> None:
        with pytest.raises(ET.ParseError):
            parse_xml("<status>")
