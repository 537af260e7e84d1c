"""Tests for tfvc.commands.get_version."""

from __future__ import annotations

from tfvc.commands.errors import NOT_AN_ENU_COMMAND_LINE, TfvcErrorKind
from tfvc.commands.get_version import GetVersion
from tfvc.core.result import Err, Ok
from tfvc.platform.process import ExecutionOptions, ExecutionResult

CLC_BANNER = "Team Explorer Everywhere Command Line Client (Version 14.0.3.201603291047)"
EXE_BANNER = "Microsoft (R) TF - Team Foundation Version Control Tool, Version 14.102.25619.0"


class TestArguments:
    def test_arguments(self) -> None:
        assert GetVersion().arguments().arguments == ("add", "-noprompt", "-?")

    def test_exe_arguments(self) -> None:
        assert GetVersion().exe_arguments() == GetVersion().arguments()

    def test_options(self) -> None:
        assert GetVersion().options() == ExecutionOptions()
        assert GetVersion().exe_options() == ExecutionOptions()


class TestParseOutput:
    def test_clc_version(self) -> None:
        execution = ExecutionResult(0, f"{CLC_BANNER}\n\nadd [/lock:none|checkin|checkout]\n", "")
        assert GetVersion().parse_output(execution) == Ok("14.0.3.201603291047")

    def test_clc_version_lowercase(self) -> None:
        execution = ExecutionResult(0, "Client (version 14.0.3.201603291047)\n", "")
        assert GetVersion().parse_output(execution) == Ok("14.0.3.201603291047")

    def test_exe_version(self) -> None:
        execution = ExecutionResult(0, f"{EXE_BANNER}\r\nCopyright (c) Microsoft\r\n", "")
        assert GetVersion().parse_exe_output(execution) == Ok("14.102.25619.0")

    def test_empty_stdout(self) -> None:
        assert GetVersion().parse_output(ExecutionResult(0, "", "")) == Ok("")

    def test_non_english_banner(self) -> None:
        banner = (
            "Microsoft (R) TF - Herramienta Control de versiones de Team Foundation, "
            "versi\u00f3n 14.102.25619.0"
        )
        result = GetVersion().parse_exe_output(ExecutionResult(0, banner, ""))
        assert isinstance(result, Err)
        assert result.error.kind == TfvcErrorKind.NOT_AN_ENU_COMMAND_LINE
        assert result.error.message == NOT_AN_ENU_COMMAND_LINE
        assert result.error.command == "add"

    def test_non_english_clc_banner(self) -> None:
        banner = "Cliente de l\u00ednea de comandos (Versi\u00f3n 14.0.3.201603291047)"
        result = GetVersion().parse_output(ExecutionResult(0, banner, ""))
        assert isinstance(result, Err)
        assert result.error.kind == TfvcErrorKind.NOT_AN_ENU_COMMAND_LINE

    def test_execution_failure(self) -> None:
        result = GetVersion().parse_output(ExecutionResult(1, "", "java: command not found"))
        assert isinstance(result, Err)
        assert result.error.kind == TfvcErrorKind.COMMAND_EXECUTION_FAILED
        assert result.error.hint is not None
