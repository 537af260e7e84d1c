"""Tests for tfvc.output.console."""

from __future__ import annotations

from tfvc.output.console import ConsoleProtocol, MockConsole, RichConsole, Style


class TestStyle:
    def test_str_conversion(self) -> None:
        assert str(Style.DIM) == "dim"
        assert str(Style.ERROR) == "error"


class TestMockConsole:
    def test_records_styles(self) -> None:
        console = MockConsole()
        console.print("tf undo -noprompt a.txt", Style.DIM)
        console.success("done")
        console.warning("careful")
        console.error("failed")

        assert console.messages == [
            "tf undo -noprompt a.txt",
            "OK done",
            "warning: careful",
            "error: failed",
        ]
        assert console.has_error()
        assert len(console.find("undo")) == 1
        assert console.outputs[0].style == Style.DIM

    def test_satisfies_protocol(self) -> None:
        console: ConsoleProtocol = MockConsole()
        console.print("x")


class TestRichConsole:
    def test_brackets_are_not_markup(self, capsys) -> None:  # type: ignore[no-untyped-def]
        console = RichConsole()
        console.print("Local item : [PC1] D:\\repo\\a.txt")
        console.error("[bold]literal[/bold]")
        out = capsys.readouterr().out
        assert "[PC1]" in out
        assert "[bold]literal[/bold]" in out
