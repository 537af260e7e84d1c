"""Error presentation and exit code mapping for the CLI."""

from __future__ import annotations

from typing import NoReturn

import typer

from tfvc.commands.errors import TfvcError, TfvcErrorKind
from tfvc.core.errors import ErrorCode
from tfvc.output.console import ConsoleProtocol, Style
from tfvc.platform.process import ProcessError

__all__ = ["error_exit_code", "fail", "print_error"]


def print_error(error: TfvcError | ProcessError, console: ConsoleProtocol) -> None:
    match error:
        case TfvcError(kind=TfvcErrorKind.COMMAND_EXECUTION_FAILED) as e:
            console.error(e.pretty())
            # Full streams, as tf printed them
            if e.stderr.strip():
                console.print(e.stderr.rstrip(), Style.DIM)
            if e.stdout.strip():
                console.print(e.stdout.rstrip(), Style.DIM)
        case TfvcError() as e:
            console.error(e.pretty())
        case ProcessError() as e:
            console.error(f"{e}: {e.stderr.strip()}")


def error_exit_code(error: TfvcError | ProcessError) -> int:
    match error:
        case TfvcError(kind=TfvcErrorKind.ARGUMENT_MISSING):
            return int(ErrorCode.USER_ERROR)
        case TfvcError(kind=TfvcErrorKind.NOT_AN_ENU_COMMAND_LINE):
            return int(ErrorCode.ENV_ERROR)
        case TfvcError():
            return int(ErrorCode.COMMAND_ERROR)
        case ProcessError():
            return int(ErrorCode.ENV_ERROR)
    return int(ErrorCode.COMMAND_ERROR)


def fail(error: TfvcError | ProcessError, console: ConsoleProtocol) -> NoReturn:
    print_error(error, console)
    raise typer.Exit(code=error_exit_code(error))
