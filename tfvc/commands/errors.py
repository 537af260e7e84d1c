"""Error taxonomy for tf command parsing."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

__all__ = [
    "ArgumentMissingError",
    "NOT_AN_ENU_COMMAND_LINE",
    "TF_EXEC_FAILED",
    "TfvcError",
    "TfvcErrorKind",
]

TF_EXEC_FAILED = "Execution of the TFVC command line failed unexpectedly."
NOT_AN_ENU_COMMAND_LINE = (
    "The TFVC command line is not running in English; "
    "only English (ENU) output can be parsed."
)


class TfvcErrorKind(StrEnum):
    """Closed set of failure categories."""

    ARGUMENT_MISSING = "argument_missing"
    NOT_AN_ENU_COMMAND_LINE = "not_an_enu_command_line"
    COMMAND_EXECUTION_FAILED = "command_execution_failed"


@dataclass(frozen=True, slots=True)
class TfvcError:
    """A command failure with everything needed to diagnose it.

    stdout and stderr are kept verbatim, never truncated.
    """

    kind: TfvcErrorKind
    message: str
    command: str = ""
    exit_code: int = 0
    stdout: str = ""
    stderr: str = ""
    hint: str | None = None

    @classmethod
    def argument_missing(cls, argument: str) -> TfvcError:
        return cls(
            kind=TfvcErrorKind.ARGUMENT_MISSING,
            message=f"Argument is required: {argument}",
        )

    def pretty(self) -> str:
        if self.hint:
            return f"{self.message} (hint: {self.hint})"
        return self.message


class ArgumentMissingError(ValueError):
    """Raised by command constructors when a required input is empty."""

    def __init__(self, argument: str) -> None:
        self.error = TfvcError.argument_missing(argument)
        super().__init__(self.error.message)
