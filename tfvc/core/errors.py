"""Error codes for CLI exit status.

These map failure categories to shell exit codes and must remain stable:
- 0: Success
- 1: User error (bad input, missing arguments)
- 2: Environment error (tf not found, unsupported locale, bad config)
- 3: Command error (tf ran and reported a failure)
- 5: I/O error (file not found, permission denied)
"""

from enum import IntEnum

__all__ = ["ErrorCode"]


class ErrorCode(IntEnum):
    """Exit codes for CLI commands."""

    OK = 0
    USER_ERROR = 1
    ENV_ERROR = 2
    COMMAND_ERROR = 3
    IO_ERROR = 5

    def __str__(self) -> str:
        """Return human-readable name."""
        return self.name.lower().replace("_", " ")

    @property
    def is_success(self) -> bool:
        return self == ErrorCode.OK

    @property
    def is_error(self) -> bool:
        return self != ErrorCode.OK
