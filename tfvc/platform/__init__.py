"""Platform abstraction layer."""

from .process import ExecutionOptions, ExecutionResult, ProcessError, execute

__all__ = [
    "ExecutionOptions",
    "ExecutionResult",
    "ProcessError",
    "execute",
]
