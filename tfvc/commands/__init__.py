"""tf command variants.

Each variant builds its own argument list and parses the ExecutionResult of
running it:

    cmd = Undo(context, ["/repo/README.md"])
    print(cmd.arguments())              # undo -noprompt -collection:... ******** ...
    result = cmd.parse_output(execution)
"""

from tfvc.commands.add import Add
from tfvc.commands.arguments import SECRET_MASK, ArgumentBuilder, ArgumentProvider
from tfvc.commands.base import TfvcCommand
from tfvc.commands.delete import Delete
from tfvc.commands.errors import ArgumentMissingError, TfvcError, TfvcErrorKind
from tfvc.commands.get_file_content import GetFileContent
from tfvc.commands.get_version import GetVersion
from tfvc.commands.status import PendingChange, Status
from tfvc.commands.undo import Undo

__all__ = [
    # arguments
    "ArgumentBuilder",
    "ArgumentProvider",
    "SECRET_MASK",
    # errors
    "ArgumentMissingError",
    "TfvcError",
    "TfvcErrorKind",
    # commands
    "Add",
    "Delete",
    "GetFileContent",
    "GetVersion",
    "PendingChange",
    "Status",
    "TfvcCommand",
    "Undo",
]
