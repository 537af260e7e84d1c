"""Argument lists for tf invocations.

Every invocation starts with ``<command> -noprompt``. When a server context
is supplied the collection switch follows, then the login switch if a
credential is present. The login switch is the only secret token: it is
recorded by index and swapped for a fixed mask in the display rendering.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from tfvc.core.context import ServerContext

__all__ = ["ArgumentBuilder", "ArgumentProvider", "SECRET_MASK"]

# Fixed length so the display never reveals the secret's length
SECRET_MASK = "********"


@dataclass(frozen=True, slots=True)
class ArgumentProvider:
    """Finalized argument list for one invocation.

    Attributes:
        arguments: Real tokens passed to the process, command first.
        secret_indexes: Positions of tokens that must not be displayed.
    """

    arguments: tuple[str, ...]
    secret_indexes: frozenset[int] = frozenset()

    @property
    def command(self) -> str:
        return self.arguments[0] if self.arguments else ""

    def arguments_for_display(self) -> tuple[str, ...]:
        """Same tokens, same length, with secrets replaced by SECRET_MASK."""
        return tuple(
            SECRET_MASK if i in self.secret_indexes else arg
            for i, arg in enumerate(self.arguments)
        )

    def __str__(self) -> str:
        return " ".join(self.arguments_for_display())


class ArgumentBuilder:
    """Fluent builder for ArgumentProvider.

    Example:
        provider = (
            ArgumentBuilder("print", context)
            .add("/repo/README.md")
            .add_option("version", "42")
            .build()
        )
    """

    def __init__(self, command: str, server_context: ServerContext | None = None) -> None:
        self._arguments: list[str] = []
        self._secret_indexes: set[int] = set()

        self.add(command)
        self.add_switch("noprompt")

        if server_context is not None:
            self.add_option("collection", server_context.collection)
            if server_context.credential is not None:
                self.add_option("login", server_context.credential.login_value(), secret=True)

    def add(self, token: str) -> ArgumentBuilder:
        self._arguments.append(token)
        return self

    def add_all(self, tokens: Iterable[str]) -> ArgumentBuilder:
        for token in tokens:
            self.add(token)
        return self

    def add_switch(self, name: str) -> ArgumentBuilder:
        return self.add(f"-{name}")

    def add_option(self, name: str, value: str, *, secret: bool = False) -> ArgumentBuilder:
        if secret:
            self._secret_indexes.add(len(self._arguments))
        return self.add(f"-{name}:{value}")

    def build(self) -> ArgumentProvider:
        return ArgumentProvider(
            arguments=tuple(self._arguments),
            secret_indexes=frozenset(self._secret_indexes),
        )
