"""Server identity and credentials for commands issued against a collection."""

from __future__ import annotations

from dataclasses import dataclass, field

__all__ = ["Credential", "ServerContext"]


@dataclass(frozen=True, slots=True)
class Credential:
    """Opaque login handle.

    The password is excluded from repr so it never ends up in tracebacks or
    console output.
    """

    username: str
    password: str = field(repr=False)

    def login_value(self) -> str:
        """Value for the ``-login:`` switch (``user,password``)."""
        return f"{self.username},{self.password}"


@dataclass(frozen=True, slots=True)
class ServerContext:
    """Remote collection a command is addressed to.

    Attributes:
        remote_url: Repository URL (e.g. http://server:8080/tfs/coll/_git/repo)
        collection_url: Explicit collection URL; derived from remote_url if None
        credential: Login handle, or None to rely on cached credentials
    """

    remote_url: str
    collection_url: str | None = None
    credential: Credential | None = None

    @property
    def account(self) -> str | None:
        return self.credential.username if self.credential else None

    @property
    def collection(self) -> str:
        if self.collection_url:
            return self.collection_url.rstrip("/")
        marker = "/_git/"
        idx = self.remote_url.find(marker)
        if idx > 0:
            return self.remote_url[:idx]
        return self.remote_url.rstrip("/")

    @property
    def has_credential(self) -> bool:
        return self.credential is not None
