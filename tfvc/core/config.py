"""Typed configuration loading for tfvc.toml.

Example file:

    [tfvc]
    location = "/opt/tee-clc/tf"
    timeout = 60

    [server]
    remote_url = "http://server:8080/tfs/collection1/_git/repo1"
    username = "user1"

The password is never read from the file; see PASSWORD_ENV_VAR.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path

from .context import Credential, ServerContext
from .result import Err, Ok, Result
from .structured import StrDict, as_str_dict, get_float, get_str, get_table

__all__ = [
    "Config",
    "ConfigError",
    "DEFAULT_TIMEOUT_SECONDS",
    "PASSWORD_ENV_VAR",
    "ServerConfig",
    "TfvcConfig",
    "load_config",
    "load_config_or_default",
]

DEFAULT_TIMEOUT_SECONDS = 120.0
PASSWORD_ENV_VAR = "TFVC_PASSWORD"


@dataclass(frozen=True, slots=True)
class ConfigError:
    """Error when config cannot be loaded or parsed."""

    message: str
    path: Path | None = None


@dataclass(frozen=True, slots=True)
class TfvcConfig:
    """Command line client settings."""

    location: str | None = None
    timeout: float = DEFAULT_TIMEOUT_SECONDS


@dataclass(frozen=True, slots=True)
class ServerConfig:
    """Remote collection settings."""

    remote_url: str | None = None
    collection_url: str | None = None
    username: str | None = None

    def to_context(self, env: Mapping[str, str] | None = None) -> ServerContext | None:
        """Build a ServerContext, pulling the password from the environment.

        Returns None when no remote is configured. A username without a
        password yields a context with no credential.
        """
        remote = self.remote_url or self.collection_url
        if remote is None:
            return None

        environ = os.environ if env is None else env
        password = environ.get(PASSWORD_ENV_VAR)
        credential = (
            Credential(self.username, password) if self.username and password else None
        )
        return ServerContext(
            remote_url=remote,
            collection_url=self.collection_url,
            credential=credential,
        )


@dataclass(frozen=True, slots=True)
class Config:
    """Main configuration container."""

    tfvc: TfvcConfig = field(default_factory=TfvcConfig)
    server: ServerConfig = field(default_factory=ServerConfig)

    @classmethod
    def from_dict(cls, data: Mapping[str, object]) -> Config:
        """Create Config from a mapping (parsed TOML)."""
        tfvc: StrDict = get_table(data, "tfvc") or {}
        server: StrDict = get_table(data, "server") or {}

        return cls(
            tfvc=TfvcConfig(
                location=get_str(tfvc, "location"),
                timeout=get_float(tfvc, "timeout") or DEFAULT_TIMEOUT_SECONDS,
            ),
            server=ServerConfig(
                remote_url=get_str(server, "remote_url"),
                collection_url=get_str(server, "collection_url"),
                username=get_str(server, "username"),
            ),
        )


def _parse_toml(path: Path) -> Result[StrDict, ConfigError]:
    """Parse a TOML file, handling import and parse errors."""
    import tomllib

    try:
        content = path.read_bytes()
        data_obj: object = tomllib.loads(content.decode("utf-8"))
        data = as_str_dict(data_obj)
        if data is None:
            return Err(ConfigError("Config root must be a TOML table", path=path))
        return Ok(data)
    except FileNotFoundError:
        return Err(ConfigError(f"Config file not found: {path}", path=path))
    except PermissionError:
        return Err(ConfigError(f"Permission denied reading: {path}", path=path))
    except tomllib.TOMLDecodeError as e:
        return Err(ConfigError(f"Invalid TOML syntax: {e}", path=path))
    except UnicodeDecodeError as e:
        return Err(ConfigError(f"Error reading config: {e}", path=path))


def load_config(path: Path) -> Result[Config, ConfigError]:
    """Load and parse configuration from a TOML file.

    Args:
        path: Path to tfvc.toml

    Returns:
        Ok(Config) on success, Err(ConfigError) on failure
    """
    result = _parse_toml(path)
    if isinstance(result, Err):
        return result

    try:
        return Ok(Config.from_dict(result.value))
    except (KeyError, TypeError, ValueError) as e:
        return Err(ConfigError(f"Invalid config structure: {e}", path=path))


def load_config_or_default(path: Path) -> Config:
    """Load config from file, or return the default config on any failure."""
    result = load_config(path)
    if isinstance(result, Ok):
        return result.value
    return Config()
