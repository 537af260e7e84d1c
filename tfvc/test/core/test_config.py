"""Tests for tfvc.core.config."""

from __future__ import annotations

from pathlib import Path

from tfvc.core.config import (
    DEFAULT_TIMEOUT_SECONDS,
    PASSWORD_ENV_VAR,
    Config,
    ServerConfig,
    TfvcConfig,
    load_config,
    load_config_or_default,
)
from tfvc.core.result import Err, Ok


class TestConfigFromDict:
    def test_defaults(self) -> None:
        config = Config.from_dict({})
        assert config == Config()
        assert config.tfvc.timeout == DEFAULT_TIMEOUT_SECONDS
        assert config.tfvc.location is None

    def test_values(self) -> None:
        config = Config.from_dict(
            {
                "tfvc": {"location": " /opt/tee/tf ", "timeout": 30},
                "server": {
                    "remote_url": "http://server:8080/tfs/c1/_git/r1",
                    "username": "user1",
                },
            }
        )
        assert config.tfvc == TfvcConfig(location="/opt/tee/tf", timeout=30.0)
        assert config.server.remote_url == "http://server:8080/tfs/c1/_git/r1"
        assert config.server.username == "user1"

    def test_invalid_timeout_ignored(self) -> None:
        for value in (True, -5, "10"):
            config = Config.from_dict({"tfvc": {"timeout": value}})
            assert config.tfvc.timeout == DEFAULT_TIMEOUT_SECONDS


class TestServerConfig:
    def test_no_remote(self) -> None:
        assert ServerConfig(username="u").to_context({}) is None

    def test_password_from_env(self) -> None:
        server = ServerConfig(remote_url="http://s/tfs/c/_git/r", username="user1")
        ctx = server.to_context({PASSWORD_ENV_VAR: "secret"})
        assert ctx is not None
        assert ctx.credential is not None
        assert ctx.credential.login_value() == "user1,secret"
        assert ctx.collection == "http://s/tfs/c"

    def test_username_without_password(self) -> None:
        server = ServerConfig(collection_url="http://s/tfs/c", username="user1")
        ctx = server.to_context({})
        assert ctx is not None
        assert ctx.credential is None


class TestLoadConfig:
    def test_valid_file(self, tmp_path: Path) -> None:
        path = tmp_path / "tfvc.toml"
        path.write_text('[tfvc]\nlocation = "C:/tools/tf.exe"\n', encoding="utf-8")
        result = load_config(path)
        assert isinstance(result, Ok)
        assert result.value.tfvc.location == "C:/tools/tf.exe"

    def test_missing_file(self, tmp_path: Path) -> None:
        result = load_config(tmp_path / "missing.toml")
        assert isinstance(result, Err)
        assert "not found" in result.error.message

    def test_invalid_toml(self, tmp_path: Path) -> None:
        path = tmp_path / "tfvc.toml"
        path.write_text("[tfvc\n", encoding="utf-8")
        result = load_config(path)
        assert isinstance(result, Err)
        assert "Invalid TOML" in result.error.message
        assert result.error.path == path

    def test_or_default(self, tmp_path: Path) -> None:
        assert load_config_or_default(tmp_path / "missing.toml") == Config()
