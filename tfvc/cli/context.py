from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import typer

from tfvc.core.config import Config, load_config
from tfvc.core.errors import ErrorCode
from tfvc.core.result import Err
from tfvc.output.console import ConsoleProtocol, RichConsole
from tfvc.repository import Repository, Tfvc

DEFAULT_CONFIG_NAME = "tfvc.toml"


@dataclass(frozen=True, slots=True)
class CLIOptions:
    """Global options collected by the app callback."""

    path: Path
    config_path: Path | None = None
    verbose: bool = False


@dataclass(frozen=True, slots=True)
class CLIContext:
    config: Config
    repository: Repository
    console: ConsoleProtocol


def _load(options: CLIOptions, console: ConsoleProtocol) -> Config:
    if options.config_path is not None:
        result = load_config(options.config_path)
        if isinstance(result, Err):
            console.error(result.error.message)
            raise typer.Exit(code=int(ErrorCode.ENV_ERROR))
        return result.value

    default = options.path / DEFAULT_CONFIG_NAME
    if not default.is_file():
        return Config()
    result = load_config(default)
    if isinstance(result, Err):
        console.warning(f"{result.error.message} (using defaults)")
        return Config()
    return result.value


def build_context(options: CLIOptions) -> CLIContext:
    console = RichConsole()
    config = _load(options, console)

    tfvc_result = Tfvc.find(config)
    if isinstance(tfvc_result, Err):
        console.error(tfvc_result.error.message)
        raise typer.Exit(code=int(ErrorCode.ENV_ERROR))

    repository = tfvc_result.value.open(
        config.server.to_context(),
        options.path,
        console if options.verbose else None,
    )
    return CLIContext(config=config, repository=repository, console=console)
