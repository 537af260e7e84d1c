from __future__ import annotations

from pathlib import Path

import typer

from tfvc import __version__
from tfvc.cli.context import CLIContext, CLIOptions, build_context
from tfvc.cli.render import fail
from tfvc.core.result import Err
from tfvc.output.console import Style

app = typer.Typer(
    add_completion=False,
    no_args_is_help=True,
    help="Run TFVC command line operations and print typed results.",
)


def _context(ctx: typer.Context) -> CLIContext:
    options = ctx.obj if isinstance(ctx.obj, CLIOptions) else CLIOptions(path=Path.cwd())
    return build_context(options)


def _print_files(cli: CLIContext, files: list[str], action: str, empty_message: str) -> None:
    if not files:
        cli.console.print(empty_message, Style.DIM)
        return
    for file in files:
        cli.console.print(file)
    cli.console.success(f"{action} {len(files)} file(s)")


def _show_version(value: bool) -> None:
    if value:
        typer.echo(__version__)
        raise typer.Exit(code=0)


@app.callback()
def _main(  # pyright: ignore[reportUnusedFunction]
    ctx: typer.Context,
    version: bool = typer.Option(
        False,
        "--version",
        callback=_show_version,
        is_eager=True,
        help="Show version and exit.",
    ),
    path: Path = typer.Option(Path("."), "--path", "-C", help="Workspace folder."),
    config: Path | None = typer.Option(None, "--config", help="Path to tfvc.toml."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Echo tf invocations."),
) -> None:
    ctx.obj = CLIOptions(path=path.expanduser().resolve(), config_path=config, verbose=verbose)


@app.command("version")
def version_cmd(ctx: typer.Context) -> None:
    """Show the tf client location and version."""
    cli = _context(ctx)
    result = cli.repository.check_version()
    if isinstance(result, Err):
        fail(result.error, cli.console)
    cli.console.print(f"{cli.repository.tfvc.location} ({result.value or 'unknown'})")


@app.command()
def add(
    ctx: typer.Context,
    paths: list[str] | None = typer.Argument(None, help="Files to add."),
) -> None:
    """Pend adds for files."""
    cli = _context(ctx)
    result = cli.repository.add(paths)
    if isinstance(result, Err):
        fail(result.error, cli.console)
    _print_files(cli, result.value, "Added", "No files added")


@app.command()
def delete(
    ctx: typer.Context,
    paths: list[str] | None = typer.Argument(None, help="Files to delete."),
) -> None:
    """Pend deletes for files."""
    cli = _context(ctx)
    result = cli.repository.delete(paths)
    if isinstance(result, Err):
        fail(result.error, cli.console)
    _print_files(cli, result.value, "Deleted", "No files deleted")


@app.command()
def undo(
    ctx: typer.Context,
    paths: list[str] | None = typer.Argument(None, help="Files to undo."),
) -> None:
    """Undo pending changes."""
    cli = _context(ctx)
    result = cli.repository.undo(paths)
    if isinstance(result, Err):
        fail(result.error, cli.console)
    _print_files(cli, result.value, "Undid", "No pending changes")


@app.command()
def status(
    ctx: typer.Context,
    paths: list[str] | None = typer.Argument(None, help="Limit to these paths."),
) -> None:
    """List pending changes."""
    cli = _context(ctx)
    result = cli.repository.get_status(paths)
    if isinstance(result, Err):
        fail(result.error, cli.console)

    if not result.value:
        cli.console.print("No pending changes", Style.DIM)
        return
    for change in result.value:
        label = f"{change.change_type:<10} {change.local_item or change.server_item}"
        if change.is_candidate:
            cli.console.print(f"{label} (detected)", Style.DIM)
        else:
            cli.console.print(label)


@app.command("print")
def print_cmd(
    ctx: typer.Context,
    path: str = typer.Argument(..., help="File to print."),
    version_spec: str | None = typer.Option(None, "--version-spec", help="e.g. C42, T, L1"),
) -> None:
    """Print a file's content, optionally at a version."""
    cli = _context(ctx)
    result = cli.repository.get_file_content(path, version_spec)
    if isinstance(result, Err):
        fail(result.error, cli.console)
    typer.echo(result.value, nl=False)


def main() -> None:
    app()
