"""
tokenplug CLI.

Commands:
- build: run the plugins configured in tokens.config.yaml
- strip-group: remove a reserved token group from a stylesheet
- modes: list modes and collections found in a token file
- plugins: list available plugins
"""

from __future__ import annotations

import logging
from pathlib import Path

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from ._version import get_version
from .build import run_build
from .core.config import CONFIG_FILE, load_project_config
from .core.errors import TokenPlugError
from .core.grouping import detect_modes, group_by_collection_and_mode
from .core.loader import load_tokens
from .plugins import get_default_registry
from .postprocess import DEFAULT_GROUP, strip_stylesheet

app = typer.Typer(
    help="Build platform resource files from design tokens.",
    no_args_is_help=True,
)

console = Console()


def configure_logging(verbose: bool = False) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def version_callback(value: bool) -> None:
    if value:
        typer.echo(f"tokenplug {get_version()}")
        raise typer.Exit()


@app.callback()
def main_callback(
    version: bool | None = typer.Option(
        None,
        "--version",
        "-V",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """tokenplug CLI main callback for global options."""
    configure_logging(verbose)


@app.command("build")
def build_command(
    config: Path = typer.Option(
        Path(CONFIG_FILE), "--config", "-c", help="Config file or directory containing one"
    ),
) -> None:
    """Run every configured plugin and write the generated files."""
    try:
        project = load_project_config(config)
        report = run_build(project)
    except TokenPlugError as e:
        console.print(f"[red]Build failed:[/red] {e}")
        raise typer.Exit(code=1)

    for path in report.files_written:
        console.print(f"[green]✓[/green] {path}")
    for path in report.stylesheets_stripped:
        console.print(f"[green]✓[/green] stripped {path}")

    for plugin, warnings in report.warnings.items():
        for warning in warnings:
            console.print(f"[yellow]⚠ {plugin}:[/yellow] {warning}")

    console.print(
        f"Wrote {len(report.files_written)} file(s) with {report.warning_count} warning(s)"
    )


@app.command("strip-group")
def strip_group_command(
    stylesheet: Path = typer.Argument(..., help="Generated stylesheet to clean in place"),
    group: str = typer.Option(DEFAULT_GROUP, "--group", "-g", help="Token group name to remove"),
) -> None:
    """Remove every block for a token group from a generated stylesheet."""
    try:
        changed = strip_stylesheet(stylesheet, group)
    except TokenPlugError as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(code=1)

    if changed:
        console.print(f"[green]Removed '{group}' blocks from {stylesheet}[/green]")
    else:
        console.print(f"No '{group}' blocks found in {stylesheet}")


@app.command("modes")
def modes_command(
    tokens: Path = typer.Argument(..., help="Token JSON file"),
) -> None:
    """List the modes and, per mode, the collections that override tokens."""
    try:
        document = load_tokens(tokens)
    except TokenPlugError as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(code=1)

    modes = detect_modes(document.tokens)
    if not modes:
        console.print(f"No modes in {tokens} ({len(document.tokens)} token(s))")
        return

    table = Table(title=f"Modes in {tokens.name}")
    table.add_column("Mode")
    table.add_column("Collection")
    table.add_column("Tokens", justify="right")
    for mode in modes:
        for collection, group in group_by_collection_and_mode(document.tokens, mode).items():
            table.add_row(mode, collection, str(len(group)))
    console.print(table)


@app.command("plugins")
def plugins_command() -> None:
    """List available plugins."""
    registry = get_default_registry()
    for name in registry.list_plugins():
        capabilities = registry.create(name).get_capabilities()
        formats = ", ".join(capabilities.output_formats)
        console.print(f"[bold]{name}[/bold] ({formats}): {capabilities.description}")


def main() -> None:
    app()


if __name__ == "__main__":
    main()
