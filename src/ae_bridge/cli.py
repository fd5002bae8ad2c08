"""Command-line interface for ae-bridge."""

import asyncio
import json
from functools import partial
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ae_bridge.applescript import AppleScriptError
from ae_bridge.config import Settings, load_settings

app = typer.Typer(
    name="ae-bridge",
    help="Run ExtendScript inside Adobe After Effects on macOS",
    no_args_is_help=True,
)
console = Console()

EXAMPLE_CONFIG = """# ae-bridge configuration
# Every value can also be set with an AE_BRIDGE_* environment variable.

# Directory searched for "Adobe After Effects*.app"
program_dir: /Applications

# Target the Render Engine bundle (not supported for execution)
render_engine: false

# Seconds to wait for osascript; leave unset to wait indefinitely
# timeout: 300

log_level: INFO
"""


def get_settings(config: Path | None = None) -> Settings:
    """Load application settings."""
    return load_settings(config)


def _setup_logging(settings: Settings) -> None:
    from ae_bridge.logging import setup_logging

    setup_logging(
        log_dir=settings.log_dir,
        log_level=settings.log_level,
        max_bytes=settings.log_rotation_size_mb * 1024 * 1024,
        backup_count=settings.log_backup_count,
    )


@app.command()
def version() -> None:
    """Show version information."""
    from ae_bridge import __version__

    console.print(f"ae-bridge v{__version__}")


@app.command()
def init(
    config_dir: Annotated[
        Path | None,
        typer.Option("--config-dir", "-c", help="Configuration directory"),
    ] = None,
) -> None:
    """Initialize configuration directory with an example config file."""
    settings = Settings()
    if config_dir:
        settings.config_dir = config_dir

    settings.ensure_config_dir()

    if settings.config_path.exists():
        console.print(f"[yellow]Exists[/yellow] {escape(str(settings.config_path))}")
        return

    settings.config_path.write_text(EXAMPLE_CONFIG)
    console.print(f"[green]Created[/green] {escape(str(settings.config_path))}")


@app.command()
def config(
    config_file: Annotated[
        Path | None,
        typer.Option("--config", "-c", help="Config file to load"),
    ] = None,
) -> None:
    """Show the effective settings."""
    settings = get_settings(config_file)

    table = Table(title="ae-bridge Settings")
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="green")

    for name, value in settings.model_dump().items():
        table.add_row(name, "" if value is None else escape(str(value)))

    console.print(table)


@app.command()
def locate(
    program_dir: Annotated[
        Path | None,
        typer.Option("--program-dir", "-d", help="Directory to search"),
    ] = None,
    render_engine: Annotated[
        bool, typer.Option("--render-engine", help="Find the Render Engine bundle")
    ] = False,
    config_file: Annotated[
        Path | None,
        typer.Option("--config", "-c", help="Config file to load"),
    ] = None,
) -> None:
    """Print the path of the installed After Effects bundle."""
    from ae_bridge.locator import find_after_effects_sync

    settings = get_settings(config_file)
    root = program_dir or settings.program_dir

    try:
        handle = find_after_effects_sync(root, render_engine or settings.render_engine)
    except OSError as e:
        console.print(f"[red]Could not search {escape(str(root))}:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    if handle is None:
        console.print(f"[red]After Effects not found under[/red] {escape(str(root))}")
        raise typer.Exit(1)

    console.print(str(handle), soft_wrap=True, markup=False)


@app.command()
def run(
    script: Annotated[Path, typer.Argument(help="ExtendScript file to run")],
    result: Annotated[
        Path | None,
        typer.Option("--result", "-r", help="JSON result file the script writes"),
    ] = None,
    program_dir: Annotated[
        Path | None,
        typer.Option("--program-dir", "-d", help="Directory to search for After Effects"),
    ] = None,
    timeout: Annotated[
        float | None,
        typer.Option("--timeout", "-t", help="Seconds to wait for osascript"),
    ] = None,
    use_async: Annotated[
        bool, typer.Option("--async", help="Run through the asyncio interface")
    ] = False,
    config_file: Annotated[
        Path | None,
        typer.Option("--config", "-c", help="Config file to load"),
    ] = None,
) -> None:
    """Run an ExtendScript file inside After Effects."""
    from ae_bridge.bridge import AfterEffects, raw_script

    settings = get_settings(config_file)
    if program_dir:
        settings.program_dir = program_dir
    if timeout:
        settings.timeout = timeout
    _setup_logging(settings)

    try:
        source = script.read_text(encoding="utf-8")
    except OSError as e:
        console.print(f"[red]Could not read script:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    def print_logs(*lines: object) -> None:
        for line in lines:
            console.print(escape(str(line)), style="dim")

    bridge = AfterEffects(
        settings,
        transpiler=partial(raw_script, result_path=result),
        log_sink=print_logs,
    )

    try:
        if use_async:
            payload = asyncio.run(bridge.execute(source))
        else:
            payload = bridge.execute_sync(source)
    except (AppleScriptError, OSError) as e:
        console.print(f"[red]Failed:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    if result is not None:
        console.print_json(json.dumps(payload))


if __name__ == "__main__":
    app()
