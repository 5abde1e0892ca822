"""Init command implementation."""

from pathlib import Path

import typer
from rich.console import Console
from rich.panel import Panel

from ..config import DEFAULT_CONFIG_NAME, ConfigModel, save_config

console = Console()


def init_command(
    config_path: Path = typer.Option(
        Path(DEFAULT_CONFIG_NAME),
        "--config",
        "-c",
        help="Where to write the config file",
    ),
    force: bool = typer.Option(False, "--force", help="Overwrite an existing config file"),
) -> None:
    """Write a config file with default settings."""
    if config_path.exists() and not force:
        console.print(f"[yellow]Config already exists: {config_path}[/yellow]")
        console.print("Use --force to overwrite.")
        raise typer.Exit(1)

    config = ConfigModel()
    save_config(config, config_path)

    console.print(Panel(
        f"[green]✅ Config written[/green]\n\n"
        f"Config: {config_path}\n"
        f"Articles root: {config.articles_root}\n"
        f"Output: {config.output.path}\n\n"
        f"Next: run 'blogindex build'",
        style="green",
    ))
