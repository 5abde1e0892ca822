"""List command implementation."""

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from ..config import Config
from ..errors import ArticlesRootNotFoundError, ConfigError
from ..pipeline import PipelineOrchestrator

console = Console()


def list_command(
    config_path: Optional[Path] = typer.Option(
        None,
        "--config",
        "-c",
        help="Config file. Default: ./blogindex.yaml or $BLOGINDEX_CONFIG",
    ),
    root: Optional[Path] = typer.Option(
        None,
        "--root",
        "-r",
        help="Articles root directory",
    ),
) -> None:
    """Show the index in display order without writing it."""
    try:
        orchestrator = PipelineOrchestrator(Config(config_path), articles_root=root)
        index = orchestrator.collect()
    except (ArticlesRootNotFoundError, ConfigError) as e:
        console.print(f"[red]❌ {e}[/red]")
        raise typer.Exit(1)

    if not len(index):
        console.print("[yellow]No articles found.[/yellow]")
        return

    table = Table(title=f"Articles ({len(index)})")
    table.add_column("Date", style="yellow")
    table.add_column("Title", style="cyan")
    table.add_column("Slug", style="blue")
    table.add_column("Words", style="green", justify="right")
    table.add_column("Tags", style="magenta")

    for record in index.records:
        table.add_row(
            record.date or "-",
            record.title,
            record.slug,
            str(record.word_count),
            ", ".join(record.tags),
        )

    console.print(table)
