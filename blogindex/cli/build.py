"""Build command implementation."""

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from ..config import Config
from ..errors import ArticlesRootNotFoundError, ConfigError
from ..pipeline import PipelineOrchestrator

console = Console()


def build_command(
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
    output: Optional[Path] = typer.Option(
        None,
        "--output",
        "-o",
        help="Output artifact path",
    ),
    output_format: Optional[str] = typer.Option(
        None,
        "--format",
        "-f",
        help="Output format (js, json)",
    ),
) -> None:
    """Rescan all articles and regenerate the index artifact."""
    if output_format is not None and output_format not in ("js", "json"):
        console.print(f"[red]Unknown format: {output_format}. Use 'js' or 'json'.[/red]")
        raise typer.Exit(2)

    try:
        config = Config(config_path)
        orchestrator = PipelineOrchestrator(
            config,
            articles_root=root,
            output_path=output,
            output_format=output_format,
        )
        orchestrator.run()
    except ArticlesRootNotFoundError as e:
        console.print(f"[red]❌ {e}[/red]")
        console.print("Check 'articles_root' in your config or pass --root.")
        raise typer.Exit(1)
    except ConfigError as e:
        console.print(f"[red]❌ {e}[/red]")
        raise typer.Exit(1)
    except KeyboardInterrupt:
        console.print("\n[yellow]Build interrupted by user[/yellow]")
        raise typer.Exit(1)
    except OSError as e:
        console.print(f"[red]Could not write index: {e}[/red]")
        raise typer.Exit(1)
