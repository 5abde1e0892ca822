"""Pipeline orchestrator that runs the full index build."""

import time
from pathlib import Path
from typing import Dict, List, Optional

from rich.console import Console
from rich.panel import Panel
from rich.progress import Progress, SpinnerColumn, TaskID, TextColumn, TimeElapsedColumn
from rich.table import Table

from ..config import Config
from ..extraction import MetadataExtractor
from ..index import IndexBuilder, save_index
from ..ingestion import SourceFile, SourceReader, SourceScanner
from ..models import ArticleIndex, BuildStats
from ..summary import ContentSummarizer, create_converter

console = Console()


class PipelineStage:
    """Represents a pipeline stage."""

    def __init__(self, name: str, description: str):
        self.name = name
        self.description = description
        self.start_time: Optional[float] = None
        self.end_time: Optional[float] = None
        self.success = False
        self.error: Optional[str] = None
        self.stats: Dict = {}

    def start(self):
        """Mark stage as started."""
        self.start_time = time.time()

    def complete(self, stats: Optional[Dict] = None):
        """Mark stage as completed successfully."""
        self.end_time = time.time()
        self.success = True
        if stats:
            self.stats.update(stats)

    def fail(self, error: str):
        """Mark stage as failed."""
        self.end_time = time.time()
        self.success = False
        self.error = error

    @property
    def duration(self) -> float:
        """Get stage duration in seconds."""
        if self.start_time and self.end_time:
            return self.end_time - self.start_time
        return 0.0


class PipelineOrchestrator:
    """Scan, read, extract, summarise, sort and write the article index."""

    def __init__(
        self,
        config: Config,
        articles_root: Optional[Path] = None,
        output_path: Optional[Path] = None,
        output_format: Optional[str] = None,
    ):
        """Initialize pipeline orchestrator. Explicit arguments override config."""
        self.config = config
        self.articles_root = Path(articles_root) if articles_root else config.articles_root
        self.output_path = Path(output_path) if output_path else config.output_path
        self.output_format = output_format or config.config.output.format
        self.stages = [
            PipelineStage("scan", "Scanning article sources"),
            PipelineStage("read", "Reading source files"),
            PipelineStage("index", "Extracting metadata and building index"),
            PipelineStage("write", "Writing index artifact"),
        ]
        self.stats = BuildStats()
        self.total_start_time: Optional[float] = None

    def _create_builder(self) -> IndexBuilder:
        summary_config = self.config.config.summary
        summarizer = ContentSummarizer(
            converter=create_converter(summary_config.markdown_extensions),
            preview_max_chars=summary_config.preview_max_chars,
            preview_max_lines=summary_config.preview_max_lines,
            ellipsis=summary_config.ellipsis,
        )
        return IndexBuilder(MetadataExtractor(), summarizer)

    def _start_stage(self, stage: PipelineStage, progress: Optional[Progress]) -> Optional[TaskID]:
        """Start a stage and show its description as a progress task."""
        stage.start()
        if progress is None:
            return None
        return progress.add_task(stage.description, total=1)

    def _end_stage(self, task: Optional[TaskID], progress: Optional[Progress]) -> None:
        if progress is not None and task is not None:
            progress.advance(task, 1)
            progress.remove_task(task)

    def collect(self, progress: Optional[Progress] = None) -> ArticleIndex:
        """
        Run every stage except the write and return the index.

        Raises:
            ArticlesRootNotFoundError: If the articles root is missing
        """
        scanner = SourceScanner(
            self.articles_root,
            self.config.config.extension,
            skip_hidden=self.config.config.skip_hidden,
        )
        reader_config = self.config.config.reader

        # Stage 1: scan
        stage = self.stages[0]
        task = self._start_stage(stage, progress)
        try:
            paths = scanner.scan()
        except Exception as e:
            stage.fail(str(e))
            raise
        self.stats.scanned = len(paths)
        stage.complete({"files": len(paths)})
        self._end_stage(task, progress)

        # Stage 2: read
        stage = self.stages[1]
        task = self._start_stage(stage, progress)
        reader = SourceReader(
            scanner.relative,
            max_concurrent=reader_config.max_concurrent,
            encoding=reader_config.encoding,
        )
        sources: List[SourceFile] = reader.read_all_sync(paths)
        stage.complete({
            "read": sum(1 for s in sources if s.read_success),
            "unreadable": sum(1 for s in sources if not s.read_success),
        })
        self._end_stage(task, progress)

        # Stage 3: extract, summarise, sort
        stage = self.stages[2]
        task = self._start_stage(stage, progress)
        index = self._create_builder().build(sources, self.stats)
        stage.complete({"indexed": self.stats.indexed, "skipped": self.stats.skipped})
        self._end_stage(task, progress)

        return index

    def write(self, index: ArticleIndex, progress: Optional[Progress] = None) -> None:
        """Write the artifact once, after all records are computed."""
        stage = self.stages[3]
        task = self._start_stage(stage, progress)
        try:
            save_index(
                index,
                self.output_path,
                fmt=self.output_format,
                variable_name=self.config.config.output.variable_name,
            )
        except Exception as e:
            stage.fail(str(e))
            raise
        stage.complete({"path": str(self.output_path)})
        self._end_stage(task, progress)

    def run(self) -> ArticleIndex:
        """
        Run the complete pipeline.

        Returns:
            The index that was written

        Raises:
            ArticlesRootNotFoundError: If the articles root is missing
        """
        self.total_start_time = time.time()

        console.print(Panel.fit(
            f"Article index build\n"
            f"Articles: {self.articles_root} • Output: {self.output_path}",
            style="bold blue",
        ))

        try:
            with Progress(
                SpinnerColumn(),
                TextColumn("[progress.description]{task.description}"),
                TimeElapsedColumn(),
                console=console,
                transient=True,
            ) as progress:
                index = self.collect(progress)
                self.write(index, progress)
        finally:
            self._print_summary()

        return index

    def _print_summary(self):
        """Print pipeline execution summary."""
        total_duration = time.time() - self.total_start_time if self.total_start_time else 0

        table = Table(title="Pipeline Summary")
        table.add_column("Stage", style="cyan")
        table.add_column("Status", style="bold")
        table.add_column("Duration", style="yellow")
        table.add_column("Details", style="dim")

        for stage in self.stages:
            if stage.start_time is None:
                status = "[dim]-[/dim]"
            else:
                status = "[green]✓[/green]" if stage.success else "[red]✗[/red]"
            duration = f"{stage.duration:.2f}s" if stage.duration > 0 else "-"

            details = ""
            if stage.success and stage.stats:
                if stage.name == "scan":
                    details = f"{stage.stats.get('files', 0)} files"
                elif stage.name == "read":
                    details = f"{stage.stats.get('read', 0)} read, {stage.stats.get('unreadable', 0)} unreadable"
                elif stage.name == "index":
                    details = f"{stage.stats.get('indexed', 0)} indexed, {stage.stats.get('skipped', 0)} skipped"
                elif stage.name == "write":
                    details = stage.stats.get("path", "")
            elif stage.error:
                details = stage.error

            table.add_row(stage.name.title(), status, duration, details)

        console.print("\n")
        console.print(table)

        if all(stage.success for stage in self.stages):
            console.print(Panel(
                f"[green]Index built[/green]\n\n"
                f"Articles indexed: {self.stats.indexed}\n"
                f"Files skipped: {self.stats.skipped}\n"
                f"Duration: {total_duration:.2f} seconds\n"
                f"Output: {self.output_path}",
                style="green",
            ))
        else:
            failed_stages = [s.name for s in self.stages if s.start_time is not None and not s.success]
            console.print(Panel(
                f"[red]Build failed[/red]\n\n"
                f"Failed stages: {', '.join(failed_stages) or 'none'}\n"
                f"Duration: {total_duration:.2f} seconds",
                style="red",
            ))
