"""Assemble article records into the ordered index."""

from typing import Iterable, List, Optional

import pendulum
from rich.console import Console

from ..errors import MissingTitleError, SourceError, SourceReadError
from ..extraction import ExtractionResult, MetadataExtractor
from ..ingestion.models import SourceFile
from ..models import ArticleIndex, ArticleRecord, BuildStats
from ..summary import ContentSummarizer

console = Console()


def sort_records(records: Iterable[ArticleRecord]) -> List[ArticleRecord]:
    """Newest first; equal dates ordered by file path. Undated records go last."""
    ordered = sorted(records, key=lambda r: r.file_path)
    # Stable sort keeps the path order within each date
    ordered.sort(key=lambda r: r.date, reverse=True)
    return ordered


class IndexBuilder:
    """Turn read source files into an ordered ArticleIndex."""

    def __init__(
        self,
        extractor: MetadataExtractor,
        summarizer: ContentSummarizer,
        verbose: bool = True,
    ) -> None:
        self.extractor = extractor
        self.summarizer = summarizer
        self.verbose = verbose

    def _warn(self, stats: BuildStats, message: str) -> None:
        stats.warn(message)
        if self.verbose:
            console.print(f"[yellow]Warning: {message}[/yellow]")

    def build_record(self, source: SourceFile, extraction: ExtractionResult) -> ArticleRecord:
        """
        Build one record from extracted metadata and the summarised body.

        Raises:
            MissingTitleError: If no title was extracted
        """
        metadata = extraction.metadata
        if not metadata.title:
            raise MissingTitleError(source.path, "missing required title")

        summary = self.summarizer.summarize(extraction.body)
        preview = summary.preview
        if metadata.preview is not None:
            preview = metadata.preview
            if len(preview) > self.summarizer.preview_max_chars:
                preview, _ = self.summarizer.truncate(preview)

        return ArticleRecord(
            title=metadata.title,
            slug=source.slug,
            file_path=source.relative_path,
            cover=metadata.cover,
            date=metadata.date,
            word_count=summary.word_count,
            preview=preview,
            tags=metadata.tags,
        )

    def process(self, source: SourceFile, stats: BuildStats) -> Optional[ArticleRecord]:
        """Process one source. Per-file failures are recorded and yield None."""
        try:
            if not source.read_success:
                raise SourceReadError(source.path, source.error or "unreadable")

            extraction = self.extractor.extract(source)
            for note in extraction.warnings:
                self._warn(stats, f"{source.relative_path}: {note}")

            return self.build_record(source, extraction)
        except SourceError as e:
            self._warn(stats, f"Skipping {source.relative_path}: {e}")
            return None

    def build(self, sources: Iterable[SourceFile], stats: Optional[BuildStats] = None) -> ArticleIndex:
        """Build the index from all sources, skipping files that fail."""
        if stats is None:
            stats = BuildStats()

        records = {}
        for source in sorted(sources, key=lambda s: s.relative_path):
            record = self.process(source, stats)
            if record is None:
                stats.skipped += 1
                continue
            if record.slug in records:
                self._warn(stats, f"Skipping {source.relative_path}: duplicate slug {record.slug!r}")
                stats.skipped += 1
                continue
            records[record.slug] = record

        ordered = sort_records(records.values())
        stats.indexed = len(ordered)
        return ArticleIndex(records=ordered, generated_at=pendulum.now())
