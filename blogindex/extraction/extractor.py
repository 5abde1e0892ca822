"""Metadata extractor dispatching to one strategy per file."""

from typing import Optional, Sequence

from ..errors import MetadataParseError
from ..ingestion.models import SourceFile
from .models import ArticleMetadata, ExtractionResult
from .strategies import DEFAULT_STRATEGIES, MetadataStrategy, detect_strategy


class MetadataExtractor:
    """Split source files into metadata and body."""

    def __init__(self, strategies: Optional[Sequence[MetadataStrategy]] = None) -> None:
        self.strategies = tuple(strategies) if strategies is not None else DEFAULT_STRATEGIES

    def extract_text(self, raw_text: str) -> ExtractionResult:
        """
        Extract metadata from raw text.

        Only the detected strategy runs. Text with no recognised block is
        returned whole as the body with default metadata and a warning.

        Raises:
            ValueError: If the detected block is malformed
        """
        strategy = detect_strategy(raw_text, self.strategies)
        if strategy is None:
            return ExtractionResult(
                strategy=None,
                metadata=ArticleMetadata(),
                body=raw_text.lstrip("\ufeff").strip(),
                warnings=["No metadata block found"],
            )

        values, body = strategy.extract(raw_text)
        metadata, warnings = strategy.build_metadata(values)
        return ExtractionResult(
            strategy=strategy.name,
            metadata=metadata,
            body=body,
            warnings=warnings,
        )

    def extract(self, source: SourceFile) -> ExtractionResult:
        """Extract metadata from a read source file."""
        try:
            return self.extract_text(source.text)
        except ValueError as e:
            raise MetadataParseError(source.path, str(e), cause=e) from e
