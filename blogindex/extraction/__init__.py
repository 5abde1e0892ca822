"""Metadata extraction from article sources."""

from .extractor import MetadataExtractor
from .models import ArticleMetadata, ExtractionResult
from .normalize import normalize_date, split_tags
from .strategies import (
    DEFAULT_STRATEGIES,
    FrontMatterStrategy,
    InlineTagStrategy,
    MetadataStrategy,
    detect_strategy,
)

__all__ = [
    "ArticleMetadata",
    "DEFAULT_STRATEGIES",
    "ExtractionResult",
    "FrontMatterStrategy",
    "InlineTagStrategy",
    "MetadataExtractor",
    "MetadataStrategy",
    "detect_strategy",
    "normalize_date",
    "split_tags",
]
