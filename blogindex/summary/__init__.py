"""Word count and preview derivation."""

from .models import ContentSummary
from .summarizer import ContentSummarizer, create_converter

__all__ = ["ContentSummary", "ContentSummarizer", "create_converter"]
