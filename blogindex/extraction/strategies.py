"""Metadata extraction strategies.

Two authoring conventions exist in the articles directory:

* a YAML front-matter block delimited by ``---`` lines, and
* a leading self-closing tag carrying ``key="value"`` attributes, e.g.
  ``<meta title="诗" date="2025-12-05" tags="随笔，古诗" />``.

Exactly one strategy runs per file, chosen by ``detect_strategy`` from the
start of the raw text.
"""

import html
import re
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional, Sequence, Tuple

import frontmatter
import yaml

from .models import ArticleMetadata
from .normalize import clean_text, normalize_date, split_tags

BOM = "\ufeff"

FRONT_MATTER_START = re.compile(r"\A-{3,}[ \t]*\r?$", re.MULTILINE)
INLINE_TAG = re.compile(r'\A<([A-Za-z][\w:-]*)((?:[^"<>]|"[^"]*")*?)/>', re.DOTALL)
TAG_ATTRIBUTE = re.compile(r'([\w-]+)\s*=\s*"([^"]*)"')


def _strip_lead(raw_text: str) -> str:
    """Drop a BOM and leading blank lines before detection."""
    return raw_text.lstrip(BOM).lstrip()


class MetadataStrategy(ABC):
    """Base class for metadata extraction strategies."""

    name: str = ""

    @abstractmethod
    def matches(self, raw_text: str) -> bool:
        """Return True if the raw text starts with this strategy's block."""
        pass

    @abstractmethod
    def extract(self, raw_text: str) -> Tuple[Dict[str, Any], str]:
        """
        Split raw text into metadata values and body.

        Args:
            raw_text: Full contents of a source file

        Returns:
            Tuple of (raw metadata mapping, body text)

        Raises:
            ValueError: If the block is present but malformed
        """
        pass

    def build_metadata(self, values: Dict[str, Any]) -> Tuple[ArticleMetadata, List[str]]:
        """Normalise raw values into ArticleMetadata plus data-quality warnings."""
        warnings = []

        try:
            date = normalize_date(values.get("date"))
        except (ValueError, TypeError, OverflowError):
            warnings.append(f"Unparseable date {values.get('date')!r}, left empty")
            date = ""

        preview = values.get("desc")
        if preview is None:
            preview = values.get("description")

        metadata = ArticleMetadata(
            title=clean_text(values.get("title")),
            cover=clean_text(values.get("cover")) or clean_text(values.get("image")),
            date=date,
            tags=split_tags(values.get("tags")),
            preview=clean_text(preview) or None,
        )
        return metadata, warnings


class FrontMatterStrategy(MetadataStrategy):
    """Leading ``key: value`` block between ``---`` markers."""

    name = "front_matter"

    def matches(self, raw_text: str) -> bool:
        return FRONT_MATTER_START.match(_strip_lead(raw_text)) is not None

    def extract(self, raw_text: str) -> Tuple[Dict[str, Any], str]:
        text = _strip_lead(raw_text)
        try:
            post = frontmatter.loads(text)
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid front matter: {e}") from e

        # frontmatter hands back the whole text when the closing marker is missing
        if post.content == text.strip():
            raise ValueError("Unterminated front matter block")

        return dict(post.metadata), post.content


class InlineTagStrategy(MetadataStrategy):
    """Leading self-closing tag with quoted attributes."""

    name = "inline_tag"

    def _match(self, raw_text: str) -> Optional[re.Match]:
        match = INLINE_TAG.match(_strip_lead(raw_text))
        if match and TAG_ATTRIBUTE.search(match.group(2)):
            return match
        return None

    def matches(self, raw_text: str) -> bool:
        return self._match(raw_text) is not None

    def extract(self, raw_text: str) -> Tuple[Dict[str, Any], str]:
        match = self._match(raw_text)
        if match is None:
            raise ValueError("No inline metadata tag found")

        values = {}
        for key, value in TAG_ATTRIBUTE.findall(match.group(2)):
            # First occurrence wins on repeated attributes
            values.setdefault(key, html.unescape(value))

        body = _strip_lead(raw_text)[match.end():].strip()
        return values, body


DEFAULT_STRATEGIES: Tuple[MetadataStrategy, ...] = (FrontMatterStrategy(), InlineTagStrategy())


def detect_strategy(
    raw_text: str,
    strategies: Sequence[MetadataStrategy] = DEFAULT_STRATEGIES,
) -> Optional[MetadataStrategy]:
    """Pick the strategy whose leading pattern the text starts with, if any."""
    for strategy in strategies:
        if strategy.matches(raw_text):
            return strategy
    return None
