"""Derive word count and preview from markdown bodies."""

import re
from typing import Iterable, Optional

import markdown
from bs4 import BeautifulSoup

from .models import ContentSummary

DEFAULT_EXTENSIONS = ("fenced_code", "tables")

WHITESPACE = re.compile(r"\s+")


def create_converter(extensions: Optional[Iterable[str]] = None) -> markdown.Markdown:
    """Create the markdown converter shared by one build."""
    if extensions is None:
        extensions = DEFAULT_EXTENSIONS
    return markdown.Markdown(extensions=list(extensions))


class ContentSummarizer:
    """
    Summarise article bodies.

    Word count is the number of non-whitespace characters left after the
    body is rendered to HTML and the tags are stripped. Articles are mostly
    written in Chinese, where whitespace tokens say nothing about length.
    A non-blank body with no visible text, such as a lone image, is counted
    on its markdown source so only blank bodies count zero.

    The preview is the first few non-blank lines of the same plain text,
    joined by single spaces and cut to a character budget. The ellipsis is
    only added when something was cut.
    """

    def __init__(
        self,
        converter: markdown.Markdown,
        preview_max_chars: int = 50,
        preview_max_lines: int = 5,
        ellipsis: str = "...",
    ) -> None:
        self.converter = converter
        self.preview_max_chars = preview_max_chars
        self.preview_max_lines = preview_max_lines
        self.ellipsis = ellipsis

    def to_text(self, body: str) -> str:
        """Render markdown and strip all markup."""
        if not body.strip():
            return ""
        self.converter.reset()
        rendered = self.converter.convert(body)
        return BeautifulSoup(rendered, "html.parser").get_text()

    def count_words(self, text: str) -> int:
        return len(WHITESPACE.sub("", text))

    def truncate(self, text: str) -> tuple:
        """Cut text to the preview budget. Returns (text, truncated)."""
        text = WHITESPACE.sub(" ", text).strip()
        if len(text) <= self.preview_max_chars:
            return text, False
        return text[: self.preview_max_chars].rstrip() + self.ellipsis, True

    def make_preview(self, text: str) -> tuple:
        lines = [line.strip() for line in text.splitlines() if line.strip()]
        return self.truncate(" ".join(lines[: self.preview_max_lines]))

    def summarize(self, body: str) -> ContentSummary:
        """Derive word count and preview. Never raises on empty input."""
        text = self.to_text(body)
        preview, truncated = self.make_preview(text)
        word_count = self.count_words(text)
        if word_count == 0 and body.strip():
            # Nothing visible once rendered (image-only, comments): count the source
            word_count = self.count_words(body)
        return ContentSummary(
            word_count=word_count,
            preview=preview,
            truncated=truncated,
        )
