"""Data models for the article index."""

from .article import ArticleRecord
from .index import ArticleIndex, BuildStats

__all__ = ["ArticleRecord", "ArticleIndex", "BuildStats"]
