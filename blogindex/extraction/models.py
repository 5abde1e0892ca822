"""Data models for metadata extraction."""

from typing import List, Optional

from pydantic import BaseModel, Field


class ArticleMetadata(BaseModel):
    """Author-supplied metadata, normalised to record defaults."""

    title: str = Field("", description="Article title, empty if absent")
    cover: str = Field("", description="Cover image reference")
    date: str = Field("", description="Publication date (YYYY-MM-DD)")
    tags: List[str] = Field(default_factory=list, description="Tags in authoring order")
    preview: Optional[str] = Field(None, description="Author-supplied preview, overrides derived one")


class ExtractionResult(BaseModel):
    """Metadata and body split out of one source file."""

    strategy: Optional[str] = Field(None, description="Name of the strategy used, None if no block found")
    metadata: ArticleMetadata = Field(default_factory=ArticleMetadata)
    body: str = Field("", description="Text following the metadata block")
    warnings: List[str] = Field(default_factory=list, description="Data-quality notes")
