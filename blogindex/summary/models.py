"""Data models for summarisation."""

from pydantic import BaseModel, Field


class ContentSummary(BaseModel):
    """Fields derived from an article body."""

    word_count: int = Field(0, description="Non-whitespace characters of the rendered text", ge=0)
    preview: str = Field("", description="Leading text, truncated")
    truncated: bool = Field(False, description="Whether the preview was cut")
