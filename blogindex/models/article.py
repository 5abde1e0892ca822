"""Article record emitted into the index."""

from typing import List

from pydantic import BaseModel, ConfigDict, Field


class ArticleRecord(BaseModel):
    """One article's metadata plus derived summary fields."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    title: str = Field(..., min_length=1, description="Article title")
    slug: str = Field(..., description="Relative path without extension")
    file_path: str = Field(..., alias="filePath", description="Path relative to the articles root")
    cover: str = Field("", description="Cover image reference")
    date: str = Field("", description="Publication date (YYYY-MM-DD)")
    word_count: int = Field(0, alias="wordCount", ge=0, description="Derived word count")
    preview: str = Field("", description="Short preview text")
    tags: List[str] = Field(default_factory=list, description="Tags in authoring order")

    def to_output(self) -> dict:
        """Serialize with the field names the client expects."""
        return self.model_dump(by_alias=True)
