"""Configuration models."""

from typing import List, Literal

from pydantic import BaseModel, Field, field_validator


class OutputConfig(BaseModel):
    """Output artifact configuration."""

    path: str = Field("public/js/api/article-data.js", description="Generated index file")
    format: Literal["js", "json"] = Field("js", description="Artifact format (js module or bare json)")
    variable_name: str = Field("allArticles", description="Exported variable name for js output")

    @field_validator("variable_name")
    @classmethod
    def validate_variable_name(cls, v: str) -> str:
        """Variable name must be a plain JS identifier."""
        if not v.isidentifier():
            raise ValueError(f"Not a valid identifier: {v!r}")
        return v


class SummaryConfig(BaseModel):
    """Preview and word count settings."""

    preview_max_chars: int = Field(50, description="Preview character budget", ge=1, le=1000)
    preview_max_lines: int = Field(5, description="Leading lines considered for preview", ge=1, le=50)
    ellipsis: str = Field("...", description="Marker appended to truncated previews")
    markdown_extensions: List[str] = Field(
        default_factory=lambda: ["fenced_code", "tables"],
        description="Extensions for the markdown converter",
    )


class ReaderConfig(BaseModel):
    """Source reading settings."""

    max_concurrent: int = Field(8, description="Concurrent file reads", ge=1, le=64)
    encoding: str = Field("utf-8", description="Source file encoding")


class ConfigModel(BaseModel):
    """Main configuration model."""

    articles_root: str = Field("articles", description="Directory holding article sources")
    extension: str = Field(".md", description="Article source extension")
    skip_hidden: bool = Field(False, description="Leave out dot-prefixed files and directories when scanning")
    output: OutputConfig = Field(default_factory=OutputConfig)
    summary: SummaryConfig = Field(default_factory=SummaryConfig)
    reader: ReaderConfig = Field(default_factory=ReaderConfig)

    @field_validator("extension")
    @classmethod
    def validate_extension(cls, v: str) -> str:
        """Extension must include the leading dot."""
        if not v.startswith(".") or len(v) < 2:
            raise ValueError(f"Extension must look like '.md', got {v!r}")
        return v
