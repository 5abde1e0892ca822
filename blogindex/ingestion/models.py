"""Data models for ingestion."""

from pathlib import Path, PurePosixPath
from typing import Optional

from pydantic import BaseModel, Field


class SourceFile(BaseModel):
    """One article source file and its raw text."""

    path: Path = Field(..., description="Absolute path to the file")
    relative_path: str = Field(..., description="Path relative to the articles root, '/' separated")
    text: str = Field("", description="Raw file contents")
    read_success: bool = Field(True, description="Whether the file was read")
    error: Optional[str] = Field(None, description="Error message if reading failed")

    @property
    def slug(self) -> str:
        """Relative path with the source extension stripped."""
        return str(PurePosixPath(self.relative_path).with_suffix(""))
