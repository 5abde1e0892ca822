"""Aggregate index and build statistics."""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field

from .article import ArticleRecord


class ArticleIndex(BaseModel):
    """Ordered sequence of article records, in display order."""

    records: List[ArticleRecord] = Field(default_factory=list, description="Records, newest first")
    generated_at: Optional[datetime] = Field(None, description="When the index was built")

    def __len__(self) -> int:
        return len(self.records)

    def find(self, key: str) -> Optional[ArticleRecord]:
        """Look up a record by slug or filePath, as the detail view does."""
        for record in self.records:
            if record.slug == key or record.file_path == key:
                return record
        return None

    def to_output(self) -> List[dict]:
        """Serialize records for the output artifact."""
        return [record.to_output() for record in self.records]


class BuildStats(BaseModel):
    """Counters and warnings collected during one build."""

    scanned: int = Field(0, description="Source files found")
    indexed: int = Field(0, description="Records written to the index")
    skipped: int = Field(0, description="Files excluded from the index")
    warnings: List[str] = Field(default_factory=list, description="Per-file issues")

    def warn(self, message: str) -> None:
        self.warnings.append(message)
