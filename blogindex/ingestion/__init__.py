"""Source discovery and reading."""

from .models import SourceFile
from .reader import SourceReader
from .scanner import SourceScanner

__all__ = ["SourceFile", "SourceReader", "SourceScanner"]
