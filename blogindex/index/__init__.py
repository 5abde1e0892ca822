"""Index assembly and serialisation."""

from .builder import IndexBuilder, sort_records
from .writer import render_index, save_index

__all__ = ["IndexBuilder", "render_index", "save_index", "sort_records"]
