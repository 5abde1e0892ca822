"""Build-time article index generator for the blog."""

__version__ = "0.1.0"
