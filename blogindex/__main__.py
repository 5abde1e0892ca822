"""Allow running as ``python -m blogindex``."""

from .cli.app import app

app()
