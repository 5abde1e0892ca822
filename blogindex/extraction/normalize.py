"""Normalisation of raw metadata values."""

import re
from datetime import date, datetime
from typing import Any, List

import pendulum

TAG_SEPARATORS = re.compile(r"[，,]")


def normalize_date(value: Any) -> str:
    """
    Normalise a date value to ``YYYY-MM-DD``.

    Args:
        value: A date, datetime or date-like string. YAML front matter
            yields date objects, inline tags yield strings.

    Returns:
        The ISO calendar date, or an empty string for missing values.

    Raises:
        ValueError: If the value is present but not a calendar date.
    """
    if value is None:
        return ""
    if isinstance(value, datetime):
        return value.date().isoformat()
    if isinstance(value, date):
        return value.isoformat()

    text = str(value).strip()
    if not text:
        return ""

    parsed = pendulum.parse(text, strict=False)
    if not hasattr(parsed, "to_date_string"):
        raise ValueError(f"Not a calendar date: {text!r}")
    return parsed.to_date_string()


def split_tags(value: Any) -> List[str]:
    """Turn a tag list or a comma-joined tag string into trimmed tags."""
    if value is None:
        return []
    if isinstance(value, str):
        items = TAG_SEPARATORS.split(value)
    elif isinstance(value, (list, tuple)):
        items = value
    else:
        items = [value]

    tags = []
    for item in items:
        if item is None:
            continue
        tag = str(item).strip()
        if tag:
            tags.append(tag)
    return tags


def clean_text(value: Any) -> str:
    """Stringify a scalar metadata value; None becomes empty."""
    if value is None:
        return ""
    return str(value).strip()
