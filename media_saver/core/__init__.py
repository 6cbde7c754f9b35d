"""
Core utilities for the media saver.

This package hosts pure, side‑effect‑free logic (the extension allow-list and
the duration codec) kept apart from the filesystem services and the CLI.
"""

__all__ = [
    "SUPPORTED_EXTENSIONS",
    "is_supported",
    "category_of",
    "normalized_extension",
    "DurationParseError",
    "parse_duration",
    "format_duration",
    "add_durations",
    "subtract_durations",
]

from .extensions import SUPPORTED_EXTENSIONS, is_supported, category_of, normalized_extension
from .durations import (
    DurationParseError,
    parse_duration,
    format_duration,
    add_durations,
    subtract_durations,
)
