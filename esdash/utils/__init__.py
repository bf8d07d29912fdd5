"""Utility helpers."""

from esdash.utils.formatting import (
    compact_json,
    flatten_json,
    format_age,
    format_count,
    highlight_token,
    pretty_json,
    truncate,
)

__all__ = [
    "compact_json",
    "flatten_json",
    "format_age",
    "format_count",
    "highlight_token",
    "pretty_json",
    "truncate",
]
