"""Formatting helpers for the dashboard view."""

from __future__ import annotations

import json
from datetime import datetime
from typing import Any

from esdash.constants.values import STATUS_NEVER


def format_age(then: datetime | None, now: datetime) -> str:
    """Render how long ago ``then`` was, e.g. ``"4s ago"`` or ``"2m ago"``."""
    if then is None:
        return STATUS_NEVER
    seconds = max(0, int((now - then).total_seconds()))
    if seconds < 60:
        return f"{seconds}s ago"
    if seconds < 3600:
        return f"{seconds // 60}m ago"
    return f"{seconds // 3600}h ago"


def format_count(value: int | None) -> str:
    return "-" if value is None else f"{value:,}"


def truncate(text: str, limit: int) -> str:
    if len(text) <= limit:
        return text
    return text[: max(0, limit - 1)] + "…"


def compact_json(value: Any) -> str:
    """Single-line JSON used for document previews."""
    return json.dumps(value, ensure_ascii=False, separators=(",", ":"), default=str)


def pretty_json(value: Any) -> str:
    return json.dumps(value, ensure_ascii=False, indent=2, sort_keys=True, default=str)


def flatten_json(value: Any, prefix: str = "") -> list[tuple[str, Any]]:
    """Flatten nested objects and arrays into ``(dotted.path, leaf)`` pairs.

    Array elements use ``[i]`` suffixes; empty containers are kept as leaves.
    """
    if isinstance(value, dict) and value:
        pairs: list[tuple[str, Any]] = []
        for key, child in value.items():
            path = f"{prefix}.{key}" if prefix else str(key)
            pairs.extend(flatten_json(child, path))
        return pairs
    if isinstance(value, list) and value:
        pairs = []
        for position, child in enumerate(value):
            pairs.extend(flatten_json(child, f"{prefix}[{position}]"))
        return pairs
    return [(prefix, value)]


def highlight_token(query: str) -> str | None:
    """First term of a query, unquoted, used to highlight matches in a document."""
    for part in query.split():
        token = part.strip('"').strip("'")
        return token or None
    return None
