"""Limit and validation constants for the dashboard."""

from typing import Final

# ============================================================================
# Validation limits
# ============================================================================

REFRESH_INTERVAL_MIN: Final = 1.0
PAGE_SIZE_MIN: Final = 1
PAGE_SIZE_MAX: Final = 500
REQUEST_TIMEOUT_MIN: Final = 0.1
FETCH_WORKERS_MIN: Final = 1
FETCH_WORKERS_MAX: Final = 16

# ============================================================================
# Display limits
# ============================================================================

DOC_PREVIEW_MAX_CHARS: Final = 120

__all__ = [
    "DOC_PREVIEW_MAX_CHARS",
    "FETCH_WORKERS_MAX",
    "FETCH_WORKERS_MIN",
    "PAGE_SIZE_MAX",
    "PAGE_SIZE_MIN",
    "REFRESH_INTERVAL_MIN",
    "REQUEST_TIMEOUT_MIN",
]
