"""Timeout constants for the dashboard.

All timeout and interval values for HTTP requests and refresh cycles.
"""

from typing import Final

# ============================================================================
# HTTP timeouts (float, in seconds)
# ============================================================================

REQUEST_TIMEOUT: Final = 3.0

# ============================================================================
# Render cadence (float, in seconds)
# ============================================================================

STATUS_REDRAW_INTERVAL: Final = 1.0

__all__ = [
    "REQUEST_TIMEOUT",
    "STATUS_REDRAW_INTERVAL",
]
