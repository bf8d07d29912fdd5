"""Scalar constants for the dashboard.

All application-level constants with proper type hints using Final.
"""

from typing import Final

# ============================================================================
# Application
# ============================================================================

APP_TITLE: Final = "esdash"

# ============================================================================
# Status markup (rich styles per cluster status value)
# ============================================================================

STATUS_STYLES: Final = {
    "green": "bold green",
    "yellow": "bold yellow",
    "red": "bold red",
    "unknown": "grey50",
}

# ============================================================================
# Placeholders
# ============================================================================

PLACEHOLDER_EMPTY: Final = "-"
STATUS_NEVER: Final = "never"

__all__ = [
    "APP_TITLE",
    "PLACEHOLDER_EMPTY",
    "STATUS_NEVER",
    "STATUS_STYLES",
]
