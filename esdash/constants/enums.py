"""All enum definitions for the dashboard.

This module consolidates all enumerations used throughout the application.
"""

from enum import Enum

# =============================================================================
# Cluster Status Enums
# =============================================================================

class ClusterStatus(Enum):
    """Cluster and index health colours reported by the search cluster."""

    GREEN = "green"
    YELLOW = "yellow"
    RED = "red"
    UNKNOWN = "unknown"

    @classmethod
    def parse(cls, value: object) -> "ClusterStatus":
        """Map a raw status string to a member, falling back to UNKNOWN."""
        normalized = str(value or "").strip().lower()
        for member in cls:
            if member.value == normalized:
                return member
        return cls.UNKNOWN


# =============================================================================
# Fetch Enums
# =============================================================================

class ResourceKind(Enum):
    """Kinds of resources the dashboard fetches."""

    HEALTH = "health"
    INDICES = "indices"
    DOCUMENTS = "documents"


class FetchErrorKind(Enum):
    """Failure categories surfaced by the fetch client."""

    TIMEOUT = "timeout"
    REFUSED = "refused"
    SERVER_ERROR = "server_error"
    DECODE_ERROR = "decode_error"
    UNEXPECTED = "unexpected"


# =============================================================================
# Interaction Enums
# =============================================================================

class InputMode(Enum):
    """How key presses are interpreted."""

    NORMAL = "normal"
    FILTER_EDIT = "filter_edit"
    INDEX_FILTER = "index_filter"


class Focus(Enum):
    """Which panel receives navigation keys."""

    INDICES = "indices"
    DOCUMENTS = "documents"


class DocViewMode(Enum):
    """Rendering mode for the document drawer."""

    PRETTY = "pretty"
    RAW = "raw"
    FLATTEN = "flatten"

    def next(self) -> "DocViewMode":
        """Return the mode that follows this one in the cycle."""
        members = list(DocViewMode)
        return members[(members.index(self) + 1) % len(members)]


__all__ = [
    "ClusterStatus",
    "DocViewMode",
    "FetchErrorKind",
    "Focus",
    "InputMode",
    "ResourceKind",
]
