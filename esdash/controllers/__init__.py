"""Controllers module for esdash.

This module provides the fetch client for the search cluster and the refresh
engine that schedules and dispatches fetches in the background.
"""

from __future__ import annotations

# Base classes
from esdash.controllers.base import BaseFetchClient

# Refresh engine
from esdash.controllers.refresh import FetchCoordinator, RefreshScheduler

# Search domain
from esdash.controllers.search import SearchClusterClient

__all__ = [
    "BaseFetchClient",
    "FetchCoordinator",
    "RefreshScheduler",
    "SearchClusterClient",
]
