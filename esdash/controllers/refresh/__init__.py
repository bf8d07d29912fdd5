"""Refresh engine: request sequencing and background dispatch."""

from esdash.controllers.refresh.coordinator import FetchCoordinator
from esdash.controllers.refresh.scheduler import RefreshScheduler

__all__ = ["FetchCoordinator", "RefreshScheduler"]
