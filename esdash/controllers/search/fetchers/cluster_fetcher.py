"""Cluster fetcher for search client - fetches health and index listings."""

from __future__ import annotations

from typing import Any

from esdash.constants.enums import ResourceKind


class ClusterFetcher:
    """Fetches cluster-level payloads."""

    HEALTH_PATH = "/_cluster/health"
    INDICES_PATH = "/_cat/indices"
    _INDEX_COLUMNS = "health,status,index,uuid,pri,rep,docs.count"

    def __init__(self, request_json_func: Any) -> None:
        """Initialize with a JSON request function.

        Args:
            request_json_func: Function ``(method, path, resource, **kwargs)``
                returning the decoded JSON body
        """
        self._request_json = request_json_func

    def fetch_health_raw(self) -> Any:
        """Fetch the raw cluster health document."""
        return self._request_json("GET", self.HEALTH_PATH, ResourceKind.HEALTH)

    def fetch_indices_raw(self) -> Any:
        """Fetch raw ``_cat/indices`` rows."""
        return self._request_json(
            "GET",
            self.INDICES_PATH,
            ResourceKind.INDICES,
            params={"format": "json", "h": self._INDEX_COLUMNS},
        )
