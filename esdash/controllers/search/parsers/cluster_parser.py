"""Cluster parser for search client - parses health and cat-indices payloads."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from esdash.constants.enums import ClusterStatus
from esdash.models.core.cluster_info import ClusterHealth, IndexSummary


def parse_optional_int(value: Any) -> int | None:
    """Parse counts that the cat APIs report as strings, or None if unusable."""
    if value is None or isinstance(value, bool):
        return None
    try:
        return int(str(value).strip())
    except ValueError:
        return None


class ClusterParser:
    """Parses cluster-level payloads into structured models."""

    def parse_health(self, payload: Any, fetched_at: datetime) -> ClusterHealth:
        """Parse a ``_cluster/health`` response.

        Raises:
            ValueError: If the payload is not a JSON object or lacks a cluster name.
        """
        if not isinstance(payload, dict):
            raise ValueError(f"expected an object, got {type(payload).__name__}")
        cluster_name = payload.get("cluster_name")
        if not cluster_name:
            raise ValueError("missing cluster_name")
        return ClusterHealth(
            cluster_name=str(cluster_name),
            status=ClusterStatus.parse(payload.get("status")),
            number_of_nodes=parse_optional_int(payload.get("number_of_nodes")) or 0,
            active_primary_shards=parse_optional_int(payload.get("active_primary_shards")) or 0,
            active_shards=parse_optional_int(payload.get("active_shards")) or 0,
            unassigned_shards=parse_optional_int(payload.get("unassigned_shards")) or 0,
            fetched_at=fetched_at,
        )

    def parse_index(self, row: dict[str, Any]) -> IndexSummary:
        """Parse a single ``_cat/indices`` row."""
        name = row.get("index")
        if not name:
            raise ValueError("index row without a name")
        return IndexSummary(
            name=str(name),
            health=ClusterStatus.parse(row.get("health")),
            primary_shards=parse_optional_int(row.get("pri")),
            replicas=parse_optional_int(row.get("rep")),
            uuid=str(row.get("uuid") or ""),
            docs_count=parse_optional_int(row.get("docs.count")),
        )

    def parse_indices(self, payload: Any) -> list[IndexSummary]:
        """Parse a ``_cat/indices?format=json`` response.

        Raises:
            ValueError: If the payload is not a list of objects.
        """
        if not isinstance(payload, list):
            raise ValueError(f"expected a list, got {type(payload).__name__}")
        indices: list[IndexSummary] = []
        for row in payload:
            if not isinstance(row, dict):
                raise ValueError(f"expected index rows to be objects, got {type(row).__name__}")
            indices.append(self.parse_index(row))
        return indices
