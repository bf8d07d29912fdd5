"""Cluster health and index listing models."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict

from esdash.constants.enums import ClusterStatus


class ClusterHealth(BaseModel):
    """Point-in-time cluster health, replaced wholesale on every fetch."""

    model_config = ConfigDict(frozen=True)

    cluster_name: str
    status: ClusterStatus = ClusterStatus.UNKNOWN
    number_of_nodes: int = 0
    active_primary_shards: int = 0
    active_shards: int = 0
    unassigned_shards: int = 0
    fetched_at: datetime


class IndexSummary(BaseModel):
    """One row of the index listing."""

    model_config = ConfigDict(frozen=True)

    name: str
    health: ClusterStatus = ClusterStatus.UNKNOWN
    primary_shards: int | None = None
    replicas: int | None = None
    uuid: str = ""
    docs_count: int | None = None
