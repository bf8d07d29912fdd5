"""Core domain models."""

from esdash.models.core.cluster_info import ClusterHealth, IndexSummary
from esdash.models.core.document_info import DocumentHit, DocumentPage
from esdash.models.core.fetch_info import (
    FetchCompletion,
    FetchError,
    FetchSpec,
    PendingRequest,
    RequestToken,
    ResourceKey,
)

__all__ = [
    "ClusterHealth",
    "DocumentHit",
    "DocumentPage",
    "FetchCompletion",
    "FetchError",
    "FetchSpec",
    "IndexSummary",
    "PendingRequest",
    "RequestToken",
    "ResourceKey",
]
