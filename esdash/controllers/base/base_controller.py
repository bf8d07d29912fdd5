"""Base fetch client for esdash.

The refresh engine only ever talks to the cluster through this interface, so
tests and alternative transports can stand in for the HTTP client.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from esdash.models.core.cluster_info import ClusterHealth, IndexSummary
from esdash.models.core.document_info import DocumentPage


class BaseFetchClient(ABC):
    """Read operations against a search cluster.

    Every call is a single attempt with no retries. Implementations raise
    :class:`~esdash.models.core.fetch_info.FetchError` for any failure.
    """

    @abstractmethod
    def get_health(self) -> ClusterHealth:
        """Fetch cluster health.

        Returns:
            ClusterHealth snapshot
        """
        ...

    @abstractmethod
    def list_indices(self) -> list[IndexSummary]:
        """Fetch the index listing.

        Returns:
            List of IndexSummary rows in server order
        """
        ...

    @abstractmethod
    def search_documents(
        self,
        index: str,
        query: str,
        offset: int,
        size: int,
    ) -> DocumentPage:
        """Fetch one page of documents from ``index``.

        Args:
            index: Index name to search
            query: Query string; empty matches all documents
            offset: Number of hits to skip
            size: Maximum number of hits to return

        Returns:
            DocumentPage for the request
        """
        ...

    def close(self) -> None:
        """Release transport resources. The default holds none."""
