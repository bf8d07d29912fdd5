"""Search cluster domain: HTTP client, fetchers and parsers."""

from esdash.controllers.search.client import SearchClusterClient
from esdash.controllers.search.fetchers import ClusterFetcher, DocumentFetcher
from esdash.controllers.search.parsers import ClusterParser, SearchParser

__all__ = [
    "ClusterFetcher",
    "ClusterParser",
    "DocumentFetcher",
    "SearchClusterClient",
    "SearchParser",
]
