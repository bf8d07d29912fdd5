"""Fetchers for search cluster endpoints."""

from esdash.controllers.search.fetchers.cluster_fetcher import ClusterFetcher
from esdash.controllers.search.fetchers.document_fetcher import DocumentFetcher

__all__ = ["ClusterFetcher", "DocumentFetcher"]
