"""Parsers for search cluster payloads."""

from esdash.controllers.search.parsers.cluster_parser import ClusterParser, parse_optional_int
from esdash.controllers.search.parsers.search_parser import SearchParser

__all__ = ["ClusterParser", "SearchParser", "parse_optional_int"]
