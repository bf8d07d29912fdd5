"""Tests for cluster and document fetchers."""

from __future__ import annotations

from unittest.mock import MagicMock

from esdash.constants.enums import ResourceKind
from esdash.controllers.search.fetchers import ClusterFetcher, DocumentFetcher


class TestClusterFetcher:
    """Tests for ClusterFetcher."""

    def test_fetch_health_raw(self) -> None:
        request_json = MagicMock(return_value={"cluster_name": "x"})

        assert ClusterFetcher(request_json).fetch_health_raw() == {"cluster_name": "x"}
        request_json.assert_called_once_with("GET", "/_cluster/health", ResourceKind.HEALTH)

    def test_fetch_indices_raw_asks_for_columns(self) -> None:
        request_json = MagicMock(return_value=[])

        ClusterFetcher(request_json).fetch_indices_raw()

        params = request_json.call_args.kwargs["params"]
        assert params["format"] == "json"
        assert "docs.count" in params["h"]


class TestDocumentFetcher:
    """Tests for DocumentFetcher."""

    def test_empty_query_matches_all(self) -> None:
        assert DocumentFetcher.build_query_body("  ") == {"query": {"match_all": {}}}

    def test_query_string_uses_and_operator(self) -> None:
        body = DocumentFetcher.build_query_body("title:dune year:1965")

        assert body["query"]["query_string"] == {
            "query": "title:dune year:1965",
            "default_operator": "AND",
        }

    def test_search_path_quotes_index_name(self) -> None:
        assert DocumentFetcher.search_path("logs-2026.01") == "/logs-2026.01/_search"
        assert DocumentFetcher.search_path("a b") == "/a%20b/_search"
        assert DocumentFetcher.search_path("logs-*") == "/logs-*/_search"

    def test_fetch_search_raw(self) -> None:
        request_json = MagicMock(return_value={})

        DocumentFetcher(request_json).fetch_search_raw("books", "", 15, 5)

        args, kwargs = request_json.call_args
        assert args == ("POST", "/books/_search", ResourceKind.DOCUMENTS)
        assert kwargs["params"] == {"from": 15, "size": 5}
        assert kwargs["index"] == "books"
