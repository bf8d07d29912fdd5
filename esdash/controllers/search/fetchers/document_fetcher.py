"""Document fetcher for search client - runs paginated searches."""

from __future__ import annotations

from typing import Any
from urllib.parse import quote

from esdash.constants.enums import ResourceKind


class DocumentFetcher:
    """Fetches raw search responses for one index."""

    def __init__(self, request_json_func: Any) -> None:
        """Initialize with a JSON request function.

        Args:
            request_json_func: Function ``(method, path, resource, *, index, **kwargs)``
                returning the decoded JSON body
        """
        self._request_json = request_json_func

    @staticmethod
    def build_query_body(query: str) -> dict[str, Any]:
        """Build the search body: match_all when empty, else an AND query_string."""
        query = query.strip()
        if not query:
            return {"query": {"match_all": {}}}
        return {
            "query": {
                "query_string": {
                    "query": query,
                    "default_operator": "AND",
                }
            }
        }

    @staticmethod
    def search_path(index: str) -> str:
        return f"/{quote(index, safe=',*')}/_search"

    def fetch_search_raw(self, index: str, query: str, offset: int, size: int) -> Any:
        """Run one search and return the raw response body."""
        return self._request_json(
            "POST",
            self.search_path(index),
            ResourceKind.DOCUMENTS,
            index=index,
            params={"from": offset, "size": size},
            json=self.build_query_body(query),
        )
