"""Search parser for search client - parses ``_search`` responses into pages."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from esdash.controllers.search.parsers.cluster_parser import parse_optional_int
from esdash.models.core.document_info import DocumentHit, DocumentPage


class SearchParser:
    """Parses search responses into DocumentPage objects."""

    @staticmethod
    def _parse_total(hits: dict[str, Any]) -> int | None:
        """Read hits.total across the object and legacy integer shapes."""
        total = hits.get("total")
        if isinstance(total, dict):
            return parse_optional_int(total.get("value"))
        return parse_optional_int(total)

    def parse_page(
        self,
        payload: Any,
        *,
        index: str,
        query: str,
        offset: int,
        size: int,
        fetched_at: datetime,
    ) -> DocumentPage:
        """Parse a search response for the given request parameters.

        Raises:
            ValueError: If the payload has no ``hits`` object.
        """
        if not isinstance(payload, dict):
            raise ValueError(f"expected an object, got {type(payload).__name__}")
        hits = payload.get("hits")
        if not isinstance(hits, dict):
            raise ValueError("missing hits")

        documents: list[DocumentHit] = []
        for hit in hits.get("hits") or []:
            if not isinstance(hit, dict) or "_id" not in hit:
                raise ValueError("malformed hit")
            documents.append(DocumentHit(id=str(hit["_id"]), source=hit.get("_source", {})))

        shards = payload.get("_shards")
        timed_out = payload.get("timed_out")
        return DocumentPage(
            index=index,
            query=query,
            offset=offset,
            size=size,
            hits=tuple(documents),
            total=self._parse_total(hits),
            took_ms=parse_optional_int(payload.get("took")),
            timed_out=timed_out if isinstance(timed_out, bool) else None,
            shards_failed=parse_optional_int(shards.get("failed")) if isinstance(shards, dict) else None,
            fetched_at=fetched_at,
        )
