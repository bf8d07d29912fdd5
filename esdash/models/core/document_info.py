"""Document search result models."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class DocumentHit(BaseModel):
    """A single search hit: the document id plus its opaque source record."""

    model_config = ConfigDict(frozen=True)

    id: str
    source: Any = Field(default_factory=dict)


class DocumentPage(BaseModel):
    """One page of search results for an index, query and offset."""

    model_config = ConfigDict(frozen=True)

    index: str
    query: str = ""
    offset: int = 0
    size: int = 0
    hits: tuple[DocumentHit, ...] = ()
    total: int | None = None
    took_ms: int | None = None
    timed_out: bool | None = None
    shards_failed: int | None = None
    fetched_at: datetime

    @property
    def is_empty(self) -> bool:
        return not self.hits

    @property
    def last_ordinal(self) -> int:
        """1-based ordinal of the last hit on this page (0 when empty)."""
        return self.offset + len(self.hits) if self.hits else 0
