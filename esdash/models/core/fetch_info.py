"""Fetch request, token and completion models.

These types tie every in-flight fetch to the resource it targets and to the
sequence number it was dispatched with, so that late responses can be told
apart from current ones.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel, ConfigDict

from esdash.constants.enums import FetchErrorKind, ResourceKind


class ResourceKey(BaseModel):
    """Identifies what a fetch targets: health, indices or one index's documents."""

    model_config = ConfigDict(frozen=True)

    kind: ResourceKind
    index: str | None = None

    @classmethod
    def health(cls) -> ResourceKey:
        return cls(kind=ResourceKind.HEALTH)

    @classmethod
    def indices(cls) -> ResourceKey:
        return cls(kind=ResourceKind.INDICES)

    @classmethod
    def documents(cls, index: str) -> ResourceKey:
        return cls(kind=ResourceKind.DOCUMENTS, index=index)

    def __str__(self) -> str:
        if self.kind is ResourceKind.DOCUMENTS:
            return f"documents({self.index})"
        return self.kind.value


class RequestToken(BaseModel):
    """Resource key plus the sequence number it was dispatched with."""

    model_config = ConfigDict(frozen=True)

    key: ResourceKey
    sequence: int


class FetchSpec(BaseModel):
    """Parameters of one fetch.

    Two specs compare equal only when they would issue the same request, which
    is what in-flight de-duplication keys on.
    """

    model_config = ConfigDict(frozen=True)

    key: ResourceKey
    query: str = ""
    offset: int = 0
    size: int = 0

    @classmethod
    def for_documents(cls, index: str, query: str, offset: int, size: int) -> FetchSpec:
        return cls(
            key=ResourceKey.documents(index),
            query=query,
            offset=offset,
            size=size,
        )


class PendingRequest(BaseModel):
    """An in-flight request: its token and the spec it was issued for."""

    model_config = ConfigDict(frozen=True)

    token: RequestToken
    spec: FetchSpec


class FetchError(Exception):
    """A failed fetch, scoped to the resource it targeted.

    Document failures also carry the index they were searching, so messages
    read ``documents(books): HTTP 500``.
    """

    def __init__(
        self,
        resource: ResourceKind,
        kind: FetchErrorKind,
        message: str,
        *,
        index: str | None = None,
    ) -> None:
        super().__init__(message)
        self.resource = resource
        self.kind = kind
        self.message = message
        self.index = index

    @property
    def scope(self) -> str:
        if self.index is None:
            return self.resource.value
        return f"{self.resource.value}({self.index})"

    def __str__(self) -> str:
        return f"{self.scope}: {self.message}"

    def __repr__(self) -> str:
        return (
            f"FetchError(resource={self.resource.value!r}, index={self.index!r}, "
            f"kind={self.kind.value!r}, message={self.message!r})"
        )


@dataclass(frozen=True)
class FetchCompletion:
    """Outcome of one dispatched fetch, delivered to the control loop."""

    token: RequestToken
    spec: FetchSpec
    data: Any | None = None
    error: FetchError | None = None
    duration_ms: float = 0.0

    @property
    def success(self) -> bool:
        return self.error is None
