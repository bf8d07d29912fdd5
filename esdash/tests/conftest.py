"""Shared fixtures for esdash tests."""

from __future__ import annotations

from collections.abc import Callable
from concurrent.futures import Executor, Future
from datetime import datetime, timezone
from typing import Any

import pytest

from esdash.constants.enums import ClusterStatus, FetchErrorKind, ResourceKind
from esdash.controllers.base import BaseFetchClient
from esdash.controllers.refresh import RefreshScheduler
from esdash.models.core.cluster_info import ClusterHealth, IndexSummary
from esdash.models.core.document_info import DocumentHit, DocumentPage
from esdash.models.core.fetch_info import FetchCompletion, FetchError, PendingRequest
from esdash.models.state.events import ReceiveResult
from esdash.models.state.machine import AppStateMachine

FIXED_NOW = datetime(2026, 1, 1, 12, 0, 0, tzinfo=timezone.utc)


# =============================================================================
# Executors
# =============================================================================


class ManualExecutor(Executor):
    """Executor that queues work until a test runs it, in any order."""

    def __init__(self) -> None:
        self.queue: list[tuple[Future[Any], Callable[..., Any], tuple, dict]] = []
        self.shutdown_called = False

    def submit(self, fn, /, *args, **kwargs) -> Future[Any]:
        future: Future[Any] = Future()
        self.queue.append((future, fn, args, kwargs))
        return future

    def run(self, position: int = 0) -> None:
        future, fn, args, kwargs = self.queue.pop(position)
        try:
            future.set_result(fn(*args, **kwargs))
        except Exception as exc:
            future.set_exception(exc)

    def run_all(self) -> None:
        while self.queue:
            self.run()

    def shutdown(self, wait: bool = True, *, cancel_futures: bool = False) -> None:
        self.shutdown_called = True


class ImmediateExecutor(ManualExecutor):
    """Executor that runs work synchronously at submit time."""

    def submit(self, fn, /, *args, **kwargs) -> Future[Any]:
        future = super().submit(fn, *args, **kwargs)
        self.run(len(self.queue) - 1)
        return future


# =============================================================================
# Fake client
# =============================================================================


class FakeFetchClient(BaseFetchClient):
    """In-memory cluster; set attributes to an exception to make calls fail."""

    def __init__(
        self,
        health: ClusterHealth | Exception | None = None,
        indices: list[IndexSummary] | Exception | None = None,
        documents: dict[str, list[dict[str, Any]] | Exception] | None = None,
    ) -> None:
        self.health = health if health is not None else make_health()
        self.indices = indices if indices is not None else []
        self.documents = documents or {}
        self.calls: list[tuple] = []
        self.closed = False

    def get_health(self) -> ClusterHealth:
        self.calls.append(("health",))
        if isinstance(self.health, Exception):
            raise self.health
        return self.health

    def list_indices(self) -> list[IndexSummary]:
        self.calls.append(("indices",))
        if isinstance(self.indices, Exception):
            raise self.indices
        return list(self.indices)

    def search_documents(self, index: str, query: str, offset: int, size: int) -> DocumentPage:
        self.calls.append(("documents", index, query, offset, size))
        sources = self.documents.get(index, [])
        if isinstance(sources, Exception):
            raise sources
        if query:
            sources = [source for source in sources if query in str(source)]
        window = sources[offset : offset + size]
        return DocumentPage(
            index=index,
            query=query,
            offset=offset,
            size=size,
            hits=tuple(
                DocumentHit(id=str(offset + position), source=source)
                for position, source in enumerate(window)
            ),
            total=len(sources),
            took_ms=1,
            fetched_at=FIXED_NOW,
        )

    def close(self) -> None:
        self.closed = True


# =============================================================================
# Builders
# =============================================================================


def make_health(
    name: str = "test-cluster",
    status: ClusterStatus = ClusterStatus.GREEN,
    nodes: int = 3,
) -> ClusterHealth:
    return ClusterHealth(
        cluster_name=name,
        status=status,
        number_of_nodes=nodes,
        active_primary_shards=5,
        active_shards=10,
        unassigned_shards=0,
        fetched_at=FIXED_NOW,
    )


def make_indices(*names: str) -> list[IndexSummary]:
    return [
        IndexSummary(name=name, health=ClusterStatus.GREEN, docs_count=10 * (position + 1))
        for position, name in enumerate(names)
    ]


def make_page(
    index: str,
    offset: int = 0,
    count: int = 3,
    total: int | None = None,
    query: str = "",
    size: int = 5,
) -> DocumentPage:
    return DocumentPage(
        index=index,
        query=query,
        offset=offset,
        size=size,
        hits=tuple(
            DocumentHit(id=f"{index}-{offset + position}", source={"n": offset + position})
            for position in range(count)
        ),
        total=total if total is not None else offset + count,
        took_ms=2,
        fetched_at=FIXED_NOW,
    )


def completion_for(
    request: PendingRequest,
    data: Any = None,
    error: FetchError | None = None,
) -> ReceiveResult:
    """Wrap a fake outcome for ``request`` as the event the machine receives."""
    return ReceiveResult(
        FetchCompletion(token=request.token, spec=request.spec, data=data, error=error)
    )


def fetch_error(
    resource: ResourceKind,
    kind: FetchErrorKind = FetchErrorKind.REFUSED,
    message: str = "connection failed",
    *,
    index: str | None = None,
) -> FetchError:
    return FetchError(resource, kind, message, index=index)


def by_kind(requests: list[PendingRequest], kind: ResourceKind) -> PendingRequest:
    matches = [request for request in requests if request.token.key.kind is kind]
    assert len(matches) == 1, f"expected one {kind.value} request, got {len(matches)}"
    return matches[0]


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture
def scheduler() -> RefreshScheduler:
    return RefreshScheduler(page_size=5, refresh_interval=10.0)


@pytest.fixture
def machine(scheduler: RefreshScheduler) -> AppStateMachine:
    return AppStateMachine(scheduler, clock=lambda: FIXED_NOW)


@pytest.fixture
def fake_client() -> FakeFetchClient:
    return FakeFetchClient(
        indices=make_indices("books", "logs", "users"),
        documents={
            "books": [{"title": f"book {n}"} for n in range(12)],
            "logs": [{"message": "started"}, {"message": "stopped"}],
            "users": [],
        },
    )
