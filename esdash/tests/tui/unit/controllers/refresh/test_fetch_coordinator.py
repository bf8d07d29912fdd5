"""Tests for the fetch coordinator - dispatch, error wrapping and shutdown."""

from __future__ import annotations

import pytest

from esdash.constants.enums import FetchErrorKind, ResourceKind
from esdash.controllers.refresh import FetchCoordinator
from esdash.models.core.fetch_info import (
    FetchCompletion,
    FetchSpec,
    RequestToken,
    ResourceKey,
)

from conftest import FakeFetchClient, ManualExecutor, fetch_error, make_indices


def _token(key: ResourceKey, sequence: int = 1) -> RequestToken:
    return RequestToken(key=key, sequence=sequence)


class TestFetchCoordinator:
    """Tests for FetchCoordinator."""

    @pytest.fixture
    def executor(self) -> ManualExecutor:
        return ManualExecutor()

    @pytest.fixture
    def delivered(self) -> list[FetchCompletion]:
        return []

    @pytest.fixture
    def client(self) -> FakeFetchClient:
        return FakeFetchClient(
            indices=make_indices("books"),
            documents={"books": [{"n": n} for n in range(7)]},
        )

    @pytest.fixture
    def coordinator(
        self,
        client: FakeFetchClient,
        executor: ManualExecutor,
        delivered: list[FetchCompletion],
    ) -> FetchCoordinator:
        return FetchCoordinator(client, delivered.append, executor=executor)

    def test_dispatch_does_not_block(
        self,
        coordinator: FetchCoordinator,
        executor: ManualExecutor,
        delivered: list[FetchCompletion],
    ) -> None:
        coordinator.dispatch(_token(ResourceKey.health()), FetchSpec(key=ResourceKey.health()))

        assert len(executor.queue) == 1
        assert delivered == []

    def test_successful_fetch_is_delivered_with_token(
        self,
        coordinator: FetchCoordinator,
        executor: ManualExecutor,
        delivered: list[FetchCompletion],
    ) -> None:
        token = _token(ResourceKey.indices(), sequence=4)
        coordinator.dispatch(token, FetchSpec(key=ResourceKey.indices()))
        executor.run_all()

        [completion] = delivered
        assert completion.success
        assert completion.token == token
        assert [entry.name for entry in completion.data] == ["books"]
        assert completion.duration_ms >= 0

    def test_documents_call_receives_spec_parameters(
        self,
        coordinator: FetchCoordinator,
        client: FakeFetchClient,
        executor: ManualExecutor,
        delivered: list[FetchCompletion],
    ) -> None:
        spec = FetchSpec.for_documents("books", "", 5, 5)
        coordinator.dispatch(_token(spec.key), spec)
        executor.run_all()

        assert client.calls == [("documents", "books", "", 5, 5)]
        assert len(delivered[0].data.hits) == 2

    def test_fetch_error_is_delivered_not_raised(
        self,
        coordinator: FetchCoordinator,
        client: FakeFetchClient,
        executor: ManualExecutor,
        delivered: list[FetchCompletion],
    ) -> None:
        client.health = fetch_error(ResourceKind.HEALTH, FetchErrorKind.TIMEOUT, "timed out")
        coordinator.dispatch(_token(ResourceKey.health()), FetchSpec(key=ResourceKey.health()))
        executor.run_all()

        [completion] = delivered
        assert not completion.success
        assert completion.error.kind is FetchErrorKind.TIMEOUT

    def test_unexpected_exception_is_wrapped(
        self,
        coordinator: FetchCoordinator,
        client: FakeFetchClient,
        executor: ManualExecutor,
        delivered: list[FetchCompletion],
    ) -> None:
        client.indices = RuntimeError("boom")
        coordinator.dispatch(_token(ResourceKey.indices()), FetchSpec(key=ResourceKey.indices()))
        executor.run_all()

        error = delivered[0].error
        assert error.kind is FetchErrorKind.UNEXPECTED
        assert error.resource is ResourceKind.INDICES
        assert "boom" in str(error)

    def test_unexpected_document_failure_names_the_index(
        self,
        coordinator: FetchCoordinator,
        client: FakeFetchClient,
        executor: ManualExecutor,
        delivered: list[FetchCompletion],
    ) -> None:
        client.documents["books"] = KeyError("shard")
        spec = FetchSpec.for_documents("books", "", 0, 5)
        coordinator.dispatch(_token(spec.key), spec)
        executor.run_all()

        error = delivered[0].error
        assert error.kind is FetchErrorKind.UNEXPECTED
        assert error.index == "books"
        assert str(error).startswith("documents(books): ")

    def test_completions_arrive_in_completion_order(
        self,
        coordinator: FetchCoordinator,
        executor: ManualExecutor,
        delivered: list[FetchCompletion],
    ) -> None:
        coordinator.dispatch(_token(ResourceKey.health()), FetchSpec(key=ResourceKey.health()))
        coordinator.dispatch(_token(ResourceKey.indices()), FetchSpec(key=ResourceKey.indices()))
        executor.run(1)
        executor.run(0)

        assert [completion.token.key.kind for completion in delivered] == [
            ResourceKind.INDICES,
            ResourceKind.HEALTH,
        ]

    def test_shutdown_stops_dispatch_and_delivery(
        self,
        coordinator: FetchCoordinator,
        executor: ManualExecutor,
        delivered: list[FetchCompletion],
    ) -> None:
        coordinator.dispatch(_token(ResourceKey.health()), FetchSpec(key=ResourceKey.health()))
        coordinator.shutdown()
        executor.run_all()

        assert coordinator.is_closed
        assert coordinator.dispatch(
            _token(ResourceKey.health(), 2), FetchSpec(key=ResourceKey.health())
        ) is None
        assert delivered == []

    def test_shutdown_leaves_injected_executor_running(
        self,
        coordinator: FetchCoordinator,
        executor: ManualExecutor,
    ) -> None:
        coordinator.shutdown()

        assert not executor.shutdown_called

    def test_owned_executor_is_shut_down(self, client: FakeFetchClient) -> None:
        coordinator = FetchCoordinator(client, lambda _: None, max_workers=1)

        coordinator.shutdown()

        assert coordinator.is_closed
