"""Tests for SearchClusterClient - transport errors and request shapes."""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from unittest.mock import MagicMock, patch

import pytest
import requests

from esdash.constants.enums import ClusterStatus, FetchErrorKind, ResourceKind
from esdash.controllers.search import SearchClusterClient
from esdash.models.core.fetch_info import FetchError

from conftest import FIXED_NOW


def _response(status: int = 200, payload=None, reason: str = "OK", bad_json: bool = False):
    response = MagicMock(spec=requests.Response)
    response.status_code = status
    response.reason = reason
    if bad_json:
        response.json.side_effect = ValueError("Expecting value")
    else:
        response.json.return_value = payload
    return response


class TestSearchClusterClient:
    """Tests for SearchClusterClient."""

    @pytest.fixture
    def session(self) -> MagicMock:
        session = MagicMock(spec=requests.Session)
        session.headers = {}
        return session

    @pytest.fixture
    def client(self, session: MagicMock) -> SearchClusterClient:
        return SearchClusterClient(
            "http://localhost:9200/",
            timeout=2.0,
            session=session,
            clock=lambda: FIXED_NOW,
        )

    def test_get_health(self, client: SearchClusterClient, session: MagicMock) -> None:
        session.request.return_value = _response(
            payload={"cluster_name": "prod", "status": "yellow", "number_of_nodes": 2}
        )

        health = client.get_health()

        assert health.cluster_name == "prod"
        assert health.status is ClusterStatus.YELLOW
        assert health.fetched_at == FIXED_NOW
        session.request.assert_called_once_with(
            "GET", "http://localhost:9200/_cluster/health", timeout=2.0
        )

    def test_list_indices_requests_json_format(
        self, client: SearchClusterClient, session: MagicMock
    ) -> None:
        session.request.return_value = _response(
            payload=[{"index": "books", "health": "green", "docs.count": "12"}]
        )

        [summary] = client.list_indices()

        assert summary.name == "books"
        assert summary.docs_count == 12
        assert session.request.call_args.kwargs["params"]["format"] == "json"

    def test_search_documents_sends_paging_and_query(
        self, client: SearchClusterClient, session: MagicMock
    ) -> None:
        session.request.return_value = _response(
            payload={
                "took": 3,
                "timed_out": False,
                "hits": {"total": {"value": 42}, "hits": [{"_id": "1", "_source": {"a": 1}}]},
            }
        )

        page = client.search_documents("books", "author:ann", 10, 5)

        args, kwargs = session.request.call_args
        assert args == ("POST", "http://localhost:9200/books/_search")
        assert kwargs["params"] == {"from": 10, "size": 5}
        assert kwargs["json"]["query"]["query_string"]["query"] == "author:ann"
        assert page.total == 42
        assert page.offset == 10
        assert page.hits[0].source == {"a": 1}

    def test_timeout_maps_to_timeout(self, client: SearchClusterClient, session: MagicMock) -> None:
        session.request.side_effect = requests.Timeout("read timed out")

        with pytest.raises(FetchError) as exc_info:
            client.get_health()

        assert exc_info.value.kind is FetchErrorKind.TIMEOUT
        assert exc_info.value.resource is ResourceKind.HEALTH

    def test_connection_error_maps_to_refused(
        self, client: SearchClusterClient, session: MagicMock
    ) -> None:
        session.request.side_effect = requests.ConnectionError("refused")

        with pytest.raises(FetchError) as exc_info:
            client.list_indices()

        assert exc_info.value.kind is FetchErrorKind.REFUSED
        assert "localhost:9200" in exc_info.value.message

    def test_server_error_includes_reason(
        self, client: SearchClusterClient, session: MagicMock
    ) -> None:
        session.request.return_value = _response(
            status=400,
            reason="Bad Request",
            payload={"error": {"reason": "Failed to parse query [author:]"}},
        )

        with pytest.raises(FetchError) as exc_info:
            client.search_documents("books", "author:", 0, 5)

        assert exc_info.value.kind is FetchErrorKind.SERVER_ERROR
        assert exc_info.value.message == "HTTP 400 Bad Request: Failed to parse query [author:]"
        assert exc_info.value.index == "books"
        assert str(exc_info.value).startswith("documents(books): HTTP 400")

    def test_server_error_without_json_body(
        self, client: SearchClusterClient, session: MagicMock
    ) -> None:
        session.request.return_value = _response(
            status=503, reason="Service Unavailable", bad_json=True
        )

        with pytest.raises(FetchError) as exc_info:
            client.get_health()

        assert exc_info.value.message == "HTTP 503 Service Unavailable"

    def test_invalid_json_maps_to_decode_error(
        self, client: SearchClusterClient, session: MagicMock
    ) -> None:
        session.request.return_value = _response(bad_json=True)

        with pytest.raises(FetchError) as exc_info:
            client.get_health()

        assert exc_info.value.kind is FetchErrorKind.DECODE_ERROR

    def test_unexpected_shape_maps_to_decode_error(
        self, client: SearchClusterClient, session: MagicMock
    ) -> None:
        session.request.return_value = _response(payload={"unexpected": True})

        with pytest.raises(FetchError) as exc_info:
            client.search_documents("books", "", 0, 5)

        assert exc_info.value.kind is FetchErrorKind.DECODE_ERROR
        assert exc_info.value.resource is ResourceKind.DOCUMENTS

    def test_close_closes_session(self, client: SearchClusterClient, session: MagicMock) -> None:
        client.close()

        session.close.assert_called_once()


class TestSearchClusterClientSessions:
    """Tests for per-thread session handling."""

    def test_each_thread_gets_its_own_session(self) -> None:
        client = SearchClusterClient("http://localhost:9200")

        with ThreadPoolExecutor(max_workers=1) as pool:
            worker_session = pool.submit(lambda: client.session).result()

        assert client.session is client.session
        assert client.session is not worker_session
        assert worker_session.headers["Accept"] == "application/json"
        client.close()

    def test_close_closes_every_thread_session(self) -> None:
        client = SearchClusterClient("http://localhost:9200")
        with ThreadPoolExecutor(max_workers=1) as pool:
            worker_session = pool.submit(lambda: client.session).result()
        main_session = client.session

        with patch.object(worker_session, "close") as worker_close, patch.object(
            main_session, "close"
        ) as main_close:
            client.close()

        worker_close.assert_called_once()
        main_close.assert_called_once()

    def test_injected_session_is_shared(self) -> None:
        session = MagicMock(spec=requests.Session)
        session.headers = {}
        client = SearchClusterClient("http://localhost:9200", session=session)

        with ThreadPoolExecutor(max_workers=1) as pool:
            assert pool.submit(lambda: client.session).result() is session
        assert client.session is session
