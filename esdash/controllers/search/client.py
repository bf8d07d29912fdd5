"""HTTP fetch client for a search cluster.

Wraps a ``requests.Session`` and maps every transport, HTTP and decoding
failure onto :class:`FetchError` so callers deal with a single exception type.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from datetime import datetime, timezone
from typing import Any

import requests

from esdash.constants.enums import FetchErrorKind, ResourceKind
from esdash.constants.timeouts import REQUEST_TIMEOUT
from esdash.controllers.base import BaseFetchClient
from esdash.controllers.search.fetchers import ClusterFetcher, DocumentFetcher
from esdash.controllers.search.parsers import ClusterParser, SearchParser
from esdash.models.core.cluster_info import ClusterHealth, IndexSummary
from esdash.models.core.document_info import DocumentPage
from esdash.models.core.fetch_info import FetchError

logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class SearchClusterClient(BaseFetchClient):
    """Search cluster client over HTTP.

    Args:
        base_url: Cluster base URL, e.g. ``http://localhost:9200``
        timeout: Per-request timeout in seconds
        session: Optional pre-configured session shared by every thread;
            when omitted each calling thread gets its own session
        clock: Source of ``fetched_at`` timestamps
    """

    def __init__(
        self,
        base_url: str,
        *,
        timeout: float = REQUEST_TIMEOUT,
        session: requests.Session | None = None,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._shared_session = session
        self._local = threading.local()
        self._sessions_lock = threading.Lock()
        self._sessions: list[requests.Session] = []
        if session is not None:
            self._register(session)
        self._clock = clock
        self._cluster_fetcher = ClusterFetcher(self._request_json)
        self._document_fetcher = DocumentFetcher(self._request_json)
        self._cluster_parser = ClusterParser()
        self._search_parser = SearchParser()

    @property
    def session(self) -> requests.Session:
        """HTTP session for the calling thread.

        Fetches run on several worker threads at once and ``requests.Session``
        is not thread-safe, so unless a session was injected each thread
        lazily opens its own.
        """
        if self._shared_session is not None:
            return self._shared_session
        session = getattr(self._local, "session", None)
        if session is None:
            session = requests.Session()
            self._register(session)
            self._local.session = session
        return session

    def _register(self, session: requests.Session) -> None:
        session.headers.setdefault("Accept", "application/json")
        with self._sessions_lock:
            self._sessions.append(session)

    def close(self) -> None:
        """Close every HTTP session opened by this client."""
        with self._sessions_lock:
            sessions, self._sessions = self._sessions, []
        for session in sessions:
            session.close()

    # =========================================================================
    # Transport
    # =========================================================================

    @staticmethod
    def _server_error_message(response: requests.Response) -> str:
        """Describe an HTTP error, including the cluster's reason when present."""
        message = f"HTTP {response.status_code}"
        if response.reason:
            message = f"{message} {response.reason}"
        try:
            body = response.json()
        except ValueError:
            return message
        error = body.get("error") if isinstance(body, dict) else None
        if isinstance(error, dict) and error.get("reason"):
            return f"{message}: {error['reason']}"
        if isinstance(error, str) and error:
            return f"{message}: {error}"
        return message

    def _request_json(
        self,
        method: str,
        path: str,
        resource: ResourceKind,
        *,
        index: str | None = None,
        **kwargs: Any,
    ) -> Any:
        """Perform one HTTP request and return the decoded JSON body.

        Raises:
            FetchError: On timeout, connection failure, HTTP error status or
                an undecodable body.
        """
        url = f"{self.base_url}{path}"
        try:
            response = self.session.request(method, url, timeout=self.timeout, **kwargs)
        except requests.Timeout as err:
            raise FetchError(
                resource,
                FetchErrorKind.TIMEOUT,
                f"timed out after {self.timeout:g}s",
                index=index,
            ) from err
        except requests.ConnectionError as err:
            raise FetchError(
                resource,
                FetchErrorKind.REFUSED,
                f"connection failed: {self.base_url}",
                index=index,
            ) from err
        except requests.RequestException as err:
            raise FetchError(
                resource, FetchErrorKind.REFUSED, f"request failed: {err}", index=index
            ) from err

        if response.status_code >= 400:
            raise FetchError(
                resource,
                FetchErrorKind.SERVER_ERROR,
                self._server_error_message(response),
                index=index,
            )
        try:
            return response.json()
        except ValueError as err:
            raise FetchError(
                resource, FetchErrorKind.DECODE_ERROR, "invalid response json", index=index
            ) from err

    @staticmethod
    def _decode(
        resource: ResourceKind,
        parse: Callable[[], Any],
        *,
        index: str | None = None,
    ) -> Any:
        try:
            return parse()
        except (ValueError, TypeError, KeyError) as err:
            raise FetchError(
                resource,
                FetchErrorKind.DECODE_ERROR,
                f"unexpected response: {err}",
                index=index,
            ) from err

    # =========================================================================
    # Read operations
    # =========================================================================

    def get_health(self) -> ClusterHealth:
        payload = self._cluster_fetcher.fetch_health_raw()
        return self._decode(
            ResourceKind.HEALTH,
            lambda: self._cluster_parser.parse_health(payload, self._clock()),
        )

    def list_indices(self) -> list[IndexSummary]:
        payload = self._cluster_fetcher.fetch_indices_raw()
        return self._decode(
            ResourceKind.INDICES,
            lambda: self._cluster_parser.parse_indices(payload),
        )

    def search_documents(
        self,
        index: str,
        query: str,
        offset: int,
        size: int,
    ) -> DocumentPage:
        payload = self._document_fetcher.fetch_search_raw(index, query, offset, size)
        return self._decode(
            ResourceKind.DOCUMENTS,
            lambda: self._search_parser.parse_page(
                payload,
                index=index,
                query=query,
                offset=offset,
                size=size,
                fetched_at=self._clock(),
            ),
            index=index,
        )
