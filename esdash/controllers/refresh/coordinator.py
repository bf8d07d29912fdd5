"""Fetch coordinator - runs fetch client calls off the control loop.

Each dispatched request runs on a thread pool. When it finishes, successfully
or not, a :class:`FetchCompletion` is handed to the ``deliver`` callback. The
coordinator never reorders completions and never inspects sequence numbers;
deciding whether a completion is still wanted happens downstream.
"""

from __future__ import annotations

import logging
import threading
import time
from collections.abc import Callable
from concurrent.futures import Executor, Future, ThreadPoolExecutor
from typing import Any

from esdash.constants.defaults import FETCH_WORKERS_DEFAULT
from esdash.constants.enums import FetchErrorKind, ResourceKind
from esdash.controllers.base import BaseFetchClient
from esdash.models.core.fetch_info import (
    FetchCompletion,
    FetchError,
    FetchSpec,
    RequestToken,
)

logger = logging.getLogger(__name__)


class FetchCoordinator:
    """Dispatches fetches concurrently and reports their outcomes.

    Args:
        client: Fetch client providing the three read operations
        deliver: Callback receiving every completion; called from a worker thread
        executor: Executor to run calls on (a private thread pool when omitted)
        max_workers: Pool size when the coordinator creates its own executor
    """

    def __init__(
        self,
        client: BaseFetchClient,
        deliver: Callable[[FetchCompletion], None],
        *,
        executor: Executor | None = None,
        max_workers: int = FETCH_WORKERS_DEFAULT,
    ) -> None:
        self._client = client
        self._deliver = deliver
        self._owns_executor = executor is None
        self._executor = executor or ThreadPoolExecutor(
            max_workers=max_workers,
            thread_name_prefix="esdash-fetch",
        )
        self._closed = threading.Event()

    @property
    def is_closed(self) -> bool:
        return self._closed.is_set()

    def dispatch(self, token: RequestToken, spec: FetchSpec) -> Future[Any] | None:
        """Start the fetch for ``spec`` without waiting for it.

        Returns:
            The executor future, or None once the coordinator is shut down.
        """
        if self.is_closed:
            logger.debug("Coordinator closed, not dispatching %s", token.key)
            return None
        logger.debug("Dispatching %s seq=%s", token.key, token.sequence)
        return self._executor.submit(self._run, token, spec)

    def shutdown(self) -> None:
        """Stop accepting work; in-flight calls finish but are not delivered."""
        self._closed.set()
        if self._owns_executor:
            self._executor.shutdown(wait=False, cancel_futures=True)

    def _run(self, token: RequestToken, spec: FetchSpec) -> None:
        started = time.monotonic()
        data: Any | None = None
        error: FetchError | None = None
        try:
            data = self._call(spec)
        except FetchError as exc:
            error = exc
        except Exception as exc:
            logger.exception("Unexpected failure fetching %s", token.key)
            error = FetchError(
                spec.key.kind,
                FetchErrorKind.UNEXPECTED,
                str(exc) or type(exc).__name__,
                index=spec.key.index,
            )

        duration_ms = (time.monotonic() - started) * 1000
        if self.is_closed:
            return
        logger.debug(
            "Completed %s seq=%s in %.2fms (%s)",
            token.key,
            token.sequence,
            duration_ms,
            "ok" if error is None else error.kind.value,
        )
        self._deliver(
            FetchCompletion(
                token=token,
                spec=spec,
                data=data,
                error=error,
                duration_ms=duration_ms,
            )
        )

    def _call(self, spec: FetchSpec) -> Any:
        kind = spec.key.kind
        if kind is ResourceKind.HEALTH:
            return self._client.get_health()
        if kind is ResourceKind.INDICES:
            return self._client.list_indices()
        return self._client.search_documents(
            spec.key.index or "",
            spec.query,
            spec.offset,
            spec.size,
        )
