"""Refresh scheduler - decides what to fetch and stamps sequence numbers.

Every request leaves here tagged with the next sequence number for its
resource key. The scheduler remembers the highest number handed out per key,
which is what the state machine consults to drop late responses.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import TYPE_CHECKING

from esdash.constants.enums import ResourceKind
from esdash.models.core.fetch_info import (
    FetchSpec,
    PendingRequest,
    RequestToken,
    ResourceKey,
)

if TYPE_CHECKING:
    from esdash.models.state.app_state import AppState

logger = logging.getLogger(__name__)


class RefreshScheduler:
    """Sequences and de-duplicates fetch requests."""

    def __init__(self, page_size: int, refresh_interval: float) -> None:
        """Initialize the scheduler.

        Args:
            page_size: Number of documents requested per page
            refresh_interval: Seconds between auto-refresh ticks
        """
        self.page_size = page_size
        self.refresh_interval = refresh_interval
        self._latest: dict[ResourceKey, int] = {}

    # =========================================================================
    # Planning
    # =========================================================================

    def documents_spec(self, state: AppState) -> FetchSpec | None:
        """Spec for the current document page, or None without a selection."""
        index_name = state.selected_index_name
        if index_name is None:
            return None
        return FetchSpec.for_documents(
            index_name,
            state.committed_filter,
            state.document_offset,
            self.page_size,
        )

    def refresh_keys(self, state: AppState) -> list[ResourceKey]:
        """Resources refreshed by a manual refresh or an auto-refresh tick."""
        keys = [ResourceKey.health(), ResourceKey.indices()]
        if state.selected_index_name is not None:
            keys.append(ResourceKey.documents(state.selected_index_name))
        return keys

    def refresh_specs(self, state: AppState) -> list[FetchSpec]:
        specs: list[FetchSpec] = []
        for key in self.refresh_keys(state):
            if key.kind is ResourceKind.DOCUMENTS:
                documents = self.documents_spec(state)
                if documents is not None:
                    specs.append(documents)
            else:
                specs.append(FetchSpec(key=key))
        return specs

    # =========================================================================
    # Sequencing
    # =========================================================================

    def schedule(self, state: AppState, specs: Iterable[FetchSpec]) -> list[PendingRequest]:
        """Tag specs with fresh tokens, skipping ones already in flight.

        A spec identical to the pending one for its key is skipped. A spec
        that differs (new offset or filter) gets a new token and supersedes
        the pending request.
        """
        requests: list[PendingRequest] = []
        for spec in specs:
            pending = state.pending.get(spec.key)
            if pending is not None and pending.spec == spec:
                logger.debug("Skipping %s: identical request already in flight", spec.key)
                continue
            token = RequestToken(key=spec.key, sequence=self._advance(spec.key))
            requests.append(PendingRequest(token=token, spec=spec))
        return requests

    def retire(self, key: ResourceKey) -> None:
        """Make any in-flight response for ``key`` stale without dispatching."""
        self._advance(key)

    def latest(self, key: ResourceKey) -> int:
        """Highest sequence number handed out for ``key`` (0 if never)."""
        return self._latest.get(key, 0)

    def is_current(self, token: RequestToken) -> bool:
        return token.sequence >= self.latest(token.key)

    def _advance(self, key: ResourceKey) -> int:
        sequence = self._latest.get(key, 0) + 1
        self._latest[key] = sequence
        return sequence
