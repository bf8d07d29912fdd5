"""Application state machine - the only writer of AppState.

Each call to :meth:`AppStateMachine.handle` runs one transition to completion:
it replaces the current state with a new immutable value and returns the
fetch requests the transition wants dispatched. Nothing here performs I/O.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import datetime, timezone
from typing import TYPE_CHECKING, Any

from esdash.constants.enums import Focus, InputMode, ResourceKind
from esdash.models.core.fetch_info import (
    FetchCompletion,
    FetchSpec,
    PendingRequest,
)
from esdash.models.state.app_state import AppState
from esdash.models.state.events import (
    AutoRefreshTick,
    CancelFilterEdit,
    ClearIndexFilter,
    CloseDrawer,
    CommitFilter,
    CommitIndexFilter,
    CycleDocView,
    EnterFilterEdit,
    EnterIndexFilter,
    Event,
    FilterBackspace,
    FilterKeystroke,
    IndexFilterBackspace,
    IndexFilterKeystroke,
    LoadDocuments,
    ManualRefresh,
    PageNext,
    PagePrev,
    Quit,
    ReceiveResult,
    SelectNext,
    SelectPrev,
    ToggleDrawer,
    ToggleFocus,
)

if TYPE_CHECKING:
    from esdash.controllers.refresh.scheduler import RefreshScheduler

logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _clamp(value: int, upper: int) -> int:
    return max(0, min(value, upper))


class AppStateMachine:
    """Applies events to the dashboard state.

    Args:
        scheduler: Refresh scheduler that plans and sequences fetches
        auto_load_on_select: Load documents as soon as the index selection moves
        clock: Source of timestamps for last-refresh bookkeeping
        state: Initial state (a blank state when omitted)
    """

    def __init__(
        self,
        scheduler: RefreshScheduler,
        *,
        auto_load_on_select: bool = True,
        clock: Callable[[], datetime] | None = None,
        state: AppState | None = None,
    ) -> None:
        self._scheduler = scheduler
        self._auto_load_on_select = auto_load_on_select
        self._clock = clock or _utcnow
        self._state = state or AppState()
        self._handlers: dict[type[Event], Callable[[Any], list[PendingRequest]]] = {
            ReceiveResult: self._on_receive_result,
            SelectNext: lambda _: self._move_selection(1),
            SelectPrev: lambda _: self._move_selection(-1),
            LoadDocuments: self._on_load_documents,
            PageNext: lambda _: self._change_page(1),
            PagePrev: lambda _: self._change_page(-1),
            EnterFilterEdit: self._on_enter_filter_edit,
            FilterKeystroke: self._on_filter_keystroke,
            FilterBackspace: self._on_filter_backspace,
            CommitFilter: self._on_commit_filter,
            CancelFilterEdit: self._on_cancel_filter_edit,
            EnterIndexFilter: self._on_enter_index_filter,
            IndexFilterKeystroke: self._on_index_filter_keystroke,
            IndexFilterBackspace: self._on_index_filter_backspace,
            CommitIndexFilter: self._on_commit_index_filter,
            ClearIndexFilter: self._on_clear_index_filter,
            ManualRefresh: self._on_refresh,
            AutoRefreshTick: self._on_refresh,
            ToggleFocus: self._on_toggle_focus,
            ToggleDrawer: self._on_toggle_drawer,
            CloseDrawer: self._on_close_drawer,
            CycleDocView: self._on_cycle_doc_view,
            Quit: self._on_quit,
        }

    @property
    def state(self) -> AppState:
        """Current state; immutable, safe to hand to the renderer."""
        return self._state

    @property
    def is_finished(self) -> bool:
        return self._state.quitting

    def handle(self, event: Event) -> list[PendingRequest]:
        """Apply one event and return the fetches it requires."""
        if self._state.quitting:
            logger.debug("Ignoring %s after quit", type(event).__name__)
            return []
        handler = self._handlers.get(type(event))
        if handler is None:
            raise TypeError(f"Unsupported event: {event!r}")
        return handler(event)

    # =========================================================================
    # Internal helpers
    # =========================================================================

    def _update(self, **changes: Any) -> None:
        self._state = self._state.model_copy(update=changes)

    def _dispatch(self, specs: list[FetchSpec]) -> list[PendingRequest]:
        """Sequence ``specs`` and record the resulting requests as pending."""
        requests = self._scheduler.schedule(self._state, specs)
        if requests:
            pending = dict(self._state.pending)
            for request in requests:
                pending[request.token.key] = request
            self._update(pending=pending)
        return requests

    def _dispatch_documents(self) -> list[PendingRequest]:
        spec = self._scheduler.documents_spec(self._state)
        if spec is None:
            return []
        return self._dispatch([spec])

    def _discard_documents(self, *, keep_index: str | None) -> None:
        """Drop the current page and any document fetch for another index.

        In-flight document requests for indices other than ``keep_index`` are
        retired so their responses arrive stale.
        """
        pending = dict(self._state.pending)
        for key in list(pending):
            if key.kind is ResourceKind.DOCUMENTS and key.index != keep_index:
                self._scheduler.retire(key)
                del pending[key]
        self._update(
            pending=pending,
            document_page=None,
            selected_document=None,
            drawer_open=False,
        )

    def _retarget_documents(self) -> list[PendingRequest]:
        """Point the documents panel at the newly selected index.

        The previous index's page, in-flight fetches, error and refresh age
        are dropped so nothing about it is shown against the new selection.
        """
        self._discard_documents(keep_index=self._state.selected_index_name)
        documents = ResourceKind.DOCUMENTS
        self._update(
            document_offset=0,
            errors={k: v for k, v in self._state.errors.items() if k is not documents},
            last_refreshed={
                k: v for k, v in self._state.last_refreshed.items() if k is not documents
            },
        )
        if self._state.selected_index_name is not None and self._auto_load_on_select:
            return self._dispatch_documents()
        return []

    def _visible_selection(self) -> int | None:
        """Current selection, moved to the first visible row if filtered out."""
        visible = self._state.visible_positions
        if not visible:
            return None
        if self._state.selected_index in visible:
            return self._state.selected_index
        return visible[0]

    def _reveal_selection(self) -> list[PendingRequest]:
        selected = self._visible_selection()
        if selected == self._state.selected_index:
            return []
        self._update(selected_index=selected)
        return self._retarget_documents()

    # =========================================================================
    # Fetch results
    # =========================================================================

    def _on_receive_result(self, event: ReceiveResult) -> list[PendingRequest]:
        completion = event.completion
        token = completion.token
        if not self._scheduler.is_current(token):
            logger.debug(
                "Dropping stale %s result (seq %s < %s)",
                token.key,
                token.sequence,
                self._scheduler.latest(token.key),
            )
            return []
        kind = token.key.kind
        if kind is ResourceKind.DOCUMENTS and token.key.index != self._state.selected_index_name:
            logger.debug("Dropping %s result for a deselected index", token.key)
            return []

        pending = dict(self._state.pending)
        current = pending.get(token.key)
        if current is not None and current.token == token:
            del pending[token.key]

        errors = dict(self._state.errors)
        if not completion.success:
            errors.pop(kind, None)
            errors[kind] = str(completion.error)
            logger.warning("Fetch failed: %s", completion.error)
            self._update(pending=pending, errors=errors)
            return []

        errors.pop(kind, None)
        last_refreshed = {**self._state.last_refreshed, kind: self._clock()}
        self._update(pending=pending, errors=errors, last_refreshed=last_refreshed)

        if kind is ResourceKind.HEALTH:
            self._update(health=completion.data)
            return []
        if kind is ResourceKind.INDICES:
            return self._apply_indices(completion)
        return self._apply_documents(completion)

    def _apply_indices(self, completion: FetchCompletion) -> list[PendingRequest]:
        previous_name = self._state.selected_index_name
        indices = tuple(sorted(completion.data or (), key=lambda entry: entry.name))
        names = [entry.name for entry in indices]

        selected: int | None
        if not indices:
            selected = None
        elif previous_name in names:
            selected = names.index(previous_name)
        elif self._state.selected_index is None:
            selected = 0
        else:
            selected = _clamp(self._state.selected_index, len(indices) - 1)

        self._update(indices=indices, selected_index=selected)
        # The selection may sit on a hidden row only while the filter is typed
        if self._state.input_mode is not InputMode.INDEX_FILTER:
            self._update(selected_index=self._visible_selection())
        if self._state.selected_index_name == previous_name:
            return []
        return self._retarget_documents()

    def _apply_documents(self, completion: FetchCompletion) -> list[PendingRequest]:
        page = completion.data
        selected: int | None = None
        if page is not None and page.hits:
            selected = _clamp(self._state.selected_document or 0, len(page.hits) - 1)
        self._update(
            document_page=page,
            selected_document=selected,
            drawer_open=self._state.drawer_open and selected is not None,
        )
        return []

    # =========================================================================
    # Navigation
    # =========================================================================

    def _move_selection(self, delta: int) -> list[PendingRequest]:
        if self._state.focus is Focus.DOCUMENTS:
            return self._move_document_selection(delta)

        visible = self._state.visible_positions
        if not visible:
            return []
        current = self._state.selected_index
        if current in visible:
            target = visible[_clamp(visible.index(current) + delta, len(visible) - 1)]
        else:
            target = visible[0]
        if target == current:
            return []

        self._update(selected_index=target)
        return self._retarget_documents()

    def _move_document_selection(self, delta: int) -> list[PendingRequest]:
        page = self._state.document_page
        if page is None or not page.hits:
            return []
        current = self._state.selected_document
        target = 0 if current is None else _clamp(current + delta, len(page.hits) - 1)
        self._update(selected_document=target)
        return []

    def _on_load_documents(self, _: LoadDocuments) -> list[PendingRequest]:
        if self._state.selected_index_name is None:
            return []
        if self._state.document_offset != 0:
            self._discard_documents(keep_index=self._state.selected_index_name)
            self._update(document_offset=0)
        return self._dispatch_documents()

    def _change_page(self, direction: int) -> list[PendingRequest]:
        if self._state.selected_index_name is None:
            return []
        page_size = self._scheduler.page_size
        offset = max(0, self._state.document_offset + direction * page_size)
        if offset == self._state.document_offset:
            return []
        self._discard_documents(keep_index=self._state.selected_index_name)
        self._update(document_offset=offset)
        return self._dispatch_documents()

    # =========================================================================
    # Filter editing
    # =========================================================================

    def _on_enter_filter_edit(self, _: EnterFilterEdit) -> list[PendingRequest]:
        self._update(
            input_mode=InputMode.FILTER_EDIT,
            draft_filter=self._state.committed_filter,
        )
        return []

    def _on_filter_keystroke(self, event: FilterKeystroke) -> list[PendingRequest]:
        if self._state.input_mode is not InputMode.FILTER_EDIT:
            return []
        self._update(draft_filter=self._state.draft_filter + event.char)
        return []

    def _on_filter_backspace(self, _: FilterBackspace) -> list[PendingRequest]:
        if self._state.input_mode is not InputMode.FILTER_EDIT:
            return []
        self._update(draft_filter=self._state.draft_filter[:-1])
        return []

    def _on_commit_filter(self, _: CommitFilter) -> list[PendingRequest]:
        if self._state.input_mode is not InputMode.FILTER_EDIT:
            return []
        committed = self._state.draft_filter.strip()
        changed = (
            committed != self._state.committed_filter or self._state.document_offset != 0
        )
        self._update(
            input_mode=InputMode.NORMAL,
            committed_filter=committed,
            draft_filter=committed,
        )
        if changed:
            self._discard_documents(keep_index=self._state.selected_index_name)
            self._update(document_offset=0)
        return self._dispatch_documents()

    def _on_cancel_filter_edit(self, _: CancelFilterEdit) -> list[PendingRequest]:
        self._update(
            input_mode=InputMode.NORMAL,
            draft_filter=self._state.committed_filter,
        )
        return []

    # =========================================================================
    # Index filter
    # =========================================================================

    def _on_enter_index_filter(self, _: EnterIndexFilter) -> list[PendingRequest]:
        self._update(input_mode=InputMode.INDEX_FILTER)
        return []

    def _on_index_filter_keystroke(self, event: IndexFilterKeystroke) -> list[PendingRequest]:
        if self._state.input_mode is not InputMode.INDEX_FILTER:
            return []
        self._update(index_filter=self._state.index_filter + event.char)
        return []

    def _on_index_filter_backspace(self, _: IndexFilterBackspace) -> list[PendingRequest]:
        if self._state.input_mode is not InputMode.INDEX_FILTER:
            return []
        self._update(index_filter=self._state.index_filter[:-1])
        return []

    def _on_commit_index_filter(self, _: CommitIndexFilter) -> list[PendingRequest]:
        if self._state.input_mode is not InputMode.INDEX_FILTER:
            return []
        self._update(
            input_mode=InputMode.NORMAL,
            index_filter=self._state.index_filter.strip(),
        )
        return self._reveal_selection()

    def _on_clear_index_filter(self, _: ClearIndexFilter) -> list[PendingRequest]:
        if self._state.input_mode is not InputMode.INDEX_FILTER:
            return []
        self._update(input_mode=InputMode.NORMAL, index_filter="")
        return self._reveal_selection()

    # =========================================================================
    # Refresh, presentation and lifecycle
    # =========================================================================

    def _on_refresh(self, _: Event) -> list[PendingRequest]:
        return self._dispatch(self._scheduler.refresh_specs(self._state))

    def _on_toggle_focus(self, _: ToggleFocus) -> list[PendingRequest]:
        if self._state.focus is Focus.INDICES:
            selected = self._state.selected_document
            page = self._state.document_page
            if selected is None and page is not None and page.hits:
                selected = 0
            self._update(focus=Focus.DOCUMENTS, selected_document=selected)
        else:
            self._update(focus=Focus.INDICES)
        return []

    def _on_toggle_drawer(self, _: ToggleDrawer) -> list[PendingRequest]:
        if self._state.selected_hit is None:
            return []
        self._update(drawer_open=not self._state.drawer_open)
        return []

    def _on_close_drawer(self, _: CloseDrawer) -> list[PendingRequest]:
        self._update(drawer_open=False)
        return []

    def _on_cycle_doc_view(self, _: CycleDocView) -> list[PendingRequest]:
        if self._state.drawer_open:
            self._update(doc_view_mode=self._state.doc_view_mode.next())
        return []

    def _on_quit(self, _: Quit) -> list[PendingRequest]:
        self._update(quitting=True)
        return []
