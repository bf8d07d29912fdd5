"""Dashboard state model.

AppState is immutable: every transition in ``AppStateMachine`` produces a new
value with ``model_copy(update=...)``, so the instance handed to the renderer
is already a read-only snapshot.
"""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from esdash.constants.enums import DocViewMode, Focus, InputMode, ResourceKind
from esdash.models.core.cluster_info import ClusterHealth, IndexSummary
from esdash.models.core.document_info import DocumentHit, DocumentPage
from esdash.models.core.fetch_info import PendingRequest, ResourceKey


class AppState(BaseModel):
    """Everything the dashboard knows at one instant."""

    model_config = ConfigDict(frozen=True)

    # Fetched data
    health: ClusterHealth | None = None
    indices: tuple[IndexSummary, ...] = ()
    document_page: DocumentPage | None = None

    # Selection and paging
    selected_index: int | None = None
    selected_document: int | None = None
    document_offset: int = 0

    # Filter editing
    committed_filter: str = ""
    draft_filter: str = ""
    index_filter: str = ""
    input_mode: InputMode = InputMode.NORMAL

    # Presentation
    focus: Focus = Focus.INDICES
    drawer_open: bool = False
    doc_view_mode: DocViewMode = DocViewMode.PRETTY

    # Refresh bookkeeping
    errors: dict[ResourceKind, str] = Field(default_factory=dict)
    last_refreshed: dict[ResourceKind, datetime] = Field(default_factory=dict)
    pending: dict[ResourceKey, PendingRequest] = Field(default_factory=dict)

    quitting: bool = False

    @property
    def selected_index_name(self) -> str | None:
        if self.selected_index is None or not 0 <= self.selected_index < len(self.indices):
            return None
        return self.indices[self.selected_index].name

    @property
    def visible_positions(self) -> tuple[int, ...]:
        """Positions in ``indices`` whose name contains the index filter.

        Matching is a case-insensitive substring test; an empty filter shows
        every index.
        """
        needle = self.index_filter.strip().lower()
        if not needle:
            return tuple(range(len(self.indices)))
        return tuple(
            position
            for position, entry in enumerate(self.indices)
            if needle in entry.name.lower()
        )

    @property
    def selected_hit(self) -> DocumentHit | None:
        page = self.document_page
        if page is None or self.selected_document is None:
            return None
        if not 0 <= self.selected_document < len(page.hits):
            return None
        return page.hits[self.selected_document]

    @property
    def last_error(self) -> str | None:
        """Most recently recorded error that has not been cleared."""
        return next(reversed(self.errors.values()), None)

    def is_pending(self, kind: ResourceKind) -> bool:
        return any(key.kind is kind for key in self.pending)
