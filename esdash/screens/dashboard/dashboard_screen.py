"""Dashboard screen - the render surface of esdash."""

from __future__ import annotations

import logging
from collections.abc import Callable
from concurrent.futures import Executor
from contextlib import suppress
from datetime import datetime, timezone

from textual import events
from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical, VerticalScroll
from textual.css.query import NoMatches, WrongType
from textual.screen import Screen
from textual.widgets import Static

from esdash.constants.timeouts import STATUS_REDRAW_INTERVAL
from esdash.controllers.base import BaseFetchClient
from esdash.models.state.app_settings import AppSettings
from esdash.screens.dashboard import view
from esdash.screens.dashboard.config import (
    DOC_DRAWER_ID,
    DOCUMENTS_PANEL_ID,
    FILTER_BAR_ID,
    INDEX_PANEL_ID,
    STATUS_BAR_ID,
    TOP_BAR_ID,
)
from esdash.screens.dashboard.presenter import DashboardPresenter, FetchCompleted

logger = logging.getLogger(__name__)


class DashboardScreen(Screen[None]):
    """Cluster health, index list and document preview in one screen."""

    DEFAULT_CSS = """
    DashboardScreen {
        layout: vertical;
    }

    #top-bar {
        height: 3;
        border: round $primary;
        padding: 0 1;
    }

    #body {
        height: 1fr;
    }

    #index-panel {
        width: 1fr;
        min-width: 30;
        border: round $secondary;
    }

    #right-column {
        width: 3fr;
    }

    #filter-bar {
        height: 3;
        border: round $secondary;
        padding: 0 1;
    }

    #documents-panel {
        height: 1fr;
        border: round $secondary;
    }

    #doc-drawer-scroll {
        height: 1fr;
        border: round $accent;
        display: none;
    }

    #doc-drawer-scroll.open {
        display: block;
    }

    #status-bar {
        height: 1;
        padding: 0 1;
    }
    """

    def __init__(
        self,
        settings: AppSettings,
        client: BaseFetchClient,
        *,
        executor: Executor | None = None,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        super().__init__()
        self._settings = settings
        self._clock = clock or (lambda: datetime.now(timezone.utc))
        self.presenter = DashboardPresenter(
            self,
            settings,
            client,
            executor=executor,
            clock=clock,
        )

    def compose(self) -> ComposeResult:
        yield Static(id=TOP_BAR_ID)
        with Horizontal(id="body"):
            yield Static(id=INDEX_PANEL_ID)
            with Vertical(id="right-column"):
                yield Static(id=FILTER_BAR_ID)
                yield Static(id=DOCUMENTS_PANEL_ID)
                with VerticalScroll(id="doc-drawer-scroll"):
                    yield Static(id=DOC_DRAWER_ID)
        yield Static(id=STATUS_BAR_ID)

    def on_mount(self) -> None:
        self.presenter.start()
        self.set_interval(self.presenter.refresh_interval, self._on_refresh_timer)
        self.set_interval(STATUS_REDRAW_INTERVAL, self.draw)
        self.draw()

    def on_unmount(self) -> None:
        self.presenter.stop()

    # =========================================================================
    # Event sources
    # =========================================================================

    def on_key(self, event: events.Key) -> None:
        """Send every key through the input router before any binding sees it."""
        if self.presenter.handle_key(event.key, event.character):
            event.stop()
            event.prevent_default()
            self._after_transition()

    def on_fetch_completed(self, message: FetchCompleted) -> None:
        self.presenter.receive(message.completion)
        self._after_transition()

    def _on_refresh_timer(self) -> None:
        self.presenter.auto_refresh()
        self._after_transition()

    def _after_transition(self) -> None:
        if self.presenter.is_finished:
            self.app.exit()
            return
        self.draw()

    # =========================================================================
    # Rendering
    # =========================================================================

    def _update(self, widget_id: str, renderable: object) -> None:
        with suppress(NoMatches, WrongType):
            self.query_one(f"#{widget_id}", Static).update(renderable)

    def draw(self) -> None:
        """Redraw every panel from the current state snapshot."""
        snapshot = self.presenter.state
        now = self._clock()
        self._update(TOP_BAR_ID, view.render_top_bar(snapshot, self._settings.base_url))
        self._update(INDEX_PANEL_ID, view.render_index_panel(snapshot))
        self._update(FILTER_BAR_ID, view.render_filter_bar(snapshot))
        self._update(DOCUMENTS_PANEL_ID, view.render_documents_panel(snapshot))
        drawer = view.render_drawer(snapshot)
        with suppress(NoMatches, WrongType):
            scroll = self.query_one("#doc-drawer-scroll", VerticalScroll)
            scroll.set_class(drawer is not None, "open")
        self._update(DOC_DRAWER_ID, drawer if drawer is not None else "")
        self._update(STATUS_BAR_ID, view.render_status_bar(snapshot, now))
