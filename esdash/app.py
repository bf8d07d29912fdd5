"""Main application class for the esdash TUI."""

from __future__ import annotations

import logging
from concurrent.futures import Executor

from textual.app import App

from esdash.constants import APP_TITLE
from esdash.controllers.base import BaseFetchClient
from esdash.controllers.search import SearchClusterClient
from esdash.models.state.app_settings import AppSettings
from esdash.screens import DashboardScreen

logger = logging.getLogger(__name__)


class DashboardApp(App[None]):
    """Terminal dashboard for a search cluster."""

    TITLE = APP_TITLE

    # Type hint for settings attribute
    settings: AppSettings

    def __init__(
        self,
        settings: AppSettings | None = None,
        client: BaseFetchClient | None = None,
        *,
        executor: Executor | None = None,
        **kwargs,
    ) -> None:
        super().__init__(**kwargs)
        self.settings = settings or AppSettings()
        self._owns_client = client is None
        self.client = client or SearchClusterClient(
            self.settings.base_url,
            timeout=self.settings.request_timeout,
        )
        self._executor = executor
        self.sub_title = self.settings.base_url

    def on_mount(self) -> None:
        """Called when app is mounted."""
        logger.info("esdash started against %s", self.settings.base_url)
        self.push_screen(
            DashboardScreen(self.settings, self.client, executor=self._executor)
        )

    def on_unmount(self) -> None:
        if self._owns_client:
            self.client.close()
        logger.info("esdash stopped")
