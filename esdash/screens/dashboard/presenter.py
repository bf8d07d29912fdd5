"""Dashboard presenter - wires input, state and background fetches together.

The presenter runs on the Textual event loop, which is the single control
loop of the dashboard: key presses, timer ticks and fetch completions all
arrive here as events, one at a time, and are applied to the state machine.
Fetch requests returned by the state machine go to the coordinator, whose
completions come back as :class:`FetchCompleted` messages posted to the
screen's message queue.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from concurrent.futures import Executor
from datetime import datetime
from typing import Any

from textual.message import Message

from esdash.controllers.base import BaseFetchClient
from esdash.controllers.refresh import FetchCoordinator, RefreshScheduler
from esdash.keyboard.router import InputRouter
from esdash.models.core.fetch_info import FetchCompletion
from esdash.models.state.app_settings import AppSettings
from esdash.models.state.app_state import AppState
from esdash.models.state.events import AutoRefreshTick, Event, ManualRefresh, ReceiveResult
from esdash.models.state.machine import AppStateMachine

logger = logging.getLogger(__name__)


# =============================================================================
# Worker Messages
# =============================================================================


class FetchCompleted(Message):
    """Message carrying one fetch completion into the control loop."""

    def __init__(self, completion: FetchCompletion) -> None:
        super().__init__()
        self.completion = completion


class DashboardPresenter:
    """Presenter for DashboardScreen - handles routing, state and dispatch."""

    def __init__(
        self,
        screen: Any,
        settings: AppSettings,
        client: BaseFetchClient,
        *,
        executor: Executor | None = None,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self._screen = screen
        self._settings = settings
        self._scheduler = RefreshScheduler(
            page_size=settings.page_size,
            refresh_interval=settings.refresh_interval,
        )
        self._machine = AppStateMachine(
            self._scheduler,
            auto_load_on_select=settings.auto_load_on_select,
            clock=clock,
        )
        self._router = InputRouter()
        self._coordinator = FetchCoordinator(
            client,
            self._deliver,
            executor=executor,
            max_workers=settings.fetch_workers,
        )

    # =========================================================================
    # Properties
    # =========================================================================

    @property
    def state(self) -> AppState:
        return self._machine.state

    @property
    def is_finished(self) -> bool:
        return self._machine.is_finished

    @property
    def refresh_interval(self) -> float:
        return self._scheduler.refresh_interval

    # =========================================================================
    # Control loop entry points
    # =========================================================================

    def start(self) -> None:
        """Kick off the initial load."""
        logger.info("Starting dashboard for %s", self._settings.base_url)
        self.apply(ManualRefresh())

    def stop(self) -> None:
        self._coordinator.shutdown()

    def auto_refresh(self) -> None:
        self.apply(AutoRefreshTick())

    def handle_key(self, key: str, character: str | None) -> bool:
        """Route a key press; return whether it was bound to an event."""
        event = self._router.route(key, character, self._machine.state)
        if event is None:
            return False
        self.apply(event)
        return True

    def receive(self, completion: FetchCompletion) -> None:
        self.apply(ReceiveResult(completion))

    def apply(self, event: Event) -> None:
        """Run one transition and dispatch the fetches it asks for."""
        for request in self._machine.handle(event):
            self._coordinator.dispatch(request.token, request.spec)

    def _deliver(self, completion: FetchCompletion) -> None:
        # Runs on a fetch worker thread; post_message is thread-safe.
        self._screen.post_message(FetchCompleted(completion))
