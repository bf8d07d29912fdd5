"""Application state, settings, events and the state machine."""

from esdash.models.state.app_settings import AppSettings, ConfigError
from esdash.models.state.app_state import AppState
from esdash.models.state.machine import AppStateMachine

__all__ = [
    "AppSettings",
    "AppState",
    "AppStateMachine",
    "ConfigError",
]
