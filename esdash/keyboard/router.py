"""Input router - maps raw key presses to state machine events.

Keys are declared per input mode as Textual ``Binding`` objects naming an
action; the router expands them into dispatch tables keyed by Textual key
names. It keeps no state: the current input mode and focus are read from the
snapshot passed with every key.
"""

from __future__ import annotations

from collections.abc import Callable

from textual.binding import Binding

from esdash.constants.enums import Focus, InputMode
from esdash.models.state.app_state import AppState
from esdash.models.state.events import (
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
    SelectNext,
    SelectPrev,
    ToggleDrawer,
    ToggleFocus,
)

KeyAction = Callable[[AppState], Event | None]


def _on_enter(state: AppState) -> Event:
    if state.focus is Focus.DOCUMENTS:
        return ToggleDrawer()
    return LoadDocuments()


def _on_open(state: AppState) -> Event | None:
    return ToggleDrawer() if state.focus is Focus.DOCUMENTS else None


def _on_escape(state: AppState) -> Event | None:
    return CloseDrawer() if state.drawer_open else None


KEY_ACTIONS: dict[str, KeyAction] = {
    "quit": lambda _: Quit(),
    "refresh": lambda _: ManualRefresh(),
    "edit_filter": lambda _: EnterFilterEdit(),
    "filter_indices": lambda _: EnterIndexFilter(),
    "select_prev": lambda _: SelectPrev(),
    "select_next": lambda _: SelectNext(),
    "toggle_focus": lambda _: ToggleFocus(),
    "load_documents": lambda _: LoadDocuments(),
    "enter": _on_enter,
    "open": _on_open,
    "escape": _on_escape,
    "page_next": lambda _: PageNext(),
    "page_prev": lambda _: PagePrev(),
    "cycle_view": lambda _: CycleDocView(),
    "commit_filter": lambda _: CommitFilter(),
    "cancel_filter": lambda _: CancelFilterEdit(),
    "filter_backspace": lambda _: FilterBackspace(),
    "commit_index_filter": lambda _: CommitIndexFilter(),
    "clear_index_filter": lambda _: ClearIndexFilter(),
    "index_filter_backspace": lambda _: IndexFilterBackspace(),
}

# ============================================================================
# Textual Binding objects per input mode
# ============================================================================

NORMAL_BINDINGS: list[Binding] = [
    Binding("q", "quit", "quit"),
    Binding("r", "refresh", "refresh"),
    Binding("slash,question_mark", "edit_filter", "filter", key_display="/"),
    Binding("ctrl+f", "filter_indices", "find index", key_display="^f"),
    Binding("up,k", "select_prev", "select", key_display="↑↓"),
    Binding("down,j", "select_next", "select", show=False),
    Binding("tab", "toggle_focus", "focus"),
    Binding("d", "load_documents", "load", key_display="d/enter"),
    Binding("enter", "enter", "load", show=False),
    Binding("o", "open", "open", show=False),
    Binding("escape", "escape", "close", show=False),
    Binding("n", "page_next", "page", key_display="n/p"),
    Binding("p", "page_prev", "page", show=False),
    Binding("v", "cycle_view", "view"),
]

FILTER_EDIT_BINDINGS: list[Binding] = [
    Binding("enter", "commit_filter", "apply"),
    Binding("escape", "cancel_filter", "cancel", key_display="esc"),
    Binding("backspace", "filter_backspace", "delete"),
]

INDEX_FILTER_BINDINGS: list[Binding] = [
    Binding("enter", "commit_index_filter", "apply"),
    Binding("escape", "clear_index_filter", "clear", key_display="esc"),
    Binding("backspace", "index_filter_backspace", "delete"),
]


def build_keymap(bindings: list[Binding]) -> dict[str, KeyAction]:
    """Expand bindings (``"up,k"`` style keys included) into a dispatch table."""
    keymap: dict[str, KeyAction] = {}
    for binding in bindings:
        for key in binding.key.split(","):
            keymap[key.strip()] = KEY_ACTIONS[binding.action]
    return keymap


def build_hints(bindings: list[Binding]) -> tuple[tuple[str, str], ...]:
    """Key/description pairs for the bindings shown in the status bar."""
    return tuple(
        (binding.key_display or binding.key, binding.description)
        for binding in bindings
        if binding.show
    )


NORMAL_KEYMAP = build_keymap(NORMAL_BINDINGS)
FILTER_EDIT_KEYMAP = build_keymap(FILTER_EDIT_BINDINGS)
INDEX_FILTER_KEYMAP = build_keymap(INDEX_FILTER_BINDINGS)

# Hints rendered in the status bar, per input mode
KEY_HINTS: dict[InputMode, tuple[tuple[str, str], ...]] = {
    InputMode.NORMAL: build_hints(NORMAL_BINDINGS),
    InputMode.FILTER_EDIT: build_hints(FILTER_EDIT_BINDINGS),
    InputMode.INDEX_FILTER: build_hints(INDEX_FILTER_BINDINGS),
}

# Text-entry modes turn unbound printable keys into these events
_KEYSTROKE_EVENTS: dict[InputMode, Callable[[str], Event]] = {
    InputMode.FILTER_EDIT: FilterKeystroke,
    InputMode.INDEX_FILTER: IndexFilterKeystroke,
}


class InputRouter:
    """Translates key presses into events according to the input mode."""

    def __init__(
        self,
        normal_keymap: dict[str, KeyAction] | None = None,
        filter_edit_keymap: dict[str, KeyAction] | None = None,
        index_filter_keymap: dict[str, KeyAction] | None = None,
    ) -> None:
        self._keymaps: dict[InputMode, dict[str, KeyAction]] = {
            InputMode.NORMAL: normal_keymap or NORMAL_KEYMAP,
            InputMode.FILTER_EDIT: filter_edit_keymap or FILTER_EDIT_KEYMAP,
            InputMode.INDEX_FILTER: index_filter_keymap or INDEX_FILTER_KEYMAP,
        }

    def route(self, key: str, character: str | None, state: AppState) -> Event | None:
        """Return the event for a key press, or None when the key is unbound.

        Args:
            key: Textual key name (``"enter"``, ``"slash"``, ``"q"``...)
            character: Printable character for the key, if any
            state: Current state snapshot
        """
        action = self._keymaps[state.input_mode].get(key)
        if action is not None:
            return action(state)
        keystroke = _KEYSTROKE_EVENTS.get(state.input_mode)
        if keystroke is not None and character and character.isprintable():
            return keystroke(character)
        return None
