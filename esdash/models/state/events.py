"""Events consumed by the application state machine.

Key presses are turned into these by the input router; the refresh timer and
the fetch coordinator produce the rest.
"""

from __future__ import annotations

from dataclasses import dataclass

from esdash.models.core.fetch_info import FetchCompletion


class Event:
    """Base class for state machine events."""


@dataclass(frozen=True)
class ReceiveResult(Event):
    completion: FetchCompletion


@dataclass(frozen=True)
class SelectNext(Event):
    pass


@dataclass(frozen=True)
class SelectPrev(Event):
    pass


@dataclass(frozen=True)
class LoadDocuments(Event):
    pass


@dataclass(frozen=True)
class PageNext(Event):
    pass


@dataclass(frozen=True)
class PagePrev(Event):
    pass


@dataclass(frozen=True)
class EnterFilterEdit(Event):
    pass


@dataclass(frozen=True)
class FilterKeystroke(Event):
    char: str


@dataclass(frozen=True)
class FilterBackspace(Event):
    pass


@dataclass(frozen=True)
class CommitFilter(Event):
    pass


@dataclass(frozen=True)
class CancelFilterEdit(Event):
    pass


@dataclass(frozen=True)
class EnterIndexFilter(Event):
    pass


@dataclass(frozen=True)
class IndexFilterKeystroke(Event):
    char: str


@dataclass(frozen=True)
class IndexFilterBackspace(Event):
    pass


@dataclass(frozen=True)
class CommitIndexFilter(Event):
    pass


@dataclass(frozen=True)
class ClearIndexFilter(Event):
    pass


@dataclass(frozen=True)
class ManualRefresh(Event):
    pass


@dataclass(frozen=True)
class AutoRefreshTick(Event):
    pass


@dataclass(frozen=True)
class ToggleFocus(Event):
    pass


@dataclass(frozen=True)
class ToggleDrawer(Event):
    pass


@dataclass(frozen=True)
class CloseDrawer(Event):
    pass


@dataclass(frozen=True)
class CycleDocView(Event):
    pass


@dataclass(frozen=True)
class Quit(Event):
    pass


__all__ = [
    "AutoRefreshTick",
    "CancelFilterEdit",
    "ClearIndexFilter",
    "CloseDrawer",
    "CommitFilter",
    "CommitIndexFilter",
    "CycleDocView",
    "EnterFilterEdit",
    "EnterIndexFilter",
    "Event",
    "FilterBackspace",
    "FilterKeystroke",
    "IndexFilterBackspace",
    "IndexFilterKeystroke",
    "LoadDocuments",
    "ManualRefresh",
    "PageNext",
    "PagePrev",
    "Quit",
    "ReceiveResult",
    "SelectNext",
    "SelectPrev",
    "ToggleDrawer",
    "ToggleFocus",
]
