"""Keyboard module.

Key presses are routed through InputRouter, which picks a dispatch table
based on the current input mode:

- NORMAL_BINDINGS: navigation, paging, refresh and quit
- FILTER_EDIT_BINDINGS: committing or cancelling the document filter
- INDEX_FILTER_BINDINGS: applying or clearing the index name filter
"""

from esdash.keyboard.router import (
    FILTER_EDIT_BINDINGS,
    FILTER_EDIT_KEYMAP,
    INDEX_FILTER_BINDINGS,
    INDEX_FILTER_KEYMAP,
    KEY_HINTS,
    NORMAL_BINDINGS,
    NORMAL_KEYMAP,
    InputRouter,
)

__all__ = [
    "FILTER_EDIT_BINDINGS",
    "FILTER_EDIT_KEYMAP",
    "INDEX_FILTER_BINDINGS",
    "INDEX_FILTER_KEYMAP",
    "KEY_HINTS",
    "NORMAL_BINDINGS",
    "NORMAL_KEYMAP",
    "InputRouter",
]
