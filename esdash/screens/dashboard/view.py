"""Dashboard view - pure functions from a state snapshot to Rich renderables.

Nothing here mutates the snapshot or performs I/O; the screen calls these on
every redraw and places the results in its widgets.
"""

from __future__ import annotations

from datetime import datetime

from rich import box
from rich.console import Group, RenderableType
from rich.markup import escape
from rich.syntax import Syntax
from rich.table import Table
from rich.text import Text

from esdash.constants.enums import DocViewMode, Focus, InputMode, ResourceKind
from esdash.constants.limits import DOC_PREVIEW_MAX_CHARS
from esdash.constants.values import PLACEHOLDER_EMPTY, STATUS_STYLES
from esdash.keyboard.router import KEY_HINTS
from esdash.models.state.app_state import AppState
from esdash.screens.dashboard.config import (
    DOCUMENT_TABLE_COLUMNS,
    INDEX_TABLE_COLUMNS,
    LOADING,
    NO_INDEX_SELECTED,
    NO_INDICES,
    NO_MATCHING_INDICES,
    RESOURCE_LABELS,
)
from esdash.utils.formatting import (
    compact_json,
    flatten_json,
    format_age,
    format_count,
    highlight_token,
    pretty_json,
    truncate,
)

_LABEL_STYLE = "grey62"
_SELECTED_STYLE = "reverse"
_ERROR_STYLE = "bold red"
_MATCH_STYLE = "bold black on yellow"


def _status_text(status_value: str) -> Text:
    return Text(status_value, style=STATUS_STYLES.get(status_value, STATUS_STYLES["unknown"]))


def _panel_title(title: str, focused: bool) -> str:
    return f"[bold]▶ {title}[/bold]" if focused else title


def _highlight(text: Text, token: str | None) -> Text:
    """Stylize every occurrence of ``token`` in ``text``."""
    if not token:
        return text
    plain = text.plain
    start = plain.find(token)
    while start != -1:
        text.stylize(_MATCH_STYLE, start, start + len(token))
        start = plain.find(token, start + len(token))
    return text


def render_top_bar(state: AppState, base_url: str) -> Text:
    """Cluster name, status, node/shard counts and the endpoint."""
    text = Text()
    health = state.health
    text.append("cluster: ", style=_LABEL_STYLE)
    if health is None:
        text.append(PLACEHOLDER_EMPTY)
    else:
        text.append(health.cluster_name, style="bold")
        text.append(" ")
        text.append_text(_status_text(health.status.value))
        text.append("  nodes: ", style=_LABEL_STYLE)
        text.append(str(health.number_of_nodes))
        text.append("  shards: ", style=_LABEL_STYLE)
        text.append(f"{health.active_primary_shards}p/{health.active_shards}a")
        text.append("  unassigned: ", style=_LABEL_STYLE)
        text.append(
            str(health.unassigned_shards),
            style="yellow" if health.unassigned_shards else "",
        )
    text.append("  url: ", style=_LABEL_STYLE)
    text.append(base_url)
    if state.pending:
        text.append("  ", style="")
        text.append("refreshing…", style="cyan")
    return text


def _indices_title(state: AppState) -> str:
    title = "Indices"
    if state.input_mode is InputMode.INDEX_FILTER:
        title = f"{title} · find: {escape(state.index_filter)}▏"
    elif state.index_filter:
        shown = len(state.visible_positions)
        title = f"{title} · find: {escape(state.index_filter)} ({shown}/{len(state.indices)})"
    return _panel_title(title, state.focus is Focus.INDICES)


def render_index_panel(state: AppState) -> Table:
    """Index listing with the selected row highlighted."""
    table = Table(
        title=_indices_title(state),
        box=box.SIMPLE_HEAD,
        expand=True,
        show_edge=False,
    )
    for name, width in INDEX_TABLE_COLUMNS:
        table.add_column(
            name,
            min_width=width,
            no_wrap=True,
            justify="right" if name == "Docs" else "left",
        )
    if not state.indices:
        table.caption = LOADING if state.is_pending(ResourceKind.INDICES) else NO_INDICES
        return table
    visible = state.visible_positions
    if not visible:
        table.caption = NO_MATCHING_INDICES
        return table
    for position in visible:
        entry = state.indices[position]
        table.add_row(
            _status_text(entry.health.value),
            Text(entry.name),
            format_count(entry.docs_count),
            style=_SELECTED_STYLE if position == state.selected_index else None,
        )
    return table


def render_filter_bar(state: AppState) -> Text:
    """Committed filter, or the draft with a cursor while editing."""
    text = Text()
    text.append("filter: ", style=_LABEL_STYLE)
    if state.input_mode is InputMode.FILTER_EDIT:
        text.append(state.draft_filter, style="bold")
        text.append("▏", style="blink")
        return text
    text.append(state.committed_filter or PLACEHOLDER_EMPTY)
    return text


def _documents_title(state: AppState) -> str:
    title = "Documents"
    index_name = state.selected_index_name
    if index_name is None:
        return _panel_title(title, state.focus is Focus.DOCUMENTS)
    title = f"{title} · {escape(index_name)}"
    page = state.document_page
    if page is not None:
        shown = f"{page.offset + 1}-{page.last_ordinal}" if page.hits else "none"
        title = f"{title} · {shown} of {format_count(page.total)}"
        if page.took_ms is not None:
            title = f"{title} · {page.took_ms}ms"
    else:
        title = f"{title} · from {state.document_offset}"
    return _panel_title(title, state.focus is Focus.DOCUMENTS)


def render_documents_panel(state: AppState) -> Table:
    """Current document page, or a placeholder explaining why there is none."""
    table = Table(
        title=_documents_title(state),
        box=box.SIMPLE_HEAD,
        expand=True,
        show_edge=False,
    )
    for name, width in DOCUMENT_TABLE_COLUMNS:
        table.add_column(name, min_width=width, no_wrap=True, overflow="ellipsis")

    page = state.document_page
    if state.selected_index_name is None:
        table.caption = NO_INDEX_SELECTED
        return table
    if page is None:
        table.caption = LOADING if state.is_pending(ResourceKind.DOCUMENTS) else PLACEHOLDER_EMPTY
        return table
    if page.is_empty:
        table.caption = (
            f"No documents at offset {page.offset} (total {format_count(page.total)})."
        )
        return table

    for position, hit in enumerate(page.hits):
        selected = state.focus is Focus.DOCUMENTS and position == state.selected_document
        table.add_row(
            str(page.offset + position + 1),
            Text(hit.id),
            Text(truncate(compact_json(hit.source), DOC_PREVIEW_MAX_CHARS)),
            style=_SELECTED_STYLE if selected else None,
        )
    warnings = []
    if page.timed_out:
        warnings.append("search timed out")
    if page.shards_failed:
        warnings.append(f"{page.shards_failed} shard(s) failed")
    if warnings:
        table.caption = ", ".join(warnings)
        table.caption_style = "yellow"
    return table


def render_drawer(state: AppState) -> RenderableType | None:
    """Selected document in the current view mode, or None when closed."""
    hit = state.selected_hit
    if not state.drawer_open or hit is None:
        return None
    header = Text()
    header.append("_id: ", style=_LABEL_STYLE)
    header.append(hit.id, style="bold")
    header.append(f"  [{state.doc_view_mode.value}]", style=_LABEL_STYLE)

    # Matches of the filter's first term are highlighted in every mode
    token = highlight_token(state.committed_filter)
    body: RenderableType
    if state.doc_view_mode is DocViewMode.PRETTY:
        code = pretty_json(hit.source)
        syntax = Syntax(code, "json", word_wrap=True)
        body = syntax if token is None else _highlight(syntax.highlight(code), token)
    elif state.doc_view_mode is DocViewMode.RAW:
        body = _highlight(Text(compact_json(hit.source)), token)
    else:
        flat = Table(box=None, show_header=False, expand=True)
        flat.add_column("path", style="cyan", no_wrap=True)
        flat.add_column("value")
        for path, value in flatten_json(hit.source):
            flat.add_row(
                Text(path or PLACEHOLDER_EMPTY),
                _highlight(Text(compact_json(value)), token),
            )
        body = flat
    return Group(header, body)


def render_status_bar(state: AppState, now: datetime) -> Text:
    """Latest error, refresh age per resource and key hints."""
    text = Text()
    last_error = state.last_error
    if last_error:
        text.append(f"error: {last_error}", style=_ERROR_STYLE)
        text.append("  ")
    for kind, label in RESOURCE_LABELS.items():
        text.append(f"{label}: ", style=_LABEL_STYLE)
        age = format_age(state.last_refreshed.get(kind), now)
        text.append(age, style="yellow" if kind in state.errors else "")
        text.append("  ")
    for key, description in KEY_HINTS[state.input_mode]:
        text.append(key, style="bold")
        text.append(f" {description} ", style=_LABEL_STYLE)
    return text
