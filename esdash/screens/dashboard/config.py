"""Dashboard screen configuration - widget IDs, column definitions and labels."""

from __future__ import annotations

from esdash.constants.enums import ResourceKind

# =============================================================================
# Widget IDs
# =============================================================================

TOP_BAR_ID = "top-bar"
INDEX_PANEL_ID = "index-panel"
FILTER_BAR_ID = "filter-bar"
DOCUMENTS_PANEL_ID = "documents-panel"
DOC_DRAWER_ID = "doc-drawer"
STATUS_BAR_ID = "status-bar"

# =============================================================================
# Table Column Definitions: list[tuple[str, int]] = [(name, width), ...]
# =============================================================================

INDEX_TABLE_COLUMNS: list[tuple[str, int]] = [
    ("Health", 7),
    ("Index", 24),
    ("Docs", 10),
]

DOCUMENT_TABLE_COLUMNS: list[tuple[str, int]] = [
    ("#", 5),
    ("_id", 22),
    ("Source", 80),
]

# =============================================================================
# Labels
# =============================================================================

RESOURCE_LABELS: dict[ResourceKind, str] = {
    ResourceKind.HEALTH: "health",
    ResourceKind.INDICES: "indices",
    ResourceKind.DOCUMENTS: "docs",
}

NO_INDEX_SELECTED = "Select an index to preview documents."
NO_INDICES = "No indices."
NO_MATCHING_INDICES = "No indices match the filter."
LOADING = "Loading…"
