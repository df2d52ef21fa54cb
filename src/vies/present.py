"""Display rules for rendered rows and headers."""
from __future__ import annotations
from typing import Any, Dict, List
from urllib.parse import urlparse

from .columns import COLUMNS, LINK_COLUMN, Direction, Row
from .state import SortState

LINK_TEXT = "Veure blog"
MISSING = "-"
ARROWS = {Direction.ASC: " ▲", Direction.DESC: " ▼"}

# compact layout: Agulla/Paret + Zona share a line, Data + Enllaç form the footer
GROUPS = {4: "location", 5: "location", 6: "footer", 7: "footer"}


def is_absolute_url(value: str) -> bool:
    parsed = urlparse(value)
    return parsed.scheme in ("http", "https") and bool(parsed.netloc)


def render_cell(row: Row, index: int) -> Dict[str, Any]:
    value = row[index] if index < len(row) else ""
    out: Dict[str, Any] = {
        "label": COLUMNS[index].label,
        "text": value or MISSING,
        "group": GROUPS.get(index),
    }
    if index == LINK_COLUMN and value and is_absolute_url(value):
        out["text"] = LINK_TEXT
        out["href"] = value
    return out


def render_row(row: Row) -> List[Dict[str, Any]]:
    return [render_cell(row, spec.index) for spec in COLUMNS]


def sort_indicator(state: SortState, index: int) -> str:
    if index != state.column or not COLUMNS[index].sortable:
        return ""
    return ARROWS[state.direction]


def render_headers(state: SortState) -> List[Dict[str, Any]]:
    return [
        {
            "index": spec.index,
            "label": spec.label,
            "sortable": spec.sortable,
            "indicator": sort_indicator(state, spec.index),
        }
        for spec in COLUMNS
    ]
