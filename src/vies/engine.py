"""Row set owner: substring search and typed, stable single-column sort."""
from __future__ import annotations
import logging
from dataclasses import dataclass, replace
from typing import Callable, Dict, List, Optional, Sequence, Tuple

from .codecs import date_to_sort_value, grade_to_sort_value, number_sort_value, text_sort_value
from .columns import SEARCH_COLUMNS, ColumnType, Direction, Row, column_type
from .csv_parser import MIN_FIELDS, load_rows
from .state import DEFAULT_COLUMN, DEFAULT_DIRECTION, SortState

logger = logging.getLogger(__name__)

SORT_KEYS: Dict[ColumnType, Callable[[str], object]] = {
    ColumnType.NUMERIC: number_sort_value,
    ColumnType.TEXT: text_sort_value,
    ColumnType.GRADE: grade_to_sort_value,
    ColumnType.DATE: date_to_sort_value,
}


def cell(row: Row, index: int) -> str:
    """Trimmed cell value; missing cells read as ''."""
    return row[index].strip() if index < len(row) and row[index] else ""


def matches(row: Row, needle: str) -> bool:
    return any(needle in cell(row, col).lower() for col in SEARCH_COLUMNS)


def filter_rows(rows: Sequence[Row], query: str) -> List[Row]:
    if not query:
        return list(rows)
    needle = query.lower()
    return [row for row in rows if matches(row, needle)]


@dataclass(frozen=True)
class QuerySnapshot:
    rows: Tuple[Row, ...]
    sort: SortState
    query: str


class QueryEngine:
    """
    One loaded table plus its search query and sort state.

    Sorting reorders the stored rows, so a sort survives later query
    changes; searching only ever returns a fresh filtered list.
    """

    def __init__(self, rows: Optional[Sequence[Row]] = None):
        self._rows: List[Row] = []
        self.sort_state = SortState()
        self.query = ""
        self.loaded = False
        if rows is not None:
            self.set_rows(rows)

    @property
    def rows(self) -> List[Row]:
        return list(self._rows)

    def set_rows(self, rows: Sequence[Row]) -> None:
        """
        Replace the row set wholesale, dropping rows with fewer than two
        fields. The first load applies the default order (column 0,
        descending); later loads are re-sorted by the current sort state.
        The query is left as it is.
        """
        first = not self.loaded
        self._rows = [list(row) for row in rows if len(row) >= MIN_FIELDS]
        self.loaded = True
        if first:
            self.sort(DEFAULT_COLUMN, DEFAULT_DIRECTION)
        else:
            self.sort(self.sort_state.column, self.sort_state.direction)

    def load_text(self, text: str) -> int:
        """Ingest a CSV export: the header and malformed rows are dropped before loading."""
        self.set_rows(load_rows(text))
        logger.info("Loaded %d rows", len(self._rows))
        return len(self._rows)

    def search(self, query: str) -> List[Row]:
        return filter_rows(self._rows, query)

    def set_query(self, query: str) -> List[Row]:
        self.query = query or ""
        return self.view()

    def view(self) -> List[Row]:
        return self.search(self.query)

    def sort(self, column: int, direction: Direction) -> bool:
        """Reorder the stored rows by ``column``. Unsortable columns are a no-op."""
        ctype = column_type(column)
        if not ctype.sortable:
            logger.debug("Ignoring sort on unsortable column %s", column)
            return False
        direction = Direction(direction)
        key = SORT_KEYS[ctype]
        self._rows.sort(key=lambda row: key(cell(row, column)), reverse=direction is Direction.DESC)
        self.sort_state.set(column, direction)
        return True

    def request_sort(self, column: int) -> bool:
        """Header click: toggle on the active column, ascending on a new one."""
        pending = replace(self.sort_state)
        if not pending.toggle(column):
            return False
        return self.sort(pending.column, pending.direction)

    def snapshot(self) -> QuerySnapshot:
        # rows are copied so the presenter cannot edit the stored set
        rows = tuple(list(row) for row in self.view())
        return QuerySnapshot(rows, replace(self.sort_state), self.query)
