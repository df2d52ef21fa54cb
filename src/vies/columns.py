from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Tuple

Row = List[str]  # [id, name, grade, length, hold_type, zone, date, link]

COLUMN_COUNT = 8

LABELS: Tuple[str, ...] = ("Nº", "Nom", "Grau", "Metres", "Agulla/Paret", "Zona", "Data", "Enllaç")

# Nom(1), Grau(2), Agulla/Paret(4), Zona(5)
SEARCH_COLUMNS: Tuple[int, ...] = (1, 2, 4, 5)

LINK_COLUMN = 7


class ColumnType(str, Enum):
    NUMERIC = "numeric"
    TEXT = "text"
    GRADE = "grade"
    DATE = "date"
    NONE = "none"   # not sortable

    @property
    def sortable(self) -> bool:
        return self is not ColumnType.NONE


class Direction(str, Enum):
    ASC = "asc"
    DESC = "desc"

    def flipped(self) -> "Direction":
        return Direction.DESC if self is Direction.ASC else Direction.ASC


@dataclass(frozen=True)
class ColumnSpec:
    index: int
    label: str
    type: ColumnType

    @property
    def sortable(self) -> bool:
        return self.type.sortable


COLUMN_TYPES: Dict[int, ColumnType] = {
    0: ColumnType.NUMERIC,   # Nº
    1: ColumnType.TEXT,      # Nom
    2: ColumnType.GRADE,     # Grau
    3: ColumnType.NUMERIC,   # Metres
    4: ColumnType.TEXT,      # Agulla/Paret
    5: ColumnType.TEXT,      # Zona
    6: ColumnType.DATE,      # Data
    7: ColumnType.NONE,      # Enllaç
}

COLUMNS: Tuple[ColumnSpec, ...] = tuple(
    ColumnSpec(i, LABELS[i], COLUMN_TYPES[i]) for i in range(COLUMN_COUNT)
)


def column_type(index: int) -> ColumnType:
    """Type of a column; indexes outside the table count as unsortable."""
    return COLUMN_TYPES.get(index, ColumnType.NONE)


def is_sortable(index: int) -> bool:
    return column_type(index).sortable


def parse_sort_option(value: str) -> Tuple[int, Direction]:
    """Decode a dropdown value like ``"2-asc"`` into (column, direction)."""
    col, sep, direction = value.strip().partition("-")
    if not sep:
        raise ValueError(f"Sort option must look like '<column>-<asc|desc>': {value!r}")
    try:
        index = int(col)
        dir_ = Direction(direction.lower())
    except ValueError:
        raise ValueError(f"Bad sort option: {value!r}") from None
    if not is_sortable(index):
        raise ValueError(f"Column {index} is not sortable")
    return index, dir_


def format_sort_option(column: int, direction: Direction) -> str:
    return f"{column}-{Direction(direction).value}"
