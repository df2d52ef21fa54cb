from __future__ import annotations
from dataclasses import dataclass

from .columns import Direction, format_sort_option, is_sortable

DEFAULT_COLUMN = 0
DEFAULT_DIRECTION = Direction.DESC


@dataclass
class SortState:
    """Active sort column and direction. Only sortable columns are ever accepted."""
    column: int = DEFAULT_COLUMN
    direction: Direction = DEFAULT_DIRECTION

    def set(self, column: int, direction: Direction) -> bool:
        """Direct assignment (dropdown). Returns False and leaves state alone for unsortable columns."""
        if not is_sortable(column):
            return False
        self.column = column
        self.direction = Direction(direction)
        return True

    def toggle(self, column: int) -> bool:
        """Header click: same column flips direction, a new column starts ascending."""
        if not is_sortable(column):
            return False
        if column == self.column:
            self.direction = self.direction.flipped()
        else:
            self.column = column
            self.direction = Direction.ASC
        return True

    def reset(self) -> None:
        self.column = DEFAULT_COLUMN
        self.direction = DEFAULT_DIRECTION

    @property
    def option(self) -> str:
        return format_sort_option(self.column, self.direction)
