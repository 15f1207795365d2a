# mdtable_core/types.py
"""
Coordinate Types - Positions and spans in a host text buffer

Shared by the cell model and the editor contract. Rows and columns are both
0-based; a column counts characters from the start of the line.
"""
from dataclasses import dataclass
from functools import total_ordering


@total_ordering
@dataclass(frozen=True)
class Point:
    """A (row, column) position in the host buffer."""
    row: int
    column: int

    def compare_to(self, other: "Point") -> int:
        """
        Compare two points in document order.

        Returns:
            -1 if this point is before `other`, 1 if after, 0 if equal
        """
        if self.row != other.row:
            return -1 if self.row < other.row else 1
        if self.column != other.column:
            return -1 if self.column < other.column else 1
        return 0

    def __lt__(self, other: "Point") -> bool:
        if not isinstance(other, Point):
            return NotImplemented
        return self.compare_to(other) < 0


@dataclass(frozen=True)
class Range:
    """
    A half-open span between two points.

    Points are stored as given; callers are responsible for ordering them.
    """
    start: Point
    end: Point

    def is_empty(self) -> bool:
        return self.start == self.end

    def contains(self, point: Point) -> bool:
        """True if `start <= point < end`."""
        return self.start <= point < self.end


__all__ = [
    "Point",
    "Range",
]
