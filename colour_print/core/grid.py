"""Square color grid."""

from __future__ import annotations

from typing import Iterable, Iterator

from colour_print.core.enums import Color

MIN_GRID_SIZE = 1


class Grid:
    """N x N color grid backed by a flat list.

    Grids handed out by the tool engine are never modified again by it;
    ``copy()`` is the only way to get a second, independent instance.
    A frozen grid (see ``freeze()``) rejects writes and is hashable.
    """

    __slots__ = ("size", "_cells", "_frozen")

    def __init__(self, size: int, default: Color = Color.EMPTY) -> None:
        if isinstance(size, bool) or not isinstance(size, int) or size < MIN_GRID_SIZE:
            raise ValueError(f"grid size must be a positive integer, got {size!r}")
        self.size = size
        self._cells: list[Color] = [Color(default)] * (size * size)
        self._frozen = False

    @classmethod
    def from_rows(cls, rows: Iterable[Iterable[Color]]) -> Grid:
        """Build a grid from nested rows; rejects ragged or non-square input."""
        materialized = [[Color(c) for c in row] for row in rows]
        size = len(materialized)
        if size == 0 or any(len(row) != size for row in materialized):
            raise ValueError("rows must form a non-empty square")
        grid = cls(size)
        grid._cells = [c for row in materialized for c in row]
        return grid

    # -- access --

    def _idx(self, row: int, col: int) -> int:
        return row * self.size + col

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.size and 0 <= col < self.size

    def get(self, row: int, col: int) -> Color:
        if not self.in_bounds(row, col):
            raise IndexError(f"cell ({row}, {col}) outside {self.size}x{self.size} grid")
        return self._cells[self._idx(row, col)]

    def set(self, row: int, col: int, color: Color) -> None:
        if self._frozen:
            raise TypeError("grid is read-only")
        if not isinstance(color, Color):
            raise ValueError(f"not a Color: {color!r}")
        if self.in_bounds(row, col):
            self._cells[self._idx(row, col)] = color

    def rows(self) -> list[list[Color]]:
        n = self.size
        return [self._cells[r * n:(r + 1) * n] for r in range(n)]

    def cells(self) -> tuple[Color, ...]:
        return tuple(self._cells)

    def __iter__(self) -> Iterator[Color]:
        return iter(self._cells)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return self.size == other.size and self._cells == other._cells

    def __hash__(self) -> int:
        if not self._frozen:
            raise TypeError("unhashable type: mutable Grid (call freeze() first)")
        return hash((self.size, tuple(self._cells)))

    def __repr__(self) -> str:
        return f"Grid(size={self.size})"

    # -- copy --

    @property
    def frozen(self) -> bool:
        return self._frozen

    def copy(self) -> Grid:
        """Independent, writable copy."""
        new = Grid.__new__(Grid)
        new.size = self.size
        new._cells = list(self._cells)
        new._frozen = False
        return new

    def freeze(self) -> Grid:
        """Read-only copy of this grid; frozen grids are returned as-is."""
        if self._frozen:
            return self
        new = self.copy()
        new._frozen = True
        return new


def create_empty_grid(size: int) -> Grid:
    """Return a size x size grid with every cell EMPTY."""
    return Grid(size)


def check_win(current: Grid, target: Grid) -> bool:
    """True iff both grids have the same size and identical cells."""
    if current.size != target.size:
        return False
    return current.cells() == target.cells()
