"""
Board logic for a 10x20 Tetris grid with a floor sentinel row.

The board is a flat numpy array of ``(height + 1) * width`` int8 cells,
indexed row-major (index = row * width + col):
  - 0 = empty cell
  - 1-5 = locked cell, value is the shape tag (shape id + 1, used for coloring)
  - -1 = floor sentinel

Indices 0-199 are the 20 visible rows. Indices 200-209 form an extra row that
is always occupied, so checking ``index + width`` for a piece on the bottom
visible row never reads past the array.
"""

from __future__ import annotations

from typing import Iterable, Sequence

import numpy as np

EMPTY = 0
FLOOR = -1


class Board:
    """Tetris board with collision detection and line clearing.

    Attributes:
        width: Number of columns (default 10).
        height: Number of visible rows (default 20).
        cells: Flat numpy array of length (height + 1) * width, dtype int8.
    """

    def __init__(self, width: int = 10, height: int = 20) -> None:
        self.width = width
        self.height = height
        self.playable = width * height
        self.size = self.playable + width
        self.cells = np.zeros(self.size, dtype=np.int8)
        self.reset()

    def reset(self) -> None:
        """Empty every visible cell and re-mark the sentinel row."""
        self.cells[:] = EMPTY
        self.cells[self.playable:] = FLOOR

    def is_occupied(self, index: int) -> bool:
        """True if the cell holds a locked piece or the floor.

        Indices outside the array report False; callers that need a bounds
        check use ``in_bounds``.
        """
        if not self.in_bounds(index):
            return False
        return bool(self.cells[index] != EMPTY)

    def in_bounds(self, index: int) -> bool:
        return 0 <= index < self.size

    def tag_at(self, index: int) -> int:
        return int(self.cells[index])

    def occupy(self, indices: Iterable[int], tag: int) -> None:
        """Mark cells as locked with ``tag``. Never writes into the sentinel row."""
        assert tag > 0, f"invalid cell tag {tag}"
        for i in indices:
            assert 0 <= i < self.playable, f"occupy outside playable area: {i}"
            self.cells[i] = tag

    def clear(self, indices: Iterable[int]) -> None:
        for i in indices:
            assert 0 <= i < self.playable, f"clear outside playable area: {i}"
            self.cells[i] = EMPTY

    def row_indices(self, row: int) -> range:
        return range(row * self.width, (row + 1) * self.width)

    def is_row_complete(self, row: int) -> bool:
        """True iff all cells of visible row ``row`` are occupied."""
        assert 0 <= row < self.height, f"row out of range: {row}"
        start = row * self.width
        return bool(np.all(self.cells[start:start + self.width] != EMPTY))

    def complete_rows(self) -> list[int]:
        """Return indices of complete visible rows, bottom to top."""
        return [r for r in range(self.height - 1, -1, -1) if self.is_row_complete(r)]

    def compact_after_clear(self, rows: Sequence[int]) -> None:
        """Remove the given rows and shift everything above them down.

        All rows are dropped in one pass with a mask, which gives the same
        result as removing them one at a time from the bottom up: every row
        above a cleared row moves down by the number of cleared rows beneath
        it, and one empty row is inserted at the top per cleared row.
        """
        if not rows:
            return
        grid = self.cells[:self.playable].reshape(self.height, self.width)
        keep = np.ones(self.height, dtype=bool)
        for r in rows:
            assert 0 <= r < self.height, f"row out of range: {r}"
            keep[r] = False
        remaining = grid[keep]
        empty_rows = np.zeros((self.height - len(remaining), self.width), dtype=np.int8)
        self.cells[:self.playable] = np.vstack([empty_rows, remaining]).ravel()

    def clear_lines(self) -> list[int]:
        """Clear all complete rows and compact the board.

        Returns:
            The cleared row indices (pre-clear numbering), bottom to top.
        """
        rows = self.complete_rows()
        for r in rows:
            self.clear(self.row_indices(r))
        self.compact_after_clear(rows)
        return rows

    def fits(self, cells: Sequence[int]) -> bool:
        """Check whether a piece occupying ``cells`` is a legal placement.

        A placement is legal if every cell:
          - Is inside the array.
          - Is not occupied by a locked cell or the floor.
        and the cells do not wrap around a side wall (a tetromino never spans
        more than 4 columns).
        """
        for i in cells:
            if not self.in_bounds(i) or self.is_occupied(i):
                return False
        cols = [i % self.width for i in cells]
        return max(cols) - min(cols) < 4

    def get_grid(self) -> np.ndarray:
        """Return a copy of the visible rows, shape (height, width)."""
        return self.cells[:self.playable].reshape(self.height, self.width).copy()
