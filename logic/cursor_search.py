"""
Cursor search for the cursor TicTacToe game.
Decides where the cursor lands when a key press would put it on a mark.
"""

from typing import Optional

import numpy as np

from .cell import BOARD_CELLS, BOARD_SIZE, Cell, Direction


class CursorNavigator:
    """
    Resolves cursor moves on a partially filled board.

    Rules:
    1. Take one step in the direction, staying put at the board edge
    2. If that cell is marked, search further:
       - Up/Down: keep stepping rows, trying the same column first and
         then the whole row left to right
       - Left/Right: keep stepping along the row until its edge
    3. If nothing free turns up, the cursor stays where it was
    """

    def is_free(self, cells: np.ndarray, index: int) -> bool:
        """True if the cell is empty or only carries the cursor overlay."""
        return not Cell(int(cells[index])).is_mark()

    def free_indices(self, cells: np.ndarray) -> np.ndarray:
        """Indices of every free cell, lowest first."""
        return np.flatnonzero((cells == Cell.EMPTY) | (cells == Cell.CURSOR))

    def first_free(self, cells: np.ndarray, exclude: Optional[int] = None) -> Optional[int]:
        """
        Find the lowest free cell.

        Args:
            cells: The board.
            exclude: Index to skip (a cell about to be marked).

        Returns:
            Board index, or None if no cell is free.
        """
        for index in range(BOARD_CELLS):
            if index != exclude and self.is_free(cells, index):
                return index
        return None

    def naive_step(self, index: int, direction: Direction) -> int:
        """
        One step in a direction, clamped at the board edges.

        Args:
            index: Starting index (0-8).
            direction: Which way to step.

        Returns:
            The neighbouring index, or the same index at an edge.
        """
        row, col = divmod(index, BOARD_SIZE)

        if direction == Direction.UP and row > 0:
            return index - BOARD_SIZE
        if direction == Direction.DOWN and row < BOARD_SIZE - 1:
            return index + BOARD_SIZE
        if direction == Direction.LEFT and col > 0:
            return index - 1
        if direction == Direction.RIGHT and col < BOARD_SIZE - 1:
            return index + 1

        return index

    def resolve(self, cells: np.ndarray, index: int, direction: Direction) -> int:
        """
        Work out where the cursor ends up after a move.

        Args:
            cells: The board.
            index: Current cursor index.
            direction: Requested direction.

        Returns:
            The new cursor index. Equal to index if the cursor can't move.
        """
        candidate = self.naive_step(index, direction)

        if self.is_free(cells, candidate):
            return candidate

        if direction in (Direction.UP, Direction.DOWN):
            return self._search_rows(cells, index, candidate, direction)

        return self._search_row(cells, index, candidate, direction)

    def _search_rows(
        self,
        cells: np.ndarray,
        index: int,
        candidate: int,
        direction: Direction
    ) -> int:
        """Vertical fallback: scan rows further and further away."""
        step = -BOARD_SIZE if direction == Direction.UP else BOARD_SIZE

        while True:
            found = self._scan_row(cells, candidate // BOARD_SIZE)
            if found is not None:
                return found

            candidate += step
            if not 0 <= candidate < BOARD_CELLS:
                return index  # Ran off the board

            # Same column first, then the rest of the row
            if self.is_free(cells, candidate):
                return candidate

    def _scan_row(self, cells: np.ndarray, row: int) -> Optional[int]:
        """First free cell in a row, left to right."""
        start = row * BOARD_SIZE
        for i in range(start, start + BOARD_SIZE):
            if self.is_free(cells, i):
                return i
        return None

    def _search_row(
        self,
        cells: np.ndarray,
        index: int,
        candidate: int,
        direction: Direction
    ) -> int:
        """Horizontal fallback: keep going until the row boundary."""
        if direction == Direction.LEFT:
            step, boundary = -1, 0
        else:
            step, boundary = 1, BOARD_SIZE - 1

        i = candidate
        while i % BOARD_SIZE != boundary and not self.is_free(cells, i):
            i += step

        return i if self.is_free(cells, i) else index
