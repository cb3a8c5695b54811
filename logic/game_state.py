"""
Game state management for the cursor TicTacToe game.
Tracks the board, the movable cursor, and whether the game is over.
"""

from typing import Optional, List
from dataclasses import dataclass, field

import numpy as np

from .cell import BOARD_CELLS, BOARD_SIZE, Cell, Direction
from .cursor_search import CursorNavigator


@dataclass
class Move:
    """
    A committed mark.
    """
    mark: Cell              # PLAYER or OPPONENT
    index: int              # Linear board index (0-8)
    move_number: int        # Which move this is (0-8)

    @property
    def row(self) -> int:
        return self.index // BOARD_SIZE

    @property
    def col(self) -> int:
        return self.index % BOARD_SIZE


@dataclass(eq=False)
class BoardGame:
    """
    The complete state of the cursor TicTacToe game.

    Tracks:
    - The 9 board cells (marks plus the painted cursor overlay)
    - Where the player's cursor is
    - Where the overlay was last painted
    - Move history
    - Whether the board has filled up

    None of the operations raise. Bad directions, full boards and
    calls after the game ended are all no-ops.
    """

    # Linear board, row = index // 3, col = index % 3
    board: np.ndarray = field(
        default_factory=lambda: np.full(BOARD_CELLS, Cell.EMPTY, dtype=np.int8)
    )

    # Logical cursor position, None once the game is over
    cursor_index: Optional[int] = 0

    # Where reconcile_overlay() last painted the cursor
    previous_overlay_index: Optional[int] = None

    # Move history
    moves: List[Move] = field(default_factory=list)

    game_over: bool = False

    navigator: CursorNavigator = field(default_factory=CursorNavigator, repr=False)

    @classmethod
    def create(cls) -> "BoardGame":
        """New game: empty board, cursor at index 0."""
        return cls()

    # ==================== QUERIES ====================

    def is_game_over(self) -> bool:
        return self.game_over

    def is_free(self, index: int) -> bool:
        """
        Check whether a cell can hold the cursor or a new mark.

        Args:
            index: Board index (0-8).

        Returns:
            True if the cell is empty (with or without the overlay on it).
        """
        return self.navigator.is_free(self.board, index)

    def empty_cells(self) -> List[int]:
        """Free cell indices in increasing order."""
        return [int(i) for i in self.navigator.free_indices(self.board)]

    def cells(self) -> np.ndarray:
        """
        Read-only snapshot of the 9 cells for rendering.

        Call reconcile_overlay() first so the cursor is painted.
        """
        snapshot = self.board.copy()
        snapshot.setflags(write=False)
        return snapshot

    def last_opponent_move(self) -> Optional[Move]:
        for move in reversed(self.moves):
            if move.mark == Cell.OPPONENT:
                return move
        return None

    def copy(self) -> "BoardGame":
        """Create a deep copy of the game."""
        return BoardGame(
            board=self.board.copy(),
            cursor_index=self.cursor_index,
            previous_overlay_index=self.previous_overlay_index,
            moves=list(self.moves),
            game_over=self.game_over,
        )

    # ==================== CURSOR ====================

    def move_cursor(self, direction: Direction) -> Optional[int]:
        """
        Move the cursor one step, skipping over marked cells.

        Args:
            direction: Which way to move.

        Returns:
            The cursor index after the move (unchanged if it could not move).
        """
        if self.game_over or self.cursor_index is None:
            return self.cursor_index

        target = self.navigator.resolve(self.board, self.cursor_index, direction)

        # Only ever land on an empty-backed cell
        if self.is_free(target):
            self.cursor_index = target

        return self.cursor_index

    def _relocate_cursor(self, exclude: Optional[int] = None) -> Optional[int]:
        """
        Put the cursor on the lowest free cell, ending the game if there is none.

        Args:
            exclude: A cell that is about to be marked and can't take the cursor.
        """
        self.cursor_index = self.navigator.first_free(self.board, exclude=exclude)

        if self.cursor_index is None:
            self.game_over = True

        return self.cursor_index

    def _place(self, index: int, mark: Cell):
        self.board[index] = mark
        self.moves.append(Move(mark=mark, index=index, move_number=len(self.moves)))

    # ==================== COMMITS ====================

    def commit_player_mark(self) -> Optional[int]:
        """
        Mark the cell under the cursor for the player.

        Returns:
            The marked index, or None if nothing was placed.
        """
        if self.game_over or self.cursor_index is None:
            return None

        index = self.cursor_index
        self._place(index, Cell.PLAYER)

        # The cursor's cell is taken now, move it along
        self._relocate_cursor()

        return index

    def commit_opponent_mark(self, rng: np.random.Generator) -> Optional[int]:
        """
        Place the opponent's mark on a uniformly random free cell.

        Args:
            rng: Random source. Anything with a numpy-style choice() works.

        Returns:
            The marked index, or None if the board was already full.
        """
        free = self.empty_cells()

        if not free:
            return None

        index = int(rng.choice(free))

        # Move the cursor off the target before the mark lands on it
        if index == self.cursor_index:
            self._relocate_cursor(exclude=index)

        self._place(index, Cell.OPPONENT)

        return index

    # ==================== RENDER SYNC ====================

    def reconcile_overlay(self):
        """
        Clear the last painted cursor and paint the current one.

        Run right before every render. A previous overlay cell that has
        since been marked is left alone.
        """
        previous = self.previous_overlay_index
        if previous is not None and self.board[previous] == Cell.CURSOR:
            self.board[previous] = Cell.EMPTY

        self.previous_overlay_index = None

        if self.cursor_index is not None and not self.game_over:
            self.board[self.cursor_index] = Cell.CURSOR
            self.previous_overlay_index = self.cursor_index
