"""
Board vocabulary shared by the game state and the cursor search.
"""

from enum import Enum, IntEnum


# 3x3 board addressed by a linear index, row = index // 3, col = index % 3
BOARD_SIZE = 3
BOARD_CELLS = BOARD_SIZE * BOARD_SIZE


class Cell(IntEnum):
    """The four states a board cell can be in."""
    EMPTY = 0
    PLAYER = 1
    OPPONENT = 2
    CURSOR = 3      # Transient overlay, always backed by an empty cell

    def is_mark(self) -> bool:
        """True for permanent marks."""
        return self in (Cell.PLAYER, Cell.OPPONENT)


class Direction(Enum):
    """Cursor movement directions."""
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
