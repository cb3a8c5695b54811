"""
Board renderer for the cursor TicTacToe game.
Turns the 9 cells into text and redraws it in place.
"""

import sys
from typing import List, Optional, Sequence

from logic.cell import BOARD_SIZE
from logic.game_state import BoardGame
from .config import TerminalConfig


# ANSI escape sequences
HIDE_CURSOR = "\x1b[?25l"
SHOW_CURSOR = "\x1b[?25h"
CLEAR_LINE = "\x1b[2K"


def move_up(lines: int) -> str:
    """Escape sequence to move the terminal cursor up a number of lines."""
    return f"\x1b[{lines}A" if lines > 0 else ""


class BoardRenderer:
    """
    Draws the board as a 3x3 grid with separators:

         X │ _ │
        ───┼───┼───
           │ O │
        ───┼───┼───
           │   │ X

    Every frame after the first overwrites the previous one.
    """

    def __init__(self, config: Optional[TerminalConfig] = None, out=None):
        """
        Initialize the renderer.

        Args:
            config: Terminal configuration. Uses defaults if not provided.
            out: Output stream (default: sys.stdout).
        """
        self.config = config or TerminalConfig()
        self.out = out or sys.stdout

        # Height of the last frame we drew, so we know how far to go back up
        self.last_frame_height = 0

    def render_lines(self, cells: Sequence[int]) -> List[str]:
        """
        Build the grid text.

        Args:
            cells: 9 cell values, already reconciled.

        Returns:
            The 5 lines of the grid.
        """
        lines = []
        for row in range(BOARD_SIZE):
            offset = row * BOARD_SIZE
            glyphs = [
                f" {self.config.glyph_for(cells[offset + col])} "
                for col in range(BOARD_SIZE)
            ]
            lines.append(self.config.CELL_SEPARATOR.join(glyphs))

            if row != BOARD_SIZE - 1:
                lines.append(self.config.ROW_SEPARATOR)

        return lines

    def status_line(self, game: BoardGame) -> str:
        """One line of game info under the board."""
        if game.is_game_over():
            return "Game over! Board is full."

        text = "Arrows/hjkl move, space places, r resets, q quits."

        last = game.last_opponent_move()
        if last is not None:
            text = f"Opponent played ({last.row}, {last.col}). " + text

        return text

    def frame(self, game: BoardGame) -> List[str]:
        """All the lines for one frame."""
        lines = self.render_lines(game.cells())
        if self.config.SHOW_STATUS:
            lines.append(self.status_line(game))
        return lines

    def draw(self, game: BoardGame):
        """
        Draw the game, replacing the previous frame.

        Args:
            game: The game, with reconcile_overlay() already run.
        """
        lines = self.frame(game)

        parts = []
        if not self.config.DEBUG_MODE:
            parts.append(move_up(self.last_frame_height))
        for line in lines:
            parts.append(f"{CLEAR_LINE}{line}\n")

        self.out.write("".join(parts))
        self.out.flush()

        self.last_frame_height = len(lines)

    def hide_cursor(self):
        self.out.write(HIDE_CURSOR)
        self.out.flush()

    def show_cursor(self):
        self.out.write(SHOW_CURSOR)
        self.out.flush()
