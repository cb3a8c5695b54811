"""
Terminal configuration for the cursor TicTacToe game.
All the settings for glyphs, layout, keys, and the opponent.
"""

from typing import Optional

from logic.cell import Cell


class TerminalConfig:
    """
    Configuration class for terminal settings.
    Change these values to taste!
    """

    # ==================== GLYPHS ====================
    PLAYER_GLYPH = "X"
    OPPONENT_GLYPH = "O"
    EMPTY_GLYPH = " "
    CURSOR_GLYPH = "_"

    # ==================== LAYOUT ====================
    # Each cell is drawn as " g " with a bar between cells
    CELL_SEPARATOR = "│"
    ROW_SEPARATOR = "───┼───┼───"

    # ==================== KEYS ====================
    # Arrow keys always work. These are the extra letter bindings.
    UP_KEYS = ("w", "k")
    DOWN_KEYS = ("s", "j")
    LEFT_KEYS = ("a", "h")
    RIGHT_KEYS = ("d", "l")
    COMMIT_KEYS = (" ", "\r", "\n")
    QUIT_KEYS = ("q", "Q", "\x1b")   # Esc on its own quits too
    RESET_KEYS = ("r",)

    # ==================== OPPONENT ====================
    RANDOM_SEED: Optional[int] = None   # Set for a repeatable game

    # ==================== DEBUG SETTINGS ====================
    SHOW_STATUS = True      # Status line under the board
    DEBUG_MODE = False      # Print opponent choices, no in-place redraw

    def glyph_for(self, cell: int) -> str:
        """
        Get the display character for a cell.

        Args:
            cell: A Cell value (plain ints from the board array work too).

        Returns:
            A single character.
        """
        return {
            Cell.PLAYER: self.PLAYER_GLYPH,
            Cell.OPPONENT: self.OPPONENT_GLYPH,
            Cell.EMPTY: self.EMPTY_GLYPH,
            Cell.CURSOR: self.CURSOR_GLYPH,
        }[Cell(int(cell))]
