"""
Logic module for the cursor TicTacToe game.
Handles the board, cursor movement, and the random opponent.
"""

from .cell import Cell, Direction, BOARD_CELLS, BOARD_SIZE
from .cursor_search import CursorNavigator
from .game_state import BoardGame, Move
from .ai_player import RandomOpponent
