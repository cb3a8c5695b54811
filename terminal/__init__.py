"""
Terminal module for the cursor TicTacToe game.
Handles key input and drawing the board.
"""

from .config import TerminalConfig
from .keyboard import Keyboard, KeyAction, KeyEvent, decode_keys
from .renderer import BoardRenderer
