"""
Main orchestration script for the cursor TicTacToe game.

This script ties together:
- Logic (board, cursor, random opponent)
- Terminal (keyboard input, board drawing)

Run this script to play TicTacToe in your terminal!
"""

import sys
import termios
from typing import Optional

# Logic imports
from logic.cell import Cell
from logic.game_state import BoardGame
from logic.ai_player import RandomOpponent

# Terminal imports
from terminal.config import TerminalConfig
from terminal.keyboard import Keyboard, KeyAction, KeyEvent
from terminal.renderer import BoardRenderer


class TicTacToeGame:
    """
    Main controller for the cursor TicTacToe game.

    Game flow:
    1. Paint the cursor and draw the board
    2. Read one key press
    3. Move the cursor, or place the player's mark and let the
       opponent answer straight away
    4. Repeat until the board is full or the player quits

    Pressing r starts a fresh board.
    """

    def __init__(
        self,
        config: Optional[TerminalConfig] = None,
        seed: Optional[int] = None,
        keyboard: Optional[Keyboard] = None,
        renderer: Optional[BoardRenderer] = None
    ):
        """
        Initialize the game.

        Args:
            config: Terminal configuration. Uses defaults if not provided.
            seed: Opponent seed, overrides config.RANDOM_SEED.
            keyboard: Key source (default: stdin).
            renderer: Board drawer (default: stdout).
        """
        self.config = config or TerminalConfig()
        if seed is None:
            seed = self.config.RANDOM_SEED

        self.game = BoardGame.create()
        self.opponent = RandomOpponent(seed=seed, verbose=self.config.DEBUG_MODE)

        self.keyboard = keyboard or Keyboard(self.config)
        self.renderer = renderer or BoardRenderer(self.config)

        self.is_running = False

    def apply_event(self, event: KeyEvent) -> bool:
        """
        Apply one key press to the game.

        Args:
            event: The decoded key press.

        Returns:
            False if the player asked to quit, True otherwise.
        """
        if event.action == KeyAction.QUIT:
            return False

        if event.action == KeyAction.MOVE:
            self.game.move_cursor(event.direction)
        elif event.action == KeyAction.COMMIT:
            if self.game.commit_player_mark() is not None:
                self.opponent.play(self.game)
        elif event.action == KeyAction.RESET:
            self.reset()

        return True

    def redraw(self):
        """Sync the cursor overlay and draw a frame."""
        self.game.reconcile_overlay()
        self.renderer.draw(self.game)

    def start(self):
        """
        Start the game.

        Raises:
            termios.error: If stdin is not a terminal.
            OSError: If there is no usable stdin.
        """
        with self.keyboard:
            try:
                self.renderer.hide_cursor()
                self.is_running = True
                self._game_loop()
            finally:
                # Cleanup
                self.renderer.show_cursor()

        self._show_game_result()

    def _game_loop(self):
        """Main game loop."""
        while self.is_running and not self.game.is_game_over():
            self.redraw()

            event = self.keyboard.read_event()
            if not self.apply_event(event):
                self.is_running = False

        if self.game.is_game_over():
            # Final frame without the cursor
            self.redraw()
        else:
            print("\nGame quit by user.")

    def _show_game_result(self):
        """Show the final game result."""
        if not self.game.is_game_over():
            return

        print("\n" + "="*30)
        print("   GAME OVER!")
        print("="*30)

        player = sum(1 for m in self.game.moves if m.mark == Cell.PLAYER)
        opponent = len(self.game.moves) - player
        print(f"You placed {player}, the opponent placed {opponent}.")

    def reset(self):
        """Reset the game for a new round."""
        self.game = BoardGame.create()
        self.opponent.reset()


def main():
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(description="Cursor TicTacToe")
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed the opponent for a repeatable game"
    )
    parser.add_argument(
        "--no-status",
        action="store_true",
        help="Hide the status line under the board"
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Print opponent choices (disables in-place redraw)"
    )

    args = parser.parse_args()

    config = TerminalConfig()
    config.RANDOM_SEED = args.seed
    config.SHOW_STATUS = not args.no_status
    config.DEBUG_MODE = args.debug

    game = TicTacToeGame(config=config)

    try:
        game.start()
    except (termios.error, OSError):
        print("ERROR: stdin is not a terminal!")
        sys.exit(1)
    except KeyboardInterrupt:
        print("\n\nGame interrupted by user.")
    finally:
        print("Goodbye!")


if __name__ == "__main__":
    main()
