"""
Keyboard module for the cursor TicTacToe game.
Puts the terminal in cbreak mode and turns key presses into game events.
"""

import os
import sys
import termios
import tty
from dataclasses import dataclass
from enum import Enum
from select import select
from typing import List, Optional, Tuple

from logic.cell import Direction
from .config import TerminalConfig


ESC = "\x1b"

# How long to wait for the rest of an escape sequence (seconds)
ESCAPE_TIMEOUT = 0.05

# Final byte of an arrow key sequence -> direction
ARROW_CODES = {
    "A": Direction.UP,
    "B": Direction.DOWN,
    "C": Direction.RIGHT,
    "D": Direction.LEFT,
}


class KeyAction(Enum):
    """What a key press asks the game to do."""
    MOVE = "move"
    COMMIT = "commit"
    QUIT = "quit"
    RESET = "reset"
    IGNORED = "ignored"


@dataclass(frozen=True)
class KeyEvent:
    """One decoded key press."""
    action: KeyAction
    direction: Optional[Direction] = None


def _decode_char(char: str, config: TerminalConfig) -> KeyEvent:
    """Map a single plain character to an event."""
    if char in config.UP_KEYS:
        return KeyEvent(KeyAction.MOVE, Direction.UP)
    if char in config.DOWN_KEYS:
        return KeyEvent(KeyAction.MOVE, Direction.DOWN)
    if char in config.LEFT_KEYS:
        return KeyEvent(KeyAction.MOVE, Direction.LEFT)
    if char in config.RIGHT_KEYS:
        return KeyEvent(KeyAction.MOVE, Direction.RIGHT)
    if char in config.COMMIT_KEYS:
        return KeyEvent(KeyAction.COMMIT)
    if char in config.RESET_KEYS:
        return KeyEvent(KeyAction.RESET)
    if char in config.QUIT_KEYS:
        return KeyEvent(KeyAction.QUIT)
    return KeyEvent(KeyAction.IGNORED)


def decode_keys(
    buffer: str,
    config: Optional[TerminalConfig] = None,
    final: bool = False
) -> Tuple[List[KeyEvent], str]:
    """
    Parse raw terminal input into key events.

    Handles CSI (ESC [ A) and SS3 (ESC O A) arrow sequences.

    Args:
        buffer: Characters read from the terminal so far.
        config: Key bindings. Uses defaults if not provided.
        final: True if no more input is pending, so a trailing ESC is a
            real Esc press rather than the start of a sequence.

    Returns:
        (events, remaining) where remaining is an incomplete sequence
        to be kept for the next read.
    """
    config = config or TerminalConfig()
    events = []
    i = 0
    length = len(buffer)

    while i < length:
        char = buffer[i]

        if char != ESC:
            events.append(_decode_char(char, config))
            i += 1
            continue

        # Lone ESC at the end: wait for more unless told it's final
        if i + 1 >= length:
            if not final:
                break
            events.append(_decode_char(char, config))
            i += 1
            continue

        introducer = buffer[i + 1]
        if introducer not in ("[", "O"):
            # Alt+key chord, not a game key
            events.append(KeyEvent(KeyAction.IGNORED))
            i += 2
            continue

        # Scan for the final byte of the sequence
        j = i + 2
        while j < length and not ("@" <= buffer[j] <= "~"):
            j += 1

        if j >= length:
            if not final:
                break  # Incomplete, keep it for the next read
            events.append(KeyEvent(KeyAction.IGNORED))
            i = length
            continue

        direction = ARROW_CODES.get(buffer[j])
        if direction is not None:
            events.append(KeyEvent(KeyAction.MOVE, direction))
        else:
            events.append(KeyEvent(KeyAction.IGNORED))
        i = j + 1

    return events, buffer[i:]


class Keyboard:
    """
    Simple keyboard wrapper class.
    Handles cbreak mode and reading key events from stdin.
    """

    def __init__(self, config: Optional[TerminalConfig] = None, stream=None):
        """
        Initialize the keyboard.

        Args:
            config: Terminal configuration. Uses defaults if not provided.
            stream: Input stream (default: sys.stdin).
        """
        self.config = config or TerminalConfig()
        self.stream = stream if stream is not None else sys.stdin
        self.fd = None
        self.is_opened = False

        self._saved_attrs = None
        self._buffer = ""
        self._pending: List[KeyEvent] = []

    def open(self):
        """
        Switch the terminal to cbreak mode (no echo, no line buffering).

        Raises:
            termios.error: If the stream is not a terminal.
            OSError: If there is no stdin or it has no file descriptor.
        """
        if self.stream is None:
            raise OSError("no stdin to read keys from")

        self.fd = self.stream.fileno()
        self._saved_attrs = termios.tcgetattr(self.fd)
        tty.setcbreak(self.fd)
        self.is_opened = True

    def close(self):
        """Restore the terminal to how we found it."""
        if self.is_opened and self._saved_attrs is not None:
            termios.tcsetattr(self.fd, termios.TCSADRAIN, self._saved_attrs)
        self.is_opened = False
        self._buffer = ""
        self._pending = []

    def __enter__(self) -> "Keyboard":
        self.open()
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()

    def _input_ready(self, timeout: float) -> bool:
        ready, _w, _e = select([self.fd], [], [], timeout)
        return bool(ready)

    def read_event(self) -> KeyEvent:
        """
        Block until the next meaningful key press.

        Returns:
            A MOVE, COMMIT, RESET or QUIT event. End of input counts as QUIT.
        """
        while not self._pending:
            data = os.read(self.fd, 32)
            if not data:
                return KeyEvent(KeyAction.QUIT)

            self._buffer += data.decode("utf-8", errors="ignore")
            events, self._buffer = decode_keys(self._buffer, self.config)

            # A dangling ESC with nothing behind it is the Esc key itself
            if self._buffer and not self._input_ready(ESCAPE_TIMEOUT):
                more, self._buffer = decode_keys(self._buffer, self.config, final=True)
                events.extend(more)

            self._pending.extend(
                event for event in events if event.action != KeyAction.IGNORED
            )

        return self._pending.pop(0)
