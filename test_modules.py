"""
Smoke tests for the cursor TicTacToe modules.
Run this to verify all components work before playing:

    pytest test_modules.py
    python test_modules.py
"""

import io
import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent))


def test_terminal_config():
    """Test terminal configuration."""
    print("\n=== Testing Terminal Config ===")
    from terminal.config import TerminalConfig
    config = TerminalConfig()
    print(f"  Glyphs: {config.PLAYER_GLYPH} {config.OPPONENT_GLYPH} {config.CURSOR_GLYPH!r}")
    print(f"  Seed: {config.RANDOM_SEED}")
    assert len({config.PLAYER_GLYPH, config.OPPONENT_GLYPH,
                config.EMPTY_GLYPH, config.CURSOR_GLYPH}) == 4
    print("  ✓ Terminal config OK")


def test_game_logic():
    """Test game logic components."""
    print("\n=== Testing Game Logic ===")
    from logic import BoardGame, Direction, RandomOpponent

    game = BoardGame.create()
    print(f"  Initial cursor: {game.cursor_index}")

    game.move_cursor(Direction.DOWN)
    game.move_cursor(Direction.RIGHT)
    print(f"  Cursor after down, right: {game.cursor_index}")
    assert game.cursor_index == 4

    placed = game.commit_player_mark()
    print(f"  Player marked {placed}")

    opponent = RandomOpponent(seed=1)
    answer = opponent.play(game)
    print(f"  Opponent answered {answer}")
    assert answer is not None and answer != placed
    assert len(game.empty_cells()) == 7
    print("  ✓ Game logic OK")


def test_renderer():
    """Test drawing a frame."""
    print("\n=== Testing Renderer ===")
    from logic import BoardGame
    from terminal.renderer import BoardRenderer

    game = BoardGame.create()
    game.reconcile_overlay()

    out = io.StringIO()
    BoardRenderer(out=out).draw(game)
    print(out.getvalue())
    assert "───┼───┼───" in out.getvalue()
    print("  ✓ Renderer OK")


def test_keyboard_decoder():
    """Test decoding arrow keys (no terminal needed)."""
    print("\n=== Testing Keyboard Decoder ===")
    from terminal.keyboard import decode_keys, KeyAction

    events, rest = decode_keys("\x1b[A \x1b")
    print(f"  Events: {[e.action.value for e in events]}, left over: {rest!r}")
    assert [e.action for e in events] == [KeyAction.MOVE, KeyAction.COMMIT]
    assert rest == "\x1b"
    print("  ✓ Keyboard decoder OK")


def run_all_tests():
    """Run all tests."""
    print("="*60)
    print("   Cursor TicTacToe - Module Tests")
    print("="*60)

    tests = {
        "Terminal Config": test_terminal_config,
        "Game Logic": test_game_logic,
        "Renderer": test_renderer,
        "Keyboard Decoder": test_keyboard_decoder,
    }

    results = {}
    for name, test in tests.items():
        try:
            test()
            results[name] = True
        except Exception as e:
            print(f"  ✗ {name} FAILED: {e}")
            results[name] = False

    print("\n" + "="*60)
    print("   Test Results")
    print("="*60)

    for name, passed in results.items():
        status = "✓ PASS" if passed else "✗ FAIL"
        print(f"  {name}: {status}")

    print("="*60)

    if all(results.values()):
        print("\n🎉 All tests passed! Ready to play TicTacToe.\n")
        return 0
    else:
        print("\n⚠ Some tests failed. Check the errors above.\n")
        return 1


if __name__ == "__main__":
    sys.exit(run_all_tests())
