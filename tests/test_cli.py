import io
import os
import unittest
from contextlib import redirect_stdout
from unittest import mock

from game import GameState, Mark, Outcome
from tictactoe_core import cli


def _feeder(lines):
    it = iter(lines)

    def read_line():
        try:
            return next(it)
        except StopIteration:
            raise EOFError()
    return read_line


class TestConsoleLoop(unittest.TestCase):
    def _play(self, lines, **kwargs):
        out = []
        state = GameState.new()
        code = cli.play(state, read_line=_feeder(lines), write=out.append, **kwargs)
        return state, code, "\n".join(out)

    def test_given_winning_moves_when_playing_then_outcome_printed(self):
        state, code, out = self._play(["0a", "1b", "1a", "2b", "2a"])
        self.assertEqual(code, 0)
        self.assertEqual(state.outcome, Outcome.X_WINS)
        self.assertIn("The game is over : X won this game!", out)
        self.assertIn("Current player : O", out)

    def test_given_bad_tokens_and_taken_cell_when_playing_then_reported_and_retried(self):
        state, code, out = self._play(["hello", "9z", "b1", "B1", "quit"])
        self.assertEqual(code, 0)
        self.assertIn("Not a valid move", out)
        self.assertIn("off the board", out)
        self.assertIn("The place 1, 1 is filled", out)
        self.assertIs(state.board.at(state.board.main_diagonal()[1]), Mark.X)
        self.assertEqual(state.board.occupied_count(), 1)
        self.assertIs(state.turn, Mark.O)

    def test_given_input_closed_when_playing_then_exit_code_one(self):
        state, code, out = self._play(["1b"])
        self.assertEqual(code, 1)
        self.assertIn("Input closed", out)
        self.assertIsNone(state.outcome)

    def test_given_show_moves_and_debug_when_playing_then_extra_lines(self):
        _, _, out = self._play(["1b", "exit"], show_moves=True, debug=True)
        self.assertIn("Free cells: 0A, 1A, 2A, 0B, 1B, 2B, 0C, 1C, 2C", out)
        self.assertIn("[engine] X -> 1B (1, 1) outcome=None", out)

    def test_given_tie_when_playing_then_no_winner(self):
        _, code, out = self._play(["0a", "1a", "2a", "1b", "0b", "2b", "1c", "0c", "2c"])
        self.assertEqual(code, 0)
        self.assertIn("no winner!", out)

    def test_given_argv_when_main_then_plays_on_stdin(self):
        buf = io.StringIO()
        with mock.patch("builtins.input", side_effect=["quit"]), redirect_stdout(buf):
            code = cli.main(["--show-moves"])
        self.assertEqual(code, 0)
        self.assertIn(cli.PROMPT, buf.getvalue())

    def test_given_env_flag_when_checking_debug_then_enabled(self):
        with mock.patch.dict(os.environ, {"TICTACTOE_DEBUG": "yes"}):
            self.assertTrue(cli.debug_enabled())
        with mock.patch.dict(os.environ, {"TICTACTOE_DEBUG": "0"}):
            self.assertFalse(cli.debug_enabled())


if __name__ == "__main__":
    unittest.main()
