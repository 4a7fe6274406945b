import unittest

from game import Coord, GameState, Outcome, apply_move, render_board, render_cell, render_status


class TestRender(unittest.TestCase):
    def test_given_empty_board_when_rendered_then_header_margin_and_tildes(self):
        text = render_board(GameState.new())
        self.assertEqual(text.split("\n"), [
            "   0--1--2",
            "A  ~  ~  ~ ",
            "B  ~  ~  ~ ",
            "C  ~  ~  ~ ",
        ])

    def test_given_marks_when_rendered_then_cells_aligned_under_header(self):
        s = GameState.new()
        apply_move(s, Coord(0, 0))
        apply_move(s, Coord(2, 1))
        lines = render_board(s).split("\n")
        self.assertEqual(lines[1], "A  X  ~  ~ ")
        self.assertEqual(lines[3], "C  ~  O  ~ ")
        # Each mark sits under its column digit.
        self.assertEqual(lines[0].index("0"), lines[1].index("X"))
        self.assertEqual(lines[0].index("1"), lines[3].index("O"))

    def test_given_state_when_rendering_then_state_untouched(self):
        s = GameState.new()
        apply_move(s, Coord(1, 1))
        before = s.copy()
        render_board(s)
        render_status(s)
        self.assertEqual(s, before)

    def test_given_cells_when_rendered_then_three_chars(self):
        s = GameState.new()
        apply_move(s, Coord(0, 0))
        for cell in s.board.grid[:2]:
            self.assertEqual(len(render_cell(cell)), 3)

    def test_given_progress_or_outcome_when_status_then_message(self):
        s = GameState.new()
        self.assertEqual(render_status(s), "Current player : X")
        s.outcome = Outcome.X_WINS
        self.assertEqual(render_status(s), "The game is over : X won this game!")


if __name__ == "__main__":
    unittest.main()
