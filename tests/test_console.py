import io
import unittest
from unittest import mock

from noughts.console import ConsoleGame, main, parse_args
from noughts.game_logic import GameEngine, PhaseKind, Player


class TestConsoleGame(unittest.TestCase):
    def setUp(self):
        self.out = io.StringIO()
        self.engine = GameEngine()
        self.game = ConsoleGame(self.engine, out=self.out)

    def test_given_move_text_when_parsing_then_pair_or_none(self):
        self.assertEqual(ConsoleGame.parse_move("1,2"), (1, 2))
        self.assertEqual(ConsoleGame.parse_move(" 0 , 2 "), (0, 2))
        self.assertEqual(ConsoleGame.parse_move("2 1"), (2, 1))
        self.assertEqual(ConsoleGame.parse_move("3,0"), (3, 0))  # engine rejects it
        self.assertIsNone(ConsoleGame.parse_move("a,b"))
        self.assertIsNone(ConsoleGame.parse_move("1"))
        self.assertIsNone(ConsoleGame.parse_move("1,2,3"))

    def test_given_empty_board_when_printed_then_column_numbers_shown(self):
        self.game.print_board()
        text = self.out.getvalue()
        self.assertIn("0  0 | 1 | 2", text)
        self.assertIn("   0   1   2", text)

    def test_given_winning_script_when_run_then_x_wins(self):
        state = self.game.run(["0,0", "1,1", "0,1", "2,2", "0,2"])
        self.assertIs(state.phase, PhaseKind.WON)
        self.assertIs(state.winner, Player.X)
        text = self.out.getvalue()
        self.assertIn("--- Game Over ---", text)
        self.assertIn("Player X wins!", text)
        self.assertIn("0  X | X | X", text)

    def test_given_drawing_script_when_run_then_draw_reported(self):
        moves = ["0,0", "1,1", "2,2", "0,2", "2,0", "1,0", "1,2", "2,1", "0,1"]
        state = self.game.run(moves)
        self.assertIs(state.phase, PhaseKind.DRAWN)
        self.assertIn("The game is a draw!", self.out.getvalue())

    def test_given_bad_moves_when_run_then_errors_shown_and_board_kept(self):
        state = self.game.run(["3,0", "0,0", "0,0", "oops"])
        self.assertIs(state.cell(0, 0), Player.X)
        self.assertIs(state.current_player, Player.O)
        self.assertEqual(len(state.empty_cells()), 8)
        text = self.out.getvalue()
        self.assertIn("!! Invalid position!", text)
        self.assertIn("!! Position already occupied!", text)
        self.assertIn("!! Invalid input format.", text)

    def test_given_reset_command_when_run_then_fresh_game(self):
        state = self.game.run(["0,0", "r", "1,1"])
        self.assertIsNone(state.cell(0, 0))
        self.assertIs(state.cell(1, 1), Player.X)
        self.assertIn("New game, Player X's Turn", self.out.getvalue())

    def test_given_quit_command_when_run_then_stops_reading(self):
        state = self.game.run(["0,0", "q", "1,1"])
        self.assertIsNone(state.cell(1, 1))
        self.assertIn("Game ended.", self.out.getvalue())

    def test_given_moves_after_game_over_when_run_then_ignored(self):
        state = self.game.run(["0,0", "1,1", "0,1", "2,2", "0,2", "2,0"])
        self.assertIsNone(state.cell(2, 0))

    def test_given_stdin_when_run_interactively_then_input_used(self):
        answers = iter(["1,1", "q"])
        with mock.patch("builtins.input", side_effect=lambda prompt: next(answers)):
            state = self.game.run()
        self.assertIs(state.cell(1, 1), Player.X)

    def test_given_stdin_closed_when_run_interactively_then_returns(self):
        with mock.patch("builtins.input", side_effect=EOFError):
            state = self.game.run()
        self.assertEqual(len(state.empty_cells()), 9)


class TestConsoleMain(unittest.TestCase):
    def test_given_no_flags_then_defaults(self):
        args = parse_args([])
        self.assertIsNone(args.moves)
        self.assertEqual(args.log_level, "WARNING")

    def test_given_scripted_moves_when_main_runs_then_game_played(self):
        with mock.patch("sys.stdout", new_callable=io.StringIO) as out:
            code = main(["--moves", "0,0 1,1 0,1 2,2 0,2"])
        self.assertEqual(code, 0)
        self.assertIn("Player X wins!", out.getvalue())


if __name__ == '__main__':
    unittest.main()
