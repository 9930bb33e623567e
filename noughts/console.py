import sys
import argparse
import logging

from .game_logic import BOARD_SIZE, GameEngine

log = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s: %(message)s"


class ConsoleGame:
    """
    two players sharing one terminal, moves typed as row,col
    """

    def __init__(self, engine=None, out=None):
        """Wraps an engine; output goes to stdout unless a stream is given."""
        self.engine = engine or GameEngine()
        self.out = out or sys.stdout

    def say(self, text=""):
        print(text, file=self.out)

    def print_board(self):
        """Prints the board, empty cells show their column number."""
        board = self.engine.current_state().board
        self.say("\n-------------")
        for i, row in enumerate(board):
            self.say(f"{i}  {' | '.join(str(cell) if cell else str(j) for j, cell in enumerate(row))}")
            if i < BOARD_SIZE - 1: self.say("  -----------")
        self.say("   0   1   2")  # column indices
        self.say("-------------")

    @staticmethod
    def parse_move(text):
        """
        "1,2" or "1 2" -> (1, 2). Returns None on anything that isn't two ints,
        range checking is left to the engine.
        """
        parts = text.replace(',', ' ').split()
        if len(parts) != 2:
            return None
        try:
            return int(parts[0]), int(parts[1])
        except ValueError:
            return None

    def play_turn(self, text):
        """
        Handles one line of input. Returns False once the game is finished.
        """
        move = self.parse_move(text)
        if move is None:
            self.say("!! Invalid input format. Use row,col (e.g., 0,0 or 1,2).")
            return True
        state = self.engine.current_state()
        result = self.engine.apply_move(move[0], move[1], state.current_player)
        if not result.ok:
            # board unchanged, same player goes again
            self.say(f"!! {result.error.message}")
            return True
        self.print_board()
        if result.state.is_over:
            self.say("\n--- Game Over ---")
            self.say(result.state.status_message())
            return False
        return True

    def run(self, lines=None):
        """
        Reads moves until the game ends. `lines` replaces stdin (used for
        scripted games). 'q' quits, 'r' starts over.
        Returns the final GameState.
        """
        self.print_board()
        source = iter(lines) if lines is not None else None
        while True:
            state = self.engine.current_state()
            prompt = f"Player {state.current_player}, enter move (row,col) from 0-2: "
            if source is None:
                try:
                    text = input(prompt)
                except EOFError:
                    break
            else:
                text = next(source, None)
                if text is None:
                    break
                self.say(prompt + text)
            text = text.strip().lower()
            if text == 'q':
                self.say("Game ended.")
                break
            if text == 'r':
                self.engine.reset()
                self.say("New game, Player X's Turn")
                self.print_board()
                continue
            if not self.play_turn(text):
                break
        return self.engine.current_state()


def parse_args(argv=None):
    p = argparse.ArgumentParser(description="Tic Tac Toe in the terminal")
    p.add_argument("--moves", default=None,
                   help='scripted game, e.g. "0,0 1,1 0,1"; plays headless and exits')
    p.add_argument("--log-level", default="WARNING",
                   choices=["DEBUG", "INFO", "WARNING", "ERROR"], help="logging threshold")
    return p.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(level=args.log_level, format=LOG_FORMAT)
    game = ConsoleGame()
    if args.moves is not None:
        log.debug("replaying scripted moves: %s", args.moves)
        game.run(args.moves.split())
    else:
        print("--- Welcome to Tic-Tac-Toe ---")
        game.run()
    return 0
