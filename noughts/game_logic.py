import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

log = logging.getLogger(__name__)

BOARD_SIZE = 3  # fixed 3x3 grid

# every row, column and both diagonals as (row, col) triples
LINES = tuple(
    [tuple((r, c) for c in range(BOARD_SIZE)) for r in range(BOARD_SIZE)]
    + [tuple((r, c) for r in range(BOARD_SIZE)) for c in range(BOARD_SIZE)]
    + [tuple((i, i) for i in range(BOARD_SIZE)),
       tuple((i, BOARD_SIZE - 1 - i) for i in range(BOARD_SIZE))]
)


class Player(Enum):
    """
    the two marks, X always opens
    """
    X = 'X'
    O = 'O'

    def other(self):
        return Player.O if self is Player.X else Player.X

    def __str__(self):
        return self.value


class PhaseKind(Enum):
    IN_PROGRESS = "in_progress"
    WON = "won"
    DRAWN = "drawn"


class MoveError(Enum):
    """
    why a move was rejected, value is the user-facing message
    """
    OUT_OF_BOUNDS = "Invalid position!"
    CELL_OCCUPIED = "Position already occupied!"
    NOT_YOUR_TURN = "Not your turn!"
    GAME_ALREADY_OVER = "The game is already over!"

    @property
    def message(self):
        return self.value


class InvalidMoveError(ValueError):
    """
    raised by MoveResult.unwrap() for hosts that prefer exceptions
    """
    def __init__(self, error):
        super().__init__(error.message)
        self.error = error


Cell = Optional[Player]
Board = Tuple[Tuple[Cell, ...], ...]


def empty_board() -> Board:
    return tuple(tuple(None for _ in range(BOARD_SIZE)) for _ in range(BOARD_SIZE))


def in_bounds(row, col):
    # bool is an int subclass but never a coordinate
    for v in (row, col):
        if not isinstance(v, int) or isinstance(v, bool):
            return False
    return 0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE


def winning_line(board: Board):
    """
    first completed line as ((r, c), ...) or None
    """
    for line in LINES:
        (r0, c0) = line[0]
        first = board[r0][c0]
        if first is not None and all(board[r][c] == first for r, c in line):
            return line
    return None


def winner_of(board: Board) -> Optional[Player]:
    line = winning_line(board)
    if line is None:
        return None
    r, c = line[0]
    return board[r][c]


def check_win(board: Board) -> bool:
    """
    true if any row, column or diagonal holds three of the same mark
    """
    return winning_line(board) is not None


def check_draw(board: Board) -> bool:
    """
    full board and nobody won; a won board is never a draw
    """
    if check_win(board):
        return False
    return all(cell is not None for row in board for cell in row)


@dataclass(frozen=True)
class GameState:
    """
    read-only snapshot handed to front ends
    """
    board: Board
    current_player: Player = Player.X
    phase: PhaseKind = PhaseKind.IN_PROGRESS
    winner: Optional[Player] = None

    @classmethod
    def new(cls):
        return cls(empty_board())

    @property
    def is_over(self):
        return self.phase is not PhaseKind.IN_PROGRESS

    def cell(self, row, col) -> Cell:
        return self.board[row][col]

    def empty_cells(self):
        return [(r, c) for r in range(BOARD_SIZE) for c in range(BOARD_SIZE)
                if self.board[r][c] is None]

    def status_message(self):
        # same wording for every front end
        if self.phase is PhaseKind.WON:
            return f"Player {self.winner} wins!"
        if self.phase is PhaseKind.DRAWN:
            return "The game is a draw!"
        return f"Player {self.current_player}'s Turn"


@dataclass(frozen=True)
class MoveResult:
    """
    outcome of apply_move: either a new state or the reason it was refused
    """
    state: GameState
    error: Optional[MoveError] = None

    @property
    def ok(self):
        return self.error is None

    def unwrap(self) -> GameState:
        if self.error is not None:
            raise InvalidMoveError(self.error)
        return self.state


class GameEngine:
    """
    tic-tac-toe rules and state, knows nothing about rendering
    """
    def __init__(self):
        self._state = GameState.new()

    def reset(self) -> GameState:
        """
        throw away the current game and start fresh with X to move
        """
        self._state = GameState.new()
        log.debug("game reset")
        return self._state

    def current_state(self) -> GameState:
        return self._state

    def apply_move(self, row, col, player: Player) -> MoveResult:
        """
        place player's mark at (row, col) and advance the game.

        checks run in this order and the first failure is returned with the
        state untouched: game over, out of bounds, cell occupied, wrong turn.
        anything that is not the player to move, including non-Player values,
        counts as the wrong turn.
        """
        state = self._state
        error = self._validate(state, row, col, player)
        if error is not None:
            log.info("rejected %s at (%r, %r): %s", player, row, col, error.name)
            return MoveResult(state, error)

        rows = [list(r) for r in state.board]
        rows[row][col] = player
        board = tuple(tuple(r) for r in rows)
        log.debug("%s played (%d, %d)", player, row, col)

        # win is judged on the post-move board before the turn passes
        if check_win(board):
            new_state = GameState(board, player, PhaseKind.WON, player)
            log.debug("player %s wins", player)
        elif check_draw(board):
            new_state = GameState(board, player, PhaseKind.DRAWN)
            log.debug("game drawn")
        else:
            new_state = GameState(board, player.other())
        self._state = new_state
        return MoveResult(new_state)

    @staticmethod
    def _validate(state, row, col, player):
        if state.is_over:
            return MoveError.GAME_ALREADY_OVER
        if not in_bounds(row, col):
            return MoveError.OUT_OF_BOUNDS
        if state.board[row][col] is not None:
            return MoveError.CELL_OCCUPIED
        if player is not state.current_player:
            return MoveError.NOT_YOUR_TURN
        return None
