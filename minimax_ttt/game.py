"""Board model for classic 3x3 Tic-Tac-Toe.

A board is an immutable tuple of nine cells in row-major order.  Each cell is
either ``" "`` (empty), ``"X"`` or ``"O"``.  Every operation here is a pure
function of its arguments: moves are applied by building a new tuple, so a
board handed to the search engine can never be changed behind its back.

The module also provides :class:`Game`, a small state value tracking whose
turn it is and whether the game has been decided.  A game only advances
through :meth:`Game.play`, which applies the move and recomputes the outcome
in one step.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Sequence, Tuple

Player = str  # Either "X" or "O"
Board = Tuple[str, ...]

EMPTY = " "
PLAYERS: Tuple[Player, Player] = ("X", "O")

WIN_LINES: Tuple[Tuple[int, int, int], ...] = (
    (0, 1, 2),
    (3, 4, 5),
    (6, 7, 8),
    (0, 3, 6),
    (1, 4, 7),
    (2, 5, 8),
    (0, 4, 8),
    (2, 4, 6),
)


class TicTacToeError(RuntimeError):
    """Base class for contract violations reported by the game core."""


class InvalidMoveError(TicTacToeError):
    """Raised when a mark is placed on an occupied or out-of-range cell."""


class InvalidStateError(TicTacToeError):
    """Raised when an operation is requested in a state that does not allow it."""


class GameOutcome(Enum):
    IN_PROGRESS = "in_progress"
    WIN_X = "win_x"
    WIN_O = "win_o"
    DRAW = "draw"

    @property
    def is_terminal(self) -> bool:
        return self is not GameOutcome.IN_PROGRESS

    @property
    def winner(self) -> Optional[Player]:
        if self is GameOutcome.WIN_X:
            return "X"
        if self is GameOutcome.WIN_O:
            return "O"
        return None


def empty_board() -> Board:
    return (EMPTY,) * 9


def check_board(board: Sequence[str]) -> Board:
    """Return ``board`` as a tuple after checking its shape and symbols."""

    cells = tuple(board)
    if len(cells) != 9:
        raise InvalidStateError(f"board must have 9 cells, got {len(cells)}")
    for index, cell in enumerate(cells):
        if cell not in (EMPTY, "X", "O"):
            raise InvalidStateError(f"cell {index} holds unknown mark {cell!r}")
    return cells


def winner_of(board: Sequence[str]) -> GameOutcome:
    # Lines are checked before fullness so a full board with a line is a win.
    for a, b, c in WIN_LINES:
        if board[a] != EMPTY and board[a] == board[b] == board[c]:
            return GameOutcome.WIN_X if board[a] == "X" else GameOutcome.WIN_O
    if all(cell != EMPTY for cell in board):
        return GameOutcome.DRAW
    return GameOutcome.IN_PROGRESS


def legal_moves(board: Sequence[str]) -> List[int]:
    """Return the indices of all empty cells in ascending order."""

    return [index for index, cell in enumerate(board) if cell == EMPTY]


def apply(board: Sequence[str], index: int, side: Player) -> Board:
    """Return a copy of ``board`` with ``side`` marked at ``index``.

    The input board is left untouched.  Marking an occupied or out-of-range
    cell raises :class:`InvalidMoveError`.
    """

    if side not in PLAYERS:
        raise InvalidMoveError(f"side must be 'X' or 'O', got {side!r}")
    if isinstance(index, bool) or not isinstance(index, int) or not 0 <= index < 9:
        raise InvalidMoveError(f"cell index must be in range 0..8, got {index!r}")
    if board[index] != EMPTY:
        raise InvalidMoveError(f"cell {index} is already occupied by {board[index]}")
    cells = list(board)
    cells[index] = side
    return tuple(cells)


def side_to_move(board: Sequence[str]) -> Player:
    """Return the side entitled to the next mark, derived from mark counts."""

    x_count = sum(cell == "X" for cell in board)
    o_count = sum(cell == "O" for cell in board)
    if x_count == o_count:
        return "X"
    if x_count == o_count + 1:
        return "O"
    raise InvalidStateError(
        f"inconsistent board: {x_count} X marks against {o_count} O marks"
    )


def render_ascii(board: Sequence[str]) -> str:
    rows: List[str] = []
    for start in range(0, 9, 3):
        rows.append(
            " ".join(cell if cell != EMPTY else "." for cell in board[start:start + 3])
        )
    return "\n".join(rows)


@dataclass(frozen=True)
class Game:
    """A single game: the board plus its derived outcome.

    The outcome is always recomputed from the board on construction.
    ``Game`` values are immutable.  :meth:`play` returns the successor state
    and is the only way a game moves forward.
    """

    board: Board
    outcome: GameOutcome = field(init=False, compare=False)

    def __post_init__(self) -> None:
        cells = check_board(self.board)
        side_to_move(cells)
        object.__setattr__(self, "board", cells)
        object.__setattr__(self, "outcome", winner_of(cells))

    @classmethod
    def new(cls) -> "Game":
        return cls(empty_board())

    @property
    def is_over(self) -> bool:
        return self.outcome.is_terminal

    @property
    def winner(self) -> Optional[Player]:
        return self.outcome.winner

    @property
    def to_move(self) -> Optional[Player]:
        """Side entitled to move, or ``None`` once the game is decided."""

        if self.is_over:
            return None
        return side_to_move(self.board)

    def legal_moves(self) -> List[int]:
        if self.is_over:
            return []
        return legal_moves(self.board)

    def play(self, index: int) -> "Game":
        if self.is_over:
            raise InvalidStateError("Game has already finished")
        board = apply(self.board, index, side_to_move(self.board))
        return Game(board)


__all__ = [
    "Board",
    "EMPTY",
    "Game",
    "GameOutcome",
    "InvalidMoveError",
    "InvalidStateError",
    "PLAYERS",
    "Player",
    "TicTacToeError",
    "WIN_LINES",
    "apply",
    "check_board",
    "empty_board",
    "legal_moves",
    "render_ascii",
    "side_to_move",
    "winner_of",
]
