"""Exhaustive minimax search for the computer opponent.

O is the maximising side and X the minimising side.  Terminal positions
score ``+10`` for an O win, ``-10`` for an X win and ``0`` for a draw.
Scores are not discounted by depth, so any forced win is as good as any
other; ties are broken by the lowest cell index.
"""
from __future__ import annotations

from functools import lru_cache
from typing import NamedTuple, Optional, Sequence

from .game import (
    Board,
    GameOutcome,
    InvalidStateError,
    Player,
    apply,
    check_board,
    legal_moves,
    side_to_move,
    winner_of,
)
from .utils import opponent

AI_PLAYER: Player = "O"
WIN_SCORE = 10

_TERMINAL_SCORES = {
    GameOutcome.WIN_X: -WIN_SCORE,
    GameOutcome.WIN_O: WIN_SCORE,
    GameOutcome.DRAW: 0,
}


class SearchResult(NamedTuple):
    index: Optional[int]
    score: int


def minimax(board: Sequence[str], player: Player) -> SearchResult:
    """Return the best move for ``player`` and the value it guarantees.

    ``index`` is ``None`` when the board is already decided.
    """

    if player not in ("X", "O"):
        raise ValueError("player must be 'X' or 'O'")
    return _search(check_board(board), player)


# Keyed on the exact position, so memoisation never changes which move wins a tie.
@lru_cache(maxsize=None)
def _search(board: Board, player: Player) -> SearchResult:
    outcome = winner_of(board)
    if outcome is not GameOutcome.IN_PROGRESS:
        return SearchResult(None, _TERMINAL_SCORES[outcome])

    maximising = player == AI_PLAYER
    best_index: Optional[int] = None
    best_score = 0
    for move in legal_moves(board):
        score = _search(apply(board, move, player), opponent(player)).score
        if best_index is None:
            best_index, best_score = move, score
        elif maximising and score > best_score:
            best_index, best_score = move, score
        elif not maximising and score < best_score:
            best_index, best_score = move, score
    return SearchResult(best_index, best_score)


def choose_ai_move(board: Sequence[str]) -> int:
    """Return the cell the computer opponent (O) plays on ``board``."""

    cells = check_board(board)
    outcome = winner_of(cells)
    if outcome is not GameOutcome.IN_PROGRESS:
        raise InvalidStateError(f"game is already decided ({outcome.value})")
    to_move = side_to_move(cells)
    if to_move != AI_PLAYER:
        raise InvalidStateError(f"it is {to_move}'s turn, not {AI_PLAYER}'s")
    result = _search(cells, AI_PLAYER)
    if result.index is None:
        raise InvalidStateError("no legal move left for the computer")
    return result.index


def clear_cache() -> None:
    _search.cache_clear()


__all__ = [
    "AI_PLAYER",
    "SearchResult",
    "WIN_SCORE",
    "choose_ai_move",
    "clear_cache",
    "minimax",
]
