"""Move-choosing strategies sharing a ``select_move(board, player)`` seam.

:class:`MinimaxAgent` plays perfectly for either side.  The other agents are
weaker baselines used by the arena to exercise the search engine.
"""
from __future__ import annotations

from typing import Dict, Optional, Sequence, Type

import numpy as np

from .game import GameOutcome, InvalidStateError, Player, apply, legal_moves, winner_of
from .search import minimax
from .utils import legal_move_mask, make_rng, opponent

_WIN_FOR = {"X": GameOutcome.WIN_X, "O": GameOutcome.WIN_O}


def immediate_winning_move(board: Sequence[str], player: Player) -> Optional[int]:
    for move in legal_moves(board):
        if winner_of(apply(board, move, player)) is _WIN_FOR[player]:
            return move
    return None


def block_opponent_move(board: Sequence[str], player: Player) -> Optional[int]:
    return immediate_winning_move(board, opponent(player))


class MinimaxAgent:
    name = "minimax"

    def select_move(self, board: Sequence[str], player: Player) -> int:
        result = minimax(board, player)
        if result.index is None:
            raise InvalidStateError("no move to select on a decided board")
        return result.index


class RandomAgent:
    name = "random"

    def __init__(self, rng: Optional[np.random.Generator] = None) -> None:
        self.rng = rng or make_rng()

    def select_move(self, board: Sequence[str], player: Player) -> int:
        legal_indices = np.flatnonzero(legal_move_mask(board))
        if legal_indices.size == 0:
            raise InvalidStateError("No legal moves available for selection")
        return int(legal_indices[self.rng.integers(legal_indices.size)])


class TacticalAgent(RandomAgent):
    """Wins when it can, blocks when it must, otherwise plays at random."""

    name = "tactical"

    def select_move(self, board: Sequence[str], player: Player) -> int:
        move = immediate_winning_move(board, player)
        if move is None:
            move = block_opponent_move(board, player)
        if move is None:
            move = super().select_move(board, player)
        return move


AGENTS: Dict[str, Type] = {
    MinimaxAgent.name: MinimaxAgent,
    RandomAgent.name: RandomAgent,
    TacticalAgent.name: TacticalAgent,
}


def make_agent(name: str, rng: Optional[np.random.Generator] = None):
    try:
        agent_cls = AGENTS[name]
    except KeyError:
        raise ValueError(
            f"unknown agent {name!r}; expected one of {', '.join(sorted(AGENTS))}"
        ) from None
    if issubclass(agent_cls, RandomAgent):
        return agent_cls(rng=rng)
    return agent_cls()


__all__ = [
    "AGENTS",
    "MinimaxAgent",
    "RandomAgent",
    "TacticalAgent",
    "block_opponent_move",
    "immediate_winning_move",
    "make_agent",
]
