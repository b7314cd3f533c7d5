"""Small helpers shared by the search engine, agents and arena."""
from __future__ import annotations

from typing import Optional, Sequence

import numpy as np

from .game import EMPTY, Player


def opponent(player: Player) -> Player:
    return "O" if player == "X" else "X"


def make_rng(seed: Optional[int] = None) -> np.random.Generator:
    return np.random.default_rng(seed)


def legal_move_mask(board: Sequence[str]) -> np.ndarray:
    """Return a boolean mask over the nine cells that are still empty."""

    return np.fromiter((cell == EMPTY for cell in board), dtype=bool, count=len(board))


__all__ = [
    "legal_move_mask",
    "make_rng",
    "opponent",
]
