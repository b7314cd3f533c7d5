"""Evaluation arena pitting two agents against each other."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List

from .game import Game, GameOutcome

__all__ = ["Arena", "ArenaResult"]

logger = logging.getLogger(__name__)


@dataclass
class ArenaResult:
    wins: int
    losses: int
    draws: int
    outcomes: List[GameOutcome] = field(default_factory=list)

    @property
    def total(self) -> int:
        return self.wins + self.losses + self.draws

    @property
    def win_rate(self) -> float:
        return self.wins / self.total if self.total else 0.0

    def __str__(self) -> str:
        return (
            f"{self.total} games: {self.wins} wins, {self.losses} losses, "
            f"{self.draws} draws (win rate {self.win_rate:.2f})"
        )


@dataclass
class Arena:
    """Plays ``challenger`` against ``baseline``; results are from the challenger's view.

    The challenger takes X in even-numbered games and O in odd-numbered ones.
    """

    challenger: object
    baseline: object

    def play_game(self, challenger_first: bool) -> GameOutcome:
        players = {
            "X": self.challenger if challenger_first else self.baseline,
            "O": self.baseline if challenger_first else self.challenger,
        }
        game = Game.new()
        while not game.is_over:
            player_to_move = game.to_move
            move = players[player_to_move].select_move(game.board, player_to_move)
            game = game.play(move)
        return game.outcome

    def play_matches(self, num_games: int = 20) -> ArenaResult:
        results = ArenaResult(wins=0, losses=0, draws=0)

        for game_index in range(num_games):
            challenger_first = game_index % 2 == 0
            challenger_side = "X" if challenger_first else "O"
            outcome = self.play_game(challenger_first)
            results.outcomes.append(outcome)

            if outcome is GameOutcome.DRAW:
                results.draws += 1
            elif outcome.winner == challenger_side:
                results.wins += 1
            else:
                results.losses += 1
            logger.debug("game %d (challenger %s): %s", game_index, challenger_side, outcome.value)

        logger.info("arena finished: %s", results)
        return results
