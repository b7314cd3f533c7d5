"""Headless human-vs-computer session with a running score tally.

The session knows nothing about rendering or timing.  Front-ends call
:meth:`GameSession.human_move`, then :meth:`GameSession.ai_move` while
:attr:`GameSession.awaiting_ai` is true, and read :attr:`GameSession.game`
to draw the board.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass

from .game import Game, GameOutcome, InvalidStateError, Player
from .search import AI_PLAYER, choose_ai_move

logger = logging.getLogger(__name__)

HUMAN_PLAYER: Player = "X"


@dataclass
class Scoreboard:
    x: int = 0
    o: int = 0
    draws: int = 0

    def record(self, outcome: GameOutcome) -> None:
        if outcome is GameOutcome.WIN_X:
            self.x += 1
        elif outcome is GameOutcome.WIN_O:
            self.o += 1
        elif outcome is GameOutcome.DRAW:
            self.draws += 1
        else:
            raise ValueError("cannot record an unfinished game")

    @property
    def games(self) -> int:
        return self.x + self.o + self.draws


class GameSession:
    def __init__(self) -> None:
        self.game = Game.new()
        self.scores = Scoreboard()

    @property
    def awaiting_ai(self) -> bool:
        return self.game.to_move == AI_PLAYER

    def human_move(self, index: int) -> Game:
        if self.game.is_over:
            raise InvalidStateError("Game has already finished")
        if self.game.to_move != HUMAN_PLAYER:
            raise InvalidStateError("It is not the human player's turn")
        self._advance(index)
        return self.game

    def ai_move(self) -> int:
        index = choose_ai_move(self.game.board)
        self._advance(index)
        logger.debug("AI plays %d", index)
        return index

    def new_game(self) -> Game:
        self.game = Game.new()
        return self.game

    def _advance(self, index: int) -> None:
        self.game = self.game.play(index)
        if self.game.is_over:
            self.scores.record(self.game.outcome)
            logger.info(
                "game over: %s (X %d, O %d, draws %d)",
                self.game.outcome.value,
                self.scores.x,
                self.scores.o,
                self.scores.draws,
            )


__all__ = ["GameSession", "HUMAN_PLAYER", "Scoreboard"]
