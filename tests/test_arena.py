from __future__ import annotations

import numpy as np
import pytest

from minimax_ttt.agents import (
    MinimaxAgent,
    RandomAgent,
    TacticalAgent,
    block_opponent_move,
    immediate_winning_move,
    make_agent,
)
from minimax_ttt.arena import Arena, ArenaResult
from minimax_ttt.game import GameOutcome, InvalidStateError, empty_board, legal_moves
from minimax_ttt.utils import legal_move_mask, make_rng, opponent


def test_opponent() -> None:
    assert opponent("X") == "O"
    assert opponent("O") == "X"


def test_legal_move_mask_matches_legal_moves(board) -> None:
    cells = board("X.O .X. ..O")
    mask = legal_move_mask(cells)
    assert mask.dtype == bool
    assert np.flatnonzero(mask).tolist() == legal_moves(cells)


def test_tactical_helpers(board) -> None:
    cells = board("XX. OO. ...")
    assert immediate_winning_move(cells, "X") == 2
    assert immediate_winning_move(cells, "O") == 5
    assert block_opponent_move(cells, "O") == 2
    assert immediate_winning_move(empty_board(), "X") is None


def test_random_agent_only_plays_legal_moves(board) -> None:
    agent = RandomAgent(rng=make_rng(7))
    cells = board("XO. X.O ..X")
    for _ in range(50):
        move = agent.select_move(cells, "O")
        assert isinstance(move, int)
        assert move in legal_moves(cells)


def test_random_agent_is_reproducible_with_a_seed() -> None:
    first = [RandomAgent(rng=make_rng(3)).select_move(empty_board(), "X") for _ in range(5)]
    second = [RandomAgent(rng=make_rng(3)).select_move(empty_board(), "X") for _ in range(5)]
    assert first == second


def test_random_agent_rejects_full_board(board) -> None:
    with pytest.raises(InvalidStateError):
        RandomAgent(rng=make_rng(0)).select_move(board("XOX XOO OXX"), "X")


def test_tactical_agent_wins_before_blocking(board) -> None:
    agent = TacticalAgent(rng=make_rng(0))
    assert agent.select_move(board("XX. OO. X.."), "O") == 5
    assert agent.select_move(board("XX. O.. ..."), "O") == 2


def test_minimax_agent_rejects_decided_board(board) -> None:
    with pytest.raises(InvalidStateError):
        MinimaxAgent().select_move(board("XXX OO. ..."), "O")


def test_make_agent() -> None:
    assert isinstance(make_agent("minimax"), MinimaxAgent)
    assert isinstance(make_agent("minimax", rng=make_rng(1)), MinimaxAgent)
    assert make_agent("random", rng=make_rng(1)).rng is not None
    assert isinstance(make_agent("tactical", rng=make_rng(1)), TacticalAgent)
    with pytest.raises(ValueError):
        make_agent("alphazero")


def test_arena_result_properties() -> None:
    result = ArenaResult(wins=3, losses=1, draws=4)
    assert result.total == 8
    assert result.win_rate == pytest.approx(0.375)
    assert ArenaResult(0, 0, 0).win_rate == 0.0
    assert "8 games" in str(result)


def test_minimax_self_play_always_draws() -> None:
    result = Arena(challenger=MinimaxAgent(), baseline=MinimaxAgent()).play_matches(4)
    assert result.draws == 4
    assert result.outcomes == [GameOutcome.DRAW] * 4


@pytest.mark.parametrize("baseline_cls", [RandomAgent, TacticalAgent])
def test_minimax_never_loses_to_baselines(baseline_cls) -> None:
    arena = Arena(challenger=MinimaxAgent(), baseline=baseline_cls(rng=make_rng(2024)))
    result = arena.play_matches(20)
    assert result.total == 20
    assert result.losses == 0


def test_arena_alternates_first_player() -> None:
    class Recorder(RandomAgent):
        def __init__(self) -> None:
            super().__init__(rng=make_rng(5))
            self.sides = set()

        def select_move(self, board, player):
            self.sides.add(player)
            return super().select_move(board, player)

    recorder = Recorder()
    Arena(challenger=recorder, baseline=RandomAgent(rng=make_rng(6))).play_matches(2)
    assert recorder.sides == {"X", "O"}
