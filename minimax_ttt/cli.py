"""Terminal front-end: play against the computer or run an arena."""
from __future__ import annotations

import argparse
import logging
import time
from pathlib import Path
from typing import List, Optional

from .agents import AGENTS, MinimaxAgent, make_agent
from .arena import Arena, ArenaResult
from .config import Config, load_config, with_overrides
from .game import GameOutcome, InvalidMoveError, render_ascii
from .session import GameSession, Scoreboard
from .utils import make_rng

logger = logging.getLogger(__name__)

INDEX_MAP = "Cells are numbered:\n1 2 3\n4 5 6\n7 8 9\n"
PROMPT = "Your move (1-9, n = new game, q = quit): "
RESULT_MESSAGES = {
    GameOutcome.WIN_X: "You (X) win!",
    GameOutcome.WIN_O: "The computer (O) wins!",
    GameOutcome.DRAW: "It's a draw!",
}


def format_scores(scores: Scoreboard) -> str:
    return f"Score  X: {scores.x}  O: {scores.o}  draws: {scores.draws}"


def _read(prompt: str) -> Optional[str]:
    try:
        return input(prompt).strip().lower()
    except EOFError:
        return None


def run_play(config: Config) -> Scoreboard:
    session = GameSession()
    if config.show_index_map:
        print(INDEX_MAP)

    while True:
        print(render_ascii(session.game.board))
        if session.game.is_over:
            print(RESULT_MESSAGES[session.game.outcome])
            print(format_scores(session.scores))

        command = _read(PROMPT)
        if command is None or command == "q":
            break
        if command == "n":
            session.new_game()
            continue
        if session.game.is_over:
            print("The game is over. Type n for a new game or q to quit.")
            continue
        if not command.isdecimal() or not command.isascii():
            print("Please type a number 1-9.")
            continue

        try:
            session.human_move(int(command) - 1)
        except InvalidMoveError:
            print("Illegal move. Try again.")
            continue

        if session.awaiting_ai:
            print(render_ascii(session.game.board))
            print("The computer is thinking...")
            time.sleep(config.ai_delay)
            index = session.ai_move()
            print(f"The computer plays {index + 1}")

    print(format_scores(session.scores))
    return session.scores


def run_arena(config: Config) -> ArenaResult:
    rng = make_rng(config.arena.seed)
    arena = Arena(
        challenger=MinimaxAgent(),
        baseline=make_agent(config.arena.baseline, rng=rng),
    )
    logger.info(
        "minimax vs %s over %d games (seed=%s)",
        config.arena.baseline,
        config.arena.games,
        config.arena.seed,
    )
    result = arena.play_matches(config.arena.games)
    print(f"minimax vs {config.arena.baseline}: {result}")
    return result


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="minimax-ttt",
        description="Play Tic-Tac-Toe against a minimax opponent",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="YAML configuration file (defaults to the bundled config.yaml)",
    )
    parser.add_argument("--log-level", default=None, help="Override the configured log level")
    subparsers = parser.add_subparsers(dest="command")

    play = subparsers.add_parser("play", help="Play against the computer (default)")
    play.add_argument(
        "--delay-ms",
        type=int,
        default=None,
        help="Pause before the computer answers, in milliseconds",
    )

    arena = subparsers.add_parser("arena", help="Pit the minimax agent against a baseline")
    arena.add_argument("--games", type=int, default=None, help="Number of games to play")
    arena.add_argument("--seed", type=int, default=None, help="Random seed for the baseline")
    arena.add_argument(
        "--baseline",
        choices=sorted(AGENTS),
        default=None,
        help="Opponent strategy",
    )
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    config = with_overrides(
        load_config(args.config),
        log_level=args.log_level,
        ai_delay_ms=getattr(args, "delay_ms", None),
        arena_games=getattr(args, "games", None),
        arena_seed=getattr(args, "seed", None),
        arena_baseline=getattr(args, "baseline", None),
    )
    logging.basicConfig(
        level=config.log_level_value,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.command == "arena":
        run_arena(config)
    else:
        run_play(config)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
