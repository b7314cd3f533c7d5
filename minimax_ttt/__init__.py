"""Classic Tic-Tac-Toe with an exhaustive minimax computer opponent."""
from .agents import MinimaxAgent, RandomAgent, TacticalAgent
from .arena import Arena, ArenaResult
from .config import Config, ConfigError, load_config
from .game import (
    WIN_LINES,
    Game,
    GameOutcome,
    InvalidMoveError,
    InvalidStateError,
    TicTacToeError,
    apply,
    empty_board,
    legal_moves,
    side_to_move,
    winner_of,
)
from .search import SearchResult, choose_ai_move, minimax
from .session import GameSession, Scoreboard

__version__ = "1.0.0"

__all__ = [
    "Arena",
    "ArenaResult",
    "Config",
    "ConfigError",
    "Game",
    "GameOutcome",
    "GameSession",
    "InvalidMoveError",
    "InvalidStateError",
    "MinimaxAgent",
    "RandomAgent",
    "Scoreboard",
    "SearchResult",
    "TacticalAgent",
    "TicTacToeError",
    "WIN_LINES",
    "apply",
    "choose_ai_move",
    "empty_board",
    "legal_moves",
    "load_config",
    "minimax",
    "side_to_move",
    "winner_of",
]
