"""Game module: moves, sessions and the interactive menu."""

from .moves import MoveOutcome, MoveResult, apply_move, parse_coordinate
from .session import GameSession
from .shell import GameShell, MenuState

__all__ = [
    "MoveOutcome",
    "MoveResult",
    "apply_move",
    "parse_coordinate",
    "GameSession",
    "GameShell",
    "MenuState",
]
