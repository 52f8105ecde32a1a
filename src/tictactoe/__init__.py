"""Tic-Tac-Toe against a minimax opponent: board rules, AI, engine, and web UI."""

from .ai import MinimaxAI
from .engine import EngineState, GameEngine
from .game import Board, Outcome, outcome_of
from .ui import app

__all__ = [
    "Board",
    "EngineState",
    "GameEngine",
    "MinimaxAI",
    "Outcome",
    "app",
    "outcome_of",
]
