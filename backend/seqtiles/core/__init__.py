"""Core game logic package.

This package contains the board generator, scoring engine, bot engine
and round simulator.
"""
from .prng import make_generator, shuffle
from .board_ops import InvalidMoveError, apply_move, is_round_complete
from .generator import BoardGenerator, generate_board, get_generator
from .scorer import compute_scores
from .bot import BotEngine, NoLegalMoveError, choose_bot_move, get_bot_engine
from .simulator import RoundSimulator, get_simulator

__all__ = [
    "make_generator",
    "shuffle",
    "InvalidMoveError",
    "apply_move",
    "is_round_complete",
    "BoardGenerator",
    "generate_board",
    "get_generator",
    "compute_scores",
    "BotEngine",
    "NoLegalMoveError",
    "choose_bot_move",
    "get_bot_engine",
    "RoundSimulator",
    "get_simulator",
]
