"""API routes package.

This package contains all API route handlers for the application.
"""
from . import board
from . import score
from . import bot
from . import simulate

__all__ = [
    "board",
    "score",
    "bot",
    "simulate",
]
