"""Data models package.

This package contains board models, bot profiles, and API schemas.
"""
from .board import (
    Board,
    BoardLayout,
    BoardMode,
    ModeLayout,
    Move,
    MoveKind,
    ScoreItem,
    ScoringResult,
    Tile,
    GRID_COLS,
    MAX_VALUE,
    MIN_SEQUENCE_LENGTH,
    MODE_LAYOUTS,
    OBSTACLE_VALUE,
    SUM_TARGET,
)
from .bot_profile import (
    BotDifficulty,
    BotProfile,
    get_all_profiles,
    get_profile,
    PREDEFINED_PROFILES,
)
from .schemas import (
    GenerateBoardRequest,
    BoardResponse,
    ScoreRequest,
    ScoreResponse,
    MoveRequest,
    MoveResponse,
    BotMoveRequest,
    BotMoveResponse,
    BotProfileListResponse,
    SimulateRequest,
    SimulateResponse,
    ErrorResponse,
)

__all__ = [
    # Board models
    "Board",
    "BoardLayout",
    "BoardMode",
    "ModeLayout",
    "Move",
    "MoveKind",
    "ScoreItem",
    "ScoringResult",
    "Tile",
    "GRID_COLS",
    "MAX_VALUE",
    "MIN_SEQUENCE_LENGTH",
    "MODE_LAYOUTS",
    "OBSTACLE_VALUE",
    "SUM_TARGET",
    # Bot profiles
    "BotDifficulty",
    "BotProfile",
    "get_all_profiles",
    "get_profile",
    "PREDEFINED_PROFILES",
    # API schemas
    "GenerateBoardRequest",
    "BoardResponse",
    "ScoreRequest",
    "ScoreResponse",
    "MoveRequest",
    "MoveResponse",
    "BotMoveRequest",
    "BotMoveResponse",
    "BotProfileListResponse",
    "SimulateRequest",
    "SimulateResponse",
    "ErrorResponse",
]
