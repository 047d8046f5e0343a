"""Pydantic schemas for API request/response validation."""
from pydantic import BaseModel, Field
from typing import Dict, List, Any, Optional

from .board import BoardMode, MoveKind, GRID_COLS
from .bot_profile import BotDifficulty


class TileSchema(BaseModel):
    """A single board cell."""
    id: int = Field(..., ge=0, description="Tile identity")
    value: int = Field(..., description="Tile value (1-7), -1 for obstacles")
    is_revealed: bool = Field(default=False, description="Whether the tile is face up")
    is_obstacle: bool = Field(default=False, description="Whether the cell is an inert obstacle")


class BoardPayload(BaseModel):
    """Board state sent by the client."""
    tiles: List[TileSchema] = Field(..., min_length=1, description="Tiles in row-major order")
    rows: int = Field(..., ge=1, description="Row count")
    cols: int = Field(default=GRID_COLS, ge=1, description="Column count")


class MoveSchema(BaseModel):
    """A keep or swap move."""
    kind: MoveKind = Field(..., description="keep or swap")
    first_index: int = Field(..., ge=0, description="Tile revealed first")
    second_index: Optional[int] = Field(default=None, ge=0, description="Swap partner (swap only)")


class ScoreItemSchema(BaseModel):
    """A single scoring match."""
    coords: List[int] = Field(..., description="Indices forming the match")
    points: int = Field(..., ge=1, description="Points awarded")


class GenerateBoardRequest(BaseModel):
    """Request schema for board generation."""
    mode: BoardMode = Field(default=BoardMode.BOARD, description="Layout mode (board/map)")
    seed: str = Field(default="", description="Seed string; empty for a random board")


class BoardResponse(BaseModel):
    """Response schema for a generated board."""
    tiles: List[TileSchema] = Field(..., description="Generated tiles")
    rows: int = Field(..., description="Row count")
    cols: int = Field(..., description="Column count")
    mode: BoardMode = Field(..., description="Layout mode")
    seed: str = Field(..., description="Seed actually used")
    obstacles_connected: bool = Field(..., description="False if obstacle placement ran out of attempts")


class ScoreRequest(BoardPayload):
    """Request schema for scoring a reveal event."""
    new_indices: List[int] = Field(..., description="Indices revealed by this event")


class ScoreResponse(BaseModel):
    """Response schema for a scoring result."""
    pairs: List[ScoreItemSchema] = Field(default=[], description="Adjacent tiles summing to 8")
    twins: List[ScoreItemSchema] = Field(default=[], description="Adjacent equal tiles")
    sequences: List[ScoreItemSchema] = Field(default=[], description="Cyclic runs of 3 or more")
    total_points: int = Field(..., ge=0, description="Sum of all points")


class MoveRequest(BoardPayload):
    """Request schema for applying a move."""
    move: MoveSchema = Field(..., description="Move to apply")


class MoveResponse(BaseModel):
    """Response schema for an applied move."""
    tiles: List[TileSchema] = Field(..., description="Board after the move")
    scoring: ScoreResponse = Field(..., description="Points scored by the move")
    round_complete: bool = Field(..., description="Whether every tile is now revealed")


class BotMoveRequest(BoardPayload):
    """Request schema for a bot move."""
    difficulty: Optional[BotDifficulty] = Field(default=None, description="easy/medium/hard; server default if omitted")


class BotMoveResponse(MoveSchema):
    """Response schema for a bot move."""
    difficulty: BotDifficulty = Field(..., description="Difficulty used")


class BotProfileListResponse(BaseModel):
    """Response schema for listing bot profiles."""
    profiles: List[Dict[str, Any]] = Field(..., description="Available bot profiles")


class SimulateRequest(BaseModel):
    """Request schema for bot-vs-bot simulation."""
    difficulties: List[BotDifficulty] = Field(
        default=[BotDifficulty.EASY, BotDifficulty.EASY],
        min_length=1,
        max_length=4,
        description="One difficulty per seat",
    )
    mode: BoardMode = Field(default=BoardMode.BOARD, description="Layout mode")
    iterations: int = Field(default=10, ge=1, le=200, description="Rounds to play")
    seed: str = Field(default="", description="Base seed; round i uses seed + i")


class SeatResultItem(BaseModel):
    """Aggregated result for one seat."""
    seat: int = Field(..., description="Seat index")
    difficulty: BotDifficulty = Field(..., description="Seat difficulty")
    iterations: int = Field(..., description="Rounds played")
    avg_score: float = Field(..., description="Average points per round")
    min_score: int = Field(..., description="Lowest round score")
    max_score: int = Field(..., description="Highest round score")
    std_score: float = Field(..., description="Standard deviation of round scores")
    win_rate: float = Field(..., ge=0, le=1, description="Share of rounds won or tied")


class SimulateResponse(BaseModel):
    """Response schema for bot-vs-bot simulation."""
    seats: List[SeatResultItem] = Field(..., description="Per-seat results")


class ErrorResponse(BaseModel):
    """Error response schema."""
    error: str = Field(..., description="Error message")
    detail: Optional[str] = Field(default=None, description="Detailed error information")
