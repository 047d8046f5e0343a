"""API dependencies."""
from ..core.generator import get_generator, BoardGenerator
from ..core.bot import get_bot_engine, BotEngine
from ..core.simulator import get_simulator, RoundSimulator
from ..models.board import Board
from ..models.schemas import BoardPayload
from ..utils.helpers import board_from_dicts, validate_board


def get_board_generator() -> BoardGenerator:
    """Dependency for board generator."""
    return get_generator()


def get_bot() -> BotEngine:
    """Dependency for bot engine."""
    return get_bot_engine()


def get_round_simulator() -> RoundSimulator:
    """Dependency for round simulator."""
    return get_simulator()


def load_board(payload: BoardPayload) -> Board:
    """Validate a request board and convert it to engine tiles.

    Raises:
        ValueError: If the board shape or tile values are malformed.
    """
    tiles = [t.model_dump() for t in payload.tiles]
    is_valid, error = validate_board(tiles, payload.rows, payload.cols)
    if not is_valid:
        raise ValueError(error)
    return board_from_dicts(tiles)
