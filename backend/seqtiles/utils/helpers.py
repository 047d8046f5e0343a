"""Utility helper functions."""
from typing import Dict, Any, Iterable, List, Mapping, Optional

from ..models.board import Board, Tile, MAX_VALUE, OBSTACLE_VALUE


def validate_board(tiles: List[Mapping[str, Any]], rows: int, cols: int) -> tuple[bool, Optional[str]]:
    """
    Validate a client-supplied board.

    Args:
        tiles: Tile dicts in row-major order.
        rows: Row count.
        cols: Column count.

    Returns:
        Tuple of (is_valid, error_message).
    """
    if rows < 1 or cols < 1:
        return False, "'rows' and 'cols' must be positive"

    if len(tiles) != rows * cols:
        return False, f"Expected {rows * cols} tiles for a {rows}x{cols} board, got {len(tiles)}"

    for idx, tile in enumerate(tiles):
        if tile.get("is_obstacle"):
            if not tile.get("is_revealed"):
                return False, f"Obstacle at {idx} must be revealed"
            continue

        value = tile.get("value")
        if not isinstance(value, int) or not 1 <= value <= MAX_VALUE:
            return False, f"Tile at {idx} has value {value!r}, expected 1-{MAX_VALUE}"

    return True, None


def board_from_dicts(tiles: Iterable[Mapping[str, Any]]) -> Board:
    """Build an immutable board from tile dicts."""
    return tuple(
        Tile(
            id=int(t["id"]),
            value=int(t["value"]),
            is_revealed=bool(t.get("is_revealed", False)),
            is_obstacle=bool(t.get("is_obstacle", False)),
        )
        for t in tiles
    )


def board_to_dicts(board: Board) -> List[Dict[str, Any]]:
    """Serialize a board to plain dicts."""
    return [tile.to_dict() for tile in board]


def format_board_for_display(board: Board, cols: int, show_hidden: bool = False) -> str:
    """
    Format a board for human-readable display.

    Hidden tiles print as ``?`` unless ``show_hidden`` is set; obstacles
    print as ``#``.
    """
    lines = []
    for start in range(0, len(board), cols):
        cells = []
        for tile in board[start:start + cols]:
            if tile.is_obstacle:
                cells.append("#")
            elif tile.is_revealed or show_hidden:
                cells.append(str(tile.value))
            else:
                cells.append("?")
        lines.append(" ".join(cells))
    return "\n".join(lines)


def extract_board_statistics(board: Board) -> Dict[str, Any]:
    """
    Extract tile statistics from a board.

    Returns:
        Dictionary with value counts and revealed/obstacle totals.
    """
    stats = {
        "total_tiles": len(board),
        "obstacles": 0,
        "revealed": 0,
        "value_counts": {value: 0 for value in range(1, MAX_VALUE + 1)},
    }

    for tile in board:
        if tile.is_obstacle or tile.value == OBSTACLE_VALUE:
            stats["obstacles"] += 1
            continue
        if tile.is_revealed:
            stats["revealed"] += 1
        stats["value_counts"][tile.value] = stats["value_counts"].get(tile.value, 0) + 1

    return stats
