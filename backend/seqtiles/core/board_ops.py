"""Pure board operations.

Boards are tuples of frozen tiles; every operation here returns a new board
and leaves its input untouched.
"""
from dataclasses import replace
from typing import List, Sequence, Tuple

from ..models.board import Board, Move, MoveKind, Tile


class InvalidMoveError(ValueError):
    """Raised when a move targets a tile that cannot be played."""


def neighbors(index: int, rows: int, cols: int) -> List[int]:
    """4-directional neighbours in up, down, left, right order."""
    row, col = divmod(index, cols)
    result = []
    if row > 0:
        result.append(index - cols)
    if row < rows - 1:
        result.append(index + cols)
    if col > 0:
        result.append(index - 1)
    if col < cols - 1:
        result.append(index + 1)
    return result


def unrevealed_indices(board: Board) -> List[int]:
    """Indices of hidden, playable tiles in board order."""
    return [
        idx for idx, tile in enumerate(board)
        if not tile.is_revealed and not tile.is_obstacle
    ]


def is_round_complete(board: Board) -> bool:
    """True once every tile has been revealed."""
    return all(tile.is_revealed for tile in board)


def is_connected(obstacles: Sequence[bool], rows: int, cols: int) -> bool:
    """
    Check that the non-obstacle cells form one 4-connected region.

    Args:
        obstacles: Per-cell flags, True where the cell is an obstacle.
        rows: Grid row count.
        cols: Grid column count.

    Returns:
        True if a flood fill from the first open cell reaches every open cell.
    """
    open_cells = [idx for idx, blocked in enumerate(obstacles) if not blocked]
    if not open_cells:
        return True

    visited = set()
    stack = [open_cells[0]]
    while stack:
        current = stack.pop()
        if current in visited:
            continue
        visited.add(current)
        for n_idx in neighbors(current, rows, cols):
            if not obstacles[n_idx] and n_idx not in visited:
                stack.append(n_idx)

    return len(visited) == len(open_cells)


def _check_playable(board: Board, index: int) -> Tile:
    if index is None or not 0 <= index < len(board):
        raise InvalidMoveError(f"Tile index {index} is outside the board")
    tile = board[index]
    if tile.is_obstacle:
        raise InvalidMoveError(f"Tile {index} is an obstacle")
    if tile.is_revealed:
        raise InvalidMoveError(f"Tile {index} is already revealed")
    return tile


def reveal(board: Board, index: int) -> Board:
    """Flip one hidden tile face up."""
    tile = _check_playable(board, index)
    tiles = list(board)
    tiles[index] = replace(tile, is_revealed=True)
    return tuple(tiles)


def swap_and_reveal(board: Board, first: int, second: int) -> Board:
    """Exchange two hidden tiles and reveal both.

    The tile id travels with its value, so the tile that was at ``first``
    ends up at ``second`` and vice versa.
    """
    if first == second:
        raise InvalidMoveError("Cannot swap a tile with itself")
    first_tile = _check_playable(board, first)
    second_tile = _check_playable(board, second)

    tiles = list(board)
    tiles[first] = replace(first_tile, id=second_tile.id, value=second_tile.value, is_revealed=True)
    tiles[second] = replace(second_tile, id=first_tile.id, value=first_tile.value, is_revealed=True)
    return tuple(tiles)


def apply_move(board: Board, move: Move) -> Tuple[Board, List[int]]:
    """
    Apply a keep or swap move.

    Returns:
        Tuple of (new_board, affected_indices) ready for scoring.
    """
    if move.kind == MoveKind.SWAP:
        if move.second_index is None:
            raise InvalidMoveError("Swap move needs a second tile")
        return swap_and_reveal(board, move.first_index, move.second_index), move.affected_indices
    return reveal(board, move.first_index), move.affected_indices
