"""Shared test fixtures."""
import pytest

from seqtiles.models.board import Tile, OBSTACLE_VALUE

OBSTACLE = None


def build_board(grid, revealed="all"):
    """Build a board from rows of values.

    ``None`` cells become obstacles. ``revealed`` is ``"all"`` or a set of
    indices to reveal.
    """
    tiles = []
    for idx, value in enumerate(v for row in grid for v in row):
        if value is OBSTACLE:
            tiles.append(Tile(id=idx, value=OBSTACLE_VALUE, is_revealed=True, is_obstacle=True))
        else:
            is_revealed = revealed == "all" or idx in revealed
            tiles.append(Tile(id=idx, value=value, is_revealed=is_revealed))
    return tuple(tiles)


@pytest.fixture
def make_board():
    """Factory fixture for small hand-built boards."""
    return build_board
