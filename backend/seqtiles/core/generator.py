"""Board generator with seeded value shuffling and obstacle placement."""
import logging
import random
from typing import List, Optional, Set

from ..models.board import (
    BoardLayout,
    BoardMode,
    ModeLayout,
    Tile,
    MAX_VALUE,
    MODE_LAYOUTS,
    OBSTACLE_VALUE,
)
from .board_ops import is_connected
from .prng import RandomSource, make_generator, shuffle

logger = logging.getLogger(__name__)


class BoardGenerator:
    """Generates reproducible starting boards."""

    # Attempts at a connected obstacle layout before settling for the last one
    MAX_OBSTACLE_ATTEMPTS = 1000

    def __init__(self, max_obstacle_attempts: Optional[int] = None):
        if max_obstacle_attempts is None:
            max_obstacle_attempts = self.MAX_OBSTACLE_ATTEMPTS
        if max_obstacle_attempts < 1:
            raise ValueError(f"max_obstacle_attempts must be at least 1, got {max_obstacle_attempts}")
        self.max_obstacle_attempts = max_obstacle_attempts

    def generate(self, mode: BoardMode = BoardMode.BOARD, seed: str = "") -> BoardLayout:
        """
        Generate a board for the given mode.

        Args:
            mode: Layout mode (plain board or obstacle map).
            seed: Seed string. Empty seeds are replaced by a random one.

        Returns:
            BoardLayout with tiles, row count and the seed actually used.

        Raises:
            ValueError: If the mode's playable cells cannot hold an equal
                number of every tile value.
        """
        mode = BoardMode(mode)
        layout = MODE_LAYOUTS[mode]
        seed = seed or str(random.random())
        rand = make_generator(seed)

        if layout.playable_cells % MAX_VALUE != 0:
            raise ValueError(
                f"{mode.value} layout has {layout.playable_cells} playable cells, "
                f"not divisible by {MAX_VALUE}"
            )

        obstacles: Set[int] = set()
        connected = True
        if layout.obstacles > 0:
            obstacles, connected = self._place_obstacles(layout, rand)
            if not connected:
                logger.warning(
                    f"No connected obstacle layout for seed {seed!r} after "
                    f"{self.max_obstacle_attempts} attempts; using last candidate"
                )

        values = shuffle(self._build_value_pool(layout), rand)

        tiles: List[Tile] = []
        value_iter = iter(values)
        for idx in range(layout.total_cells):
            if idx in obstacles:
                # Obstacles render as permanently face up and inert
                tiles.append(Tile(id=idx, value=OBSTACLE_VALUE, is_revealed=True, is_obstacle=True))
            else:
                tiles.append(Tile(id=idx, value=next(value_iter)))

        return BoardLayout(
            tiles=tuple(tiles),
            rows=layout.rows,
            cols=layout.cols,
            mode=mode,
            seed=seed,
            obstacles_connected=connected,
        )

    def _place_obstacles(self, layout: ModeLayout, rand: RandomSource):
        """Sample obstacle sets until the open cells are connected."""
        candidates = list(range(layout.total_cells))
        chosen: List[int] = []

        for attempt in range(self.max_obstacle_attempts):
            chosen = shuffle(candidates, rand)[:layout.obstacles]
            flags = [False] * layout.total_cells
            for idx in chosen:
                flags[idx] = True

            if is_connected(flags, layout.rows, layout.cols):
                logger.debug(f"Obstacle layout accepted after {attempt + 1} attempt(s)")
                return set(chosen), True

        return set(chosen), False

    def _build_value_pool(self, layout: ModeLayout) -> List[int]:
        """Equal copies of every value 1..MAX_VALUE for the playable cells."""
        copies = layout.playable_cells // MAX_VALUE
        return [value for value in range(1, MAX_VALUE + 1) for _ in range(copies)]


def generate_board(mode: BoardMode = BoardMode.BOARD, seed: str = "") -> BoardLayout:
    """Generate a board with the shared generator."""
    return get_generator().generate(mode, seed)


# Singleton instance
_generator: Optional[BoardGenerator] = None


def get_generator() -> BoardGenerator:
    """Get or create generator singleton instance."""
    global _generator
    if _generator is None:
        from ..config import get_settings
        _generator = BoardGenerator(get_settings().obstacle_attempt_budget)
    return _generator
