"""Board data models and ruleset constants."""
from dataclasses import dataclass
from typing import Dict, List, Any, Optional, Tuple
from enum import Enum


# Ruleset
MAX_VALUE = 7            # Tile values cycle through 1..MAX_VALUE
SUM_TARGET = 8           # Adjacent tiles summing to this score a pair
GRID_COLS = 14
OBSTACLE_VALUE = -1
MIN_SEQUENCE_LENGTH = 3


class BoardMode(str, Enum):
    """Board layout mode."""
    BOARD = "board"  # Plain grid
    MAP = "map"      # Larger grid with obstacle cells


@dataclass(frozen=True)
class ModeLayout:
    """Grid dimensions for a board mode."""
    rows: int
    obstacles: int
    cols: int = GRID_COLS

    @property
    def total_cells(self) -> int:
        return self.rows * self.cols

    @property
    def playable_cells(self) -> int:
        return self.total_cells - self.obstacles


MODE_LAYOUTS: Dict[BoardMode, ModeLayout] = {
    BoardMode.BOARD: ModeLayout(rows=7, obstacles=0),
    BoardMode.MAP: ModeLayout(rows=8, obstacles=14),
}


@dataclass(frozen=True)
class Tile:
    """A single grid cell."""
    id: int
    value: int
    is_revealed: bool = False
    is_obstacle: bool = False

    @property
    def is_playable_revealed(self) -> bool:
        """Revealed and able to take part in scoring."""
        return self.is_revealed and not self.is_obstacle

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "value": self.value,
            "is_revealed": self.is_revealed,
            "is_obstacle": self.is_obstacle,
        }


Board = Tuple[Tile, ...]


@dataclass
class BoardLayout:
    """Result of board generation."""
    tiles: Board
    rows: int
    cols: int = GRID_COLS
    mode: BoardMode = BoardMode.BOARD
    seed: str = ""
    # False when obstacle placement ran out of attempts
    obstacles_connected: bool = True

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "tiles": [t.to_dict() for t in self.tiles],
            "rows": self.rows,
            "cols": self.cols,
            "mode": self.mode.value,
            "seed": self.seed,
            "obstacles_connected": self.obstacles_connected,
        }


@dataclass(frozen=True)
class ScoreItem:
    """One scoring match and the cells forming it."""
    coords: Tuple[int, ...]
    points: int

    def to_dict(self) -> Dict[str, Any]:
        return {"coords": list(self.coords), "points": self.points}


@dataclass(frozen=True)
class ScoringResult:
    """Points breakdown for one reveal event."""
    pairs: Tuple[ScoreItem, ...] = ()
    twins: Tuple[ScoreItem, ...] = ()
    sequences: Tuple[ScoreItem, ...] = ()

    @property
    def total_points(self) -> int:
        return sum(item.points for item in self.pairs + self.twins + self.sequences)

    @property
    def sequence_points(self) -> int:
        return sum(item.points for item in self.sequences)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "pairs": [p.to_dict() for p in self.pairs],
            "twins": [t.to_dict() for t in self.twins],
            "sequences": [s.to_dict() for s in self.sequences],
            "total_points": self.total_points,
        }


class MoveKind(str, Enum):
    """What the player does with the first revealed tile."""
    KEEP = "keep"
    SWAP = "swap"


@dataclass(frozen=True)
class Move:
    """A turn: reveal ``first_index``, then keep it or swap it with ``second_index``."""
    kind: MoveKind
    first_index: int
    second_index: Optional[int] = None

    @property
    def affected_indices(self) -> List[int]:
        if self.kind == MoveKind.SWAP:
            return [self.first_index, self.second_index]
        return [self.first_index]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "kind": self.kind.value,
            "first_index": self.first_index,
            "second_index": self.second_index,
        }
