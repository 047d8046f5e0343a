"""Scoring engine for pairs, twins and cyclic sequences."""
from typing import Callable, Iterable, List, Set, Tuple

from ..models.board import (
    Board,
    ScoreItem,
    ScoringResult,
    GRID_COLS,
    MAX_VALUE,
    MIN_SEQUENCE_LENGTH,
    SUM_TARGET,
)
from .board_ops import neighbors

ValueStep = Callable[[int, int], bool]


def is_next_in_sequence(value: int, other: int) -> bool:
    """``other`` follows ``value`` cyclically (MAX_VALUE wraps to 1)."""
    if value == MAX_VALUE:
        return other == 1
    return other == value + 1


def is_prev_in_sequence(value: int, other: int) -> bool:
    """``other`` precedes ``value`` cyclically (1 wraps to MAX_VALUE)."""
    if value == 1:
        return other == MAX_VALUE
    return other == value - 1


def _is_pivot(board: Board, idx: int) -> bool:
    return 0 <= idx < len(board) and board[idx].is_playable_revealed


def compute_scores(
    board: Board,
    new_indices: Iterable[int],
    rows: int,
    cols: int = GRID_COLS,
) -> ScoringResult:
    """
    Score the matches created by newly revealed tiles.

    Only matches passing through a tile in ``new_indices`` are counted, so
    matches made entirely of tiles revealed on earlier turns are never
    awarded again.

    Args:
        board: Current board, with the new tiles already revealed.
        new_indices: Indices revealed by this event.
        rows: Grid row count.
        cols: Grid column count.

    Returns:
        ScoringResult with pairs, twins and sequences.
    """
    new_indices = list(new_indices)
    pairs: List[ScoreItem] = []
    twins: List[ScoreItem] = []
    pair_keys: Set[Tuple[int, int]] = set()
    twin_keys: Set[Tuple[int, int]] = set()

    for idx in new_indices:
        if not _is_pivot(board, idx):
            continue
        tile = board[idx]

        for n_idx in neighbors(idx, rows, cols):
            neighbor = board[n_idx]
            if not neighbor.is_playable_revealed:
                continue

            edge = (min(idx, n_idx), max(idx, n_idx))
            if tile.value + neighbor.value == SUM_TARGET and edge not in pair_keys:
                pairs.append(ScoreItem(coords=(idx, n_idx), points=1))
                pair_keys.add(edge)
            # A midpoint value scores both a pair and a twin on the same edge
            if tile.value == neighbor.value and edge not in twin_keys:
                twins.append(ScoreItem(coords=(idx, n_idx), points=1))
                twin_keys.add(edge)

    sequences: List[ScoreItem] = []
    seen_paths: Set[Tuple[int, ...]] = set()

    for start in new_indices:
        if not _is_pivot(board, start):
            continue

        up_branches = find_monotone_paths(board, start, is_next_in_sequence, rows, cols)
        down_branches = find_monotone_paths(board, start, is_prev_in_sequence, rows, cols)

        for up_path in up_branches:
            for down_path in down_branches:
                combined = tuple(reversed(down_path)) + (start,) + tuple(up_path)
                if len(combined) < MIN_SEQUENCE_LENGTH:
                    continue
                key = tuple(sorted(combined))
                if key in seen_paths:
                    continue
                sequences.append(ScoreItem(coords=combined, points=len(combined)))
                seen_paths.add(key)

    return ScoringResult(
        pairs=tuple(pairs),
        twins=tuple(twins),
        sequences=tuple(sequences),
    )


def find_monotone_paths(
    board: Board,
    start: int,
    step: ValueStep,
    rows: int,
    cols: int = GRID_COLS,
) -> List[List[int]]:
    """
    Enumerate every maximal chain leaving ``start`` in one direction.

    Each returned branch lists the indices after ``start``; a dead end is
    represented by an empty branch. Chains only pass through revealed,
    non-obstacle tiles and never revisit a cell.

    Recursion depth is bounded by the number of playable cells.
    """
    return _extend(board, start, step, rows, cols, frozenset())


def _extend(
    board: Board,
    current: int,
    step: ValueStep,
    rows: int,
    cols: int,
    visited: frozenset,
) -> List[List[int]]:
    path_visited = visited | {current}
    value = board[current].value
    branches: List[List[int]] = []
    found_any = False

    for n_idx in neighbors(current, rows, cols):
        if n_idx in path_visited:
            continue
        neighbor = board[n_idx]
        if neighbor.is_playable_revealed and step(value, neighbor.value):
            found_any = True
            for sub in _extend(board, n_idx, step, rows, cols, path_visited):
                branches.append([n_idx] + sub)

    if not found_any:
        return [[]]
    return branches
