"""Computer opponent: move enumeration, evaluation and tiered selection."""
import logging
import math
import random
from dataclasses import dataclass
from typing import List, Optional

from ..models.board import Board, Move, MoveKind, ScoringResult, GRID_COLS
from ..models.bot_profile import BotDifficulty, BotProfile, get_profile
from .board_ops import apply_move, neighbors, unrevealed_indices
from .scorer import compute_scores

logger = logging.getLogger(__name__)


class NoLegalMoveError(RuntimeError):
    """Raised when the bot is asked to move on a fully revealed board."""


@dataclass
class MoveOption:
    """A candidate move with its immediate score and evaluation."""
    move: Move
    score: int = 0
    evaluation: float = 0.0


class BotEngine:
    """
    Picks moves for a computer player.

    Every unrevealed tile is a candidate first reveal. For each one the bot
    may keep it, or swap it with any other unrevealed tile. Candidates are
    scored on a hypothetical board and ranked; the difficulty profile decides
    how wide the search is and how the final pick is made.
    """

    def __init__(self, rng: Optional[random.Random] = None):
        self._rng = rng or random.Random()

    def choose_move(
        self,
        board: Board,
        rows: int,
        cols: int = GRID_COLS,
        difficulty: BotDifficulty = BotDifficulty.MEDIUM,
    ) -> Move:
        """
        Choose a move for the given difficulty.

        Raises:
            NoLegalMoveError: If no hidden, non-obstacle tile remains.
        """
        profile = get_profile(difficulty)
        candidates = unrevealed_indices(board)
        if not candidates:
            raise NoLegalMoveError("No unrevealed tiles available")

        if profile.random_move_rate > 0 and self._rng.random() < profile.random_move_rate:
            move = self._random_move(candidates, profile)
            logger.debug(f"{profile.name} played a random move: {move}")
            return move

        options = self.enumerate_moves(board, rows, cols, profile, candidates)
        move = self._select(options, profile)
        logger.debug(f"{profile.name} chose {move} from {len(options)} candidates")
        return move

    def enumerate_moves(
        self,
        board: Board,
        rows: int,
        cols: int,
        profile: BotProfile,
        candidates: Optional[List[int]] = None,
    ) -> List[MoveOption]:
        """Build and evaluate every candidate move the profile considers."""
        if candidates is None:
            candidates = unrevealed_indices(board)

        firsts = candidates if profile.first_sample is None else candidates[:profile.first_sample]
        options: List[MoveOption] = []

        for first in firsts:
            options.append(self.evaluate_move(board, rows, cols, Move(MoveKind.KEEP, first), profile))

            partners = [idx for idx in candidates if idx != first]
            if profile.partner_sample is not None:
                partners = partners[:profile.partner_sample]
            for second in partners:
                options.append(
                    self.evaluate_move(board, rows, cols, Move(MoveKind.SWAP, first, second), profile)
                )

        return options

    def evaluate_move(
        self,
        board: Board,
        rows: int,
        cols: int,
        move: Move,
        profile: BotProfile,
    ) -> MoveOption:
        """Score a move on a hypothetical board without touching ``board``."""
        next_board, affected = apply_move(board, move)
        result = compute_scores(next_board, affected, rows, cols)
        return MoveOption(
            move=move,
            score=result.total_points,
            evaluation=self._evaluate_position(next_board, result, rows, cols, profile),
        )

    def _evaluate_position(
        self,
        board: Board,
        result: ScoringResult,
        rows: int,
        cols: int,
        profile: BotProfile,
    ) -> float:
        """Immediate points plus, for stronger bots, a bonus for open neighbours."""
        evaluation = result.total_points * profile.score_weight
        if not profile.use_heuristic:
            return evaluation

        potential_pairs = 0.0
        potential_twins = 0.0
        for idx, tile in enumerate(board):
            if not tile.is_playable_revealed:
                continue
            for n_idx in neighbors(idx, rows, cols):
                neighbor = board[n_idx]
                if neighbor.is_obstacle or neighbor.is_revealed:
                    continue
                # Hidden neighbours are future chances we cannot see yet
                potential_pairs += profile.pair_weight
                potential_twins += profile.twin_weight

        evaluation += potential_pairs * profile.bonus_multiplier
        evaluation += potential_twins * profile.bonus_multiplier
        evaluation += result.sequence_points * profile.bonus_multiplier
        return evaluation

    def _select(self, options: List[MoveOption], profile: BotProfile) -> Move:
        if profile.top_fraction is None:
            # max() keeps the first of equal evaluations
            return max(options, key=lambda o: o.evaluation).move

        ranked = sorted(options, key=lambda o: o.evaluation, reverse=True)
        cutoff = max(1, math.ceil(len(ranked) * profile.top_fraction))
        return self._rng.choice(ranked[:cutoff]).move

    def _random_move(self, candidates: List[int], profile: BotProfile) -> Move:
        first = self._rng.choice(candidates)
        if self._rng.random() < profile.keep_probability:
            return Move(MoveKind.KEEP, first)

        others = [idx for idx in candidates if idx != first]
        if not others:
            return Move(MoveKind.KEEP, first)
        return Move(MoveKind.SWAP, first, self._rng.choice(others))


def choose_bot_move(
    board: Board,
    rows: int,
    cols: int = GRID_COLS,
    difficulty: BotDifficulty = BotDifficulty.MEDIUM,
) -> Move:
    """Choose a move with the shared bot engine."""
    return get_bot_engine().choose_move(board, rows, cols, difficulty)


# Singleton instance
_bot_engine: Optional[BotEngine] = None


def get_bot_engine() -> BotEngine:
    """Get or create bot engine singleton instance."""
    global _bot_engine
    if _bot_engine is None:
        _bot_engine = BotEngine()
    return _bot_engine
