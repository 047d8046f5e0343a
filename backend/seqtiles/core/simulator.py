"""Bot-vs-bot round simulation for comparing difficulty tiers."""
import random
import statistics
from dataclasses import dataclass, field
from typing import Dict, List, Any, Optional, Sequence

from ..models.board import BoardMode
from ..models.bot_profile import BotDifficulty
from .board_ops import apply_move, is_round_complete
from .bot import BotEngine
from .generator import BoardGenerator
from .scorer import compute_scores


@dataclass
class RoundResult:
    """Outcome of one simulated round."""
    seat_scores: List[int]
    turns: int
    winners: List[int] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "seat_scores": self.seat_scores,
            "turns": self.turns,
            "winners": self.winners,
        }


@dataclass
class TierBenchmarkResult:
    """Aggregated results for one seat over many rounds."""
    seat: int
    difficulty: BotDifficulty
    iterations: int
    avg_score: float
    min_score: int
    max_score: int
    std_score: float
    win_rate: float

    def to_dict(self) -> Dict[str, Any]:
        return {
            "seat": self.seat,
            "difficulty": self.difficulty.value,
            "iterations": self.iterations,
            "avg_score": round(self.avg_score, 2),
            "min_score": self.min_score,
            "max_score": self.max_score,
            "std_score": round(self.std_score, 2),
            "win_rate": round(self.win_rate, 4),
        }


class RoundSimulator:
    """Plays complete rounds where every seat is a bot.

    Seats move in order, starting with seat 0. Handicaps and timers are
    not modelled; the results only compare how the tiers score.
    """

    def __init__(
        self,
        generator: Optional[BoardGenerator] = None,
        rng: Optional[random.Random] = None,
    ):
        self._generator = generator or BoardGenerator()
        self._rng = rng or random.Random()
        self._bot = BotEngine(self._rng)

    def play_round(
        self,
        difficulties: Sequence[BotDifficulty],
        mode: BoardMode = BoardMode.BOARD,
        seed: str = "",
    ) -> RoundResult:
        """
        Play one round to completion.

        Args:
            difficulties: One difficulty per seat.
            mode: Board layout mode.
            seed: Board seed.

        Returns:
            RoundResult with per-seat points and the winning seats.
        """
        if not difficulties:
            raise ValueError("At least one seat is required")

        layout = self._generator.generate(mode, seed)
        board = layout.tiles
        scores = [0] * len(difficulties)
        turns = 0

        while not is_round_complete(board):
            seat = turns % len(difficulties)
            move = self._bot.choose_move(board, layout.rows, layout.cols, difficulties[seat])
            board, affected = apply_move(board, move)
            scores[seat] += compute_scores(board, affected, layout.rows, layout.cols).total_points
            turns += 1

        best = max(scores)
        return RoundResult(
            seat_scores=scores,
            turns=turns,
            winners=[i for i, s in enumerate(scores) if s == best],
        )

    def benchmark(
        self,
        difficulties: Sequence[BotDifficulty],
        iterations: int = 20,
        mode: BoardMode = BoardMode.BOARD,
        seed: str = "",
    ) -> List[TierBenchmarkResult]:
        """
        Run many rounds and aggregate per-seat statistics.

        Round ``i`` uses the board seed ``f"{seed}{i}"`` when a seed is
        given, so a seeded benchmark always plays the same boards.
        """
        results: List[RoundResult] = []
        for i in range(iterations):
            round_seed = f"{seed}{i}" if seed else ""
            results.append(self.play_round(difficulties, mode, round_seed))

        summary = []
        for seat, difficulty in enumerate(difficulties):
            seat_scores = [r.seat_scores[seat] for r in results]
            wins = sum(1 for r in results if seat in r.winners)
            summary.append(TierBenchmarkResult(
                seat=seat,
                difficulty=BotDifficulty(difficulty),
                iterations=len(results),
                avg_score=statistics.mean(seat_scores) if seat_scores else 0,
                min_score=min(seat_scores) if seat_scores else 0,
                max_score=max(seat_scores) if seat_scores else 0,
                std_score=statistics.stdev(seat_scores) if len(seat_scores) > 1 else 0,
                win_rate=wins / len(results) if results else 0,
            ))

        return summary


# Singleton instance
_simulator: Optional[RoundSimulator] = None


def get_simulator() -> RoundSimulator:
    """Get or create simulator singleton instance."""
    global _simulator
    if _simulator is None:
        from .generator import get_generator
        _simulator = RoundSimulator(get_generator())
    return _simulator
