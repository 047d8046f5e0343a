"""Bot profile definitions for the three difficulty tiers."""
from dataclasses import dataclass
from typing import Dict, List, Optional
from enum import Enum


class BotDifficulty(str, Enum):
    """Bot difficulty enumeration, weakest first."""
    EASY = "easy"       # Often random, judges a small sample on immediate score
    MEDIUM = "medium"   # Full search, picks among the better moves
    HARD = "hard"       # Full search, always the best move

    @classmethod
    def all_types(cls) -> List["BotDifficulty"]:
        """Return all difficulties in order of skill level."""
        return [cls.EASY, cls.MEDIUM, cls.HARD]


@dataclass(frozen=True)
class BotProfile:
    """
    Configuration profile for a computer opponent.

    Each profile controls how wide the bot searches, how it weighs
    candidate moves, and how much randomness goes into the final pick.
    """
    name: str
    difficulty: BotDifficulty
    description: str

    # Chance of skipping evaluation and playing a random move
    random_move_rate: float = 0.0
    # Chance a random move keeps instead of swapping
    keep_probability: float = 0.5

    # Search breadth (None = every unrevealed tile)
    first_sample: Optional[int] = None
    partner_sample: Optional[int] = None

    # Evaluation
    use_heuristic: bool = True
    score_weight: float = 10.0
    pair_weight: float = 0.3
    twin_weight: float = 0.2
    bonus_multiplier: float = 2.0

    # Fraction of ranked moves to pick from (None = single best)
    top_fraction: Optional[float] = None

    def to_dict(self) -> Dict:
        """Convert to dictionary."""
        return {
            "name": self.name,
            "difficulty": self.difficulty.value,
            "description": self.description,
            "random_move_rate": self.random_move_rate,
            "keep_probability": self.keep_probability,
            "first_sample": self.first_sample,
            "partner_sample": self.partner_sample,
            "use_heuristic": self.use_heuristic,
            "score_weight": self.score_weight,
            "pair_weight": self.pair_weight,
            "twin_weight": self.twin_weight,
            "bonus_multiplier": self.bonus_multiplier,
            "top_fraction": self.top_fraction,
        }


PREDEFINED_PROFILES: Dict[BotDifficulty, BotProfile] = {
    BotDifficulty.EASY: BotProfile(
        name="Easy Bot",
        difficulty=BotDifficulty.EASY,
        description="Plays a random tile 40% of the time, otherwise picks among the better half of a small sample.",
        random_move_rate=0.4,
        keep_probability=0.5,
        first_sample=5,
        partner_sample=3,
        use_heuristic=False,
        top_fraction=0.5,
    ),

    BotDifficulty.MEDIUM: BotProfile(
        name="Medium Bot",
        difficulty=BotDifficulty.MEDIUM,
        description="Evaluates every move with lookahead bonuses and picks among the top 30%.",
        top_fraction=0.3,
    ),

    BotDifficulty.HARD: BotProfile(
        name="Hard Bot",
        difficulty=BotDifficulty.HARD,
        description="Evaluates every move with lookahead bonuses and always plays the best one.",
    ),
}


def get_profile(difficulty: BotDifficulty) -> BotProfile:
    """Get predefined profile by difficulty."""
    return PREDEFINED_PROFILES[BotDifficulty(difficulty)]


def get_all_profiles() -> List[BotProfile]:
    """Get all predefined profiles."""
    return list(PREDEFINED_PROFILES.values())
