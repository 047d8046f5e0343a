"""Tests for bot profiles and the bot engine."""
import random

import pytest
from seqtiles.core.bot import BotEngine, NoLegalMoveError, choose_bot_move
from seqtiles.core.generator import BoardGenerator
from seqtiles.models.board import BoardMode, Move, MoveKind
from seqtiles.models.bot_profile import (
    BotDifficulty,
    BotProfile,
    get_all_profiles,
    get_profile,
    PREDEFINED_PROFILES,
)

OBSTACLE = None


class ScriptedRandom:
    """Random source returning fixed floats and always choosing the first item."""

    def __init__(self, *values):
        self._values = list(values)

    def random(self):
        return self._values.pop(0) if len(self._values) > 1 else self._values[0]

    def choice(self, seq):
        return seq[0]


@pytest.fixture
def keep_wins_board(make_board):
    """1x3 board where keeping the middle tile makes a 4-4 pair and twin."""
    return make_board([[4, 4, 2]], revealed={0})


class TestBotProfile:
    """Tests for BotProfile model."""

    def test_predefined_profiles_exist(self):
        """Test that every difficulty has a profile."""
        for difficulty in BotDifficulty:
            assert difficulty in PREDEFINED_PROFILES
            assert get_profile(difficulty).difficulty == difficulty

    def test_get_profile_accepts_strings(self):
        """Test lookup by plain string."""
        assert get_profile("hard").difficulty == BotDifficulty.HARD

    def test_get_all_profiles(self):
        """Test getting all profiles."""
        profiles = get_all_profiles()

        assert len(profiles) == 3
        assert all(isinstance(p, BotProfile) for p in profiles)

    def test_profile_skill_progression(self):
        """Test that stronger tiers search wider and guess less."""
        easy = get_profile(BotDifficulty.EASY)
        medium = get_profile(BotDifficulty.MEDIUM)
        hard = get_profile(BotDifficulty.HARD)

        assert easy.random_move_rate > medium.random_move_rate == hard.random_move_rate == 0
        assert easy.first_sample == 5 and easy.partner_sample == 3
        assert medium.first_sample is None and hard.first_sample is None
        assert not easy.use_heuristic and medium.use_heuristic and hard.use_heuristic
        assert easy.top_fraction == 0.5
        assert medium.top_fraction == 0.3
        assert hard.top_fraction is None

    def test_profile_to_dict(self):
        """Test profile serialization."""
        data = get_profile(BotDifficulty.MEDIUM).to_dict()

        assert data["difficulty"] == "medium"
        assert data["pair_weight"] == 0.3
        assert data["twin_weight"] == 0.2


class TestMoveEnumeration:
    """Tests for candidate enumeration and evaluation."""

    def test_full_search_covers_every_move(self, make_board):
        """Test U keeps plus U*(U-1) swaps for full-search profiles."""
        board = make_board([[1, 2, 3, 4]], revealed={0})
        options = BotEngine().enumerate_moves(board, 1, 4, get_profile(BotDifficulty.HARD))

        assert len(options) == 3 + 3 * 2
        assert options[0].move == Move(MoveKind.KEEP, 1)
        assert options[1].move == Move(MoveKind.SWAP, 1, 2)

    def test_easy_sample_is_limited(self, make_board):
        """Test that easy looks at 5 first tiles and 3 partners each."""
        board = make_board([[1, 2, 3, 4, 5, 6, 7, 1, 2, 3]], revealed=set())
        options = BotEngine().enumerate_moves(board, 1, 10, get_profile(BotDifficulty.EASY))

        assert len(options) == 5 * (1 + 3)
        assert {o.move.first_index for o in options} == {0, 1, 2, 3, 4}

    def test_evaluation_weights(self, keep_wins_board):
        """Test the evaluation of a keep that scores a pair and a twin."""
        engine = BotEngine()
        move = Move(MoveKind.KEEP, 1)

        hard = engine.evaluate_move(keep_wins_board, 1, 3, move, get_profile(BotDifficulty.HARD))
        easy = engine.evaluate_move(keep_wins_board, 1, 3, move, get_profile(BotDifficulty.EASY))

        assert hard.score == 2
        # 2 points * 10, plus one hidden neighbour worth (0.3 + 0.2) * 2
        assert hard.evaluation == pytest.approx(21.0)
        assert easy.evaluation == pytest.approx(20.0)

    def test_sequence_bonus(self, make_board):
        """Test that sequence points are counted again as a bonus."""
        board = make_board([[1, 2, 3]], revealed={0, 1})
        option = BotEngine().evaluate_move(
            board, 1, 3, Move(MoveKind.KEEP, 2), get_profile(BotDifficulty.HARD)
        )

        assert option.score == 3
        assert option.evaluation == pytest.approx(30 + 3 * 2)

    def test_evaluation_leaves_board_untouched(self, keep_wins_board):
        """Test that hypothetical moves do not change the input board."""
        snapshot = tuple(keep_wins_board)
        BotEngine().enumerate_moves(keep_wins_board, 1, 3, get_profile(BotDifficulty.MEDIUM))

        assert keep_wins_board == snapshot


class TestBotEngine:
    """Tests for move selection."""

    def test_no_legal_move(self, make_board):
        """Test that a fully revealed board raises NoLegalMoveError."""
        board = make_board([[1, 2], [3, OBSTACLE]])

        for difficulty in BotDifficulty:
            with pytest.raises(NoLegalMoveError):
                BotEngine().choose_move(board, 2, 2, difficulty)

    def test_hard_picks_best_move(self, keep_wins_board):
        """Test that hard keeps the tile that completes the 4-4 match."""
        move = BotEngine().choose_move(keep_wins_board, 1, 3, BotDifficulty.HARD)

        assert move == Move(MoveKind.KEEP, 1)

    def test_hard_tie_break_is_first_encountered(self, make_board):
        """Test that equal evaluations resolve to enumeration order."""
        board = make_board([[1, 3]], revealed=set())
        move = BotEngine().choose_move(board, 1, 2, BotDifficulty.HARD)

        assert move == Move(MoveKind.KEEP, 0)

    @pytest.mark.parametrize("seed", ["h1", "h2", "h3"])
    def test_hard_matches_maximum_evaluation(self, make_board, seed):
        """Test hard-tier optimality on partly revealed generated grids."""
        rng = random.Random(seed)
        values = [[rng.randint(1, 7) for _ in range(4)] for _ in range(3)]
        revealed = set(rng.sample(range(12), 5))
        board = make_board(values, revealed=revealed)

        engine = BotEngine()
        profile = get_profile(BotDifficulty.HARD)
        options = engine.enumerate_moves(board, 3, 4, profile)
        move = engine.choose_move(board, 3, 4, BotDifficulty.HARD)
        chosen = engine.evaluate_move(board, 3, 4, move, profile)

        assert chosen.evaluation == max(o.evaluation for o in options)

    def test_medium_picks_from_top_30_percent(self, keep_wins_board):
        """Test that medium only plays moves from the top of the ranking."""
        # 4 candidates -> top 2: keep 1 (21.0) and keep 2 (2.0)
        allowed = {Move(MoveKind.KEEP, 1), Move(MoveKind.KEEP, 2)}

        for seed in range(20):
            engine = BotEngine(random.Random(seed))
            assert engine.choose_move(keep_wins_board, 1, 3, BotDifficulty.MEDIUM) in allowed

    def test_easy_evaluated_branch(self, keep_wins_board):
        """Test that easy ranks its sample on immediate score."""
        engine = BotEngine(ScriptedRandom(0.9))

        assert engine.choose_move(keep_wins_board, 1, 3, BotDifficulty.EASY) == Move(MoveKind.KEEP, 1)

    def test_easy_random_keep(self, keep_wins_board):
        """Test the random branch choosing to keep."""
        engine = BotEngine(ScriptedRandom(0.1, 0.1))

        assert engine.choose_move(keep_wins_board, 1, 3, BotDifficulty.EASY) == Move(MoveKind.KEEP, 1)

    def test_easy_random_swap(self, keep_wins_board):
        """Test the random branch choosing to swap."""
        engine = BotEngine(ScriptedRandom(0.1, 0.9))

        assert engine.choose_move(keep_wins_board, 1, 3, BotDifficulty.EASY) == Move(MoveKind.SWAP, 1, 2)

    def test_easy_random_swap_without_partner_keeps(self, make_board):
        """Test that a random swap with one hidden tile left falls back to keep."""
        board = make_board([[1, 2]], revealed={0})
        engine = BotEngine(ScriptedRandom(0.1, 0.9))

        assert engine.choose_move(board, 1, 2, BotDifficulty.EASY) == Move(MoveKind.KEEP, 1)

    @pytest.mark.parametrize("difficulty", list(BotDifficulty))
    def test_moves_are_legal(self, make_board, difficulty):
        """Test that every tier only targets hidden, non-obstacle tiles."""
        board = make_board([
            [1, 2, OBSTACLE, 4],
            [5, 6, 7, 1],
            [2, OBSTACLE, 4, 5],
        ], revealed={0, 5, 10})
        hidden = {i for i, t in enumerate(board) if not t.is_revealed and not t.is_obstacle}

        for seed in range(15):
            move = BotEngine(random.Random(seed)).choose_move(board, 3, 4, difficulty)
            assert move.first_index in hidden
            if move.kind == MoveKind.SWAP:
                assert move.second_index in hidden
                assert move.second_index != move.first_index
            else:
                assert move.second_index is None

    def test_legal_on_generated_map(self):
        """Test legality on a full generated map board."""
        layout = BoardGenerator().generate(BoardMode.MAP, "bot-map")
        move = BotEngine(random.Random(1)).choose_move(
            layout.tiles, layout.rows, layout.cols, BotDifficulty.EASY
        )

        tile = layout.tiles[move.first_index]
        assert not tile.is_obstacle and not tile.is_revealed

    def test_choose_bot_move_entry_point(self, keep_wins_board):
        """Test the module-level entry point."""
        assert choose_bot_move(keep_wins_board, 1, 3, BotDifficulty.HARD) == Move(MoveKind.KEEP, 1)
