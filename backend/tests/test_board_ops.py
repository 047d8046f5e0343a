"""Tests for pure board operations."""
import pytest
from seqtiles.core.board_ops import (
    InvalidMoveError,
    apply_move,
    is_connected,
    is_round_complete,
    neighbors,
    reveal,
    swap_and_reveal,
    unrevealed_indices,
)
from seqtiles.models.board import Move, MoveKind

OBSTACLE = None  # obstacle cell in make_board grids


class TestNeighbors:
    """Test cases for neighbors."""

    def test_corner_cell(self):
        """Test that a corner has two neighbours."""
        assert neighbors(0, 3, 4) == [4, 1]

    def test_middle_cell_order(self):
        """Test up, down, left, right ordering."""
        assert neighbors(5, 3, 4) == [1, 9, 4, 6]

    def test_last_cell(self):
        """Test the bottom-right corner."""
        assert neighbors(11, 3, 4) == [7, 10]


class TestRevealAndSwap:
    """Test cases for reveal, swap_and_reveal and apply_move."""

    def test_reveal_returns_new_board(self, make_board):
        """Test that reveal leaves the input board unchanged."""
        board = make_board([[1, 2, 3]], revealed=set())
        result = reveal(board, 1)

        assert result[1].is_revealed
        assert not board[1].is_revealed
        assert result[0] == board[0]

    def test_reveal_revealed_tile_raises(self, make_board):
        """Test that a revealed tile cannot be revealed again."""
        board = make_board([[1, 2]], revealed={0})

        with pytest.raises(InvalidMoveError):
            reveal(board, 0)

    def test_reveal_obstacle_raises(self, make_board):
        """Test that obstacles cannot be played."""
        board = make_board([[1, OBSTACLE]], revealed=set())

        with pytest.raises(InvalidMoveError):
            reveal(board, 1)

    def test_reveal_out_of_range_raises(self, make_board):
        """Test that indices outside the board are rejected."""
        board = make_board([[1, 2]], revealed=set())

        with pytest.raises(InvalidMoveError):
            reveal(board, 5)

    def test_swap_exchanges_values_and_ids(self, make_board):
        """Test that a swap moves value and identity together."""
        board = make_board([[1, 2, 3]], revealed=set())
        result = swap_and_reveal(board, 0, 2)

        assert (result[0].value, result[0].id) == (3, 2)
        assert (result[2].value, result[2].id) == (1, 0)
        assert result[0].is_revealed and result[2].is_revealed
        assert not result[1].is_revealed

    def test_swap_with_itself_raises(self, make_board):
        """Test that swapping a tile with itself is rejected."""
        board = make_board([[1, 2]], revealed=set())

        with pytest.raises(InvalidMoveError):
            swap_and_reveal(board, 1, 1)

    def test_apply_keep_move(self, make_board):
        """Test that a keep move reveals one tile."""
        board = make_board([[1, 2]], revealed=set())
        result, affected = apply_move(board, Move(MoveKind.KEEP, 1))

        assert affected == [1]
        assert result[1].is_revealed

    def test_apply_swap_move(self, make_board):
        """Test that a swap move affects both tiles."""
        board = make_board([[1, 2]], revealed=set())
        result, affected = apply_move(board, Move(MoveKind.SWAP, 0, 1))

        assert affected == [0, 1]
        assert [t.value for t in result] == [2, 1]

    def test_apply_swap_without_partner_raises(self, make_board):
        """Test that a swap needs a second index."""
        board = make_board([[1, 2]], revealed=set())

        with pytest.raises(InvalidMoveError):
            apply_move(board, Move(MoveKind.SWAP, 0))


class TestBoardQueries:
    """Test cases for board queries."""

    def test_unrevealed_indices_skip_obstacles(self, make_board):
        """Test that obstacles and revealed tiles are not candidates."""
        board = make_board([[1, OBSTACLE, 3, 4]], revealed={3})

        assert unrevealed_indices(board) == [0, 2]

    def test_round_complete(self, make_board):
        """Test round completion."""
        assert is_round_complete(make_board([[1, OBSTACLE]], revealed={0}))
        assert not is_round_complete(make_board([[1, 2]], revealed={0}))

    def test_connected_grid(self):
        """Test that a grid with a corner obstacle stays connected."""
        flags = [True, False, False,
                 False, False, False,
                 False, False, False]

        assert is_connected(flags, 3, 3)

    def test_disconnected_grid(self):
        """Test that a blocked middle column splits the grid."""
        flags = [False, True, False,
                 False, True, False,
                 False, True, False]

        assert not is_connected(flags, 3, 3)

    def test_all_obstacles_is_connected(self):
        """Test that a grid with no open cells counts as connected."""
        assert is_connected([True, True], 1, 2)
