"""
Unit tests for Board value and board generation.

Tests index arithmetic, neighbor clipping, mine placement, adjacency
counts and observation generation.
"""
import random

import numpy as np
import pytest
from sweeper import (
    Board,
    Cell,
    Configuration,
    generate_board,
    index_to_position,
    neighbor_indices,
    position_to_index,
)


# ============================================================================
# Index Utilities Tests
# ============================================================================

class TestIndexUtilities:
    """Test index/position conversion and neighbors."""

    def test_position_to_index(self) -> None:
        assert position_to_index(5, 0, 0) == 0
        assert position_to_index(5, 2, 3) == 13
        assert position_to_index(7, 1, 0) == 7

    def test_index_to_position(self) -> None:
        assert index_to_position(5, 13) == (2, 3)
        assert index_to_position(7, 7) == (1, 0)

    def test_corner_has_three_neighbors(self) -> None:
        assert sorted(neighbor_indices(5, 5, 0)) == [1, 5, 6]
        assert sorted(neighbor_indices(5, 5, 24)) == [18, 19, 23]

    def test_edge_has_five_neighbors(self) -> None:
        assert sorted(neighbor_indices(5, 5, 2)) == [1, 3, 6, 7, 8]

    def test_interior_has_eight_neighbors(self) -> None:
        assert sorted(neighbor_indices(5, 5, 12)) == [6, 7, 8, 11, 13, 16, 17, 18]

    def test_neighbors_do_not_wrap_rows(self) -> None:
        """Cell at the end of a row is not adjacent to the next row's start."""
        assert 5 not in neighbor_indices(5, 5, 4)
        assert 4 not in neighbor_indices(5, 5, 5)

    def test_non_square_board(self) -> None:
        assert sorted(neighbor_indices(3, 2, 5)) == [1, 2, 4]


# ============================================================================
# Board Generation Tests
# ============================================================================

class TestGenerateBoard:
    """Test mine placement and adjacency counts."""

    def test_board_has_correct_length(self, test_config: Configuration) -> None:
        board = generate_board(test_config, random.Random(1))
        assert len(board) == 25

    def test_all_cells_start_covered(self, test_config: Configuration) -> None:
        board = generate_board(test_config, random.Random(1))
        assert all(cell.covered for cell in board)

    @pytest.mark.parametrize("seed", range(10))
    def test_places_exact_mine_count(self, seed: int) -> None:
        config = Configuration(9, 7, 20)
        board = generate_board(config, random.Random(seed))
        assert len(board.mine_indices) == 20

    def test_dense_board_leaves_one_safe_cell(self) -> None:
        config = Configuration(3, 3, 8)
        board = generate_board(config, random.Random(4))
        assert len(board.mine_indices) == 8

    def test_seeded_generation_is_reproducible(self) -> None:
        config = Configuration(16, 16, 40)
        first = generate_board(config, random.Random(2024))
        second = generate_board(config, random.Random(2024))
        assert first == second

    def test_regression_layout(
        self, test_config: Configuration, regression_rng, regression_mines
    ) -> None:
        """Scripted draws place mines exactly where requested."""
        board = generate_board(test_config, regression_rng)
        assert board.mine_indices == regression_mines

    def test_collisions_are_redrawn(
        self, test_config: Configuration, regression_rng
    ) -> None:
        """One repeated draw costs one extra row/col pair."""
        generate_board(test_config, regression_rng)
        assert regression_rng.calls == 12

    def test_draws_row_then_column(self, scripted_random) -> None:
        config = Configuration(4, 2, 1)
        board = generate_board(config, scripted_random([1, 3]))
        assert board.mine_indices == {7}

    def test_adjacent_counts(
        self, test_config: Configuration, regression_rng
    ) -> None:
        board = generate_board(test_config, regression_rng)
        expected = {
            0: 0, 5: 2, 6: 2, 7: 1, 12: 1, 16: 4,
            17: 2, 18: 1, 19: 1, 21: 2, 22: 1, 24: 1,
        }
        for index, count in expected.items():
            assert board[index].adjacent_mines == count

    @pytest.mark.parametrize("seed", range(5))
    def test_adjacent_counts_match_neighbors(self, seed: int) -> None:
        config = Configuration(8, 6, 12)
        board = generate_board(config, random.Random(seed))
        for index, cell in enumerate(board):
            if cell.mine:
                continue
            mines = sum(1 for n in board.neighbors(index) if board[n].mine)
            assert cell.adjacent_mines == mines
            assert 0 <= cell.adjacent_mines <= 8


# ============================================================================
# Board Value Tests
# ============================================================================

class TestBoardValue:
    """Test copy-on-write updates and counts."""

    def test_wrong_length_raises_error(self, test_config: Configuration) -> None:
        with pytest.raises(ValueError, match="Number of cells"):
            Board(test_config, (Cell(),) * 24)

    def test_with_cells_returns_new_board(
        self, test_config: Configuration, regression_rng
    ) -> None:
        board = generate_board(test_config, regression_rng)
        updated = board.with_cells({0: board[0].reveal()})

        assert updated is not board
        assert updated[0].revealed is True
        assert board[0].revealed is False

    def test_with_no_updates_returns_same_board(
        self, test_config: Configuration, regression_rng
    ) -> None:
        board = generate_board(test_config, regression_rng)
        assert board.with_cells({}) is board

    def test_counts(self, test_config: Configuration, regression_rng) -> None:
        board = generate_board(test_config, regression_rng)
        board = board.with_cells({0: board[0].reveal(), 1: board[1].toggle_flag()})

        assert board.revealed_count == 1
        assert board.flagged_count == 1
        assert board.covered_count == 23

    def test_get_cell_by_position(
        self, test_config: Configuration, regression_rng
    ) -> None:
        board = generate_board(test_config, regression_rng)
        assert board.get_cell(2, 0).mine is True
        assert board.get_cell(5, 0) is None
        assert board.get_cell(0, -1) is None

    def test_in_bounds(self, test_config: Configuration, regression_rng) -> None:
        board = generate_board(test_config, regression_rng)
        assert board.in_bounds(0)
        assert board.in_bounds(24)
        assert not board.in_bounds(25)
        assert not board.in_bounds(-1)


# ============================================================================
# Observation Tests
# ============================================================================

class TestObservation:
    """Test observation array."""

    def test_observation_shape_and_dtype(self) -> None:
        config = Configuration(7, 3, 2)
        obs = generate_board(config, random.Random(0)).get_observation()
        assert obs.shape == (3, 7)
        assert obs.dtype == np.int8

    def test_new_board_observation_all_covered(
        self, test_config: Configuration, regression_rng
    ) -> None:
        obs = generate_board(test_config, regression_rng).get_observation()
        assert np.all(obs == -1)

    def test_observation_values(
        self, test_config: Configuration, regression_rng
    ) -> None:
        board = generate_board(test_config, regression_rng)
        board = board.with_cells({
            5: board[5].reveal(),
            10: board[10].reveal(),
            24: board[24].toggle_flag(),
        })
        obs = board.get_observation()
        assert obs[1, 0] == 2
        assert obs[2, 0] == 9
        assert obs[4, 4] == -2

    def test_valid_actions_lists_covered_cells(
        self, test_config: Configuration, regression_rng
    ) -> None:
        board = generate_board(test_config, regression_rng)
        board = board.with_cells({0: board[0].reveal(), 1: board[1].toggle_flag()})
        actions = board.valid_actions()
        assert 0 not in actions
        assert 1 not in actions
        assert len(actions) == 23
