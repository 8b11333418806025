"""
Unit tests for the hint solver.
"""
from typing import Iterable, Tuple

import numpy as np
from minefield import Board, HintResult, find_hints, find_hints_in_observation


def open_cells(board: Board, positions: Iterable[Tuple[int, int]]) -> None:
    """Reveal cells one by one without cascading."""
    for row, col in positions:
        board.get_cell(row, col).reveal()


def assert_same_on_observation(board: Board, result: HintResult) -> None:
    """The observation-based solver must agree with the board solver."""
    assert find_hints_in_observation(board.get_observation()) == result


# ============================================================================
# Deduction Tests
# ============================================================================

class TestDeductions:
    """Test the two forced-conclusion rules."""

    def test_single_hidden_neighbor_is_mine(self, make_board) -> None:
        """A 1 with one hidden neighbor and no flags marks it as a mine."""
        board = make_board(4, 4, [(0, 0)])
        open_cells(board, [(0, 1), (0, 2), (1, 0), (1, 1), (1, 2),
                           (2, 0), (2, 1), (2, 2)])

        result = find_hints(board)

        assert result.likely_mine == {(0, 0)}
        assert result.safe == set()
        assert_same_on_observation(board, result)

    def test_satisfied_flags_make_rest_safe(self, make_board) -> None:
        """A 1 with one flagged neighbor clears its other hidden neighbors."""
        board = make_board(4, 4, [(0, 0)])
        board.get_cell(0, 0).toggle_flag()
        open_cells(board, [(1, 1)])

        result = find_hints(board)

        assert result.safe == {
            (0, 1), (0, 2), (1, 0), (1, 2), (2, 0), (2, 1), (2, 2)
        }
        assert result.likely_mine == set()
        assert_same_on_observation(board, result)

    def test_ambiguous_number_gives_nothing(self, make_board) -> None:
        """A lone 1 among eight hidden neighbors is undecided."""
        board = make_board(4, 4, [(0, 0)])
        open_cells(board, [(1, 1)])

        result = find_hints(board)

        assert result.is_empty
        assert_same_on_observation(board, result)

    def test_unstarted_board_has_no_hints(self, default_board: Board) -> None:
        """With nothing revealed there is nothing to deduce."""
        assert find_hints(default_board).is_empty


# ============================================================================
# Aggregation Tests
# ============================================================================

class TestAggregation:
    """Test how results combine across numbered cells."""

    def test_duplicates_stored_once(self, make_board) -> None:
        """Cells deduced from several numbers appear once."""
        board = make_board(4, 4, [(0, 2), (1, 2), (2, 2), (3, 2)])
        board.reveal_cell(0, 0)

        result = find_hints(board)

        assert result.likely_mine == {(0, 2), (1, 2), (2, 2), (3, 2)}
        assert result.safe == set()
        assert_same_on_observation(board, result)

    def test_safe_and_mine_from_different_cells(self, make_board) -> None:
        """Both sets can be filled by one query."""
        board = make_board(4, 4, [(0, 3), (3, 3)])
        board.reveal_cell(0, 0)
        board.get_cell(0, 3).toggle_flag()
        board.get_cell(2, 3).reveal()

        result = find_hints(board)

        assert result.safe == {(1, 3)}
        assert result.likely_mine == {(3, 3)}
        assert_same_on_observation(board, result)

    def test_revealed_mines_are_not_numbers(self, make_board) -> None:
        """Mines exposed after a loss do not produce hints."""
        board = make_board(4, 4, [(0, 2), (1, 2), (2, 2), (3, 2)])
        board.reveal_all_mines()
        assert find_hints(board).is_empty

    def test_solver_leaves_board_untouched(self, make_board) -> None:
        """The solver never changes cell state."""
        board = make_board(4, 4, [(0, 2), (1, 2), (2, 2), (3, 2)])
        board.reveal_cell(0, 0)
        before = board.get_observation().copy()
        find_hints(board)
        assert np.array_equal(board.get_observation(), before)
