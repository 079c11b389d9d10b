"""Unit tests for Sudoku board and validation."""

import pytest
from sudogen.core.board import SudokuBoard, InvalidBoardError
from sudogen.core.validator import (
    count_solutions,
    has_unique_solution,
    is_valid_board,
    solve,
    validate_solution,
)


SOLVED = (
    "534678912"
    "672195348"
    "198342567"
    "859761423"
    "426853791"
    "713924856"
    "961537284"
    "287419635"
    "345286179"
)


class TestSudokuBoard:
    """Tests for SudokuBoard class."""

    def test_create_empty_board(self):
        """Test creating an empty 9x9 board."""
        board = SudokuBoard()
        assert board.size == 9
        assert board.box_size == 3
        assert board.count_empty() == 81
        assert board.count_filled() == 0
        assert not board.rows_used.any()
        assert not board.cols_used.any()
        assert not board.boxes_used.any()

    def test_set_cell_place_and_remove(self):
        """Test placing and removing a digit updates grid and presence tables."""
        board = SudokuBoard()
        board.set_cell(4, 5, 7)
        assert board.get(4, 5) == 7
        assert board.rows_used[4, 7]
        assert board.cols_used[5, 7]
        assert board.boxes_used[4, 7]
        assert board.presence_consistent()

        board.set_cell(4, 5, 7, place=False)
        assert board.is_empty(4, 5)
        assert not board.rows_used[4, 7]
        assert not board.cols_used[5, 7]
        assert not board.boxes_used[4, 7]
        assert board.presence_consistent()

    def test_presence_tracks_every_mutation(self):
        """Presence tables match the grid after each placement and removal."""
        board = SudokuBoard()
        placed = []
        for idx, ch in enumerate(SOLVED[:30]):
            row, col, digit = idx // 9, idx % 9, int(ch)
            board.set_cell(row, col, digit)
            placed.append((row, col, digit))
            assert board.presence_consistent()
        for row, col, digit in reversed(placed):
            board.set_cell(row, col, digit, place=False)
            assert board.presence_consistent()
        assert board.count_empty() == 81

    def test_is_safe_after_placement(self):
        """A placed digit blocks its row, column and box."""
        board = SudokuBoard()
        board.set_cell(0, 0, 5)

        # Can't place 5 in same row
        assert not board.is_safe(0, 5, 5)
        # Can't place 5 in same column
        assert not board.is_safe(5, 0, 5)
        # Can't place 5 in same box
        assert not board.is_safe(1, 1, 5)
        # Same cell is blocked for 5
        assert not board.is_safe(0, 0, 5)

        # Different value or unrelated cell is fine
        assert board.is_safe(0, 5, 7)
        assert board.is_safe(4, 4, 5)

    def test_is_safe_ignores_occupied_cell(self):
        """is_safe answers from the presence tables, not from the cell contents."""
        board = SudokuBoard()
        board.set_cell(4, 4, 7)

        assert not board.is_safe(4, 4, 7)
        # 3 appears nowhere in row 4, column 4 or box 4
        assert board.is_safe(4, 4, 3)
        assert board.get(4, 4) == 7

    def test_set_cell_rejects_bad_input(self):
        """Out-of-range digits and cells raise ValueError."""
        board = SudokuBoard()
        with pytest.raises(ValueError):
            board.set_cell(0, 0, 10)
        with pytest.raises(ValueError):
            board.set_cell(0, 0, 0)
        with pytest.raises(ValueError):
            board.set_cell(9, 0, 1)

    def test_find_blank_row_major(self):
        """find_blank returns the first empty cell in row-major order."""
        board = SudokuBoard.from_string(SOLVED)
        assert board.find_blank() is None

        board.set_cell(2, 7, board.get(2, 7), place=False)
        board.set_cell(5, 1, board.get(5, 1), place=False)
        assert board.find_blank() == (2, 7)

        assert SudokuBoard().find_blank() == (0, 0)

    def test_is_valid(self):
        """Test board validation."""
        board = SudokuBoard()
        assert board.is_valid()  # Empty board is valid

        board.grid[0, 0] = 5
        board.grid[0, 1] = 5  # Duplicate in row, bypassing set_cell
        assert not board.is_valid()

    def test_from_string(self):
        """Test creating board from string."""
        puzzle_str = "0" * 80 + "9"  # 80 zeros and a 9 at the end
        board = SudokuBoard.from_string(puzzle_str)
        assert board.get(8, 8) == 9
        assert board.rows_used[8, 9]

        dotted = SudokuBoard.from_string("." * 80 + "9")
        assert dotted == board

    def test_from_string_conflict(self):
        """Conflicting givens raise InvalidBoardError."""
        with pytest.raises(InvalidBoardError):
            SudokuBoard.from_string("55" + "0" * 79)

    def test_from_string_bad_length(self):
        """Wrong-length strings are rejected."""
        with pytest.raises(ValueError):
            SudokuBoard.from_string("123")

    def test_to_string_and_export(self):
        """Test converting board to string and flat list."""
        board = SudokuBoard()
        board.set_cell(0, 0, 5)
        s = board.to_string()
        assert len(s) == 81
        assert s[0] == '5'

        cells = board.export_grid()
        assert len(cells) == 81
        assert cells[0] == 5
        assert all(type(v) is int for v in cells)

    def test_copy_is_independent(self):
        """Modifying the copy leaves the original and its tables unchanged."""
        board = SudokuBoard()
        board.set_cell(4, 4, 7)
        copy = board.copy()

        assert copy.get(4, 4) == 7

        copy.set_cell(4, 4, 7, place=False)
        copy.set_cell(0, 0, 3)
        assert board.get(4, 4) == 7
        assert board.rows_used[4, 7]
        assert not board.rows_used[0, 3]
        assert board.presence_consistent()

    def test_pretty_print(self):
        """The pretty format shows blanks as dots."""
        board = SudokuBoard()
        board.set_cell(0, 0, 5)
        text = str(board)
        assert "| 5 . . |" in text
        assert text.count("+-------+-------+-------+") == 4


class TestValidator:
    """Tests for the uniqueness verifier."""

    def test_full_grid_is_unique(self):
        """A complete valid grid has exactly one completion."""
        board = SudokuBoard.from_string(SOLVED)
        assert count_solutions(board) == 1
        assert has_unique_solution(board)

    def test_swappable_digits_not_unique(self):
        """Blanks whose digits can be swapped without breaking constraints are not unique."""
        # Rows 3 and 4 hold 1 and 3 in columns 5 and 8 in opposite orders,
        # and the four cells sit in just two boxes.
        board = SudokuBoard.from_string(SOLVED)
        assert (board.get(3, 5), board.get(3, 8)) == (1, 3)
        assert (board.get(4, 5), board.get(4, 8)) == (3, 1)
        for row, col in [(3, 5), (3, 8), (4, 5), (4, 8)]:
            board.set_cell(row, col, board.get(row, col), place=False)

        assert count_solutions(board) == 2
        assert not has_unique_solution(board)

    def test_blanks_forced_by_peers_are_unique(self):
        """Blanks in one box whose values are forced by rows and columns stay unique."""
        board = SudokuBoard.from_string(SOLVED)
        for row, col in [(0, 0), (0, 1), (1, 0), (1, 1)]:
            board.set_cell(row, col, board.get(row, col), place=False)
        assert has_unique_solution(board)

    def test_count_stops_at_limit(self):
        """The empty board has many solutions but counting stops at the limit."""
        empty = SudokuBoard()
        assert count_solutions(empty) == 2
        assert count_solutions(empty, limit=3) == 3
        assert not has_unique_solution(empty)

    def test_unsolvable_is_not_unique(self):
        """A puzzle with no completion reports zero solutions, not an error."""
        board = SudokuBoard()
        # Row 0 holds 1-8 except the last cell, and 9 sits in column 8 below
        for col, digit in enumerate([1, 2, 3, 4, 5, 6, 7, 8]):
            board.set_cell(0, col, digit)
        board.set_cell(4, 8, 9)
        assert count_solutions(board) == 0
        assert not has_unique_solution(board)

    def test_verifier_leaves_board_untouched(self):
        """count_solutions works on a copy."""
        board = SudokuBoard.from_string(SOLVED)
        board.set_cell(8, 8, board.get(8, 8), place=False)
        before = board.copy()
        count_solutions(board)
        assert board == before
        assert board.presence_consistent()

    def test_solve_and_validate(self):
        """solve returns a completion that matches the clues."""
        puzzle = SudokuBoard.from_string(SOLVED)
        for row, col in [(0, 0), (4, 4), (8, 8), (2, 6)]:
            puzzle.set_cell(row, col, puzzle.get(row, col), place=False)
        solution = solve(puzzle)
        assert solution is not None
        assert solution.to_string() == SOLVED
        assert validate_solution(puzzle, solution)
        assert is_valid_board(solution)

        wrong = SudokuBoard.from_string(SOLVED)
        assert not validate_solution(SudokuBoard.from_string("9" + "0" * 80), wrong)

    def test_solve_unsolvable_returns_none(self):
        """solve returns None when no completion exists."""
        board = SudokuBoard()
        for col, digit in enumerate([1, 2, 3, 4, 5, 6, 7, 8]):
            board.set_cell(0, col, digit)
        board.set_cell(4, 8, 9)
        assert solve(board) is None


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
