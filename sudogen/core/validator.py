"""Solution counting and validation for Sudoku puzzles."""

from __future__ import annotations
from typing import Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from .board import SudokuBoard


def count_solutions(board: SudokuBoard, limit: int = 2) -> int:
    """
    Count the number of solutions for a puzzle (up to limit).

    Works on a copy of the board, so the caller's board is never touched.
    Cells are filled in row-major order with digits tried in ascending
    order, and the search stops as soon as ``limit`` solutions are found.

    Args:
        board: The puzzle board.
        limit: Maximum solutions to count before stopping.

    Returns:
        Number of solutions found (up to limit).
    """
    work_board = board.copy()
    count = [0]  # Use list to allow modification in nested function

    def backtrack() -> bool:
        """Returns True if limit reached."""
        cell = work_board.find_blank()
        if cell is None:
            count[0] += 1
            return count[0] >= limit

        row, col = cell
        for digit in range(1, work_board.size + 1):
            if work_board.is_safe(row, col, digit):
                work_board.set_cell(row, col, digit)
                if backtrack():
                    return True
                work_board.set_cell(row, col, digit, place=False)

        return False

    backtrack()
    return count[0]


def has_unique_solution(board: SudokuBoard) -> bool:
    """
    Check if a puzzle has exactly one solution.

    An unsolvable puzzle (zero solutions) is reported as not unique.
    """
    return count_solutions(board, limit=2) == 1


def solve(board: SudokuBoard) -> Optional[SudokuBoard]:
    """
    Find the first completion of a puzzle.

    Returns:
        A solved copy of the board, or None if it has no solution.
    """
    work_board = board.copy()

    def backtrack() -> bool:
        cell = work_board.find_blank()
        if cell is None:
            return True

        row, col = cell
        for digit in range(1, work_board.size + 1):
            if work_board.is_safe(row, col, digit):
                work_board.set_cell(row, col, digit)
                if backtrack():
                    return True
                work_board.set_cell(row, col, digit, place=False)

        return False

    if backtrack():
        return work_board
    return None


def is_valid_board(board: SudokuBoard) -> bool:
    """Check if the board has no conflicts and its presence tables match the grid."""
    return board.is_valid() and board.presence_consistent()


def validate_solution(puzzle: SudokuBoard, solution: SudokuBoard) -> bool:
    """
    Validate that a solution correctly solves the puzzle.

    Args:
        puzzle: The original puzzle.
        solution: The proposed solution.

    Returns:
        True if solution is valid and matches puzzle clues.
    """
    clues = puzzle.grid != 0
    if (puzzle.grid[clues] != solution.grid[clues]).any():
        return False

    return solution.is_solved()
