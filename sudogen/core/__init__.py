"""Core module for Sudoku board representation and validation."""

from .board import SudokuBoard, InvalidBoardError
from .validator import (
    count_solutions,
    has_unique_solution,
    is_valid_board,
    solve,
    validate_solution,
)

__all__ = [
    "SudokuBoard",
    "InvalidBoardError",
    "count_solutions",
    "has_unique_solution",
    "is_valid_board",
    "solve",
    "validate_solution",
]
