"""Sudoku grid generator and unique-solution puzzle carver."""

from .core import SudokuBoard, InvalidBoardError, count_solutions, has_unique_solution
from .generator import SudokuGenerator, CarveStats
from .sudoku import Sudoku

__version__ = "1.0.0"

__all__ = [
    "Sudoku",
    "SudokuBoard",
    "InvalidBoardError",
    "SudokuGenerator",
    "CarveStats",
    "count_solutions",
    "has_unique_solution",
]
