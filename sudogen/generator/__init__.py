"""Generator module for creating Sudoku grids and puzzles."""

from .generator import SudokuGenerator, CarveStats

__all__ = ["SudokuGenerator", "CarveStats"]
