"""Single-board facade exposing generate, carve and export."""

from __future__ import annotations
import random
from typing import List, Optional

from .core.board import SudokuBoard
from .generator.generator import SudokuGenerator, CarveStats


class Sudoku:
    """
    One board plus the random source used to fill and carve it.

    Typical use::

        sudoku = Sudoku(seed=7)
        sudoku.generate()
        sudoku.carve(40)
        cells = sudoku.export_grid()
    """

    def __init__(self, seed: Optional[int] = None, rng: Optional[random.Random] = None):
        self.board = SudokuBoard()
        self.generator = SudokuGenerator(seed=seed, rng=rng)

    @classmethod
    def new(cls, seed: Optional[int] = None, rng: Optional[random.Random] = None) -> Sudoku:
        """Construct an all-blank board."""
        return cls(seed=seed, rng=rng)

    def generate(self) -> bool:
        """Fill the current board. Returns whether completion succeeded."""
        return self.generator.fill(self.board)

    def carve(self, num_holes: int) -> CarveStats:
        """Remove up to num_holes cells while keeping the solution unique."""
        return self.generator.carve(self.board, num_holes)

    def export_grid(self) -> List[int]:
        """Row-major list of the 81 cell values, 0 for blanks."""
        return self.board.export_grid()

    def __str__(self) -> str:
        return str(self.board)
