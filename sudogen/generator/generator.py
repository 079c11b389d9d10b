"""Sudoku grid generator and puzzle carver."""

from __future__ import annotations
import logging
import os
import random
import time
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, Tuple

from tqdm import tqdm

from ..core.board import SudokuBoard, SIZE, BLANK
from ..core.validator import has_unique_solution

log = logging.getLogger(__name__)


@dataclass
class CarveStats:
    """Statistics from a carve run."""
    holes_requested: int = 0
    holes_made: int = 0
    attempts: int = 0
    rejected: int = 0
    time_seconds: float = 0.0

    @property
    def reached_target(self) -> bool:
        return self.holes_made >= self.holes_requested

    def to_dict(self) -> Dict[str, Any]:
        """Convert stats to dictionary."""
        return {
            "holes_requested": self.holes_requested,
            "holes_made": self.holes_made,
            "attempts": self.attempts,
            "rejected": self.rejected,
            "time_seconds": self.time_seconds,
        }


class SudokuGenerator:
    """
    Generator for uniquely solvable Sudoku puzzles.

    Algorithm:
    1. Fill an empty board using randomized backtracking
    2. Visit every cell once in random order, blanking it if the puzzle
       keeps a unique solution, until the requested number of holes is made

    All randomness comes from a single ``random.Random`` instance, so two
    generators built with the same seed produce the same grids and puzzles.
    """

    def __init__(self, seed: Optional[int] = None, rng: Optional[random.Random] = None):
        """
        Initialize the generator.

        Args:
            seed: Random seed for reproducibility. Ignored if rng is given.
            rng: Random source to draw permutations from.
        """
        self.rng = rng if rng is not None else random.Random(seed)

    def fill(self, board: SudokuBoard) -> bool:
        """
        Fill every blank cell of the board in place.

        Cells are taken in row-major order and candidate digits in a fresh
        random order at every level of the recursion.

        Returns:
            True if the board was completed, False if no completion exists.
        """
        cell = board.find_blank()
        if cell is None:
            return True

        row, col = cell
        digits = list(range(1, SIZE + 1))
        self.rng.shuffle(digits)

        for digit in digits:
            if board.is_safe(row, col, digit):
                board.set_cell(row, col, digit)
                if self.fill(board):
                    return True
                board.set_cell(row, col, digit, place=False)

        return False

    def carve(
        self,
        board: SudokuBoard,
        num_holes: int,
        on_step: Optional[Callable[[SudokuBoard], None]] = None,
    ) -> CarveStats:
        """
        Remove up to num_holes cells from the board while keeping a unique solution.

        Each cell is tried at most once. A removal that breaks uniqueness is
        undone and the cell is skipped. Falling short of num_holes is not an
        error; check the returned stats or the board.

        Args:
            board: A board to carve in place, normally a complete grid.
            num_holes: Number of cells to blank. Values <= 0 leave the board untouched.
            on_step: Called with the board after every accepted removal.

        Returns:
            CarveStats describing the run.
        """
        stats = CarveStats(holes_requested=max(0, num_holes))
        if stats.holes_requested == 0:
            return stats

        start_time = time.perf_counter()

        positions = [(i, j) for i in range(SIZE) for j in range(SIZE)]
        self.rng.shuffle(positions)

        for row, col in positions:
            removed = board.get(row, col)
            if removed == BLANK:
                continue

            stats.attempts += 1
            board.set_cell(row, col, removed, place=False)

            # has_unique_solution works on its own copy of the board
            if has_unique_solution(board):
                stats.holes_made += 1
                if on_step is not None:
                    on_step(board)
                if stats.holes_made >= stats.holes_requested:
                    break
            else:
                stats.rejected += 1
                board.set_cell(row, col, removed)

        stats.time_seconds = time.perf_counter() - start_time

        if not stats.reached_target:
            log.debug(
                "Carved only %d of %d requested holes", stats.holes_made, stats.holes_requested
            )
        log.debug("Carve finished: %s", stats.to_dict())
        return stats

    def generate_complete(self) -> SudokuBoard:
        """Generate a complete valid Sudoku board."""
        board = SudokuBoard()
        if not self.fill(board):
            # Unreachable for an empty 9x9 board
            raise RuntimeError("Failed to fill an empty board")
        log.debug("Generated complete grid %s", board.to_string())
        return board

    def generate(self, num_holes: int) -> SudokuBoard:
        """
        Generate a puzzle with up to num_holes blank cells.

        Returns:
            A SudokuBoard with the puzzle (clues only, no solution).
        """
        puzzle, _ = self.generate_with_solution(num_holes)
        return puzzle

    def generate_with_solution(self, num_holes: int) -> Tuple[SudokuBoard, SudokuBoard]:
        """
        Generate a puzzle along with its solution.

        Returns:
            Tuple of (puzzle, solution) SudokuBoards.
        """
        solution = self.generate_complete()
        puzzle = solution.copy()
        self.carve(puzzle, num_holes)
        return puzzle, solution

    def generate_batch(
        self, count: int, num_holes: int, show_progress: bool = False
    ) -> List[Tuple[SudokuBoard, SudokuBoard]]:
        """
        Generate multiple (puzzle, solution) pairs with the same hole target.

        Args:
            count: Number of puzzles to generate.
            num_holes: Hole target for every puzzle.
            show_progress: Display a progress bar.
        """
        return [
            self.generate_with_solution(num_holes)
            for _ in tqdm(range(count), desc="Generating", disable=not show_progress)
        ]

    @staticmethod
    def save_to_folder(puzzles: List[SudokuBoard], folder_path: str, prefix: str = "puzzle") -> List[str]:
        """
        Save a list of puzzles to a folder as individual text files.

        Args:
            puzzles: List of SudokuBoard objects.
            folder_path: Directory to save the puzzles.
            prefix: Prefix for the filename (default: "puzzle").

        Returns:
            Paths of the written files.
        """
        os.makedirs(folder_path, exist_ok=True)

        paths = []
        for i, puzzle in enumerate(puzzles, 1):
            file_path = os.path.join(folder_path, f"{prefix}_{i}.txt")
            with open(file_path, "w") as f:
                f.write(puzzle.to_string())
                f.write("\n\nPretty format:\n")
                f.write(str(puzzle))
            paths.append(file_path)
        return paths
