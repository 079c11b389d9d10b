"""9x9 Sudoku board with row, column and box presence tables."""

from __future__ import annotations
import numpy as np
from typing import List, Tuple, Optional

SIZE = 9
BOX_SIZE = 3
BLANK = 0


class InvalidBoardError(ValueError):
    """Raised when givens loaded into a board conflict with each other."""


class SudokuBoard:
    """
    Represents a standard 9x9 Sudoku board.

    Besides the grid itself the board keeps three presence tables
    (``rows_used``, ``cols_used``, ``boxes_used``), indexed by line and digit,
    so that legality of a digit at a cell is answered in constant time.
    All mutations go through :meth:`set_cell`, which updates the grid and
    the tables together.
    """

    size = SIZE
    box_size = BOX_SIZE

    def __init__(self, grid: Optional[np.ndarray] = None):
        """
        Initialize a Sudoku board.

        Args:
            grid: Optional initial grid of shape (9, 9). If None, creates
                  an empty board.

        Raises:
            ValueError: If the grid has the wrong shape or out-of-range values.
            InvalidBoardError: If two givens conflict.
        """
        self.grid = np.zeros((SIZE, SIZE), dtype=np.int32)
        # Column 0 of each table is unused so digits index directly.
        self.rows_used = np.zeros((SIZE, SIZE + 1), dtype=bool)
        self.cols_used = np.zeros((SIZE, SIZE + 1), dtype=bool)
        self.boxes_used = np.zeros((SIZE, SIZE + 1), dtype=bool)

        if grid is not None:
            grid = np.asarray(grid)
            if grid.shape != (SIZE, SIZE):
                raise ValueError(f"Grid shape must be ({SIZE}, {SIZE}), got {grid.shape}")
            for i in range(SIZE):
                for j in range(SIZE):
                    value = int(grid[i, j])
                    if value == BLANK:
                        continue
                    self._check_digit(value)
                    if not self.is_safe(i, j, value):
                        raise InvalidBoardError(
                            f"Digit {value} at ({i}, {j}) conflicts with an earlier given"
                        )
                    self.set_cell(i, j, value)

    def copy(self) -> SudokuBoard:
        """Create a deep copy of the board."""
        new_board = SudokuBoard()
        new_board.grid = self.grid.copy()
        new_board.rows_used = self.rows_used.copy()
        new_board.cols_used = self.cols_used.copy()
        new_board.boxes_used = self.boxes_used.copy()
        return new_board

    # ------------------------------------------------------------------
    # Constraint oracle
    # ------------------------------------------------------------------

    @staticmethod
    def box_index(row: int, col: int) -> int:
        """Get the box index (0 to 8) for a cell."""
        return (row // BOX_SIZE) * BOX_SIZE + (col // BOX_SIZE)

    def is_safe(self, row: int, col: int, digit: int) -> bool:
        """Check whether digit is absent from the row, column and box of (row, col)."""
        return not (
            self.rows_used[row, digit]
            or self.cols_used[col, digit]
            or self.boxes_used[self.box_index(row, col), digit]
        )

    def set_cell(self, row: int, col: int, digit: int, place: bool = True) -> None:
        """
        Place or remove a digit, keeping the presence tables in sync.

        Args:
            row, col: Cell position.
            digit: Digit 1-9. When removing, this must be the digit currently
                   in the cell so that the right presence flags are cleared.
            place: True to write the digit, False to blank the cell.
        """
        self._check_cell(row, col)
        self._check_digit(digit)
        self.grid[row, col] = digit if place else BLANK
        self.rows_used[row, digit] = place
        self.cols_used[col, digit] = place
        self.boxes_used[self.box_index(row, col), digit] = place

    def find_blank(self) -> Optional[Tuple[int, int]]:
        """Return the first blank cell in row-major order, or None if the grid is full."""
        blanks = np.flatnonzero(self.grid == BLANK)
        if blanks.size == 0:
            return None
        return divmod(int(blanks[0]), SIZE)

    @staticmethod
    def _check_cell(row: int, col: int) -> None:
        if not (0 <= row < SIZE and 0 <= col < SIZE):
            raise ValueError(f"Cell ({row}, {col}) is outside the {SIZE}x{SIZE} grid")

    @staticmethod
    def _check_digit(digit: int) -> None:
        if digit < 1 or digit > SIZE:
            raise ValueError(f"Digit must be 1-{SIZE}, got {digit}")

    # ------------------------------------------------------------------
    # Read-only queries
    # ------------------------------------------------------------------

    def get(self, row: int, col: int) -> int:
        """Get value at position (row, col). 0 means empty."""
        return int(self.grid[row, col])

    def is_empty(self, row: int, col: int) -> bool:
        """Check if cell is empty (value is 0)."""
        return self.grid[row, col] == BLANK

    def get_row(self, row: int) -> np.ndarray:
        """Get all values in a row."""
        return self.grid[row, :]

    def get_col(self, col: int) -> np.ndarray:
        """Get all values in a column."""
        return self.grid[:, col]

    def get_box(self, row: int, col: int) -> np.ndarray:
        """Get all values in the box containing (row, col)."""
        box_row = (row // BOX_SIZE) * BOX_SIZE
        box_col = (col // BOX_SIZE) * BOX_SIZE
        return self.grid[box_row:box_row + BOX_SIZE,
                         box_col:box_col + BOX_SIZE].flatten()

    def count_empty(self) -> int:
        """Count the number of empty cells."""
        return int(np.sum(self.grid == BLANK))

    def count_filled(self) -> int:
        """Count the number of filled cells."""
        return int(np.sum(self.grid != BLANK))

    def is_complete(self) -> bool:
        """Check if all cells are filled."""
        return self.count_empty() == 0

    def is_valid(self) -> bool:
        """
        Check if the current grid has no duplicate digit in any row, column or box.
        Does not check if the solution is complete.
        """
        for i in range(SIZE):
            for unit in (self.get_row(i), self.get_col(i),
                         self.get_box((i // BOX_SIZE) * BOX_SIZE, (i % BOX_SIZE) * BOX_SIZE)):
                non_zero = unit[unit != BLANK]
                if len(non_zero) != len(set(non_zero.tolist())):
                    return False
        return True

    def is_solved(self) -> bool:
        """Check if the puzzle is completely and correctly solved."""
        return self.is_complete() and self.is_valid()

    def presence_consistent(self) -> bool:
        """Recompute the presence tables from the grid and compare with the stored ones."""
        rows = np.zeros_like(self.rows_used)
        cols = np.zeros_like(self.cols_used)
        boxes = np.zeros_like(self.boxes_used)
        for i in range(SIZE):
            for j in range(SIZE):
                value = self.grid[i, j]
                if value != BLANK:
                    rows[i, value] = True
                    cols[j, value] = True
                    boxes[self.box_index(i, j), value] = True
        return (np.array_equal(rows, self.rows_used)
                and np.array_equal(cols, self.cols_used)
                and np.array_equal(boxes, self.boxes_used))

    # ------------------------------------------------------------------
    # Conversion
    # ------------------------------------------------------------------

    def export_grid(self) -> List[int]:
        """Row-major flattening of the grid as 81 plain ints."""
        return [int(v) for v in self.grid.flatten()]

    def to_string(self) -> str:
        """Convert board to an 81-character string, 0 for empty cells."""
        return ''.join(str(v) for v in self.export_grid())

    @classmethod
    def from_string(cls, s: str) -> SudokuBoard:
        """
        Create a board from a string representation.

        Args:
            s: String of length 81. 0 or . for empty, 1-9 for values.
        """
        if len(s) != SIZE * SIZE:
            raise ValueError(f"String length must be {SIZE * SIZE}, got {len(s)}")

        grid = np.zeros((SIZE, SIZE), dtype=np.int32)
        for idx, c in enumerate(s):
            if c == '.':
                continue
            if not c.isdigit():
                raise ValueError(f"Invalid character {c!r} at position {idx}")
            grid[idx // SIZE, idx % SIZE] = int(c)

        return cls(grid)

    @classmethod
    def from_2d_list(cls, data: List[List[int]]) -> SudokuBoard:
        """Create a board from a 2D list."""
        return cls(np.array(data, dtype=np.int32))

    def __str__(self) -> str:
        """Pretty-print the board."""
        lines = []
        horizontal_sep = '+' + (('-' * (BOX_SIZE * 2 + 1)) + '+') * BOX_SIZE

        for i in range(SIZE):
            if i % BOX_SIZE == 0:
                lines.append(horizontal_sep)

            row_str = '|'
            for j in range(SIZE):
                val = self.grid[i, j]
                row_str += ' .' if val == BLANK else f' {val}'
                if (j + 1) % BOX_SIZE == 0:
                    row_str += ' |'

            lines.append(row_str)

        lines.append(horizontal_sep)
        return '\n'.join(lines)

    def __repr__(self) -> str:
        return f"SudokuBoard(filled={self.count_filled()})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SudokuBoard):
            return False
        return np.array_equal(self.grid, other.grid)

    def __hash__(self) -> int:
        return hash(self.to_string())
