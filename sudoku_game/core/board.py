"""Sudoku board representation for the standard 9x9 game."""

from __future__ import annotations
import numpy as np
from typing import List, Tuple, Optional

BOARD_SIZE = 9
BOX_SIZE = 3


class SudokuBoard:
    """
    Represents a 9x9 Sudoku board.

    Cells hold 0 (empty) or a value from 1 to 9. Rows and columns are
    0-based internally; the rendered board labels them 1 to 9.
    """

    size = BOARD_SIZE
    box_size = BOX_SIZE

    def __init__(self, grid: Optional[np.ndarray] = None):
        """
        Initialize a Sudoku board.

        Args:
            grid: Optional initial 9x9 grid. If None, creates an empty board.
        """
        if grid is not None:
            grid = np.asarray(grid)
            if grid.shape != (BOARD_SIZE, BOARD_SIZE):
                raise ValueError(f"Grid shape must be ({BOARD_SIZE}, {BOARD_SIZE})")
            if grid.min() < 0 or grid.max() > BOARD_SIZE:
                raise ValueError(f"Grid values must be 0-{BOARD_SIZE}")
            self.grid = grid.copy().astype(np.int32)
        else:
            self.grid = np.zeros((BOARD_SIZE, BOARD_SIZE), dtype=np.int32)

    def copy(self) -> SudokuBoard:
        """Create a deep copy of the board."""
        new_board = SudokuBoard()
        new_board.grid = self.grid.copy()
        return new_board

    def get(self, row: int, col: int) -> int:
        """Get value at position (row, col). 0 means empty."""
        return int(self.grid[row, col])

    def set(self, row: int, col: int, value: int) -> None:
        """Set value at position (row, col). Use 0 to clear."""
        if value < 0 or value > BOARD_SIZE:
            raise ValueError(f"Value must be 0-{BOARD_SIZE}, got {value}")
        self.grid[row, col] = value

    def clear(self, row: int, col: int) -> None:
        """Clear the cell at position (row, col)."""
        self.grid[row, col] = 0

    def is_empty(self, row: int, col: int) -> bool:
        """Check if cell is empty (value is 0)."""
        return bool(self.grid[row, col] == 0)

    def get_row(self, row: int) -> np.ndarray:
        """Get all values in a row."""
        return self.grid[row, :]

    def get_col(self, col: int) -> np.ndarray:
        """Get all values in a column."""
        return self.grid[:, col]

    @staticmethod
    def box_start(row: int, col: int) -> Tuple[int, int]:
        """Top-left corner of the box containing (row, col)."""
        return row - row % BOX_SIZE, col - col % BOX_SIZE

    def get_box(self, row: int, col: int) -> np.ndarray:
        """Get all values in the box containing (row, col)."""
        box_row, box_col = self.box_start(row, col)
        return self.grid[box_row:box_row + BOX_SIZE,
                         box_col:box_col + BOX_SIZE].flatten()

    def row_safe(self, row: int, value: int) -> bool:
        """True if value does not appear in the row."""
        return value not in self.grid[row, :]

    def col_safe(self, col: int, value: int) -> bool:
        """True if value does not appear in the column."""
        return value not in self.grid[:, col]

    def box_safe(self, box_row_start: int, box_col_start: int, value: int) -> bool:
        """True if value does not appear in the box whose corner is given."""
        box = self.grid[box_row_start:box_row_start + BOX_SIZE,
                        box_col_start:box_col_start + BOX_SIZE]
        return value not in box

    def is_safe(self, row: int, col: int, value: int) -> bool:
        """
        Check if value is absent from the row, column and box of (row, col).

        The cell itself is included in the check, so call this before
        setting the value.
        """
        box_row, box_col = self.box_start(row, col)
        return (self.row_safe(row, value)
                and self.col_safe(col, value)
                and self.box_safe(box_row, box_col, value))

    def get_empty_cells(self) -> List[Tuple[int, int]]:
        """Get list of all empty cell positions in row-major order."""
        rows, cols = np.nonzero(self.grid == 0)
        return [(int(r), int(c)) for r, c in zip(rows, cols)]

    def count_empty(self) -> int:
        """Count the number of empty cells."""
        return int(np.sum(self.grid == 0))

    def count_filled(self) -> int:
        """Count the number of filled cells."""
        return int(np.sum(self.grid != 0))

    def is_complete(self) -> bool:
        """Check if all cells are filled."""
        return self.count_empty() == 0

    def to_string(self) -> str:
        """Convert board to an 81-character string, 0 for empty cells."""
        return ''.join(str(v) for v in self.grid.flatten())

    @classmethod
    def from_string(cls, s: str) -> SudokuBoard:
        """
        Create a board from a string representation.

        Args:
            s: String of 81 characters. 0 or . for empty, 1-9 for values.
        """
        cells = BOARD_SIZE * BOARD_SIZE
        if len(s) != cells:
            raise ValueError(f"String length must be {cells}, got {len(s)}")

        values = []
        for c in s:
            if c == '.':
                values.append(0)
            elif c.isdigit():
                values.append(int(c))
            else:
                raise ValueError(f"Invalid cell character: {c!r}")

        return cls(np.array(values, dtype=np.int32).reshape(BOARD_SIZE, BOARD_SIZE))

    @classmethod
    def from_2d_list(cls, data: List[List[int]]) -> SudokuBoard:
        """Create a board from a 2D list."""
        return cls(np.array(data, dtype=np.int32))

    def render(self) -> str:
        """
        Render the board with 1-based X/Y headers.

        Columns are labelled along the top (X) and rows down the side (Y);
        boxes are separated with | and dash lines, empty cells shown as '.'.
        """
        dashes = '--' * (BOARD_SIZE + 2 * BOX_SIZE)

        header = '  X'
        for i in range(1, BOARD_SIZE + 1):
            header += f' {i} '
            if i % BOX_SIZE == 0:
                header += ' '
        lines = [header, 'Y  ' + dashes]

        for i in range(BOARD_SIZE):
            row_str = f'{i + 1} '
            for j in range(BOARD_SIZE):
                if j % BOX_SIZE == 0:
                    row_str += '|'
                val = self.grid[i, j]
                row_str += ' . ' if val == 0 else f' {val} '
            row_str += '|'
            lines.append(row_str)

            if (i + 1) % BOX_SIZE == 0:
                lines.append('   ' + dashes)

        return '\n'.join(lines)

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"SudokuBoard(filled={self.count_filled()})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SudokuBoard):
            return False
        return np.array_equal(self.grid, other.grid)

    def __hash__(self) -> int:
        return hash(self.to_string())
