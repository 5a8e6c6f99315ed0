"""Validation utilities for Sudoku puzzles."""

from __future__ import annotations
import numpy as np
from typing import TYPE_CHECKING

from .board import BOARD_SIZE, BOX_SIZE

if TYPE_CHECKING:
    from .board import SudokuBoard

FULL_UNIT = set(range(1, BOARD_SIZE + 1))


def is_legal_placement(board: SudokuBoard, row: int, col: int, value: int) -> bool:
    """
    Check if placing a value at (row, col) respects the Sudoku rules.

    Only the current state of the board is consulted. A legal value can
    still be wrong with respect to the puzzle's answer key.

    Args:
        board: The puzzle board.
        row: Row index (0-based).
        col: Column index (0-based).
        value: Value to check (1 to 9).

    Returns:
        True if the value is absent from the row, column and box.
    """
    if value < 1 or value > BOARD_SIZE:
        return False

    return board.is_safe(row, col, value)


def is_solved(puzzle: SudokuBoard, solution: SudokuBoard) -> bool:
    """
    Check if every puzzle cell is filled and equals the answer key.

    Args:
        puzzle: The board the player is filling in.
        solution: The answer key.

    Returns:
        True if the puzzle matches the solution exactly.
    """
    if puzzle.count_empty() > 0:
        return False
    return bool(np.array_equal(puzzle.grid, solution.grid))


def is_valid_solution(board: SudokuBoard) -> bool:
    """
    Check that each row, column and box holds the values 1-9 exactly once.
    """
    for i in range(BOARD_SIZE):
        if set(board.get_row(i).tolist()) != FULL_UNIT:
            return False
        if set(board.get_col(i).tolist()) != FULL_UNIT:
            return False

    for box_row in range(0, BOARD_SIZE, BOX_SIZE):
        for box_col in range(0, BOARD_SIZE, BOX_SIZE):
            if set(board.get_box(box_row, box_col).tolist()) != FULL_UNIT:
                return False

    return True


def clues_match(puzzle: SudokuBoard, solution: SudokuBoard) -> bool:
    """True if every filled cell of the puzzle agrees with the solution."""
    filled = puzzle.grid != 0
    return bool(np.array_equal(puzzle.grid[filled], solution.grid[filled]))
