"""Core module for Sudoku board representation and validation."""

from .board import SudokuBoard, BOARD_SIZE, BOX_SIZE
from .errors import SudokuError, GenerationError
from .validator import is_legal_placement, is_solved, is_valid_solution, clues_match

__all__ = [
    "SudokuBoard",
    "BOARD_SIZE",
    "BOX_SIZE",
    "SudokuError",
    "GenerationError",
    "is_legal_placement",
    "is_solved",
    "is_valid_solution",
    "clues_match",
]
