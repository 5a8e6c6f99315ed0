"""Generator module for creating Sudoku puzzles."""

from .generator import SudokuGenerator, Difficulty, generate_puzzle

__all__ = ["SudokuGenerator", "Difficulty", "generate_puzzle"]
