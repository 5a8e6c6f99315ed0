"""Terminal Sudoku: puzzle generator, validator and interactive game."""

__version__ = "1.0.0"
