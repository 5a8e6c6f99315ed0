"""Exceptions raised by the Sudoku core."""


class SudokuError(Exception):
    """Base class for all errors raised by this package."""


class GenerationError(SudokuError):
    """Raised when the generator cannot produce a complete grid."""
