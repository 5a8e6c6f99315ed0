"""Player moves and their outcomes."""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from ..core.board import SudokuBoard, BOARD_SIZE

QUIT_SENTINEL = 0


class MoveOutcome(Enum):
    """Result of trying to place a value on the puzzle."""
    PLACED = "placed"
    INVALID_COORDINATE = "invalid_coordinate"
    CELL_OCCUPIED = "cell_occupied"
    QUIT_REQUESTED = "quit_requested"


@dataclass
class MoveResult:
    """Outcome of a move, with the 1-based coordinates it concerned."""
    outcome: MoveOutcome
    row: Optional[int] = None
    col: Optional[int] = None
    value: Optional[int] = None

    @property
    def ok(self) -> bool:
        return self.outcome is MoveOutcome.PLACED

    @property
    def message(self) -> str:
        """Text shown to the player when a move is refused."""
        messages = {
            MoveOutcome.INVALID_COORDINATE: "Invalid input! Try again.",
            MoveOutcome.CELL_OCCUPIED: "Cell is already filled! Try another one.",
            MoveOutcome.QUIT_REQUESTED: "Returning to the main menu.",
        }
        return messages.get(self.outcome, "")


def in_range(n: Optional[int]) -> bool:
    """True if n is a usable 1-based row, column or value."""
    return n is not None and 1 <= n <= BOARD_SIZE


def parse_coordinate(text: str) -> Optional[int]:
    """
    Parse a number typed by the player.

    Returns None if the text is not an integer.
    """
    try:
        return int(text.strip())
    except ValueError:
        return None


def check_target(puzzle: SudokuBoard, row: int, col: int) -> MoveResult:
    """
    Check that 1-based (row, col) is on the board and empty.

    Returns a PLACED result when the cell can take a value.
    """
    if not in_range(row) or not in_range(col):
        return MoveResult(MoveOutcome.INVALID_COORDINATE, row, col)
    if not puzzle.is_empty(row - 1, col - 1):
        return MoveResult(MoveOutcome.CELL_OCCUPIED, row, col)
    return MoveResult(MoveOutcome.PLACED, row, col)


def apply_move(puzzle: SudokuBoard, row: int, col: int, value: int) -> MoveResult:
    """
    Write value into the empty cell at 1-based (row, col).

    Sudoku rules are not enforced here: any value from 1 to 9 may go in
    an empty cell. The puzzle is only modified when the outcome is PLACED.

    Args:
        puzzle: The board the player is filling in.
        row: Row number, 1 to 9.
        col: Column number, 1 to 9.
        value: Value to place, 1 to 9.
    """
    if not in_range(value):
        return MoveResult(MoveOutcome.INVALID_COORDINATE, row, col, value)

    result = check_target(puzzle, row, col)
    if not result.ok:
        result.value = value
        return result

    puzzle.set(row - 1, col - 1, value)
    return MoveResult(MoveOutcome.PLACED, row, col, value)
