"""A single game: the puzzle being played and its answer key."""

from __future__ import annotations
import logging
from typing import Optional

from ..core.validator import is_legal_placement, is_solved
from ..generator import SudokuGenerator, Difficulty
from .moves import MoveResult, apply_move, in_range

log = logging.getLogger(__name__)


class GameSession:
    """
    Owns the two grids of one game.

    The solution is generated once per session (or restart) and is never
    modified; the puzzle is carved from it and then edited by moves.
    """

    def __init__(self, difficulty: Difficulty = Difficulty.EASY,
                 generator: Optional[SudokuGenerator] = None):
        self.difficulty = difficulty
        self.generator = generator or SudokuGenerator()
        self.moves_made = 0
        self.puzzle, self.solution = self.generator.generate_with_solution(difficulty)
        log.info("Started %s game with %d empty cells", difficulty.value, self.empty_cells_remaining)

    def restart(self, difficulty: Optional[Difficulty] = None) -> None:
        """Discard both grids and generate a new game."""
        if difficulty is not None:
            self.difficulty = difficulty
        self.moves_made = 0
        self.puzzle, self.solution = self.generator.generate_with_solution(self.difficulty)
        log.info("Restarted %s game", self.difficulty.value)

    @property
    def empty_cells_remaining(self) -> int:
        return self.puzzle.count_empty()

    def apply_move(self, row: int, col: int, value: int) -> MoveResult:
        """Place a value at 1-based (row, col). See moves.apply_move."""
        result = apply_move(self.puzzle, row, col, value)
        if result.ok:
            self.moves_made += 1
            log.debug("Move %d: %d at (%d, %d)", self.moves_made, value, row, col)
        return result

    def is_legal_placement(self, row: int, col: int, value: int) -> bool:
        """Rule check for 1-based (row, col) against the current puzzle."""
        if not (in_range(row) and in_range(col)):
            return False
        return is_legal_placement(self.puzzle, row - 1, col - 1, value)

    def is_solved(self) -> bool:
        return is_solved(self.puzzle, self.solution)

    def render(self) -> str:
        return self.puzzle.render()
