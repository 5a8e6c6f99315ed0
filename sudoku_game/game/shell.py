"""Interactive menu and play loop, written as a small state machine."""

from __future__ import annotations
import logging
import os
import sys
from enum import Enum
from typing import Callable, Dict, Optional

from ..generator import SudokuGenerator, Difficulty
from .moves import MoveOutcome, MoveResult, QUIT_SENTINEL, check_target, parse_coordinate
from .session import GameSession

log = logging.getLogger(__name__)

HOW_TO_PLAY_TEXT = """==== How to Play ====

Sudoku is a logic-based, combinatorial number-placement puzzle.

The objective is to fill a 9x9 grid with digits so that each column, each row, and each of the nine 3x3 subgrids that compose the grid contain all of the digits from 1 to 9.

The puzzle setter provides a partially completed grid, which for a well-posed puzzle has a single solution.
Completed puzzles are always a type of Latin square with an additional constraint on the contents of individual regions.

Enter a row, then a column, then the value to place. Enter 0 at any prompt to go back to the main menu.

For more information, visit: https://en.wikipedia.org/wiki/Sudoku
"""

ABOUT_TEXT = """==== About ====

Terminal Sudoku generates a fresh puzzle for every game by filling a
complete grid with randomized backtracking and clearing cells from it.
Easy, Medium and Hard clear 13, 29 and 41 cells.
"""

MAIN_MENU_TEXT = """==== Main Menu ====

1. Start Game
2. How to Play
3. About
4. Exit
"""

DIFFICULTY_MENU_TEXT = """Choose difficulty level:
1. Easy
2. Medium
3. Hard"""


class MenuState(Enum):
    """Screens of the interactive game."""
    MAIN_MENU = "main_menu"
    HOW_TO_PLAY = "how_to_play"
    ABOUT = "about"
    PLAYING = "playing"
    EXIT = "exit"


def clear_screen() -> None:
    """Clear the terminal when attached to one."""
    if sys.stdout.isatty():
        os.system("cls" if os.name == "nt" else "clear")


class GameShell:
    """
    Runs the menu and play loop.

    Each state has a handler that does its screen's I/O and returns the
    next state. The game session is created on entering PLAYING and
    dropped when play ends.
    """

    def __init__(
        self,
        generator: Optional[SudokuGenerator] = None,
        input_fn: Optional[Callable[[str], str]] = None,
        output_fn: Optional[Callable[[str], None]] = None,
        clear_fn: Callable[[], None] = clear_screen,
        pause_fn: Optional[Callable[[], None]] = None,
    ):
        """
        Initialize the shell.

        Args:
            generator: Generator shared by every game (seed it for repeatable games).
            input_fn: Reads one line after showing a prompt. Defaults to input().
            output_fn: Writes text to the player. Defaults to print().
            clear_fn: Clears the screen between displays.
            pause_fn: Waits for the player to continue. Defaults to an
                      Enter prompt through input_fn.
        """
        self.generator = generator or SudokuGenerator()
        self.input_fn = input_fn or input
        self.output_fn = output_fn or print
        self.clear_fn = clear_fn
        self.pause_fn = pause_fn or self._press_enter
        self.session: Optional[GameSession] = None
        self.state = MenuState.MAIN_MENU

        self.handlers: Dict[MenuState, Callable[[], MenuState]] = {
            MenuState.MAIN_MENU: self.main_menu,
            MenuState.HOW_TO_PLAY: self.how_to_play,
            MenuState.ABOUT: self.about,
            MenuState.PLAYING: self.play,
        }

    def _press_enter(self) -> None:
        self.input_fn("Press Enter to continue...")

    def run(self) -> None:
        """Loop through states until EXIT."""
        self.output_fn("Welcome to Sudoku!\n")
        try:
            self.pause_fn()
        except EOFError:
            self.state = MenuState.EXIT
        while self.state is not MenuState.EXIT:
            self.state = self.step(self.state)
        self.output_fn("Thanks for playing! Goodbye.")

    def step(self, state: MenuState) -> MenuState:
        """Run the handler for one state and return the next state."""
        if state is MenuState.EXIT:
            return state
        try:
            next_state = self.handlers[state]()
        except EOFError:
            log.debug("Input closed in state %s", state.value)
            return MenuState.EXIT
        log.debug("Transition %s -> %s", state.value, next_state.value)
        return next_state

    def main_menu(self) -> MenuState:
        self.clear_fn()
        self.output_fn(MAIN_MENU_TEXT)
        choice = parse_coordinate(self.input_fn("Your choice: "))

        transitions = {
            1: MenuState.PLAYING,
            2: MenuState.HOW_TO_PLAY,
            3: MenuState.ABOUT,
            4: MenuState.EXIT,
        }
        if choice in transitions:
            return transitions[choice]

        self.output_fn("Invalid choice! Try again.")
        self.pause_fn()
        return MenuState.MAIN_MENU

    def how_to_play(self) -> MenuState:
        self.clear_fn()
        self.output_fn(HOW_TO_PLAY_TEXT)
        self.pause_fn()
        return MenuState.MAIN_MENU

    def about(self) -> MenuState:
        self.clear_fn()
        self.output_fn(ABOUT_TEXT)
        self.pause_fn()
        return MenuState.MAIN_MENU

    def choose_difficulty(self) -> Difficulty:
        self.clear_fn()
        self.output_fn(DIFFICULTY_MENU_TEXT)
        choice = parse_coordinate(self.input_fn("Your choice: "))
        if choice not in (1, 2, 3):
            self.output_fn("Invalid choice! Defaulting to Easy level.")
        return Difficulty.from_menu_choice(choice)

    def read_move(self) -> MoveResult:
        """
        Prompt for row, column and value.

        The target cell is checked before the value is asked for. Returns
        a PLACED result holding the three numbers when the move can be
        applied; anything else is the reason it cannot.
        """
        row = parse_coordinate(self.input_fn("\nEnter row (1-9) (or 0 to quit): "))
        if row == QUIT_SENTINEL:
            return MoveResult(MoveOutcome.QUIT_REQUESTED)

        col = parse_coordinate(self.input_fn("Enter column (1-9) (or 0 to quit): "))
        if col == QUIT_SENTINEL:
            return MoveResult(MoveOutcome.QUIT_REQUESTED)

        target = check_target(self.session.puzzle, row, col)
        if not target.ok:
            return target

        value = parse_coordinate(self.input_fn("Enter value (1-9) (or 0 to quit): "))
        if value == QUIT_SENTINEL:
            return MoveResult(MoveOutcome.QUIT_REQUESTED)

        return MoveResult(MoveOutcome.PLACED, row, col, value)

    def play(self) -> MenuState:
        """Play one game until it is solved or the player quits."""
        difficulty = self.choose_difficulty()
        self.session = GameSession(difficulty, self.generator)

        try:
            while not self.session.is_solved():
                self.clear_fn()
                self.output_fn(self.session.render())

                move = self.read_move()
                if move.outcome is MoveOutcome.QUIT_REQUESTED:
                    log.info("Game abandoned with %d empty cells",
                             self.session.empty_cells_remaining)
                    return MenuState.MAIN_MENU

                if move.ok:
                    move = self.session.apply_move(move.row, move.col, move.value)
                if not move.ok:
                    self.output_fn(move.message)
                    self.pause_fn()

            self.clear_fn()
            self.output_fn(self.session.render())
            self.output_fn("\n\nCongratulations! You've solved the Sudoku puzzle!\n\n")
            log.info("Game solved in %d moves", self.session.moves_made)
            self.pause_fn()
            return MenuState.MAIN_MENU
        finally:
            self.session = None
