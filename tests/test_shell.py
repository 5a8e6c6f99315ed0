"""Tests for the interactive menu, driven by scripted input."""

import pytest
from sudoku_game.core.board import SudokuBoard
from sudoku_game.game.shell import GameShell, MenuState
from sudoku_game.generator import SudokuGenerator


SOLVED = (
    "534678912"
    "672195348"
    "198342567"
    "859761423"
    "426853791"
    "713924856"
    "961537284"
    "287419635"
    "345286179"
)


class OneBlankGenerator(SudokuGenerator):
    """Always returns the same puzzle with only (0, 2) empty."""

    def generate_with_solution(self, difficulty=None):
        solution = SudokuBoard.from_string(SOLVED)
        puzzle = solution.copy()
        puzzle.clear(0, 2)
        return puzzle, solution


class ScriptedIO:
    """Feeds answers to prompts and records everything shown."""

    def __init__(self, answers):
        self.answers = list(answers)
        self.prompts = []
        self.output = []

    def input(self, prompt):
        self.prompts.append(prompt)
        if not self.answers:
            raise EOFError
        return self.answers.pop(0)

    def print(self, text=""):
        self.output.append(text)

    @property
    def text(self):
        return "\n".join(self.output)


def make_shell(answers, generator=None):
    io = ScriptedIO(answers)
    shell = GameShell(
        generator=generator or OneBlankGenerator(),
        input_fn=io.input,
        output_fn=io.print,
        clear_fn=lambda: None,
        pause_fn=lambda: None,
    )
    return shell, io


class TestMenu:
    """Tests for menu transitions."""

    def test_exit_from_main_menu(self):
        shell, io = make_shell(["4"])
        shell.run()
        assert shell.state is MenuState.EXIT
        assert io.output[-1] == "Thanks for playing! Goodbye."

    @pytest.mark.parametrize("choice, expected", [
        ("1", MenuState.PLAYING),
        ("2", MenuState.HOW_TO_PLAY),
        ("3", MenuState.ABOUT),
        ("4", MenuState.EXIT),
        ("9", MenuState.MAIN_MENU),
        ("abc", MenuState.MAIN_MENU),
    ])
    def test_main_menu_transitions(self, choice, expected):
        shell, io = make_shell([choice])
        assert shell.step(MenuState.MAIN_MENU) is expected

    def test_invalid_choice_message(self):
        shell, io = make_shell(["7", "4"])
        shell.run()
        assert "Invalid choice! Try again." in io.output

    def test_info_screens_return_to_menu(self):
        shell, io = make_shell(["2", "3", "4"])
        shell.run()
        assert "==== How to Play ====" in io.text
        assert "==== About ====" in io.text
        assert shell.state is MenuState.EXIT

    def test_welcome_waits_before_menu(self):
        events = []
        io = ScriptedIO(["4"])
        shell = GameShell(
            generator=OneBlankGenerator(),
            input_fn=io.input,
            output_fn=lambda text="": events.append(("print", text)),
            clear_fn=lambda: events.append(("clear", None)),
            pause_fn=lambda: events.append(("pause", None)),
        )
        shell.run()
        assert events[0] == ("print", "Welcome to Sudoku!\n")
        assert events[1] == ("pause", None)
        assert events[2] == ("clear", None)

    def test_default_pause_reads_a_line(self):
        io = ScriptedIO(["", "4"])
        shell = GameShell(generator=OneBlankGenerator(), input_fn=io.input,
                          output_fn=io.print, clear_fn=lambda: None)
        shell.run()
        assert io.prompts[0] == "Press Enter to continue..."
        assert shell.state is MenuState.EXIT

    def test_step_from_exit_stays_exit(self):
        shell, io = make_shell([])
        assert shell.step(MenuState.EXIT) is MenuState.EXIT
        assert io.prompts == []

    def test_how_to_play_text(self):
        shell, io = make_shell([])
        assert shell.step(MenuState.HOW_TO_PLAY) is MenuState.MAIN_MENU
        assert "well-posed puzzle has a single solution" in io.text
        assert "Latin square" in io.text

    def test_eof_exits(self):
        shell, io = make_shell([])
        shell.run()
        assert shell.state is MenuState.EXIT


class TestPlaying:
    """Tests for the play loop."""

    def test_solve_puzzle(self):
        # start, easy, row 1, column 3, value 4, then exit
        shell, io = make_shell(["1", "1", "1", "3", "4", "4"])
        shell.run()

        assert "Congratulations! You've solved the Sudoku puzzle!" in io.text
        assert shell.state is MenuState.EXIT
        assert shell.session is None

    def test_quit_sentinel_returns_to_menu(self):
        shell, io = make_shell(["1", "1", "0"])
        assert shell.step(MenuState.MAIN_MENU) is MenuState.PLAYING
        assert shell.step(MenuState.PLAYING) is MenuState.MAIN_MENU
        assert shell.session is None
        assert "Congratulations" not in io.text

    @pytest.mark.parametrize("answers", [["0"], ["1", "0"], ["1", "3", "0"]])
    def test_quit_at_any_prompt(self, answers):
        shell, io = make_shell(["1"] + answers)
        assert shell.step(MenuState.PLAYING) is MenuState.MAIN_MENU

    def test_occupied_cell_reprompts(self):
        shell, io = make_shell(["1", "1", "1", "1", "3", "4"])
        assert shell.step(MenuState.PLAYING) is MenuState.MAIN_MENU
        assert "Cell is already filled! Try another one." in io.output
        # the value prompt is skipped for the occupied cell
        assert sum(p.startswith("Enter value") for p in io.prompts) == 1

    def test_invalid_input_reprompts(self):
        shell, io = make_shell(["1", "12", "3", "1", "3", "x", "1", "3", "4"])
        assert shell.step(MenuState.PLAYING) is MenuState.MAIN_MENU
        assert io.output.count("Invalid input! Try again.") == 2
        assert "Congratulations! You've solved the Sudoku puzzle!" in io.text

    def test_wrong_value_keeps_playing(self):
        # 5 is wrong at (0, 2); the board is full but unsolved, so quit
        shell, io = make_shell(["1", "1", "3", "5", "0"])
        assert shell.step(MenuState.PLAYING) is MenuState.MAIN_MENU
        assert "Congratulations" not in io.text

    def test_invalid_difficulty_defaults_to_easy(self):
        shell, io = make_shell(["5", "0"], generator=SudokuGenerator(seed=4))
        assert shell.step(MenuState.PLAYING) is MenuState.MAIN_MENU
        assert "Invalid choice! Defaulting to Easy level." in io.output

    def test_board_rendered(self):
        shell, io = make_shell(["1", "0"])
        shell.step(MenuState.PLAYING)
        assert "1 | 5  3  . | 6  7  8 | 9  1  2 |" in io.text


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
