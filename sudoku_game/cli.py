"""Command-line interface for the Sudoku game."""

import argparse
import json
import logging
import sys

from .generator import SudokuGenerator, Difficulty
from .game import GameShell
from .game.shell import clear_screen


def build_parser() -> argparse.ArgumentParser:
    # Accepted before or after the subcommand
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        "--verbose", "-v", action="store_true", default=argparse.SUPPRESS,
        help="Enable debug logging"
    )

    parser = argparse.ArgumentParser(
        parents=[common],
        description="Terminal Sudoku: play generated puzzles or export them",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Play in the terminal
  python -m sudoku_game.cli play

  # Generate 5 hard puzzles with their solutions as JSON
  python -m sudoku_game.cli generate --count 5 --difficulty hard --output puzzles.json
        """
    )
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Play command
    play_parser = subparsers.add_parser("play", parents=[common], help="Play Sudoku interactively")
    play_parser.add_argument(
        "--seed", "-s", type=int, default=None,
        help="Random seed for reproducible games"
    )
    play_parser.add_argument(
        "--no-clear", action="store_true",
        help="Do not clear the screen between displays"
    )

    # Generate command
    gen_parser = subparsers.add_parser("generate", parents=[common], help="Generate Sudoku puzzles")
    gen_parser.add_argument(
        "--count", "-n", type=int, default=5,
        help="Number of puzzles to generate per difficulty (default: 5)"
    )
    gen_parser.add_argument(
        "--difficulty", "-d",
        choices=["easy", "medium", "hard", "all"],
        default="medium",
        help="Difficulty level (default: medium)"
    )
    gen_parser.add_argument(
        "--output", "-o", type=str, default=None,
        help="Output file for puzzles (JSON format)"
    )
    gen_parser.add_argument(
        "--seed", "-s", type=int, default=None,
        help="Random seed for reproducibility"
    )

    parser.set_defaults(seed=None, no_clear=False)
    return parser


def main(argv=None):
    """Main entry point for the CLI."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if getattr(args, "verbose", False) else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s: %(message)s",
    )

    if args.command is None or args.command == "play":
        return cmd_play(args)
    elif args.command == "generate":
        return cmd_generate(args)


def cmd_play(args):
    """Handle the play command."""
    shell = GameShell(
        generator=SudokuGenerator(seed=args.seed),
        clear_fn=(lambda: None) if args.no_clear else clear_screen,
    )
    shell.run()
    return 0


def cmd_generate(args):
    """Handle the generate command."""
    generator = SudokuGenerator(seed=args.seed)

    if args.difficulty == "all":
        difficulties = list(Difficulty)
    else:
        difficulties = [Difficulty(args.difficulty)]

    records = []
    for difficulty in difficulties:
        pairs = generator.generate_batch(args.count, difficulty, show_progress=True)

        for i, (puzzle, solution) in enumerate(pairs, 1):
            records.append({
                "difficulty": difficulty.value,
                "index": i,
                "puzzle": puzzle.to_string(),
                "solution": solution.to_string(),
                "empty_cells": puzzle.count_empty(),
            })

            print(f"\n--- {difficulty.value.capitalize()} Puzzle {i} ({puzzle.count_empty()} empty cells) ---")
            print(puzzle)

    if args.output:
        with open(args.output, "w") as f:
            json.dump(records, f, indent=2)
        print(f"\nAll puzzles saved to {args.output}")

    print(f"\nTotal puzzles generated: {len(records)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
