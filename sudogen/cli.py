"""Command-line interface for the Sudoku generator."""

import argparse
import json
import logging
import sys

from .core.board import SudokuBoard
from .core.validator import count_solutions, solve
from .generator import SudokuGenerator

log = logging.getLogger(__name__)


def main(argv=None):
    """Main entry point for the CLI."""
    parser = argparse.ArgumentParser(
        description="Sudoku Grid Generator & Unique-Solution Puzzle Carver",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Generate 5 puzzles with 45 blank cells
  sudogen generate --count 5 --holes 45

  # Reproducible puzzle written to JSON
  sudogen generate --seed 42 --output puzzles.json

  # Check whether a puzzle has a unique solution
  sudogen solve --puzzle "0030206..."
        """
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Generate command
    gen_parser = subparsers.add_parser("generate", help="Generate Sudoku puzzles")
    gen_parser.add_argument(
        "--count", "-n", type=int, default=1,
        help="Number of puzzles to generate (default: 1)"
    )
    gen_parser.add_argument(
        "--holes", "-k", type=int, default=40,
        help="Number of cells to blank in each puzzle (default: 40)"
    )
    gen_parser.add_argument(
        "--seed", "-s", type=int, default=None,
        help="Random seed for reproducibility"
    )
    gen_parser.add_argument(
        "--output", "-o", type=str, default=None,
        help="Output file for puzzles (JSON format)"
    )
    gen_parser.add_argument(
        "--folder", type=str, default=None,
        help="Also save each puzzle as a text file in this directory"
    )
    gen_parser.add_argument(
        "--show-solution", action="store_true",
        help="Print the solution under each puzzle"
    )
    gen_parser.add_argument(
        "--verbose", "-v", action="store_true",
        help="Enable debug logging"
    )

    # Solve command
    solve_parser = subparsers.add_parser("solve", help="Solve a puzzle and check uniqueness")
    solve_parser.add_argument(
        "--puzzle", "-p", type=str, required=True,
        help="Puzzle string (81 chars, 0 or . for empty cells)"
    )
    solve_parser.add_argument(
        "--verbose", "-v", action="store_true",
        help="Enable debug logging"
    )

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(1)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.command == "generate":
        cmd_generate(args)
    elif args.command == "solve":
        cmd_solve(args)


def cmd_generate(args):
    """Handle the generate command."""
    if args.count < 1:
        print(f"Error: --count must be at least 1, got {args.count}")
        sys.exit(1)

    generator = SudokuGenerator(seed=args.seed)

    print(f"Generating {args.count} puzzle(s) with {args.holes} holes...")
    pairs = generator.generate_batch(args.count, args.holes, show_progress=args.count > 1)

    all_puzzles = []
    for i, (puzzle, solution) in enumerate(pairs, 1):
        holes = puzzle.count_empty()
        if holes < args.holes:
            log.warning("Puzzle %d has %d holes, fewer than the %d requested", i, holes, args.holes)

        all_puzzles.append({
            "index": i,
            "puzzle": puzzle.to_string(),
            "solution": solution.to_string(),
            "holes": holes,
            "clues": puzzle.count_filled(),
        })

        print(f"\n--- Puzzle {i} ({puzzle.count_filled()} clues) ---")
        print(puzzle)
        if args.show_solution:
            print("Solution:")
            print(solution)

    if args.folder:
        SudokuGenerator.save_to_folder([p for p, _ in pairs], args.folder)
        print(f"\nPuzzles saved individually in the '{args.folder}/' directory")

    if args.output:
        with open(args.output, "w") as f:
            json.dump(all_puzzles, f, indent=2)
        print(f"\nAll puzzles saved to {args.output}")

    print(f"\nTotal puzzles generated: {len(all_puzzles)}")
    return all_puzzles


def cmd_solve(args):
    """Handle the solve command."""
    try:
        board = SudokuBoard.from_string(args.puzzle)
    except ValueError as e:
        print(f"Error parsing puzzle: {e}")
        sys.exit(1)

    print("Input puzzle:")
    print(board)
    print()

    solutions = count_solutions(board, limit=2)
    if solutions == 0:
        print("✗ No solution")
        return None

    print("✓ Unique solution" if solutions == 1 else "✗ Multiple solutions")
    solution = solve(board)
    print(solution)
    return solution


if __name__ == "__main__":
    main()
