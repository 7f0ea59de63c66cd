"""
Sudoku Grid - command line entry point.
"""

import argparse
import logging

from .board_io import format_board, parse_board, read_board
from .grid import InvalidCell
from .solver import solve_puzzle


def main(argv=None) -> int:
    """
    Solve a puzzle given on the command line or in a file.

    Returns:
        int: Exit status, 0 when a solution was found
    """
    parser = argparse.ArgumentParser(
        prog='sudoku-grid',
        description='Sudoku Grid - backtracking Sudoku solver',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  Solve a puzzle written inline (0, . or _ for blanks):
    sudoku-grid 530070000600195000098000060800060003400803001700020006060000280000419005000080079

  Solve a puzzle stored in a file, showing search progress:
    sudoku-grid --file puzzle.txt -vv
        """
    )

    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument('puzzle', nargs='?',
                        help='Puzzle as 81 cell characters')
    source.add_argument('--file', '-f',
                        help='Path to a text file holding the puzzle')
    parser.add_argument('--plain', action='store_true',
                        help='Print the bare grid instead of the boxed board')
    parser.add_argument('--verbose', '-v', action='count', default=0,
                        help='Log solver progress (-vv for every placement)')

    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(
            level=logging.DEBUG if args.verbose > 1 else logging.INFO,
            format='%(levelname)s %(name)s: %(message)s',
        )

    try:
        grid = read_board(args.file) if args.file else parse_board(args.puzzle)
    except OSError as e:
        print(f"Error: Could not read puzzle from {args.file}: {e}")
        return 1
    except InvalidCell as e:
        print(f"Error: {e}")
        return 1

    def render(g):
        return str(g).rstrip("\n") if args.plain else format_board(g)

    print(f"Puzzle ({81 - grid.blanks()} givens):")
    print(render(grid))

    solution, message = solve_puzzle(grid)
    if solution is None:
        print(f"✗ Could not solve: {message}")
        return 1

    print(f"\n✓ Solved puzzle ({message}):")
    print(render(solution))
    return 0
