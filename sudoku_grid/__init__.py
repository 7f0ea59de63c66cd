"""
Sudoku Grid - puzzle representation and backtracking solver

This package contains modules for:
- The 9x9 grid, its row/column/box checks and the in-place search
- Consistency checks on given digits and a copy-and-solve wrapper
- Parsing puzzles from text and formatting boards
- A small command line front end
"""

from .grid import Grid, InvalidCell
from .solver import find_conflicts, solve_puzzle
from .board_io import format_board, parse_board, read_board

__version__ = "1.0.0"

__all__ = [
    'Grid',
    'InvalidCell',
    'find_conflicts',
    'solve_puzzle',
    'format_board',
    'parse_board',
    'read_board',
]
