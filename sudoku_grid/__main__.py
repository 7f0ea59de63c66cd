"""
Entry point for running the sudoku_grid package.

Usage:
    python -m sudoku_grid 530070000600195000...
    python -m sudoku_grid --file puzzle.txt
"""

import sys

from .cli import main

if __name__ == '__main__':
    sys.exit(main())
