"""
Convenience wrappers around the grid search with basic safety checks.
"""

import numpy as np

from .grid import Grid


def _as_grid(board) -> Grid:
    if isinstance(board, Grid):
        return board
    if np.ndim(board) == 2:
        return Grid.from_nested(board)
    return Grid.from_flat(board)


def find_conflicts(board) -> list[str]:
    """
    Check a puzzle for duplicate givens in its rows, columns and blocks.

    Args:
        board: A Grid, a flat sequence of 81 cells or 9 rows of 9 cells

    Returns:
        Notes describing each duplicate, empty when the givens are consistent

    Raises:
        InvalidCell: If a raw board holds values outside 0..9
    """
    return _as_grid(board).conflicts()


def solve_puzzle(board) -> tuple[Grid | None, str]:
    """
    Return a solved copy of the board, or (None, reason) if unsolvable or invalid.

    The board passed in is never modified.
    """
    grid = _as_grid(board)

    conflicts = grid.conflicts()
    if conflicts:
        return None, "; ".join(conflicts)

    working = grid.copy()
    working.solve()
    if working.is_solved:
        return working, f"Solved in {working.steps} steps"
    return None, "No solution found"
