"""
Sudoku grid representation and in-place backtracking search.

The grid owns 81 cells stored row-major in a flat numpy array, so cell
``(column, row)`` lives at index ``row * 9 + column``. A cell holds 0 for a
blank or a placed digit 1-9.
"""

import logging

import numpy as np

log = logging.getLogger(__name__)

SIZE = 9
BOX = 3
CELLS = SIZE * SIZE
BLANK = 0


class InvalidCell(ValueError):
    """Raised when a grid is built from values that are not cells in 0..9."""

    def __init__(self, message: str = "There are invalid cells in the given sudoku."):
        super().__init__(message)


def _to_cells(values, shape: tuple[int, ...]) -> np.ndarray:
    if isinstance(values, Grid):
        values = values.cells()
    try:
        arr = np.asarray(values)
    except (TypeError, ValueError) as exc:
        # ragged nested input
        raise InvalidCell() from exc

    if arr.shape != shape:
        raise InvalidCell()
    if arr.dtype == np.bool_ or not np.issubdtype(arr.dtype, np.integer):
        raise InvalidCell()
    if np.any(arr < BLANK) or np.any(arr > SIZE):
        raise InvalidCell()

    return arr.astype(np.uint8).reshape(CELLS)


def _duplicates(unit: np.ndarray, label: str) -> list[str]:
    values, counts = np.unique(unit[unit != BLANK], return_counts=True)
    return [f"{label} has duplicate given digit {int(v)}" for v in values[counts > 1]]


class Grid:
    """
    A 9x9 Sudoku puzzle together with its solver.

    The search mutates the grid in place: candidates are written into blank
    cells and reset to blank when backtracking. ``is_solved`` is set only when
    the search reaches the end of the grid, and ``steps`` counts the candidate
    placements made by the last search.
    """

    def __init__(self, cells=None):
        """
        Args:
            cells: Optional flat sequence of 81 integers in 0..9. When omitted
                the grid starts out empty.

        Raises:
            InvalidCell: If any value is outside 0..9 or the input is not
                81 integers.
        """
        if cells is None:
            self._cells = np.zeros(CELLS, dtype=np.uint8)
        else:
            self._cells = _to_cells(cells, (CELLS,))
        self.is_solved = False
        self.steps = 0

    @classmethod
    def empty(cls) -> "Grid":
        return cls()

    @classmethod
    def from_flat(cls, values) -> "Grid":
        """Build a grid from 81 integers listed row by row."""
        return cls(_to_cells(values, (CELLS,)))

    @classmethod
    def from_nested(cls, rows) -> "Grid":
        """Build a grid from 9 rows of 9 integers; row r, column c maps to r*9 + c."""
        return cls(_to_cells(rows, (SIZE, SIZE)))

    def copy(self) -> "Grid":
        other = Grid(self._cells.copy())
        other.is_solved = self.is_solved
        other.steps = self.steps
        return other

    @property
    def _board(self) -> np.ndarray:
        # 9x9 view sharing storage with the flat cells
        return self._cells.reshape(SIZE, SIZE)

    # ------------------------------------------------------------------
    # Accessors

    def cells(self) -> list[int]:
        return [int(v) for v in self._cells]

    def rows(self) -> list[list[int]]:
        return [[int(v) for v in row] for row in self._board]

    def blanks(self) -> int:
        """Number of cells still holding 0."""
        return int(np.count_nonzero(self._cells == BLANK))

    def __getitem__(self, key):
        """
        Read one cell by linear index ``0..80`` or by ``(x, y)``, i.e.
        (column, row) in the same order as ``coordinates`` and ``is_valid``.

        Raises:
            IndexError: If the index or either coordinate is out of range
        """
        if isinstance(key, tuple):
            x, y = key
            if not (0 <= x < SIZE and 0 <= y < SIZE):
                raise IndexError(f"cell {key} is outside the grid")
            key = y * SIZE + x
        if not 0 <= key < CELLS:
            raise IndexError(f"cell {key} is outside the grid")
        return int(self._cells[key])

    def __iter__(self):
        return iter(self.cells())

    def __len__(self) -> int:
        return CELLS

    # ------------------------------------------------------------------
    # Constraint checks

    def is_row_valid(self, number: int, row: int) -> bool:
        return number not in self._board[row, :]

    def is_column_valid(self, number: int, col: int) -> bool:
        return number not in self._board[:, col]

    def is_box_valid(self, number: int, coords: tuple[int, int]) -> bool:
        x, y = coords
        c0 = (x // BOX) * BOX
        r0 = (y // BOX) * BOX
        return number not in self._board[r0:r0 + BOX, c0:c0 + BOX]

    def is_valid(self, number: int, coords: tuple[int, int]) -> bool:
        """Check whether ``number`` may be placed at ``(x, y)`` given the current cells."""
        x, y = coords
        return (
            self.is_row_valid(number, y)
            and self.is_column_valid(number, x)
            and self.is_box_valid(number, coords)
        )

    @staticmethod
    def coordinates(index: int) -> tuple[int, int]:
        """Map a linear cell index to its ``(column, row)`` pair."""
        return index % SIZE, index // SIZE

    def conflicts(self) -> list[str]:
        """
        List rows, columns and 3x3 boxes in which a given digit appears twice.

        Returns:
            One note per duplicated digit per unit, empty when the givens agree.
        """
        board = self._board
        notes: list[str] = []
        for i in range(SIZE):
            notes.extend(_duplicates(board[i, :], f"Row {i + 1}"))
            notes.extend(_duplicates(board[:, i], f"Column {i + 1}"))

        for br in range(BOX):
            for bc in range(BOX):
                block = board[br * BOX:(br + 1) * BOX, bc * BOX:(bc + 1) * BOX].ravel()
                notes.extend(_duplicates(block, f"3x3 block ({br + 1},{bc + 1})"))

        return notes

    # ------------------------------------------------------------------
    # Search

    def solve(self) -> None:
        """
        Fill every blank cell in place using recursive backtracking.

        Cells are visited in index order and candidates tried from 1 to 9, so
        the first solution in that order is the one kept. A grid whose givens
        already conflict is left untouched. Check ``is_solved`` afterwards: an
        unsolvable puzzle does not raise, it just comes back with its blank
        cells still blank.
        """
        if self.is_solved:
            log.debug("Grid already solved, nothing to do")
            return

        conflicts = self.conflicts()
        if conflicts:
            log.warning("Not searching, givens conflict: %s", "; ".join(conflicts))
            return

        self.steps = 0
        log.info("Solving grid with %d blank cells", self.blanks())
        self._search(0)

        if self.is_solved:
            log.info("Solved in %d steps", self.steps)
        else:
            log.info("No solution found after %d steps", self.steps)

    def _search(self, index: int) -> None:
        if self.is_solved:
            return

        if index == CELLS:
            self.is_solved = True
            return

        if self._cells[index] != BLANK:
            self._search(index + 1)
            return

        coords = self.coordinates(index)
        for number in range(1, SIZE + 1):
            if self.is_valid(number, coords):
                self._cells[index] = number
                self.steps += 1
                log.debug("Placed %d at %s", number, coords)

                self._search(index + 1)
                if self.is_solved:
                    return

        self._cells[index] = BLANK

    # ------------------------------------------------------------------
    # Comparison and rendering

    def __eq__(self, other):
        if isinstance(other, Grid):
            return bool(np.array_equal(self._cells, other._cells))
        try:
            arr = np.asarray(other)
        except (TypeError, ValueError):
            return NotImplemented

        if arr.shape == (SIZE, SIZE):
            arr = arr.reshape(CELLS)
        if arr.shape != (CELLS,):
            return NotImplemented
        if not np.issubdtype(arr.dtype, np.integer):
            return False
        return bool(np.array_equal(self._cells, arr))

    __hash__ = None

    def __str__(self) -> str:
        lines = []
        for row in self._board:
            line = " ".join(str(v) if v != BLANK else "_" for v in row)
            lines.append(line + "\n")
        return "".join(lines)

    def __repr__(self) -> str:
        return "<Grid %s>" % "".join(str(v) for v in self._cells)
