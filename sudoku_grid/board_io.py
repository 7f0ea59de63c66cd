"""
Reading puzzles from text and rendering boards for people.
"""

from .grid import BLANK, BOX, CELLS, Grid, InvalidCell

_IGNORED = set(" \t\r\n|-+")
_BLANK_CHARS = set("0._")
_DIGITS = set("123456789")


def parse_board(text: str) -> Grid:
    """
    Parse a puzzle written as 81 cell characters.

    Digits 1-9 are givens; '0', '.' and '_' are blanks. Whitespace and the
    box separators drawn by format_board ('|', '-', '+') are skipped, so a
    formatted board parses back to the same grid.

    Raises:
        InvalidCell: On any other character or a cell count other than 81
    """
    values = []
    for ch in text:
        if ch in _IGNORED:
            continue
        if ch in _BLANK_CHARS:
            values.append(BLANK)
        elif ch in _DIGITS:
            values.append(int(ch))
        else:
            raise InvalidCell()

    if len(values) != CELLS:
        raise InvalidCell()
    return Grid.from_flat(values)


def read_board(path: str) -> Grid:
    """
    Read a puzzle file written in any layout parse_board accepts.

    Raises:
        OSError: If the file cannot be opened
        InvalidCell: If the file is not UTF-8 text or does not hold a puzzle
    """
    try:
        with open(path, encoding="utf-8") as fh:
            text = fh.read()
    except UnicodeDecodeError as exc:
        raise InvalidCell() from exc
    return parse_board(text)


def _band_line(row: list[int]) -> str:
    cells = ["." if v == BLANK else str(v) for v in row]
    boxes = [" ".join(cells[i:i + BOX]) for i in range(0, len(cells), BOX)]
    return " | ".join(boxes)


def format_board(grid: Grid) -> str:
    """Render the board in three row bands, with boxes split by '|' and dashed rules."""
    rows = grid.rows()
    bands = []
    for start in range(0, len(rows), BOX):
        bands.append([_band_line(row) for row in rows[start:start + BOX]])

    rule = "-" * len(bands[0][0])
    return ("\n" + rule + "\n").join("\n".join(band) for band in bands)
