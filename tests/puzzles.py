"""Shared puzzles for the test modules."""

CANONICAL = [
    5, 3, 0, 0, 7, 0, 0, 0, 0,
    6, 0, 0, 1, 9, 5, 0, 0, 0,
    0, 9, 8, 0, 0, 0, 0, 6, 0,
    8, 0, 0, 0, 6, 0, 0, 0, 3,
    4, 0, 0, 8, 0, 3, 0, 0, 1,
    7, 0, 0, 0, 2, 0, 0, 0, 6,
    0, 6, 0, 0, 0, 0, 2, 8, 0,
    0, 0, 0, 4, 1, 9, 0, 0, 5,
    0, 0, 0, 0, 8, 0, 0, 7, 9,
]

CANONICAL_TEXT = (
    "530070000"
    "600195000"
    "098000060"
    "800060003"
    "400803001"
    "700020006"
    "060000280"
    "000419005"
    "000080079"
)

CANONICAL_SOLUTION = [
    5, 3, 4, 6, 7, 8, 9, 1, 2,
    6, 7, 2, 1, 9, 5, 3, 4, 8,
    1, 9, 8, 3, 4, 2, 5, 6, 7,
    8, 5, 9, 7, 6, 1, 4, 2, 3,
    4, 2, 6, 8, 5, 3, 7, 9, 1,
    7, 1, 3, 9, 2, 4, 8, 5, 6,
    9, 6, 1, 5, 3, 7, 2, 8, 4,
    2, 8, 7, 4, 1, 9, 6, 3, 5,
    3, 4, 5, 2, 8, 6, 1, 7, 9,
]

# Row 1 holds 1-8 and column 9 already has a 9, so the last cell of row 1
# has no candidate. The givens themselves do not conflict.
UNSOLVABLE = [1, 2, 3, 4, 5, 6, 7, 8, 0] + [0] * 8 + [9] + [0] * 63

DUPLICATE_IN_ROW = [5, 5] + [0] * 79


def nested(flat):
    return [list(flat[r * 9:(r + 1) * 9]) for r in range(9)]


def assert_valid_solution(case, cells):
    """Fail ``case`` unless ``cells`` is a complete grid with no repeated digit in any unit."""
    case.assertEqual(len(cells), 81)
    case.assertTrue(all(1 <= v <= 9 for v in cells))
    rows = nested(cells)
    digits = set(range(1, 10))
    for i in range(9):
        case.assertEqual(set(rows[i]), digits, f"row {i}")
        case.assertEqual({rows[r][i] for r in range(9)}, digits, f"column {i}")
    for br in range(3):
        for bc in range(3):
            box = {rows[br * 3 + r][bc * 3 + c] for r in range(3) for c in range(3)}
            case.assertEqual(box, digits, f"box {br},{bc}")
