import re
from dataclasses import dataclass
from typing import Optional

# Column part of a token: optionally signed decimal digits, nothing else.
COLUMN_RE = re.compile(r"[+-]?\d+")


@dataclass(frozen=True)
class Coordinate:
    """Zero-based (row, col) grid position. Range is checked by the field, not here."""

    row: int
    col: int


def parse_coordinate(token: str) -> Optional[Coordinate]:
    """
    Convert a token like 'B5' into a Coordinate, or None when it cannot be parsed.

    The row letter is taken as-is (case-sensitive): 'a1' yields row 32, which
    the field later rejects as out of range.
    """
    if token is None or len(token) not in (2, 3) or not token[0].isalpha():
        return None
    col_digits = token[1:]
    if not COLUMN_RE.fullmatch(col_digits):
        return None
    row = ord(token[0]) - ord("A")
    col = int(col_digits) - 1
    return Coordinate(row, col)


def format_coord(row: int, col: int) -> str:
    """Label a zero-based cell the way players type it: (0, 0) -> "A1"."""
    return f"{chr(ord('A') + row)}{col + 1}"
