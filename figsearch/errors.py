from __future__ import annotations

from typing import Optional


class FigsearchError(Exception):
    """Base class for every error raised by figsearch."""


class InvalidImage(FigsearchError):
    """Empty bitmap handed to a scanner, or malformed bitmap input."""


class OutOfRange(FigsearchError, IndexError):
    """Index outside the bitmap.

    ``row`` or ``col`` is None when a whole column or row was requested.
    """

    def __init__(self, row: Optional[int], col: Optional[int], height: int, width: int) -> None:
        if col is None:
            where = f"row {row}"
        elif row is None:
            where = f"column {col}"
        else:
            where = f"cell ({row}, {col})"
        super().__init__(f"{where} outside {height}x{width} bitmap")
        self.row = row
        self.col = col


class ShapeMismatch(FigsearchError, ValueError):
    """Rows do not match the declared dimensions, or a cell is not 0/1."""
