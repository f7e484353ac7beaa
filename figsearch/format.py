from __future__ import annotations

from typing import Optional, Tuple, Union

from .lines import LineRun
from .squares import Square


NOT_FOUND = "Not found"
INVALID = "Invalid"
VALID = "Valid"

Coordinates = Tuple[int, int, int, int]
Figure = Union[LineRun, Square]


def line_coordinates(run: Optional[LineRun]) -> Optional[Coordinates]:
    if run is None:
        return None
    end = run.end
    return run.start.x, run.start.y, end.x, end.y


def square_coordinates(square: Optional[Square]) -> Optional[Coordinates]:
    if square is None:
        return None
    return square.top_left.x, square.top_left.y, square.bottom_right.x, square.bottom_right.y


def _join(coords: Optional[Coordinates]) -> str:
    if coords is None:
        return NOT_FOUND
    return " ".join(str(v) for v in coords)


def format_line(run: Optional[LineRun]) -> str:
    return _join(line_coordinates(run))


def format_square(square: Optional[Square]) -> str:
    return _join(square_coordinates(square))


def format_result(result: Optional[Figure]) -> str:
    """Render a found figure as ``x1 y1 x2 y2``, or ``Not found``."""
    if result is None:
        return NOT_FOUND
    if isinstance(result, LineRun):
        return format_line(result)
    if isinstance(result, Square):
        return format_square(result)
    raise TypeError(f"cannot format {type(result).__name__}")
