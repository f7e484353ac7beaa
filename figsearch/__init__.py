"""Figure search over binary bitmaps.

Modules:
- bitmap: immutable 0/1 grid with bounds-checked access
- lines: longest horizontal / vertical run of 1-cells
- squares: largest solid square of 1-cells
- format: coordinate output for found figures
- io: bitmap file loader and validator
- cli: command-line entrypoint
"""

from .errors import FigsearchError, InvalidImage, OutOfRange, ShapeMismatch
from .bitmap import Bitmap
from .lines import LineRun, Orientation, Point, find_runs, longest_run
from .squares import Square, largest_square
from .format import format_result
from .io import load_bitmap, parse_bitmap, validate_file

__all__ = [
    "Bitmap",
    "FigsearchError",
    "InvalidImage",
    "OutOfRange",
    "ShapeMismatch",
    "LineRun",
    "Orientation",
    "Point",
    "find_runs",
    "longest_run",
    "Square",
    "largest_square",
    "format_result",
    "load_bitmap",
    "parse_bitmap",
    "validate_file",
]
