from __future__ import annotations

import enum
import logging
from dataclasses import dataclass
from typing import Iterator, List, Optional

from .bitmap import Bitmap
from .errors import InvalidImage


class Orientation(enum.Enum):
    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"


@dataclass(frozen=True, order=True)
class Point:
    # x follows the row index, y the column index
    x: int
    y: int


@dataclass(frozen=True)
class LineRun:
    """Maximal run of 1-cells along one axis."""

    start: Point
    length: int
    orientation: Orientation

    @property
    def end(self) -> Point:
        if self.orientation is Orientation.HORIZONTAL:
            return Point(self.start.x, self.start.y + self.length - 1)
        return Point(self.start.x + self.length - 1, self.start.y)

    def cells(self) -> Iterator[Point]:
        for offset in range(self.length):
            if self.orientation is Orientation.HORIZONTAL:
                yield Point(self.start.x, self.start.y + offset)
            else:
                yield Point(self.start.x + offset, self.start.y)


def _require_image(bitmap: Bitmap) -> None:
    if bitmap is None or bitmap.is_empty:
        raise InvalidImage("Image is empty.")


def iter_runs(bitmap: Bitmap, orientation: Orientation) -> Iterator[LineRun]:
    """Yield every maximal run of 1-cells in scan order.

    Horizontal runs come row by row, left to right; vertical runs column by
    column, top to bottom.
    """
    _require_image(bitmap)
    horizontal = orientation is Orientation.HORIZONTAL
    if horizontal:
        outer, inner = bitmap.height, bitmap.width
    else:
        outer, inner = bitmap.width, bitmap.height
    cells = bitmap.cells

    for fixed in range(outer):
        lane = cells[fixed] if horizontal else cells[:, fixed]
        run_start = -1
        for pos in range(inner):
            if lane[pos]:
                if run_start < 0:
                    run_start = pos
                continue
            if run_start >= 0:
                yield _make_run(fixed, run_start, pos - run_start, orientation)
                run_start = -1
        if run_start >= 0:
            yield _make_run(fixed, run_start, inner - run_start, orientation)


def _make_run(fixed: int, start: int, length: int, orientation: Orientation) -> LineRun:
    if orientation is Orientation.HORIZONTAL:
        return LineRun(Point(fixed, start), length, orientation)
    return LineRun(Point(start, fixed), length, orientation)


def find_runs(bitmap: Bitmap, orientation: Orientation) -> List[LineRun]:
    return list(iter_runs(bitmap, orientation))


def longest_run(bitmap: Bitmap, orientation: Orientation) -> Optional[LineRun]:
    """Longest run on the given axis, or None if the bitmap has no 1-cell.

    Only a strictly longer run replaces the current best, so among runs of
    equal length the first one in scan order wins.
    """
    best: Optional[LineRun] = None
    for run in iter_runs(bitmap, orientation):
        if best is None or run.length > best.length:
            best = run
    if best is None:
        logging.debug("No %s line in %dx%d bitmap", orientation.value, bitmap.height, bitmap.width)
    else:
        logging.debug(
            "Longest %s line starts at (%d, %d) with length %d",
            orientation.value,
            best.start.x,
            best.start.y,
            best.length,
        )
    return best


def longest_hline(bitmap: Bitmap) -> Optional[LineRun]:
    return longest_run(bitmap, Orientation.HORIZONTAL)


def longest_vline(bitmap: Bitmap) -> Optional[LineRun]:
    return longest_run(bitmap, Orientation.VERTICAL)
