from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterator, Optional

import numpy as np

from .bitmap import Bitmap
from .errors import InvalidImage
from .lines import Point


@dataclass(frozen=True)
class Square:
    top_left: Point
    bottom_right: Point

    def __post_init__(self) -> None:
        dx = self.bottom_right.x - self.top_left.x
        dy = self.bottom_right.y - self.top_left.y
        if dx != dy or dx < 0:
            raise ValueError(f"not a square: {self.top_left} .. {self.bottom_right}")

    @property
    def side(self) -> int:
        return self.bottom_right.x - self.top_left.x + 1

    def cells(self) -> Iterator[Point]:
        for x in range(self.top_left.x, self.bottom_right.x + 1):
            for y in range(self.top_left.y, self.bottom_right.y + 1):
                yield Point(x, y)


def is_solid(bitmap: Bitmap, top: int, left: int, side: int) -> bool:
    """True if the side x side block at (top, left) lies inside the bitmap and is all 1."""
    if side < 1 or top < 0 or left < 0:
        return False
    if top + side > bitmap.height or left + side > bitmap.width:
        return False
    return bool(bitmap.cells[top : top + side, left : left + side].all())


def largest_square(bitmap: Bitmap) -> Optional[Square]:
    """Find the largest axis-aligned square made only of 1-cells.

    Dynamic programming over bottom-right corners: the side of the largest
    solid square ending at (r, c) is 0 for a 0-cell, otherwise one more than
    the smallest of its up, left and up-left neighbours. A single row buffer
    is rolled down the bitmap; ``buf[c + 1]`` holds the value for column c
    and ``buf[0]`` stays 0 as the left border.

    Among squares of the maximal side the one whose top-left corner comes
    first in row-major order is returned. None if the bitmap has no 1-cell.
    """
    if bitmap is None or bitmap.is_empty:
        raise InvalidImage("Image is empty.")

    cells = bitmap.cells
    height, width = bitmap.shape
    buf = np.zeros(width + 1, dtype=np.int64)

    best_side = 0
    best_top = best_left = -1
    for r in range(height):
        row = cells[r]
        up_left = 0
        for c in range(width):
            up = int(buf[c + 1])
            if row[c]:
                side = 1 + min(up_left, up, int(buf[c]))
            else:
                side = 0
            buf[c + 1] = side
            up_left = up

            # equal sides keep the earlier corner, whose top-left is also earlier
            if side > best_side:
                best_side, best_top, best_left = side, r - side + 1, c - side + 1

    if best_side == 0:
        logging.debug("No square in %dx%d bitmap", height, width)
        return None
    logging.debug("Largest square at (%d, %d) with side %d", best_top, best_left, best_side)
    return Square(
        Point(best_top, best_left),
        Point(best_top + best_side - 1, best_left + best_side - 1),
    )
