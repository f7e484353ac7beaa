from __future__ import annotations

from typing import List, Optional, Sequence, Tuple

import numpy as np

from .errors import OutOfRange, ShapeMismatch


# Grid represented as list of rows, each row a list of 0/1 ints
Grid = List[List[int]]


class Bitmap:
    """Rectangular grid of binary cells.

    Cells live in a single read-only ``uint8`` array of shape
    ``(height, width)``; the constructor copies its input, so a Bitmap never
    changes after it is built and can be shared between readers.
    """

    __slots__ = ("_cells",)

    def __init__(self, cells: np.ndarray) -> None:
        try:
            arr = np.asarray(cells)
        except ValueError as exc:
            raise ShapeMismatch(f"bitmap rows are ragged: {exc}") from None
        if arr.ndim != 2:
            raise ShapeMismatch(f"bitmap must be 2-dimensional, got {arr.ndim} dimension(s)")
        # checked on the raw values so 0.5 or 1.9 are not truncated into 0/1
        if arr.size and not np.isin(arr, (0, 1)).all():
            raise ShapeMismatch("bitmap cells must be 0 or 1")
        data = arr.astype(np.uint8)
        data.flags.writeable = False
        self._cells = data

    @classmethod
    def from_rows(
        cls,
        rows: Sequence[Sequence[int]],
        height: Optional[int] = None,
        width: Optional[int] = None,
    ) -> "Bitmap":
        """Build from row-major rows, checked against declared dimensions if given."""
        if height is not None and len(rows) != height:
            raise ShapeMismatch(f"expected {height} rows, got {len(rows)}")
        if width is None:
            width = len(rows[0]) if rows else 0
        for r, row in enumerate(rows):
            if len(row) != width:
                raise ShapeMismatch(f"row {r} has {len(row)} cells, expected {width}")
        if not rows:
            return cls(np.zeros((0, width), dtype=np.uint8))
        return cls(np.asarray(rows))

    @classmethod
    def from_values(cls, height: int, width: int, values: Sequence[int]) -> "Bitmap":
        if height < 0 or width < 0:
            raise ShapeMismatch(f"negative dimensions {height}x{width}")
        if len(values) != height * width:
            raise ShapeMismatch(f"expected {height * width} values for {height}x{width}, got {len(values)}")
        return cls(np.asarray(values, dtype=np.int64).reshape(height, width))

    @property
    def height(self) -> int:
        return self._cells.shape[0]

    @property
    def width(self) -> int:
        return self._cells.shape[1]

    @property
    def shape(self) -> Tuple[int, int]:
        return self.height, self.width

    @property
    def is_empty(self) -> bool:
        return self.height == 0 or self.width == 0

    @property
    def cells(self) -> np.ndarray:
        return self._cells

    def cell(self, row: int, col: int) -> int:
        if not (0 <= row < self.height and 0 <= col < self.width):
            raise OutOfRange(row, col, self.height, self.width)
        return int(self._cells[row, col])

    def row(self, index: int) -> np.ndarray:
        if not 0 <= index < self.height:
            raise OutOfRange(index, None, self.height, self.width)
        return self._cells[index]

    def column(self, index: int) -> np.ndarray:
        if not 0 <= index < self.width:
            raise OutOfRange(None, index, self.height, self.width)
        return self._cells[:, index]

    def to_rows(self) -> Grid:
        return self._cells.astype(int).tolist()

    def count(self) -> int:
        return int(self._cells.sum())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Bitmap):
            return NotImplemented
        return self.shape == other.shape and bool(np.array_equal(self._cells, other._cells))

    def __hash__(self) -> int:
        return hash((self.shape, self._cells.tobytes()))

    def __repr__(self) -> str:
        return f"Bitmap(height={self.height}, width={self.width})"
