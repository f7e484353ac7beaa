from __future__ import annotations

import logging
import re
from typing import List

from .bitmap import Bitmap
from .errors import InvalidImage


# ASCII decimal digits with an optional leading minus
_INTEGER = re.compile(r"-?[0-9]+")


def _to_int(token: str, what: str) -> int:
    if not _INTEGER.fullmatch(token):
        raise InvalidImage(f"{what} is not an integer: {token!r}")
    return int(token)


def parse_bitmap(text: str) -> Bitmap:
    """Parse the bitmap text format.

    The text holds whitespace-separated integers: height and width (both
    positive), then height * width cells, each 0 or 1, in row-major order.
    Line breaks carry no meaning.
    """
    tokens = text.split()
    if len(tokens) < 2:
        raise InvalidImage("missing bitmap dimensions")
    height = _to_int(tokens[0], "height")
    width = _to_int(tokens[1], "width")
    if height <= 0 or width <= 0:
        raise InvalidImage(f"dimensions must be positive, got {height}x{width}")

    values: List[int] = []
    for i, token in enumerate(tokens[2:]):
        value = _to_int(token, f"cell {i}")
        if value not in (0, 1):
            raise InvalidImage(f"cell {i} is {value}, expected 0 or 1")
        values.append(value)
    if len(values) != height * width:
        raise InvalidImage(f"expected {height * width} cells for {height}x{width}, got {len(values)}")

    logging.debug("Parsed %dx%d bitmap", height, width)
    return Bitmap.from_values(height, width, values)


def load_bitmap(path: str) -> Bitmap:
    """Load a bitmap file; any unreadable or malformed file raises InvalidImage."""
    try:
        with open(path, "r", encoding="utf-8") as f:
            text = f.read()
    except (OSError, UnicodeDecodeError) as exc:
        logging.info("Cannot read %s: %s", path, exc)
        raise InvalidImage(f"cannot read {path}: {exc}") from exc
    try:
        return parse_bitmap(text)
    except InvalidImage as exc:
        logging.info("Rejected %s: %s", path, exc)
        raise


def validate_file(path: str) -> bool:
    try:
        load_bitmap(path)
    except InvalidImage:
        return False
    return True
