from __future__ import annotations

import argparse
import json
from typing import Any, Dict, List, Optional

import numpy as np

from figsearch.bitmap import Bitmap
from figsearch.format import format_result
from figsearch.lines import LineRun, Orientation, longest_run
from figsearch.squares import Square, is_solid, largest_square


def brute_force_square_side(bitmap: Bitmap) -> int:
    best = 0
    for top in range(bitmap.height):
        for left in range(bitmap.width):
            side = best + 1
            while is_solid(bitmap, top, left, side):
                best = side
                side += 1
    return best


def _line_is_maximal(bitmap: Bitmap, run: LineRun) -> bool:
    if not all(bitmap.cell(p.x, p.y) for p in run.cells()):
        return False
    dx, dy = (0, 1) if run.orientation is Orientation.HORIZONTAL else (1, 0)
    before = (run.start.x - dx, run.start.y - dy)
    after = (run.end.x + dx, run.end.y + dy)
    for x, y in (before, after):
        if 0 <= x < bitmap.height and 0 <= y < bitmap.width and bitmap.cell(x, y):
            return False
    return True


def _check_square(bitmap: Bitmap, square: Optional[Square]) -> bool:
    expected = brute_force_square_side(bitmap)
    if square is None:
        return expected == 0
    return square.side == expected and is_solid(bitmap, square.top_left.x, square.top_left.y, square.side)


def run_sample(
    samples: int = 20,
    height: int = 16,
    width: int = 16,
    density: float = 0.7,
    seed: int = 0,
) -> Dict[str, Any]:
    rng = np.random.default_rng(seed)
    mismatches = 0
    details: List[Dict[str, Any]] = []

    for idx in range(samples):
        cells = (rng.random((height, width)) < density).astype(np.uint8)
        bitmap = Bitmap(cells)
        hline = longest_run(bitmap, Orientation.HORIZONTAL)
        vline = longest_run(bitmap, Orientation.VERTICAL)
        square = largest_square(bitmap)

        ok = _check_square(bitmap, square)
        for run in (hline, vline):
            if run is None:
                ok = ok and bitmap.count() == 0
            else:
                ok = ok and _line_is_maximal(bitmap, run)
        if not ok:
            mismatches += 1
        details.append(
            {
                "sample": idx,
                "ones": bitmap.count(),
                "hline": format_result(hline),
                "vline": format_result(vline),
                "square": format_result(square),
                "ok": ok,
            }
        )

    return {
        "num_samples": samples,
        "shape": [height, width],
        "density": density,
        "mismatches": mismatches,
        "details": details,
    }


def main(argv: Any = None) -> int:
    parser = argparse.ArgumentParser(description="Run figure searches on random bitmaps and cross-check them")
    parser.add_argument("--samples", type=int, default=20)
    parser.add_argument("--height", type=int, default=16)
    parser.add_argument("--width", type=int, default=16)
    parser.add_argument("--density", type=float, default=0.7)
    parser.add_argument("--seed", type=int, default=0)
    args = parser.parse_args(argv)

    summary = run_sample(
        samples=args.samples,
        height=args.height,
        width=args.width,
        density=args.density,
        seed=args.seed,
    )
    print(json.dumps(summary, indent=2))
    return 0 if summary["mismatches"] == 0 else 1


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
