"""FAST-style corner detection on a grayscale image."""

from __future__ import annotations

from collections.abc import Sequence
from itertools import groupby

from slammer.types import Point2D

THRESHOLD = 50
CONTIGUOUS = 12
GRID_STEP = 2

# Bresenham circle of radius 3, clockwise from the top.
_CIRCLE = (
    (0, -3), (1, -3), (2, -2), (3, -1),
    (3, 0), (3, 1), (2, 2), (1, 3),
    (0, 3), (-1, 3), (-2, 2), (-3, 1),
    (-3, 0), (-3, -1), (-2, -2), (-1, -3),
)


def _is_corner(data: Sequence[int], width: int, x: int, y: int) -> bool:
    centre = data[y * width + x]
    high = min(centre + THRESHOLD, 255)
    low = max(centre - THRESHOLD, 0)

    def classify(pixel: int) -> int:
        if pixel > high:
            return 1
        if pixel < low:
            return -1
        return 0

    ring = [classify(data[(y + dy) * width + x + dx]) for dx, dy in _CIRCLE]
    return any(
        label != 0 and sum(1 for _ in run) >= CONTIGUOUS
        for label, run in groupby(ring * 2)
    )


def detect_keypoints(data: Sequence[int], width: int, height: int) -> list[Point2D]:
    """Return corners found on a grid of every second pixel."""
    if height < 3:
        raise ValueError(f"image height must be at least 3, got {height}")
    rows = range(3, height - 3, GRID_STEP)
    if len(rows) > 0:
        if width < 3:
            raise ValueError(f"image width must be at least 3, got {width}")
        if len(data) < width * height:
            raise ValueError(f"expected at least {width * height} bytes, got {len(data)}")

    return [
        Point2D(float(x), float(y))
        for y in rows
        for x in range(3, width - 3, GRID_STEP)
        if _is_corner(data, width, x, y)
    ]