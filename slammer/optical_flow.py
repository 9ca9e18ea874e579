"""Single-step Lucas-Kanade optical flow."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from slammer.types import FlowVector, Point2D

WINDOW_RADIUS = 1
_MIN_DETERMINANT = 1e-6


def lk_optical_flow(
    prev: Sequence[int],
    curr: Sequence[int],
    width: int,
    height: int,
    points: Iterable[Point2D],
) -> list[FlowVector]:
    """Track each point from ``prev`` to ``curr``.

    Points too close to the border or in textureless regions are dropped.
    """
    window = range(-WINDOW_RADIUS, WINDOW_RADIUS + 1)
    tracked = []

    for point in points:
        x = int(point.x)
        y = int(point.y)
        if (
            x <= WINDOW_RADIUS
            or y <= WINDOW_RADIUS
            or x >= width - WINDOW_RADIUS
            or y >= height - WINDOW_RADIUS
        ):
            continue

        sum_gx2 = sum_gy2 = sum_gxgy = sum_gxit = sum_gyit = 0.0
        for j in window:
            for i in window:
                idx = (y + j) * width + x + i
                gx = (prev[idx + 1] - prev[idx - 1]) / 2.0
                gy = (prev[idx + width] - prev[idx - width]) / 2.0
                it = float(curr[idx] - prev[idx])

                sum_gx2 += gx * gx
                sum_gy2 += gy * gy
                sum_gxgy += gx * gy
                sum_gxit += gx * it
                sum_gyit += gy * it

        det = sum_gx2 * sum_gy2 - sum_gxgy * sum_gxgy
        if abs(det) < _MIN_DETERMINANT:
            continue

        u = (-sum_gy2 * sum_gxit + sum_gxgy * sum_gyit) / det
        v = (sum_gxgy * sum_gxit - sum_gx2 * sum_gyit) / det
        tracked.append(FlowVector(point, Point2D(point.x + u, point.y + v)))

    return tracked