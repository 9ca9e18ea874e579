"""Motion estimation from a set of flow vectors."""

from __future__ import annotations

import math
from collections.abc import Sequence

from slammer.types import FlowVector, MotionEstimate, Point2D


def _wrap(angle: float) -> float:
    if angle > math.pi:
        return angle - 2.0 * math.pi
    if angle < -math.pi:
        return angle + 2.0 * math.pi
    return angle


def estimate_motion(flows: Sequence[FlowVector], pivot: Point2D) -> MotionEstimate:
    """Average translation and rotation about ``pivot`` over all flows."""
    sum_dx = sum_dy = sum_dtheta = 0.0
    for flow in flows:
        sum_dx += flow.end.x - flow.start.x
        sum_dy += flow.end.y - flow.start.y
        before = math.atan2(flow.start.y - pivot.y, flow.start.x - pivot.x)
        after = math.atan2(flow.end.y - pivot.y, flow.end.x - pivot.x)
        sum_dtheta += _wrap(after - before)

    n = max(len(flows), 1)
    return MotionEstimate(sum_dx / n, sum_dy / n, sum_dtheta / n)