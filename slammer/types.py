"""Plain value types shared by the motion pipeline."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Point2D:
    """A point in image coordinates."""

    x: float
    y: float


@dataclass(frozen=True)
class FlowVector:
    """Displacement of one tracked point between two frames."""

    start: Point2D
    end: Point2D


@dataclass(frozen=True)
class MotionEstimate:
    """Average translation and rotation between two frames."""

    dx: float
    dy: float
    dtheta: float


@dataclass
class Pose2D:
    """Accumulated planar pose."""

    x: float = 0.0
    y: float = 0.0
    theta: float = 0.0

    def update(self, dx: float, dy: float, dtheta: float) -> None:
        """Add an incremental motion to the pose."""
        self.x += dx
        self.y += dy
        self.theta += dtheta


@dataclass(frozen=True)
class Frame:
    """A grayscale image stored row by row, one byte per pixel."""

    data: bytes
    width: int
    height: int