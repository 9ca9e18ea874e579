import dataclasses

import pytest

from slammer.types import FlowVector, Frame, MotionEstimate, Point2D, Pose2D


def test_pose_starts_at_origin():
    pose = Pose2D()
    assert (pose.x, pose.y, pose.theta) == (0.0, 0.0, 0.0)


def test_pose_update_accumulates():
    pose = Pose2D()
    pose.update(1.0, 2.0, 0.5)
    pose.update(-0.5, 1.0, 0.25)
    assert pose.x == pytest.approx(0.5)
    assert pose.y == pytest.approx(3.0)
    assert pose.theta == pytest.approx(0.75)


def test_pose_update_with_zero_keeps_values():
    pose = Pose2D(3.0, -4.0, 1.5)
    pose.update(0.0, 0.0, 0.0)
    assert pose == Pose2D(3.0, -4.0, 1.5)


def test_point_is_immutable():
    point = Point2D(1.0, 2.0)
    with pytest.raises(dataclasses.FrozenInstanceError):
        point.x = 5.0  # type: ignore[misc]
    assert (point.x, point.y) == (1.0, 2.0)
    assert point == Point2D(1.0, 2.0)


def test_flow_vector_holds_endpoints():
    flow = FlowVector(Point2D(1.0, 2.0), Point2D(3.0, 4.0))
    assert flow.end.x - flow.start.x == 2.0
    assert flow.end.y - flow.start.y == 2.0


def test_frame_equality_by_value():
    first = Frame(bytes([1, 2, 3, 4]), 2, 2)
    second = Frame(bytes([1, 2, 3, 4]), 2, 2)
    assert first == second
    assert first != Frame(bytes([1, 2, 3, 5]), 2, 2)


def test_motion_estimate_fields():
    estimate = MotionEstimate(0.5, -0.25, 0.125)
    assert (estimate.dx, estimate.dy, estimate.dtheta) == (0.5, -0.25, 0.125)