"""Frame-pair motion pipeline and a command that tracks a pose over raw frames."""

from __future__ import annotations

import argparse
import dataclasses
import sys
from collections.abc import Iterable, Iterator

from slammer.keypoints import detect_keypoints
from slammer.optical_flow import lk_optical_flow
from slammer.pose import estimate_motion
from slammer.preprocessing import preprocess_image
from slammer.types import Frame, MotionEstimate, Point2D, Pose2D

DEFAULT_WIDTH = 128
DEFAULT_HEIGHT = 128


def process_frame_pair(prev: Frame, curr: Frame) -> MotionEstimate:
    """Estimate the camera motion between two consecutive frames."""
    width, height = curr.width, curr.height
    prev_pixels = preprocess_image(prev.data, width, height)
    curr_pixels = preprocess_image(curr.data, width, height)

    keypoints = detect_keypoints(prev_pixels, width, height)
    flows = lk_optical_flow(prev_pixels, curr_pixels, width, height, keypoints)
    pivot = Point2D(width / 2.0, height / 2.0)
    return estimate_motion(flows, pivot)


def track_poses(frames: Iterable[Frame]) -> Iterator[Pose2D]:
    """Yield the accumulated pose after each new frame."""
    iterator = iter(frames)
    prev = next(iterator, None)
    if prev is None:
        return
    pose = Pose2D()
    for curr in iterator:
        estimate = process_frame_pair(prev, curr)
        pose.update(estimate.dx, estimate.dy, estimate.dtheta)
        yield dataclasses.replace(pose)
        prev = curr


def format_pose(pose: Pose2D) -> str:
    """Render a pose as a single status line."""
    return f"Pose: x = {pose.x:.2f}, y = {pose.y:.2f}, theta = {pose.theta:.2f}"


def _split_frames(raw: bytes, width: int, height: int) -> Iterator[Frame]:
    size = width * height
    for offset in range(0, len(raw), size):
        yield Frame(raw[offset:offset + size], width, height)


def main(argv: list[str] | None = None) -> int:
    """Track the pose over a file of raw grayscale frames and print it."""
    parser = argparse.ArgumentParser(
        prog="slammer",
        description="Estimate planar motion from consecutive raw 8-bit grayscale frames.",
    )
    parser.add_argument("source", help="file of concatenated frames, or - for standard input")
    parser.add_argument("--width", type=int, default=DEFAULT_WIDTH)
    parser.add_argument("--height", type=int, default=DEFAULT_HEIGHT)
    args = parser.parse_args(argv)

    if args.width < 1 or args.height < 1:
        parser.error("frame dimensions must be positive")

    try:
        if args.source == "-":
            raw = sys.stdin.buffer.read()
        else:
            with open(args.source, "rb") as stream:
                raw = stream.read()
    except OSError as exc:
        print(f"slammer: {exc}", file=sys.stderr)
        return 1

    frame_size = args.width * args.height
    if len(raw) % frame_size:
        print(
            f"slammer: input length {len(raw)} is not a multiple of the frame size {frame_size}",
            file=sys.stderr,
        )
        return 1

    try:
        for pose in track_poses(_split_frames(raw, args.width, args.height)):
            print(format_pose(pose))
    except ValueError as exc:
        print(f"slammer: {exc}", file=sys.stderr)
        return 1
    return 0