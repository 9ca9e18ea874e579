# slammer

This package estimates planar motion from pairs of 8-bit grayscale frames.

For each pair of consecutive frames, slammer does four things:

1. It passes the images through `preprocess_image`. This currently leaves the pixels unchanged. A 3x3 mean filter, `box_blur`, is also provided. It keeps the one-pixel border as it was.
2. It finds corner keypoints in the earlier frame with `detect_keypoints`. This is a FAST-style segment test on a radius-3 circle. The test needs 12 contiguous pixels that are brighter or darker than the centre by more than 50. It checks every second pixel in both directions.
3. It tracks those keypoints into the later frame with `lk_optical_flow`. This is a single-level Lucas-Kanade solver over a 3x3 window. It drops points next to the border and points in textureless regions.
4. It turns the flow vectors into a mean translation and a mean rotation about the image centre, using `estimate_motion`.

The estimates for each pair are added up into a running `Pose2D`.

## Installation

```
pip install .
```

The package uses only the Python standard library. It needs Python 3.10 or later.

## Library use

A `slammer.types.Frame` holds an image as a flat byte sequence, row by row, with one byte per pixel:

```python
from slammer.types import Frame, Pose2D
from slammer.pipeline import process_frame_pair, format_pose

prev = Frame(data=prev_bytes, width=128, height=128)
curr = Frame(data=curr_bytes, width=128, height=128)

estimate = process_frame_pair(prev, curr)   # MotionEstimate(dx, dy, dtheta)

pose = Pose2D()
pose.update(estimate.dx, estimate.dy, estimate.dtheta)
print(format_pose(pose))   # Pose: x = ..., y = ..., theta = ...
```

`track_poses(frames)` takes an iterable of frames. After each new frame it yields a copy of the accumulated pose. If you give it fewer than two frames, it yields nothing.

```python
from slammer.pipeline import track_poses, format_pose

for pose in track_poses(frames):
    print(format_pose(pose))
```

You can also use each stage on its own:

- `slammer.preprocessing.preprocess_image(data, width, height)` returns `bytes`.
- `slammer.preprocessing.box_blur(data, width, height)` returns `bytes`.
- `slammer.keypoints.detect_keypoints(data, width, height)` returns a list of `Point2D`.
- `slammer.optical_flow.lk_optical_flow(prev, curr, width, height, points)` returns a list of `FlowVector`. Each has a `start` and an `end` point.
- `slammer.pose.estimate_motion(flows, pivot)` returns a `MotionEstimate`. When there are no flows, every field is zero.

`box_blur` and `detect_keypoints` raise `ValueError` when the dimensions are too small or the data is too short.

`slammer.timing.log_duration(name)` works as a context manager and as a decorator. It logs the wall-clock time of the block at INFO level through the `slammer.timing` logger. When Python runs with `-O`, it logs nothing.

## Command line

The `slammer` command reads a file of raw grayscale frames joined end to end. It prints the pose after each consecutive pair:

```
slammer frames.raw --width 128 --height 128
```

Pass `-` instead of a file name to read from standard input. Width and height both default to 128. The exit status is 1 in these cases:

- the input cannot be read,
- its length is not a whole number of frames,
- a frame is too small to process.

Each output line looks like this:

```
Pose: x = 0.00, y = 0.00, theta = 0.00
```

## What it does not do

slammer does not capture images from a camera, and it does not run as a live tracking loop. It only processes frames that are already in memory, in a file or on standard input.

## Running the tests

```
pip install .[test]
pytest
```