"""Image preprocessing before keypoint detection."""

from __future__ import annotations

from collections.abc import Sequence


def preprocess_image(data: Sequence[int], width: int, height: int) -> bytes:
    """Prepare a grayscale image for tracking.

    Currently passes the pixels through unchanged.
    """
    return bytes(data)


def box_blur(data: Sequence[int], width: int, height: int) -> bytes:
    """Blur with a 3x3 mean filter, keeping the one-pixel border unchanged."""
    if width < 1 or height < 1:
        raise ValueError(f"image dimensions must be positive, got {width}x{height}")
    size = width * height
    if len(data) < size:
        raise ValueError(f"expected at least {size} bytes, got {len(data)}")

    pixels = bytes(data)
    rows = [pixels[y * width:(y + 1) * width] for y in range(height)]
    out = bytearray(rows[0])

    for top, mid, bottom in zip(rows, rows[1:], rows[2:]):
        if width < 3:
            out += mid
            continue
        columns = [a + b + c for a, b, c in zip(top, mid, bottom)]
        blurred = bytes(
            (left + centre + right) // 9
            for left, centre, right in zip(columns, columns[1:], columns[2:])
        )
        out += mid[:1] + blurred + mid[-1:]

    if height > 1:
        out += rows[-1]
    out += pixels[size:]
    return bytes(out)