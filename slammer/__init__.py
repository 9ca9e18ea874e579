"""Planar motion estimation and pose tracking from grayscale frame pairs."""

__version__ = "0.1.0"

__all__ = [
    "types",
    "timing",
    "preprocessing",
    "keypoints",
    "optical_flow",
    "pose",
    "pipeline",
]