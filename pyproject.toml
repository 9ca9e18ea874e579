[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "slammer"
version = "0.1.0"
description = "Planar motion estimation from grayscale frame pairs: corner detection, Lucas-Kanade optical flow and 2D pose tracking"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "odometry",
    "optical-flow",
    "lucas-kanade",
    "keypoints",
    "corner-detection",
    "pose-estimation",
    "computer-vision",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Image Processing",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
slammer = "slammer.pipeline:main"

[tool.hatch.build.targets.wheel]
packages = ["slammer"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
