[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "trajtools"
version = "0.1.0"
description = "Record robot odometry as trajectories, save them to JSON, CSV or YAML, and load them back as line-strip markers."
requires-python = ">=3.10"
dependencies = [
    "pyyaml",
]
keywords = [
    "trajectory",
    "odometry",
    "robotics",
    "pose",
    "marker",
    "csv",
    "json",
    "yaml",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["trajtools"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]
