[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "clubbot"
version = "0.1.0"
description = "Navigation, sensor, touchscreen and graphics logic for a small differential-drive club robot"
requires-python = ">=3.10"
dependencies = []
keywords = ["robotics", "odometry", "waypoints", "navigation", "graphics", "touchscreen", "font"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Human Machine Interfaces",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["clubbot"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
