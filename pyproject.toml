[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tb3sim"
version = "0.1.0"
description = "Kinematic simulation of a differential-drive TurtleBot3 and a simple obstacle-avoiding drive controller"
requires-python = ">=3.10"
dependencies = []
keywords = ["robotics", "turtlebot3", "odometry", "simulation", "differential-drive"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Education",
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
test = ["pytest"]

[project.scripts]
tb3sim-fake = "tb3sim.fake:main"
tb3sim-drive = "tb3sim.drive:main"

[tool.hatch.build.targets.wheel]
packages = ["tb3sim"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
