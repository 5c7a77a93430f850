[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "aocdays"
version = "0.1.0"
description = "Solutions to five daily programming puzzles, runnable from the command line"
requires-python = ">=3.10"
dependencies = []
keywords = ["puzzles", "advent-of-code", "solutions"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Puzzle Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
aoc = "aocdays.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["aocdays"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
