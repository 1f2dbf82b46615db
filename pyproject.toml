[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "puzzlekit"
version = "0.1.0"
description = "Solvers for a collection of small daily programming puzzles"
requires-python = ">=3.10"
keywords = ["puzzles", "intervals", "grid", "dial", "solver"]
classifiers = [
    "Development Status :: 3 - Alpha",
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
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
puzzlekit-rotator = "puzzlekit.rotator:main"
puzzlekit-digitpattern = "puzzlekit.digitpattern:main"
puzzlekit-joltage = "puzzlekit.joltage:main"
puzzlekit-forklift = "puzzlekit.forklift:main"
puzzlekit-foodb = "puzzlekit.foodb:main"
puzzlekit-postfix = "puzzlekit.postfix:main"

[tool.hatch.build.targets.wheel]
packages = ["puzzlekit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"
