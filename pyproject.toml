[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "psolve"
version = "0.1.0"
description = "Solutions to classic algorithmic puzzles: counting, stacks, heaps, grids and anagram groups."
requires-python = ">=3.10"
dependencies = []
keywords = ["algorithms", "puzzles", "stack", "heap", "bfs", "anagrams", "combinatorics"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
psolve = "psolve.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["psolve"]

[tool.pytest.ini_options]
addopts = "-ra"
