[build-system]
requires = ["setuptools>=61.0"]
build-backend = "setuptools.build_meta"

[project]
name = "aocsolve"
version = "0.1.0"
description = "Solutions to Advent of Code puzzles from 2015, 2021 and 2022"
requires-python = ">=3.10"
dependencies = []
keywords = ["advent-of-code", "puzzles", "solutions"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment :: Puzzle Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
aocsolve = "aocsolve.cli:main"

[tool.setuptools.packages.find]
include = ["aocsolve*"]

[tool.pytest.ini_options]
addopts = "-ra"
