"""Solutions to a selection of Advent of Code puzzles from 2015, 2021 and 2022."""

__version__ = "0.1.0"