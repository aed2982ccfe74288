"""Solvers for Advent of Code puzzles from 2015 to 2018, one module per puzzle."""

__version__ = "0.1.0"