"""Solvers for a collection of programming puzzles, one small module per theme."""

__version__ = "0.1.0"