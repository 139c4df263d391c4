"""Data structures, graph algorithms and solvers for programming-contest problems."""

__version__ = "0.1.0"