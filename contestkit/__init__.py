"""Solved programming-contest problems as plain Python functions and small classes."""

__version__ = "0.1.0"