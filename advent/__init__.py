"""Advent of Code puzzle solutions, grid helpers and workspace setup."""

__version__ = "0.1.0"