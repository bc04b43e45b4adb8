"""Arrange tetrominoes in the smallest square that holds them, with small text, buffer and list helpers."""

__version__ = "1.0.0"