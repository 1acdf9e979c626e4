"""Poros, a one-based poro vector and a binary search tree of poros ordered by volume."""

__version__ = "0.1.0"
__all__ = ["poro", "vector", "tree", "demo"]