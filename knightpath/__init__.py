"""Shortest knight paths on an 8x8 board via BFS and DFS."""

__version__ = "0.1.0"
