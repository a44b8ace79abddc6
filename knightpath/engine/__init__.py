"""Board squares and the knight move graph."""

from __future__ import annotations

from .board import KNIGHT_OFFSETS, MoveGraph, knight_moves
from .square import BOARD_SIZE, FILES, RANKS, Square, on_board

__all__ = [
    "BOARD_SIZE",
    "FILES",
    "KNIGHT_OFFSETS",
    "MoveGraph",
    "RANKS",
    "Square",
    "knight_moves",
    "on_board",
]
