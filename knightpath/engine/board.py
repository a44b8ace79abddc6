from __future__ import annotations

from typing import Dict, Final, Iterator, List, Optional, Tuple

from .square import BOARD_SIZE, FILES, RANKS, Square, on_board


# (file delta, rank delta) for every knight jump
KNIGHT_OFFSETS: Final[Tuple[Tuple[int, int], ...]] = (
    (2, 1),
    (2, -1),
    (-2, -1),
    (-2, 1),
    (1, 2),
    (-1, 2),
    (1, -2),
    (-1, -2),
)


class MoveGraph:
    """Knight move graph over the 8x8 board.

    Topology only: the graph is built once and never mutated, so one
    instance can be shared by any number of searches. Per-search
    bookkeeping lives in ``knightpath.search.service.TraversalState``.
    """

    def __init__(self, adjacency: Dict[Square, Tuple[Square, ...]]) -> None:
        self._adjacency = adjacency

    @classmethod
    def build(cls) -> "MoveGraph":
        adjacency: Dict[Square, Tuple[Square, ...]] = {}
        for rank in range(BOARD_SIZE):
            for file in range(BOARD_SIZE):
                sq = Square(file, rank)
                adjacency[sq] = knight_moves(sq)
        return cls(adjacency)

    def neighbors(self, square: Square) -> Tuple[Square, ...]:
        """Return the squares one knight move away, in offset order.

        Raises:
            KeyError: If ``square`` is not part of this graph.
        """
        return self._adjacency[square]

    def find_square(self, file: str, rank: str) -> Optional[Square]:
        """Resolve notation characters such as ``("h", "8")`` to a square.

        Returns None when either coordinate is unknown.
        """
        if file not in FILES or rank not in RANKS:
            return None
        sq = Square(FILES.index(file), RANKS.index(rank))
        return sq if sq in self._adjacency else None

    def squares(self) -> List[Square]:
        return list(self._adjacency)

    def is_symmetric(self) -> bool:
        for sq, targets in self._adjacency.items():
            for t in targets:
                if sq not in self._adjacency.get(t, ()):
                    return False
        return True

    def __contains__(self, square: object) -> bool:
        return square in self._adjacency

    def __iter__(self) -> Iterator[Square]:
        return iter(self._adjacency)

    def __len__(self) -> int:
        return len(self._adjacency)

    def __repr__(self) -> str:
        edges = sum(len(t) for t in self._adjacency.values())
        return f"MoveGraph(squares={len(self)}, edges={edges})"


def knight_moves(square: Square) -> Tuple[Square, ...]:
    out: List[Square] = []
    for df, dr in KNIGHT_OFFSETS:
        f, r = square.file + df, square.rank + dr
        if on_board(f, r):
            out.append(Square(f, r))
    return tuple(out)
