from __future__ import annotations

from dataclasses import dataclass
from typing import Final, Tuple


BOARD_SIZE: Final = 8

# Index 0 is the a-file and the 8th rank respectively
FILES: Final[Tuple[str, ...]] = ("a", "b", "c", "d", "e", "f", "g", "h")
RANKS: Final[Tuple[str, ...]] = ("8", "7", "6", "5", "4", "3", "2", "1")


@dataclass(frozen=True, order=True)
class Square:
    """One cell of the board.

    Attributes:
        file (int): File index, 0 for ``a`` through 7 for ``h``.
        rank (int): Rank index, 0 for rank ``8`` through 7 for rank ``1``.
    """

    file: int
    rank: int

    def __post_init__(self) -> None:
        if not on_board(self.file, self.rank):
            raise ValueError(f"square off board: ({self.file}, {self.rank})")

    @classmethod
    def from_str(cls, s: str) -> "Square":
        """Parse algebraic notation.

        Args:
            s (str): Square name such as ``"h8"``.

        Returns:
            Square: Parsed square.

        Raises:
            ValueError: If ``s`` is not a valid square.
        """
        if len(s) != 2 or s[0] not in FILES or s[1] not in RANKS:
            raise ValueError(f"invalid square: {s!r}")
        return cls(FILES.index(s[0]), RANKS.index(s[1]))

    def __str__(self) -> str:
        return FILES[self.file] + RANKS[self.rank]


def on_board(file: int, rank: int) -> bool:
    return 0 <= file < BOARD_SIZE and 0 <= rank < BOARD_SIZE
