from __future__ import annotations

import pytest

from knightpath.engine.square import Square


def test_from_str_maps_rank_8_to_index_0() -> None:
    assert Square.from_str("a8") == Square(0, 0)
    assert Square.from_str("h1") == Square(7, 7)
    assert Square.from_str("e4") == Square(4, 4)


def test_str_round_trips_notation() -> None:
    for name in ("a1", "b3", "d5", "h8"):
        assert str(Square.from_str(name)) == name


@pytest.mark.parametrize("bad", ["", "a", "i1", "a9", "a0", "A1", "a10", "11"])
def test_from_str_rejects_invalid(bad: str) -> None:
    with pytest.raises(ValueError):
        Square.from_str(bad)


def test_off_board_square_rejected() -> None:
    with pytest.raises(ValueError):
        Square(8, 0)
    with pytest.raises(ValueError):
        Square(0, -1)


def test_value_equality_and_hash() -> None:
    a = Square(3, 4)
    b = Square.from_str(str(a))
    assert a == b and a is not b
    assert len({a, b}) == 1
