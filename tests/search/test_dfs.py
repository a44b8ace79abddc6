from __future__ import annotations

from knightpath.engine.board import MoveGraph
from knightpath.engine.square import Square
from knightpath.search.service import PathSearchService


def _sq(name: str) -> Square:
    return Square.from_str(name)


def test_dfs_h8_to_a1_finds_path_or_stalls() -> None:
    service = PathSearchService()
    start, finish = _sq("h8"), _sq("a1")
    res = service.dfs(start, finish)
    if res.found is None:
        assert res.path == []
        return
    assert res.found == finish
    assert res.moves is not None and res.moves >= 6
    assert res.path[0] == start and res.path[-1] == finish
    for a, b in zip(res.path, res.path[1:]):
        assert b in service.graph.neighbors(a)


def test_dfs_is_deterministic() -> None:
    service = PathSearchService()
    a = service.dfs(_sq("a1"), _sq("h8"))
    b = service.dfs(_sq("a1"), _sq("h8"))
    assert a.found == b.found
    assert a.path == b.path
    assert a.nodes == b.nodes


def test_dfs_start_equals_finish() -> None:
    res = PathSearchService().dfs(_sq("e5"), _sq("e5"))
    assert res.found == _sq("e5")
    assert res.moves == 0


def test_dfs_follows_most_recent_push() -> None:
    a, b, c, d = Square(0, 0), Square(1, 0), Square(2, 0), Square(3, 0)
    g = MoveGraph({a: (b, c), b: (a,), c: (a, d), d: (c,)})
    res = PathSearchService(g).dfs(a, d)
    assert res.found == d
    assert res.path == [a, c, d]


def test_dfs_stalls_without_backtracking() -> None:
    # d is reachable through c, but b is pushed last and is a dead end
    a, b, c, d = Square(0, 0), Square(1, 0), Square(2, 0), Square(3, 0)
    g = MoveGraph({a: (c, b), b: (a,), c: (a, d), d: (c,)})
    service = PathSearchService(g)
    res = service.dfs(a, d)
    assert res.found is None
    assert res.path == []
    assert res.nodes == 3
    # The path exists; BFS finds it
    assert service.bfs(a, d).path == [a, c, d]
