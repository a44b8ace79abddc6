from __future__ import annotations

from fastapi.testclient import TestClient

from knightpath.protocol.http.app import create_app


def _client() -> TestClient:
    return TestClient(create_app())


def test_bfs_path_corner_to_corner() -> None:
    client = _client()
    r = client.post("/api/path", json={"start": "h8", "finish": "a1"})
    assert r.status_code == 200
    body = r.json()
    assert body["algorithm"] == "bfs"
    assert body["found"] is True
    assert body["moves"] == 6
    assert body["path"][0] == "h8"
    assert body["path"][-1] == "a1"
    assert len(body["path"]) == 7


def test_dfs_path_found_or_stalled() -> None:
    client = _client()
    r = client.post("/api/path", json={"start": "h8", "finish": "a1", "algorithm": "dfs"})
    assert r.status_code == 200
    body = r.json()
    assert body["algorithm"] == "dfs"
    if body["found"]:
        assert body["moves"] >= 6
        assert body["path"][0] == "h8" and body["path"][-1] == "a1"
    else:
        assert body["moves"] is None
        assert body["path"] == []


def test_same_square_is_zero_moves() -> None:
    r = _client().post("/api/path", json={"start": "d4", "finish": "d4"})
    assert r.status_code == 200
    assert r.json()["moves"] == 0
    assert r.json()["path"] == ["d4"]


def test_invalid_square_is_bad_request() -> None:
    r = _client().post("/api/path", json={"start": "z9", "finish": "a1"})
    assert r.status_code == 400
    err = r.json()["error"]
    assert err["code"] == "bad_request"
    assert "z9" in err["message"]


def test_invalid_algorithm_is_validation_error() -> None:
    r = _client().post("/api/path", json={"start": "h8", "finish": "a1", "algorithm": "astar"})
    assert r.status_code == 422
    err = r.json()["error"]
    assert err["code"] == "unprocessable_entity"
    assert any(fe["field"].endswith("algorithm") for fe in err["field_errors"])


def test_missing_field_is_validation_error() -> None:
    r = _client().post("/api/path", json={"start": "h8"})
    assert r.status_code == 422


def test_moves_for_square() -> None:
    client = _client()
    r = client.get("/api/squares/a1/moves")
    assert r.status_code == 200
    assert sorted(r.json()["moves"]) == ["b3", "c2"]

    r_bad = client.get("/api/squares/a0/moves")
    assert r_bad.status_code == 400


def test_distances_from_square() -> None:
    r = _client().get("/api/distances/a1")
    assert r.status_code == 200
    dist = r.json()["distances"]
    assert len(dist) == 64
    assert dist["a1"] == 0
    assert dist["h8"] == 6
    assert dist["b3"] == 1
