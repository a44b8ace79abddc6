#!/usr/bin/env python3
# ruff: noqa: E402
from __future__ import annotations

import argparse
import logging
import os
import sys
from typing import List, Optional

# Allow running this script directly via `python scripts/knight_path.py`
# by adding the repo root (which contains `knightpath/`) to sys.path.
REPO_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if REPO_ROOT not in sys.path:
    sys.path.insert(0, REPO_ROOT)

from knightpath.engine.board import MoveGraph
from knightpath.search.service import PathSearchService, SearchResult


def format_result(res: SearchResult) -> str:
    head = f"{res.algorithm.upper()} between {res.finish} and {res.start}:"
    if res.found is None:
        return f"{head} no path (nodes={res.nodes})"
    route = " -> ".join(str(s) for s in res.path)
    return f"{head} {route} (moves={res.moves} nodes={res.nodes} time_ms={res.time_ms})"


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Find a knight path between two squares")
    parser.add_argument("--start", type=str, default="h8", help="Start square (default: h8)")
    parser.add_argument("--finish", type=str, default="a1", help="Finish square (default: a1)")
    parser.add_argument(
        "--algorithm",
        choices=("bfs", "dfs", "both"),
        default="both",
        help="Traversal to run (default: both, BFS first)",
    )
    parser.add_argument("--log-level", type=str, default="WARNING")
    args = parser.parse_args(argv)

    logging.basicConfig(level=args.log_level.upper())

    graph = MoveGraph.build()
    start = graph.find_square(args.start[:1], args.start[1:])
    finish = graph.find_square(args.finish[:1], args.finish[1:])
    if start is None or finish is None:
        parser.error(f"invalid square: {args.start if start is None else args.finish!r}")

    service = PathSearchService(graph)
    algorithms = ("bfs", "dfs") if args.algorithm == "both" else (args.algorithm,)
    status = 0
    for algo in algorithms:
        res = service.search(start, finish, algo)
        print(format_result(res))
        # BFS always reaches every square; a DFS stall is an accepted outcome
        if algo == "bfs" and res.found is None:
            status = 1
    return status


if __name__ == "__main__":
    sys.exit(main())
