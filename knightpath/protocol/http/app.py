from __future__ import annotations

import logging
from typing import Dict, List, Literal, Optional

from fastapi import FastAPI, HTTPException
from fastapi.exceptions import RequestValidationError
from pydantic import BaseModel, Field
from starlette.exceptions import HTTPException as StarletteHTTPException

from .error import (
    exception_handler,
    http_exception_handler,
    request_validation_exception_handler,
    value_error_handler,
)
from .logging_middleware import RequestIDLoggingMiddleware
from ...engine.board import MoveGraph
from ...engine.square import Square
from ...search.service import PathSearchService


logger = logging.getLogger(__name__)


class PathRequest(BaseModel):
    start: str = Field(..., description="Start square, e.g. h8")
    finish: str = Field(..., description="Finish square, e.g. a1")
    algorithm: Literal["bfs", "dfs"] = "bfs"


class PathResponse(BaseModel):
    algorithm: str
    start: str
    finish: str
    found: bool
    path: List[str]
    moves: Optional[int]
    nodes: int
    time_ms: int


class MovesResponse(BaseModel):
    square: str
    moves: List[str]


class DistancesResponse(BaseModel):
    square: str
    distances: Dict[str, int]


def create_app(graph: Optional[MoveGraph] = None) -> FastAPI:
    app = FastAPI(title="Knight Path API", version="0.1.0")

    logging.basicConfig(level=logging.INFO)

    app.add_middleware(RequestIDLoggingMiddleware)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, request_validation_exception_handler)
    app.add_exception_handler(ValueError, value_error_handler)
    app.add_exception_handler(Exception, exception_handler)

    # One graph per app; searches keep their own traversal state
    service = PathSearchService(graph)

    @app.get("/healthz")
    async def healthz() -> Dict[str, str]:
        return {"status": "ok"}

    @app.get("/api/squares/{square}/moves", response_model=MovesResponse)
    async def moves(square: str) -> MovesResponse:
        sq = _parse_square(square)
        return MovesResponse(
            square=str(sq), moves=[str(n) for n in service.graph.neighbors(sq)]
        )

    @app.get("/api/distances/{square}", response_model=DistancesResponse)
    async def distances(square: str) -> DistancesResponse:
        sq = _parse_square(square)
        table = service.distance_table(sq)
        return DistancesResponse(
            square=str(sq), distances={str(k): v for k, v in sorted(table.items())}
        )

    @app.post("/api/path", response_model=PathResponse)
    async def path(req: PathRequest) -> PathResponse:
        start = _parse_square(req.start)
        finish = _parse_square(req.finish)
        res = service.search(start, finish, req.algorithm)
        if res.found is None:
            logger.info("no %s path from %s to %s", req.algorithm, start, finish)
        return PathResponse(
            algorithm=res.algorithm,
            start=str(res.start),
            finish=str(res.finish),
            found=res.found is not None,
            path=[str(s) for s in res.path],
            moves=res.moves,
            nodes=res.nodes,
            time_ms=res.time_ms,
        )

    return app


def _parse_square(s: str) -> Square:
    try:
        return Square.from_str(s)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


# Default app for non-factory servers
app = create_app()
