from __future__ import annotations

from .service import ALGORITHMS, PathSearchService, SearchResult, TraversalState, reconstruct

__all__ = ["ALGORITHMS", "PathSearchService", "SearchResult", "TraversalState", "reconstruct"]
