"""Searcher Interface."""

from __future__ import annotations

from typing import Dict, List, Optional

from ..core import Match


class Searcher:
    """Abstract base class for semantic search."""

    def search(self, query: str, cfg: Dict, top_k: Optional[int] = None) -> List[Match]:
        """Search for lines semantically similar to query.

        Args:
            query: Search query text
            cfg: Configuration dictionary
            top_k: Number of results to return (defaults to ``search.top_k``)

        Returns:
            Matches sorted by ascending distance, empty on failure
        """
        raise NotImplementedError
