"""Semantic search functionality."""

from __future__ import annotations

import logging
from typing import Dict, List, Optional

from ..core import Embedder, Match, make_embedder
from ..storage import QueryResult, VectorStore, make_vector_store
from .base import Searcher

logger = logging.getLogger(__name__)


class CollectionNotFoundError(LookupError):
    """Raised when querying a collection that was never indexed."""


def to_matches(result: QueryResult) -> List[Match]:
    """Zip parallel store results into matches, nearest first."""
    matches = [
        Match(
            file=str(metadata.get("file", "")),
            line_number=int(metadata.get("line_number", 0)),
            content=document,
            distance=distance,
        )
        for metadata, document, distance in zip(result.metadatas, result.documents, result.distances)
    ]
    # stable: an already ordered response keeps its order
    matches.sort(key=lambda m: m.distance)
    return matches


class DefaultSearcher(Searcher):

    def __init__(self, embedder: Optional[Embedder] = None, store: Optional[VectorStore] = None) -> None:
        self.embedder = embedder
        self.store = store

    def search(self, query: str, cfg: Dict, top_k: Optional[int] = None) -> List[Match]:
        if top_k is None:
            top_k = int(cfg.get("search", {}).get("top_k", 5))

        # configuration errors (SystemExit) abort instead of soft-failing
        store = self.store or make_vector_store(cfg)
        emb = self.embedder or make_embedder(cfg)

        try:
            if not store.exists():
                raise CollectionNotFoundError(
                    f"Collection '{store.collection_name}' not found. Please run indexing first."
                )

            qv = emb.embed_one(query)
            logger.debug(f"Query embedding length: {len(qv)}")

            return to_matches(store.query(qv, top_k))
        except Exception as e:
            logger.error(f"Error searching code: {e}")
            return []


def search_code(
    query: str,
    cfg: Dict,
    top_k: Optional[int] = None,
    embedder: Optional[Embedder] = None,
    store: Optional[VectorStore] = None,
) -> List[Match]:
    searcher = DefaultSearcher(embedder=embedder, store=store)
    return searcher.search(query, cfg, top_k)


def format_match(match: Match) -> str:
    return (
        f"File: {match.file}, Line: {match.line_number}, "
        f"Content: {match.content}, Distance: {match.distance:.3f}"
    )
