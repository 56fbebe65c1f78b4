"""Abstract vector storage interface."""

from __future__ import annotations

import dataclasses
from abc import ABC, abstractmethod
from typing import Dict, List, Union

Metadata = Dict[str, Union[str, int]]


@dataclasses.dataclass
class QueryResult:
    """Parallel result arrays for a single query vector, nearest first."""

    ids: List[str]
    metadatas: List[Metadata]
    documents: List[str]
    distances: List[float]


class VectorStore(ABC):
    """Abstract base class for vector storage backends."""

    collection_name: str

    @abstractmethod
    def get_or_create_collection(self, vector_dim: int) -> None:
        """Create the collection if missing."""
        pass

    @abstractmethod
    def exists(self) -> bool:
        """Check if the collection exists."""
        pass

    @abstractmethod
    def add(
        self,
        ids: List[str],
        embeddings: List[List[float]],
        metadatas: List[Metadata],
        documents: List[str],
    ) -> None:
        """Upsert entries given as equal-length parallel lists."""
        pass

    @abstractmethod
    def query(self, query_embedding: List[float], n_results: int) -> QueryResult:
        """Return the ``n_results`` nearest entries."""
        pass

    @abstractmethod
    def count(self) -> int:
        """Count entries in the collection."""
        pass

    @abstractmethod
    def clear(self) -> None:
        """Delete the collection."""
        pass
