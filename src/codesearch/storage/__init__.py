"""Vector storage backends (Qdrant only)."""

from .base import QueryResult, VectorStore
from .factory import make_vector_store
from .qdrant import QdrantVectorStore

__all__ = [
    "QueryResult",
    "VectorStore",
    "QdrantVectorStore",
    "make_vector_store",
]
