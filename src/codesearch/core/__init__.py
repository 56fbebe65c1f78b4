"""Core functionality for codesearch."""

from .models import IndexedEntry, LineRecord, Match
from .extractor import read_code_files, split_lines
from .embeddings import (
    Embedder,
    EmbeddingError,
    EmbeddingShapeError,
    HTTPEmbedder,
    SentenceTransformersEmbedder,
    make_embedder,
    unwrap_vector,
)

__all__ = [
    "IndexedEntry",
    "LineRecord",
    "Match",
    "read_code_files",
    "split_lines",
    "Embedder",
    "EmbeddingError",
    "EmbeddingShapeError",
    "HTTPEmbedder",
    "SentenceTransformersEmbedder",
    "make_embedder",
    "unwrap_vector",
]
