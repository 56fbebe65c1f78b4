"""Factory for creating vector store instances (Qdrant only)."""

from __future__ import annotations

from typing import Dict, Optional

from .base import VectorStore
from .qdrant import QdrantVectorStore


def make_vector_store(cfg: Dict, collection_name: Optional[str] = None) -> VectorStore:
    vector_store_cfg = cfg.get("vector_store", {})
    backend = str(vector_store_cfg.get("backend", "qdrant")).strip().lower()
    if backend != "qdrant":
        raise SystemExit(f"Invalid vector_store.backend: {backend!r}")

    qdrant_cfg = vector_store_cfg.get("qdrant", {})

    return QdrantVectorStore(
        collection_name=collection_name or cfg.get("collection_name", "code_vectors"),
        host=qdrant_cfg.get("host", "localhost"),
        port=qdrant_cfg.get("port", 6333),
        location=qdrant_cfg.get("location"),
        distance=vector_store_cfg.get("distance", "cosine"),
        batch_size=int(vector_store_cfg.get("batch_size", 100)),
    )
