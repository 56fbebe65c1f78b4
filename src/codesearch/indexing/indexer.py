"""Code indexing logic."""

from __future__ import annotations

import hashlib
import logging
from pathlib import Path
from typing import Dict, List, Optional, Sequence

from ..core import Embedder, LineRecord, make_embedder, read_code_files
from ..storage import VectorStore, make_vector_store
from .base import Indexer

logger = logging.getLogger(__name__)


class LengthMismatchError(ValueError):
    """Raised when the parallel arrays sent to the store differ in length."""


def check_lengths(
    ids: Sequence,
    embeddings: Sequence,
    texts: Sequence,
    metadatas: Sequence,
) -> None:
    if not (len(ids) == len(embeddings) == len(texts) == len(metadatas)):
        raise LengthMismatchError(
            f"Mismatched lengths: ids={len(ids)}, embeddings={len(embeddings)}, "
            f"texts={len(texts)}, metadatas={len(metadatas)}"
        )


def make_ids(records: List[LineRecord], scheme: str = "positional") -> List[str]:
    if scheme == "positional":
        return [f"line_{i}" for i in range(len(records))]
    if scheme == "content":
        return [
            hashlib.sha256(
                (r.file + ":" + str(r.line_number) + ":" + r.content).encode("utf-8")
            ).hexdigest()
            for r in records
        ]
    raise ValueError(f"Unknown id_scheme: {scheme!r}")


class DefaultIndexer(Indexer):

    def __init__(self, embedder: Optional[Embedder] = None, store: Optional[VectorStore] = None) -> None:
        self.embedder = embedder
        self.store = store

    def index(self, directory: Path, cfg: Dict) -> int:
        code_data = read_code_files(Path(directory), cfg.get("extensions", []))
        if not code_data:
            print("No code files found to index.")
            return 0

        emb = self.embedder or make_embedder(cfg)
        store = self.store or make_vector_store(cfg)

        texts = [r.content for r in code_data]
        logger.info(f"Embedding {len(texts)} lines from {directory}")
        embeddings = emb.embed(texts)

        ids = make_ids(code_data, cfg.get("id_scheme", "positional"))
        metadatas = [{"file": r.file, "line_number": r.line_number} for r in code_data]

        logger.debug(
            f"ids: {len(ids)} embeddings: {len(embeddings)} "
            f"texts: {len(texts)} metadatas: {len(metadatas)}"
        )
        check_lengths(ids, embeddings, texts, metadatas)

        store.get_or_create_collection(vector_dim=len(embeddings[0]))
        store.add(ids=ids, embeddings=embeddings, metadatas=metadatas, documents=texts)

        print(f"Stored {len(code_data)} lines in vector database.")
        return len(code_data)


def build_index(
    directory: Path,
    cfg: Dict,
    embedder: Optional[Embedder] = None,
    store: Optional[VectorStore] = None,
) -> int:
    """Index every line under ``directory`` (Wrapper)."""
    indexer = DefaultIndexer(embedder=embedder, store=store)
    return indexer.index(directory, cfg)
