"""Embedding models for semantic search."""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

import requests

logger = logging.getLogger(__name__)


class EmbeddingError(RuntimeError):
    """Raised when the embedding service cannot produce a vector."""


class EmbeddingShapeError(ValueError):
    """Raised when an embedding response cannot be reduced to a flat vector."""


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def unwrap_vector(payload: Any) -> List[float]:
    """Reduce an embedding response to a flat numeric vector.

    Accepted shapes, all for a single input text:
        [[0.1, 0.2, ...]]                   bare batch of embeddings
        {"embeddings": [[0.1, 0.2, ...]]}   wrapped batch
        [[[0.1, 0.2, ...]]]                 extra nesting (one or two levels)

    The first element is taken at every level until the elements are numbers.

    Raises:
        EmbeddingShapeError: If the payload has no numeric leaf vector
    """
    if isinstance(payload, dict):
        if "embeddings" not in payload:
            raise EmbeddingShapeError(
                f"Embedding response has no 'embeddings' field (keys: {sorted(payload)})"
            )
        payload = payload["embeddings"]

    value = payload
    while isinstance(value, list) and value and isinstance(value[0], list):
        value = value[0]

    if not isinstance(value, list) or not value:
        raise EmbeddingShapeError(f"Expected a non-empty list of numbers, got {type(value).__name__}")
    if not all(_is_number(x) for x in value):
        raise EmbeddingShapeError("Embedding vector contains non-numeric values")
    return [float(x) for x in value]


class Embedder:
    """Abstract base class for embedding models."""

    dimension: Optional[int] = None

    def embed(self, texts: List[str]) -> List[List[float]]:
        """Embed multiple texts into vectors."""
        raise NotImplementedError

    def embed_one(self, text: str) -> List[float]:
        """Embed a single text into a vector."""
        return self.embed([text])[0]

    def _check_dimension(self, vector: List[float]) -> List[float]:
        if self.dimension is None:
            self.dimension = len(vector)
        elif len(vector) != self.dimension:
            raise EmbeddingShapeError(
                f"Embedding has dimension {len(vector)}, expected {self.dimension}"
            )
        return vector


class HTTPEmbedder(Embedder):
    """Embedder calling a remote feature-extraction endpoint.

    Texts are sent one request at a time, in order. The first failure
    aborts the whole call.
    """

    def __init__(
        self,
        base_url: str,
        model: str,
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.url = f"{base_url.rstrip('/')}/pipeline/feature-extraction/{model}"
        self.timeout = timeout
        self.session = session or requests.Session()
        self.headers = {
            "Accept": "application/json",
            "Content-Type": "application/json",
        }

    def _request(self, text: str) -> Any:
        try:
            response = self.session.post(
                self.url,
                headers=self.headers,
                json={"inputs": [text]},
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            raise EmbeddingError(f"Embedding request to {self.url} failed: {e}") from e

        if not 200 <= response.status_code < 300:
            raise EmbeddingError(f"HTTP error! status: {response.status_code}")

        try:
            return response.json()
        except ValueError as e:
            raise EmbeddingShapeError(f"Embedding response is not valid JSON: {e}") from e

    def embed(self, texts: List[str]) -> List[List[float]]:
        """Embed texts one request at a time."""
        embeddings: List[List[float]] = []
        for i, text in enumerate(texts):
            data = self._request(text)
            embeddings.append(self._check_dimension(unwrap_vector(data)))
            logger.debug(f"Embedded text {i + 1}/{len(texts)}")
        return embeddings


class SentenceTransformersEmbedder(Embedder):
    """Embedder using SentenceTransformers library."""

    def __init__(self, model_name: str) -> None:
        from sentence_transformers import SentenceTransformer  # type: ignore
        self.model = SentenceTransformer(model_name)

    def embed(self, texts: List[str]) -> List[List[float]]:
        """Embed texts using SentenceTransformers model."""
        arr = self.model.encode(texts, normalize_embeddings=True, show_progress_bar=False)
        return [self._check_dimension(row.tolist()) for row in arr]


def make_embedder(cfg: Dict) -> Embedder:
    """Create embedder from config.

    Args:
        cfg: Configuration dictionary

    Returns:
        Embedder instance

    Raises:
        SystemExit: If backend is invalid or dependencies are missing
    """
    emb_cfg = cfg.get("embedding", {})
    backend = str(emb_cfg.get("backend", "http")).strip().lower()
    model_name = emb_cfg.get("model", "sentence-transformers/all-MiniLM-L6-v2")

    if backend == "http":
        return HTTPEmbedder(
            base_url=emb_cfg.get("base_url", "http://127.0.0.1:8080"),
            model=model_name,
            timeout=emb_cfg.get("timeout"),
        )

    if backend == "sentence_transformers":
        try:
            return SentenceTransformersEmbedder(model_name)
        except ImportError as e:
            raise SystemExit(
                "Could not load sentence-transformers. "
                "Install it with: pip install 'codesearch[local]'"
            ) from e

    raise SystemExit(f"Invalid embedding.backend: {backend!r}")
