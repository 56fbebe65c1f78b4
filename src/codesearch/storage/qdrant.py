"""Qdrant vector database backend."""

from __future__ import annotations

import logging
import uuid
from typing import List, Optional

from qdrant_client import QdrantClient
from qdrant_client.models import Distance, PointStruct, VectorParams

from ..core.models import IndexedEntry
from .base import Metadata, QueryResult, VectorStore

logger = logging.getLogger(__name__)

DISTANCES = {
    "cosine": Distance.COSINE,
    "euclid": Distance.EUCLID,
    "manhattan": Distance.MANHATTAN,
}


def point_id(entry_id: str) -> str:
    """Map an arbitrary string id to the UUID Qdrant requires."""
    return str(uuid.uuid5(uuid.NAMESPACE_URL, entry_id))


class QdrantVectorStore(VectorStore):

    def __init__(
        self,
        collection_name: str,
        host: str = "localhost",
        port: int = 6333,
        location: Optional[str] = None,
        distance: str = "cosine",
        batch_size: int = 100,
        client: Optional[QdrantClient] = None,
    ):
        if distance not in DISTANCES:
            raise ValueError(f"Unsupported distance {distance!r}, expected one of {sorted(DISTANCES)}")
        self.host = host
        self.port = port
        self.collection_name = collection_name
        self.distance = distance
        self.batch_size = batch_size
        if client is not None:
            self.client = client
        elif location:
            self.client = QdrantClient(location=location)
        else:
            self.client = QdrantClient(host=host, port=port)

    def _get_collection_vector_dim(self) -> int:
        collection_info = self.client.get_collection(collection_name=self.collection_name)
        return collection_info.config.params.vectors.size

    def _to_distance(self, score: float) -> float:
        # Qdrant reports similarity for cosine and raw distance for the others
        if self.distance == "cosine":
            return max(0.0, 1.0 - score)
        return score

    def get_or_create_collection(self, vector_dim: int) -> None:
        if self.exists():
            existing_dim = self._get_collection_vector_dim()
            if existing_dim != vector_dim:
                raise ValueError(
                    f"Collection '{self.collection_name}' exists with dimension {existing_dim}, "
                    f"but records have dimension {vector_dim}. Please delete the collection and re-index."
                )
            return

        self.client.create_collection(
            collection_name=self.collection_name,
            vectors_config=VectorParams(size=vector_dim, distance=DISTANCES[self.distance]),
        )
        logger.info(f"Created collection '{self.collection_name}' (dim={vector_dim}, distance={self.distance})")

    def exists(self) -> bool:
        return self.client.collection_exists(collection_name=self.collection_name)

    def add(
        self,
        ids: List[str],
        embeddings: List[List[float]],
        metadatas: List[Metadata],
        documents: List[str],
    ) -> None:
        if not ids:
            logger.warning("No records to save")
            return

        entries = [
            IndexedEntry(id=entry_id, embedding=emb, metadata=meta, document=doc)
            for entry_id, emb, meta, doc in zip(ids, embeddings, metadatas, documents, strict=True)
        ]

        points = [
            PointStruct(
                id=point_id(entry.id),
                vector=entry.embedding,
                payload={**entry.metadata, "id": entry.id, "document": entry.document},
            )
            for entry in entries
        ]

        batch_size = self.batch_size
        total_batches = (len(points) + batch_size - 1) // batch_size
        logger.info(f"Uploading {len(points)} points in {total_batches} batches")

        for i in range(0, len(points), batch_size):
            batch = points[i:i + batch_size]
            batch_num = i // batch_size + 1
            try:
                self.client.upsert(
                    collection_name=self.collection_name,
                    points=batch,
                )
                logger.debug(f"Uploaded batch {batch_num}/{total_batches}")
            except Exception as e:
                raise RuntimeError(
                    f"Failed to upsert batch {batch_num}/{total_batches} "
                    f"(points {i}-{i+len(batch)}): {e}"
                ) from e

        logger.info(f"Successfully saved {len(points)} records to collection '{self.collection_name}'")

    def query(self, query_embedding: List[float], n_results: int) -> QueryResult:
        """Search using Qdrant's vector search."""
        results = self.client.query_points(
            collection_name=self.collection_name,
            query=query_embedding,
            limit=n_results,
            with_payload=True,
            with_vectors=False,
        )

        out = QueryResult(ids=[], metadatas=[], documents=[], distances=[])
        for point in results.points:
            payload = dict(point.payload or {})
            out.ids.append(payload.pop("id", str(point.id)))
            out.documents.append(payload.pop("document", ""))
            out.metadatas.append(payload)
            out.distances.append(self._to_distance(point.score))
        return out

    def count(self) -> int:
        """Count records in the collection."""
        if not self.exists():
            return 0
        return self.client.count(collection_name=self.collection_name).count

    def clear(self) -> None:
        """Delete the collection."""
        if self.exists():
            self.client.delete_collection(collection_name=self.collection_name)
            logger.info(f"Deleted collection '{self.collection_name}'")
