"""
In-memory Vector Store Implementation.

Keeps every record in a dict for the lifetime of the process and scores
all of them on each search. Suitable for small collections and tests;
nothing is persisted.
"""

import asyncio
import logging
from typing import Optional

from ..errors import InvalidInputError
from .base import MemoryRecord, SearchResult, VectorStore
from .embeddings import Embedder
from .similarity import cosine_similarity

logger = logging.getLogger("semantic_memory.memory.store")


class InMemoryVectorStore(VectorStore):
    """
    Dict-backed implementation of the vector store.

    Records are copied on the way in and out, so callers never hold a
    reference to store-owned state. Iteration order is the order of each
    id's most recent store() call; search ties keep that order.
    """

    def __init__(self, embedder: Embedder):
        self.embedder = embedder
        self._records: dict[str, MemoryRecord] = {}
        self._lock = asyncio.Lock()

    async def store(self, record: MemoryRecord) -> None:
        """Insert or replace a record by id."""
        if record is None:
            raise InvalidInputError("Record cannot be null.")
        if not isinstance(record.id, str) or not record.id.strip():
            raise InvalidInputError("Record id cannot be null or empty.")

        logger.debug(f"Storing record '{record.id}'")
        async with self._lock:
            # Re-stored ids move to the end of iteration order
            self._records.pop(record.id, None)
            self._records[record.id] = record.copy()

    async def delete(self, record_id: str) -> None:
        """Delete a record if present."""
        logger.debug(f"Deleting record '{record_id}'")
        async with self._lock:
            self._records.pop(record_id, None)

    async def search(self, query: str, limit: int = 5) -> list[SearchResult]:
        """Search for records similar to the query text."""
        if not isinstance(query, str) or not query.strip():
            return []
        if limit <= 0:
            return []

        # Embedding happens outside the lock; cancellation here leaves the store untouched
        query_embedding = await self.embedder.embed(query)
        query_vector = query_embedding.vector

        async with self._lock:
            scored = [
                SearchResult(
                    record_id=record.id,
                    similarity=cosine_similarity(record.embedding, query_vector),
                    vector=tuple(record.embedding or ()),
                    text=record.text,
                    metadata=dict(record.metadata or {}),
                )
                for record in self._records.values()
            ]

        # list.sort is stable, so equal scores keep store order
        scored.sort(key=lambda r: r.similarity, reverse=True)
        results = scored[:limit]

        logger.info(f"Search completed - {len(results)} matches for '{query}'")
        return results

    async def get(self, record_id: str) -> Optional[MemoryRecord]:
        """Get a copy of a stored record."""
        async with self._lock:
            record = self._records.get(record_id)
            return record.copy() if record is not None else None

    async def count(self) -> int:
        """Get total number of stored records."""
        return len(self._records)

    async def clear(self) -> None:
        """Remove every stored record."""
        async with self._lock:
            self._records.clear()
        logger.info("Vector store cleared")
