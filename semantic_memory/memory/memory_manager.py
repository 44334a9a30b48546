"""
Memory Manager - Orchestrates the vector memory system.

This is the high-level interface callers use.
It handles:
- Embedding text and storing it as a memory
- Searching stored memories by meaning
- Forgetting memories
"""

import logging
from typing import Any, Optional

from ..config import Config
from .base import MemoryRecord, SearchResult, VectorStore
from .embeddings import Embedder, create_embedding_service
from .in_memory_store import InMemoryVectorStore

logger = logging.getLogger("semantic_memory.memory.manager")


class MemoryManager:
    """
    High-level memory management.

    Combines an Embedder with a VectorStore so callers can remember and
    recall text without handling vectors themselves.
    """

    def __init__(
        self,
        vector_store: VectorStore,
        embedder: Embedder,
        default_limit: int = 5,
        min_similarity: float = 0.0,
    ):
        self.vector_store = vector_store
        self.embedder = embedder
        self.default_limit = default_limit
        self.min_similarity = min_similarity
        logger.info("MemoryManager created")

    async def remember(
        self,
        record_id: str,
        text: str,
        metadata: Optional[dict[str, Any]] = None,
    ) -> MemoryRecord:
        """
        Embed a text and store it as a memory.

        Args:
            record_id: Unique id; an existing memory with this id is replaced
            text: The text to embed
            metadata: Extra fields kept alongside the vector

        Returns:
            The record as stored
        """
        embedding = await self.embedder.embed(text)
        record = MemoryRecord.from_embedding(record_id, embedding, metadata)
        await self.vector_store.store(record)

        logger.info(f"Stored memory {record_id} with {embedding.dimension}-dim embedding")
        return record

    async def recall(
        self,
        query: str,
        limit: Optional[int] = None,
        min_similarity: Optional[float] = None,
    ) -> list[SearchResult]:
        """
        Find the memories most similar to a query.

        Args:
            query: Text to search for
            limit: Maximum results (defaults to the manager's default_limit)
            min_similarity: Drop results scoring below this threshold

        Returns:
            Matching memories, most similar first
        """
        if limit is None:
            limit = self.default_limit
        if min_similarity is None:
            min_similarity = self.min_similarity

        results = await self.vector_store.search(query, limit)
        results = [r for r in results if r.similarity >= min_similarity]

        logger.info(f"Recalled {len(results)} memories")
        for r in results:
            logger.debug(f"  - {r.record_id}: similarity={r.similarity:.3f}")

        return results

    async def forget(self, record_id: str) -> None:
        """Delete a memory. Unknown ids are ignored."""
        await self.vector_store.delete(record_id)

    async def count(self) -> int:
        """Get total number of stored memories."""
        return await self.vector_store.count()

    async def close(self) -> None:
        """Clean up resources."""
        await self.embedder.close()
        logger.info("MemoryManager closed")


def create_memory_manager(config: Config) -> MemoryManager:
    """
    Factory function to create a configured MemoryManager.

    Args:
        config: Application configuration

    Returns:
        MemoryManager backed by an in-memory vector store
    """
    service = create_embedding_service(
        provider=config.embedding.provider,
        base_url=config.embedding.base_url,
        api_key=config.embedding.api_key,
        model=config.embedding.model,
        path=config.embedding.path,
        timeout=config.embedding.timeout,
        dimensions=config.embedding.dimensions,
    )
    embedder = Embedder(service)

    return MemoryManager(
        vector_store=InMemoryVectorStore(embedder),
        embedder=embedder,
        default_limit=config.memory.default_limit,
        min_similarity=config.memory.min_similarity,
    )
