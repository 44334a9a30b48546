"""
Base interfaces and data structures for vector memory.

Defines the records that get stored, the results a search hands back,
and the abstract contract that vector store backends implement.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Optional


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class Embedding:
    """
    A vector produced by the embedding service, with its provenance.

    Immutable once constructed.
    """
    source_text: str
    vector: tuple[float, ...]
    model: str
    created_at: datetime = field(default_factory=_utcnow)

    @property
    def dimension(self) -> int:
        """Number of components in the vector."""
        return len(self.vector)


@dataclass
class MemoryRecord:
    """
    A single stored memory.

    The embedding may be set directly from a raw vector, so a record can
    be stored without ever going through the embedding service.
    """
    # Identity
    id: str

    # The stored vector
    embedding: list[float] = field(default_factory=list)

    # Provenance
    text: str = ""
    metadata: dict[str, Any] = field(default_factory=dict)
    created_at: datetime = field(default_factory=_utcnow)

    @classmethod
    def from_embedding(
        cls,
        id: str,
        embedding: Embedding,
        metadata: Optional[dict[str, Any]] = None,
    ) -> "MemoryRecord":
        """Build a record that carries an Embedding's vector and source text."""
        merged = dict(metadata or {})
        merged.setdefault("model", embedding.model)
        return cls(
            id=id,
            embedding=list(embedding.vector),
            text=embedding.source_text,
            metadata=merged,
            created_at=embedding.created_at,
        )

    def copy(self) -> "MemoryRecord":
        """Return a copy that shares no mutable state with this record."""
        return MemoryRecord(
            id=self.id,
            embedding=list(self.embedding or []),
            text=self.text,
            metadata=dict(self.metadata or {}),
            created_at=self.created_at,
        )


@dataclass(frozen=True)
class SearchResult:
    """
    A search hit, detached from the stored record.

    Holds a snapshot of the record's vector at scoring time; later changes
    to the store do not affect results already returned.
    """
    record_id: str
    similarity: float
    vector: tuple[float, ...]
    text: str = ""
    metadata: dict[str, Any] = field(default_factory=dict)

    @property
    def is_strong_match(self) -> bool:
        """Is this a strong enough match to act on?"""
        return self.similarity > 0.75

    @property
    def is_moderate_match(self) -> bool:
        """Is this a moderate match worth considering?"""
        return self.similarity > 0.6


class VectorStore(ABC):
    """
    Abstract interface for vector storage backends.

    Implementations: InMemoryVectorStore
    """

    @abstractmethod
    async def store(self, record: MemoryRecord) -> None:
        """
        Insert a record, replacing any record with the same id.

        Raises:
            InvalidInputError: If record is None or has a blank id
        """
        pass

    @abstractmethod
    async def delete(self, record_id: str) -> None:
        """Remove a record. Unknown ids are ignored."""
        pass

    @abstractmethod
    async def search(self, query: str, limit: int = 5) -> list[SearchResult]:
        """
        Embed the query and return the most similar records.

        Args:
            query: Text to search for
            limit: Maximum number of results

        Returns:
            Results ordered by similarity, highest first. Blank queries
            and non-positive limits return an empty list.
        """
        pass

    @abstractmethod
    async def get(self, record_id: str) -> Optional[MemoryRecord]:
        """Get a stored record by id."""
        pass

    @abstractmethod
    async def count(self) -> int:
        """Get total number of stored records."""
        pass

    @abstractmethod
    async def clear(self) -> None:
        """Remove every stored record."""
        pass
