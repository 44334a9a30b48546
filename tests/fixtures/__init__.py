"""
Test fixtures and sample data for semantic memory tests.
"""

import asyncio

from semantic_memory.memory import EmbeddingService, MemoryRecord


class FakeEmbeddingService(EmbeddingService):
    """
    Embedding service double that returns canned vectors and counts calls.

    Texts listed in `vectors` get their own vector; everything else gets
    `default`.
    """

    def __init__(
        self,
        vectors: dict[str, list[float]] | None = None,
        default: list[float] | None = None,
        model: str = "fake-embedding-model",
    ):
        self.vectors = vectors or {}
        self.default = default if default is not None else [1.0, 0.0]
        self.calls: list[str] = []
        self.closed = False
        self._model = model

    @property
    def model(self) -> str:
        return self._model

    async def embed(self, text: str) -> list[float]:
        self.calls.append(text)
        return list(self.vectors.get(text, self.default))

    async def close(self) -> None:
        self.closed = True


class BlockingEmbeddingService(FakeEmbeddingService):
    """Embedding service double that waits until `release` is set."""

    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        self.started = asyncio.Event()
        self.release = asyncio.Event()

    async def embed(self, text: str) -> list[float]:
        self.calls.append(text)
        self.started.set()
        await self.release.wait()
        return list(self.vectors.get(text, self.default))


def make_record(
    id: str = "record-1",
    embedding: list[float] | None = None,
    text: str = "",
    metadata: dict | None = None,
) -> MemoryRecord:
    """Create a sample MemoryRecord for testing."""
    return MemoryRecord(
        id=id,
        embedding=embedding if embedding is not None else [1.0, 0.0],
        text=text or f"text for {id}",
        metadata=metadata or {},
    )
