"""
Vector Memory System.

Embeds text through an external service, keeps the vectors in a store
and finds the closest matches for a query by cosine similarity.
"""

from .base import Embedding, MemoryRecord, SearchResult, VectorStore
from .embeddings import (
    Embedder,
    EmbeddingService,
    HttpEmbeddingService,
    OpenAIEmbeddingService,
    create_embedding_service,
)
from .in_memory_store import InMemoryVectorStore
from .memory_manager import MemoryManager, create_memory_manager
from .similarity import cosine_similarity

__all__ = [
    "Embedding",
    "MemoryRecord",
    "SearchResult",
    "VectorStore",
    "Embedder",
    "EmbeddingService",
    "HttpEmbeddingService",
    "OpenAIEmbeddingService",
    "create_embedding_service",
    "InMemoryVectorStore",
    "MemoryManager",
    "create_memory_manager",
    "cosine_similarity",
]
