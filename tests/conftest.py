"""
Shared pytest fixtures for semantic memory tests.

This module provides:
- Fake embedding services that never touch the network
- Embedder, vector store and memory manager wired to the fakes
- Mock HTTP transport and OpenAI client
"""

import json
from unittest.mock import AsyncMock, MagicMock, patch

import httpx
import pytest
import pytest_asyncio

from semantic_memory.memory import Embedder, InMemoryVectorStore, MemoryManager
from tests.fixtures import FakeEmbeddingService, make_record


# =============================================================================
# Embedding Fixtures
# =============================================================================


@pytest.fixture
def fake_service() -> FakeEmbeddingService:
    """Embedding service that returns [1, 0] for every text."""
    return FakeEmbeddingService(default=[1.0, 0.0])


@pytest.fixture
def embedder(fake_service) -> Embedder:
    """Embedder backed by the fake service."""
    return Embedder(fake_service)


# =============================================================================
# Store Fixtures
# =============================================================================


@pytest.fixture
def vector_store(embedder) -> InMemoryVectorStore:
    """Empty in-memory vector store."""
    return InMemoryVectorStore(embedder)


@pytest_asyncio.fixture
async def populated_store(vector_store) -> InMemoryVectorStore:
    """Store holding records with vectors [1, 0], [0, 1] and [1, 1]."""
    await vector_store.store(make_record("east", [1.0, 0.0], text="east"))
    await vector_store.store(make_record("north", [0.0, 1.0], text="north"))
    await vector_store.store(make_record("northeast", [1.0, 1.0], text="northeast"))
    return vector_store


@pytest.fixture
def memory_manager(vector_store, embedder) -> MemoryManager:
    """MemoryManager over the empty store."""
    return MemoryManager(vector_store=vector_store, embedder=embedder)


# =============================================================================
# Mock External Services
# =============================================================================


@pytest_asyncio.fixture
async def embedding_server():
    """
    Mock HTTP embedding endpoint.

    Yields a dict holding the received requests, a client wired to the
    mock transport and a `respond` callable tests can swap out.
    """
    state = {
        "requests": [],
        "respond": lambda request: httpx.Response(200, json=[0.1, 0.2, 0.3]),
    }

    def handler(request: httpx.Request) -> httpx.Response:
        state["requests"].append(request)
        return state["respond"](request)

    state["client"] = httpx.AsyncClient(
        base_url="http://embeddings.test",
        transport=httpx.MockTransport(handler),
    )
    state["payload"] = lambda i=-1: json.loads(state["requests"][i].content)
    yield state
    await state["client"].aclose()


@pytest.fixture
def mock_openai():
    """Mock AsyncOpenAI for OpenAI embedding tests."""
    # Patch at the module where it's imported, not where it's defined
    with patch("semantic_memory.memory.embeddings.AsyncOpenAI") as mock_client_class:
        mock_client = MagicMock()

        mock_item = MagicMock()
        mock_item.embedding = [0.5, 0.25, 0.125]

        mock_response = MagicMock()
        mock_response.data = [mock_item]

        mock_client.embeddings.create = AsyncMock(return_value=mock_response)
        mock_client.close = AsyncMock()
        mock_client_class.return_value = mock_client
        yield mock_client_class


# =============================================================================
# Config Fixtures
# =============================================================================


@pytest.fixture
def mock_env_vars(monkeypatch):
    """Set mock environment variables for testing."""
    monkeypatch.setenv("OPENAI_API_KEY", "test-openai-key")
    monkeypatch.setenv("EMBEDDING_BASE_URL", "http://embeddings.test")
