"""
Embedding Service for generating vector representations.

Talks to an HTTP embedding endpoint by default, with the OpenAI SDK
available as an alternative backend. The Embedder wraps either one and
attaches provenance to every vector it produces.
"""

import logging
import math
from abc import ABC, abstractmethod
from datetime import datetime, timezone
from typing import Any, Literal

import httpx
from openai import AsyncOpenAI, OpenAIError

from ..errors import EmbeddingFailedError, InvalidInputError
from .base import Embedding

logger = logging.getLogger("semantic_memory.memory.embeddings")

DEFAULT_MODEL = "text-embedding-3-large"
DEFAULT_PATH = "/embeddings"


def _parse_vector(body: Any) -> list[float]:
    """
    Validate a decoded response body as a vector.

    A null body is treated as an empty vector. Anything other than a list
    of numbers is a protocol violation.
    """
    if body is None:
        return []
    if not isinstance(body, list):
        raise EmbeddingFailedError(
            f"Expected a JSON array from the embedding service, got {type(body).__name__}"
        )
    vector = []
    for value in body:
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise EmbeddingFailedError(
                f"Embedding vector contains a non-numeric value: {value!r}"
            )
        if not math.isfinite(value):
            raise EmbeddingFailedError(
                f"Embedding vector contains a non-finite value: {value!r}"
            )
        vector.append(float(value))
    return vector


class EmbeddingService(ABC):
    """Abstract interface for embedding generation."""

    @property
    @abstractmethod
    def model(self) -> str:
        """Return the model identifier sent with each request."""
        pass

    @abstractmethod
    async def embed(self, text: str) -> list[float]:
        """
        Generate the raw vector for a single text.

        Issues exactly one request to the backing service.

        Raises:
            EmbeddingFailedError: If the service fails or responds with
                something that is not a vector
        """
        pass

    async def close(self) -> None:
        """Release any underlying connections."""
        pass


class HttpEmbeddingService(EmbeddingService):
    """
    Embedding service backed by a plain HTTP endpoint.

    Posts ``{"input": text, "model": model}`` to ``base_url + path`` and
    expects the response body to be a JSON array of floats.
    """

    def __init__(
        self,
        base_url: str = "",
        model: str = DEFAULT_MODEL,
        path: str = DEFAULT_PATH,
        timeout: float = 30.0,
        client: httpx.AsyncClient | None = None,
    ):
        """
        Initialize the HTTP embedding service.

        Args:
            base_url: Root URL of the embedding service
            model: Model identifier sent with each request
            path: Relative path of the embeddings endpoint
            timeout: Request timeout in seconds
            client: Pre-built client to use instead of creating one. It is
                    not closed by close().
        """
        self.base_url = base_url
        self.path = path
        self.timeout = timeout
        self._model = model
        self._client = client
        self._owns_client = client is None
        logger.info(f"HttpEmbeddingService initialized: base_url={base_url}, model={model}")

    @property
    def model(self) -> str:
        return self._model

    def _get_client(self) -> httpx.AsyncClient:
        """Get or create the async HTTP client."""
        if self._client is None:
            self._client = httpx.AsyncClient(base_url=self.base_url, timeout=self.timeout)
        return self._client

    async def embed(self, text: str) -> list[float]:
        """Generate embedding for a single text."""
        client = self._get_client()
        payload = {"input": text, "model": self._model}

        try:
            response = await client.post(self.path, json=payload)
            response.raise_for_status()
            body = response.json()
        except httpx.HTTPStatusError as e:
            logger.error(f"Embedding service returned {e.response.status_code}")
            raise EmbeddingFailedError(
                f"Embedding service returned error {e.response.status_code}",
                status_code=e.response.status_code,
            ) from e
        except httpx.RequestError as e:
            logger.error(f"Failed to reach embedding service: {e}")
            raise EmbeddingFailedError(f"Failed to reach embedding service: {e}") from e
        except ValueError as e:
            logger.error(f"Embedding service returned invalid JSON: {e}")
            raise EmbeddingFailedError(f"Embedding service returned invalid JSON: {e}") from e

        return _parse_vector(body)

    async def close(self) -> None:
        if self._client is not None and self._owns_client:
            await self._client.aclose()
            self._client = None


class OpenAIEmbeddingService(EmbeddingService):
    """
    OpenAI embedding service using text-embedding-3 models.

    Supports native dimension reduction via the dimensions parameter.
    """

    def __init__(
        self,
        api_key: str,
        model: str = DEFAULT_MODEL,
        dimensions: int | None = None,
    ):
        """
        Initialize OpenAI embedding service.

        Args:
            api_key: OpenAI API key
            model: Model name (text-embedding-3-small or text-embedding-3-large)
            dimensions: Override output dimensions. If None, uses the model's default.
        """
        self._api_key = api_key
        self._model = model
        self._dimensions = dimensions
        self._client: AsyncOpenAI | None = None
        logger.info(f"OpenAIEmbeddingService initialized: model={model}")

    @property
    def model(self) -> str:
        return self._model

    def _get_client(self) -> AsyncOpenAI:
        """Get or create the async OpenAI client."""
        if self._client is None:
            self._client = AsyncOpenAI(api_key=self._api_key)
        return self._client

    async def embed(self, text: str) -> list[float]:
        """Generate embedding for a single text."""
        client = self._get_client()

        kwargs: dict[str, Any] = {
            "model": self._model,
            "input": text,
        }
        if self._dimensions is not None:
            kwargs["dimensions"] = self._dimensions

        try:
            response = await client.embeddings.create(**kwargs)
        except OpenAIError as e:
            logger.error(f"OpenAI embeddings error: {e}")
            raise EmbeddingFailedError(f"OpenAI embeddings request failed: {e}") from e

        if not response.data:
            raise EmbeddingFailedError("OpenAI embeddings response contained no data")

        return _parse_vector(response.data[0].embedding)

    async def close(self) -> None:
        if self._client is not None:
            await self._client.close()
            self._client = None


class Embedder:
    """
    Turns text into Embedding values.

    Validates input before any request is made and stamps each vector with
    its source text, model and completion time. No retries are attempted.
    """

    def __init__(self, service: EmbeddingService):
        self.service = service

    @property
    def model(self) -> str:
        return self.service.model

    async def embed(self, text: str) -> Embedding:
        """
        Embed a single text.

        Raises:
            InvalidInputError: If text is None, empty or whitespace only
            EmbeddingFailedError: If the embedding service fails
        """
        if not isinstance(text, str) or not text.strip():
            raise InvalidInputError("Input text cannot be null or empty.")

        logger.debug(f"Requesting embedding for input of length {len(text)}")
        vector = await self.service.embed(text)

        embedding = Embedding(
            source_text=text,
            vector=tuple(vector),
            model=self.service.model,
            created_at=datetime.now(timezone.utc),
        )
        logger.info(f"Generated {embedding.dimension}-dimensional embedding")
        return embedding

    async def close(self) -> None:
        await self.service.close()


def create_embedding_service(
    provider: Literal["http", "openai"] = "http",
    base_url: str = "",
    api_key: str = "",
    model: str = "",
    path: str = DEFAULT_PATH,
    timeout: float = 30.0,
    dimensions: int | None = None,
) -> EmbeddingService:
    """
    Factory function to create the appropriate embedding service.

    Args:
        provider: "http" or "openai"
        base_url: Root URL of the HTTP embedding service (required for http)
        api_key: OpenAI API key (required for openai)
        model: Model name (optional, defaults to text-embedding-3-large)
        path: Relative endpoint path for the http provider
        timeout: Request timeout in seconds for the http provider
        dimensions: Output dimension override for the openai provider

    Returns:
        Configured EmbeddingService instance
    """
    if provider == "http":
        if not base_url:
            raise ValueError("base_url required for http embedding provider")
        return HttpEmbeddingService(
            base_url=base_url,
            model=model or DEFAULT_MODEL,
            path=path,
            timeout=timeout,
        )
    elif provider == "openai":
        if not api_key:
            raise ValueError("OpenAI API key required for openai embedding provider")
        return OpenAIEmbeddingService(
            api_key=api_key,
            model=model or DEFAULT_MODEL,
            dimensions=dimensions,
        )
    else:
        raise ValueError(f"Unknown embedding provider: {provider}")
