"""
Error types raised by the semantic memory layer.

Cancellation is not represented here: an aborted embedding call surfaces
as the asyncio.CancelledError raised by the running task.
"""


class SemanticMemoryError(Exception):
    """Base class for all semantic memory errors."""


class InvalidInputError(SemanticMemoryError, ValueError):
    """A required argument was missing or blank."""


class EmbeddingFailedError(SemanticMemoryError):
    """The embedding service returned an error or an unusable response."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code
