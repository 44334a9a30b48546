"""
Semantic Memory - embed, store and recall text by meaning.

This package turns text into vector embeddings through an external
embedding service, keeps the resulting records in a vector store and
answers nearest-neighbor queries by cosine similarity.
"""

__version__ = "1.0.0"
