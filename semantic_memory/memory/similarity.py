"""
Cosine similarity scoring for embedding vectors.
"""

from typing import Sequence

import numpy as np

# Added to the denominator so all-zero vectors score 0 instead of dividing by zero
EPSILON = 1e-9


def cosine_similarity(
    a: Sequence[float] | None,
    b: Sequence[float] | None,
) -> float:
    """
    Compute the cosine similarity between two vectors.

    Returns 0.0 when either vector is missing or empty, or when their
    lengths differ. The result is not clamped, so values at the very edge
    of [-1, 1] may fall slightly inside it.
    """
    if a is None or b is None or len(a) == 0 or len(b) == 0 or len(a) != len(b):
        return 0.0

    vec_a = np.asarray(a, dtype=float)
    vec_b = np.asarray(b, dtype=float)

    return float(
        np.dot(vec_a, vec_b) / (np.linalg.norm(vec_a) * np.linalg.norm(vec_b) + EPSILON)
    )
