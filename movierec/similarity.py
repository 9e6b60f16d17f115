from __future__ import annotations

import numpy as np

from .errors import DimensionMismatchError


def cosine_similarity(a: np.ndarray, b: np.ndarray) -> float:
    """Cosine similarity of two equal-length feature vectors.

    A vector with zero norm (an item without recognised tags) scores 0.0
    against everything, itself and other zero vectors included.
    """
    a = np.asarray(a, dtype=np.float64)
    b = np.asarray(b, dtype=np.float64)
    if a.shape != b.shape:
        raise DimensionMismatchError(int(a.size), int(b.size))

    aa = float(np.dot(a, a))
    bb = float(np.dot(b, b))
    if aa == 0.0 or bb == 0.0:
        return 0.0

    sim = float(np.dot(a, b)) / float(np.sqrt(aa * bb))
    # Rounding can push parallel vectors a hair above 1.
    return min(sim, 1.0)
