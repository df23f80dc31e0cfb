"""Deterministic seeding utilities for reproducibility.

Randomized checks draw from their own NumPy Generator so a seed never
touches the global ``random`` or ``np.random`` state.
"""

from typing import Optional

import numpy as np


def make_rng(seed: Optional[int] = None) -> np.random.Generator:
    """Return an independent NumPy Generator seeded with ``seed``.

    Args:
        seed: The seed value to use. If None, fresh OS entropy is used.

    Example:
        >>> from poker_hands.utils import make_rng
        >>> make_rng(42).integers(0, 52)  # doctest: +SKIP
    """
    return np.random.default_rng(seed)
