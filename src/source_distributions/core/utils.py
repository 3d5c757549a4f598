"""
Core utility functions shared across the distribution and config modules.

This module provides the random stream helpers. Distributions never create
their own streams; callers obtain one here and pass it to ``sample``.
"""

from typing import Protocol

import numpy as np
from numpy.random import Generator


class DrawSource(Protocol):
    """Anything that yields one uniform real in [0, 1) per call."""

    def random(self) -> float: ...


def get_rng(seed: int | None = None) -> Generator:
    """
    Create a numpy random Generator with optional seed.

    Args:
        seed: Random seed for reproducibility. If None, uses entropy.

    Returns:
        A numpy random Generator instance.
    """
    return np.random.default_rng(seed)


def spawn_rngs(seed: int | None, n: int) -> list[Generator]:
    """
    Create independent random Generators from a single seed.

    Each worker sampling the same distributions concurrently should own
    one of these streams. The streams are derived from one SeedSequence,
    so a run is reproducible given ``seed`` and ``n``.

    Args:
        seed: Root seed. If None, uses entropy.
        n: Number of streams.

    Returns:
        List of ``n`` Generator instances.
    """
    if n < 1:
        raise ValueError(f"n must be positive, got {n}")

    children = np.random.SeedSequence(seed).spawn(n)
    return [np.random.default_rng(child) for child in children]
