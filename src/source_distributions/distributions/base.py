"""
Base contract shared by all source distributions.

A distribution is built once during configuration loading and is immutable
afterwards. Sampling takes the random stream as an argument, so the same
instance can be sampled concurrently by workers that each own a stream.
"""

from abc import ABC, abstractmethod

import numpy as np
from numpy.typing import NDArray

from source_distributions.core.utils import DrawSource, get_rng


class Distribution(ABC):
    """Abstract base class for a univariate source distribution."""

    @abstractmethod
    def sample(self, rng: DrawSource) -> float:
        """
        Sample one value.

        Args:
            rng: Uniform random stream. Each call consumes draws from it.

        Returns:
            Sampled value.
        """
        ...


def as_readonly_array(values: object) -> NDArray[np.float64]:
    """Copy values into a float64 array that cannot be written to."""
    array = np.array(values, dtype=np.float64).reshape(-1)
    array.setflags(write=False)
    return array


def draw_samples(
    distribution: Distribution,
    n: int,
    rng: DrawSource | None = None,
) -> NDArray[np.float64]:
    """
    Draw consecutive samples from a distribution.

    Args:
        distribution: Distribution to sample.
        n: Number of samples.
        rng: Random number generator.

    Returns:
        Array of shape (n,) with sampled values.
    """
    if n < 0:
        raise ValueError(f"n must be non-negative, got {n}")

    if rng is None:
        rng = get_rng()

    samples = np.empty(n, dtype=np.float64)
    for i in range(n):
        samples[i] = distribution.sample(rng)
    return samples
