"""
Discrete distribution over a finite set of outcomes.
"""

from dataclasses import dataclass, field

import numpy as np
from numpy.typing import NDArray

from source_distributions.core.errors import InvalidParameterError
from source_distributions.core.utils import DrawSource
from source_distributions.distributions.base import (
    Distribution,
    as_readonly_array,
)


@dataclass(frozen=True, eq=False)
class Discrete(Distribution):
    """
    Distribution over outcomes ``x`` with probabilities proportional to ``p``.

    The weights are renormalized to sum to one on construction.

    Examples:
        >>> dist = Discrete(x=[1.1732, 1.3325], p=[0.9985, 0.9998])
    """

    x: NDArray[np.float64]
    p: NDArray[np.float64]
    _cdf: NDArray[np.float64] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        x = as_readonly_array(self.x)
        p = np.array(self.p, dtype=np.float64).reshape(-1)

        if x.size == 0:
            raise InvalidParameterError(
                "Discrete distribution needs at least one outcome"
            )
        if x.size != p.size:
            raise InvalidParameterError(
                f"Number of outcomes ({x.size}) must match number of "
                f"weights ({p.size})"
            )
        if np.any(p < 0):
            raise InvalidParameterError("Weights must be non-negative")

        total = p.sum()
        if not total > 0:
            raise InvalidParameterError("Weights must have a positive sum")

        p /= total
        p.setflags(write=False)

        # Running sum in array order, same rounding as an explicit scan
        cdf = np.cumsum(p)
        cdf.setflags(write=False)

        object.__setattr__(self, "x", x)
        object.__setattr__(self, "p", p)
        object.__setattr__(self, "_cdf", cdf)

    def sample(self, rng: DrawSource) -> float:
        n = self.x.size
        # A single outcome needs no draw
        if n == 1:
            return float(self.x[0])

        r = rng.random()
        i = int(np.searchsorted(self._cdf, r, side="right"))
        # Rounding can leave the last cumulative weight just below r
        return float(self.x[min(i, n - 1)])
