"""
Tabulated distributions sampled by inverting a piecewise CDF.

Tabular holds density values ``p`` on a grid ``x`` and builds the matching
cumulative table ``c`` for either histogram (piecewise-constant density) or
linear-linear (piecewise-linear density) interpolation. Equiprobable holds
bin boundaries that each enclose the same probability mass.
"""

import math
from dataclasses import InitVar, dataclass, field

import numpy as np
from numpy.typing import ArrayLike, NDArray

from source_distributions.core.errors import (
    InvalidParameterError,
    NonIncreasingGridError,
    UnknownInterpolationError,
)
from source_distributions.core.utils import DrawSource
from source_distributions.distributions.base import (
    Distribution,
    as_readonly_array,
)
from source_distributions.distributions.enums import Interpolation


def build_cdf(
    x: NDArray[np.float64],
    p: NDArray[np.float64],
    interpolation: Interpolation,
) -> NDArray[np.float64]:
    """
    Integrate a tabulated density into an (unnormalized) cumulative table.

    Args:
        x: Grid points, strictly increasing.
        p: Density values at the grid points.
        interpolation: How the density varies between grid points.

    Returns:
        Array ``c`` with ``c[0] == 0`` and ``c[i]`` the integral of the
        density from ``x[0]`` to ``x[i]``.
    """
    widths = np.diff(x)
    if interpolation is Interpolation.HISTOGRAM:
        areas = p[:-1] * widths
    else:
        areas = 0.5 * (p[:-1] + p[1:]) * widths

    c = np.empty_like(x)
    c[0] = 0.0
    # Sequential sum so each entry matches c[i-1] + area[i-1]
    np.cumsum(areas, out=c[1:])
    return c


@dataclass(frozen=True, eq=False)
class Tabular(Distribution):
    """
    Distribution defined by a tabulated density.

    ``p`` and ``c`` are normalized on construction so that ``c[-1] == 1``.
    A cumulative table may be supplied directly through ``cumulative`` (for
    example from evaluated nuclear data); otherwise ``c`` is integrated from
    ``p``.

    Examples:
        >>> # Triangular density on [0, 2]
        >>> dist = Tabular(
        ...     x=[0.0, 1.0, 2.0],
        ...     p=[0.0, 1.0, 0.0],
        ...     interpolation=Interpolation.LINEAR_LINEAR,
        ... )
    """

    x: NDArray[np.float64]
    p: NDArray[np.float64]
    interpolation: Interpolation = Interpolation.HISTOGRAM
    cumulative: InitVar[ArrayLike | None] = None
    c: NDArray[np.float64] = field(init=False)
    _slopes: NDArray[np.float64] = field(init=False, repr=False)

    def __post_init__(self, cumulative: ArrayLike | None) -> None:
        try:
            interpolation = Interpolation(self.interpolation)
        except ValueError:
            raise UnknownInterpolationError(str(self.interpolation)) from None

        x = as_readonly_array(self.x)
        p = np.array(self.p, dtype=np.float64).reshape(-1)

        if x.size != p.size:
            raise InvalidParameterError(
                f"Number of grid points ({x.size}) must match number of "
                f"density values ({p.size})"
            )
        if x.size < 2:
            raise InvalidParameterError(
                "Tabular distribution needs at least two grid points"
            )
        if not np.all(np.diff(x) > 0):
            raise NonIncreasingGridError(
                "Tabular grid points must be strictly increasing"
            )
        if np.any(p < 0):
            raise InvalidParameterError("Density values must be non-negative")

        if cumulative is not None:
            c = np.array(cumulative, dtype=np.float64).reshape(-1)
            if c.size != x.size:
                raise InvalidParameterError(
                    f"Number of cumulative values ({c.size}) must match "
                    f"number of grid points ({x.size})"
                )
            if c[0] != 0.0 or np.any(np.diff(c) < 0):
                raise InvalidParameterError(
                    "Cumulative values must start at zero and be "
                    "non-decreasing"
                )
        else:
            c = build_cdf(x, p, interpolation)

        total = c[-1]
        if not total > 0:
            raise InvalidParameterError(
                "Tabulated density must enclose a positive probability"
            )

        p /= total
        c /= total
        p.setflags(write=False)
        c.setflags(write=False)

        slopes = np.diff(p) / np.diff(x)
        slopes.setflags(write=False)

        object.__setattr__(self, "interpolation", interpolation)
        object.__setattr__(self, "x", x)
        object.__setattr__(self, "p", p)
        object.__setattr__(self, "c", c)
        object.__setattr__(self, "_slopes", slopes)

    def _bin(self, r: float) -> int:
        """Smallest bin i with r <= c[i + 1], clamped to the last bin."""
        j = int(np.searchsorted(self.c, r, side="left"))
        return min(max(j - 1, 0), self.x.size - 2)

    def sample(self, rng: DrawSource) -> float:
        r = rng.random()
        i = self._bin(r)

        x_i = float(self.x[i])
        p_i = float(self.p[i])
        c_i = float(self.c[i])

        if self.interpolation is Interpolation.HISTOGRAM:
            if p_i > 0.0:
                return x_i + (r - c_i) / p_i
            return x_i

        m = float(self._slopes[i])
        if m == 0.0:
            if p_i > 0.0:
                return x_i + (r - c_i) / p_i
            return x_i

        # Radicand can dip below zero by rounding at bin edges
        radicand = max(0.0, p_i * p_i + 2.0 * m * (r - c_i))
        return x_i + (math.sqrt(radicand) - p_i) / m

    def cdf(self, values: ArrayLike) -> NDArray[np.float64] | float:
        """
        Evaluate the cumulative distribution implied by the interpolation.

        Args:
            values: Point or array of points.

        Returns:
            P(X <= value), same shape as ``values``.
        """
        v = np.asarray(values, dtype=np.float64)

        i = np.clip(
            np.searchsorted(self.x, v, side="right") - 1, 0, self.x.size - 2
        )
        dx = v - self.x[i]
        result = self.c[i] + self.p[i] * dx
        if self.interpolation is Interpolation.LINEAR_LINEAR:
            result = result + 0.5 * self._slopes[i] * dx * dx

        result = np.where(v <= self.x[0], 0.0, result)
        result = np.where(v >= self.x[-1], 1.0, result)
        result = np.clip(result, 0.0, 1.0)

        if result.ndim == 0:
            return float(result)
        return result


@dataclass(frozen=True, eq=False)
class Equiprobable(Distribution):
    """
    Distribution whose ``n`` boundaries split the domain into ``n - 1``
    bins of equal probability, with uniform density inside each bin.
    """

    x: NDArray[np.float64]

    def __post_init__(self) -> None:
        x = as_readonly_array(self.x)
        if x.size < 2:
            raise InvalidParameterError(
                "Equiprobable distribution needs at least two boundaries"
            )
        if np.any(np.diff(x) < 0):
            raise NonIncreasingGridError(
                "Equiprobable boundaries must be non-decreasing"
            )
        object.__setattr__(self, "x", x)

    def sample(self, rng: DrawSource) -> float:
        n_bins = self.x.size - 1

        scaled = n_bins * rng.random()
        i = min(math.floor(scaled), n_bins - 1)

        x_left = float(self.x[i])
        x_right = float(self.x[i + 1])
        return x_left + (scaled - i) * (x_right - x_left)
