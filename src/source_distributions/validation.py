"""
Statistical checks of sampled data against the distribution it came from.

At any point the empirical CDF of N samples has a standard deviation of
sqrt(F (1 - F) / N) <= 0.5 / sqrt(N), which sets the tolerances used here.
"""

from collections.abc import Callable

import numpy as np
from numpy.typing import ArrayLike, NDArray
from scipy import stats

from source_distributions.distributions.tabular import Tabular


class ValidationError(Exception):
    """Raised when validation fails."""

    pass


def empirical_cdf(
    samples: NDArray[np.float64], points: ArrayLike
) -> NDArray[np.float64]:
    """
    Fraction of samples at or below each point.

    Args:
        samples: Sampled values.
        points: Points at which to evaluate.

    Returns:
        Array with the same length as ``points``.
    """
    sorted_samples = np.sort(np.asarray(samples, dtype=np.float64))
    points = np.atleast_1d(np.asarray(points, dtype=np.float64))
    if sorted_samples.size == 0:
        return np.zeros_like(points)

    counts = np.searchsorted(sorted_samples, points, side="right")
    result: NDArray[np.float64] = counts / sorted_samples.size
    return result


def cdf_tolerance(n_samples: int, n_sigma: float = 5.0) -> float:
    """Tolerance on an empirical CDF value from ``n_samples`` draws."""
    if n_samples < 1:
        raise ValueError(f"n_samples must be positive, got {n_samples}")
    return float(n_sigma * 0.5 / np.sqrt(n_samples))


def validate_tabular_cdf(
    samples: NDArray[np.float64],
    tabular: Tabular,
    n_sigma: float = 5.0,
) -> None:
    """
    Validate that samples reproduce a tabular distribution's CDF table.

    Args:
        samples: Values sampled from ``tabular``.
        tabular: The distribution.
        n_sigma: Allowed deviation in standard deviations.

    Raises:
        ValidationError: If the empirical CDF at any grid point deviates
            from the stored table by more than the tolerance.
    """
    observed = empirical_cdf(samples, tabular.x)
    tolerance = cdf_tolerance(len(samples), n_sigma)

    deviation = np.abs(observed - tabular.c)
    worst = int(np.argmax(deviation))
    if deviation[worst] > tolerance:
        raise ValidationError(
            f"Empirical CDF {observed[worst]:.4f} at x={tabular.x[worst]} "
            f"differs from tabulated {tabular.c[worst]:.4f} by more than "
            f"tolerance {tolerance:.4f}"
        )


def ks_test(
    samples: NDArray[np.float64],
    cdf: Callable[..., object],
) -> tuple[float, float]:
    """
    One-sample Kolmogorov-Smirnov test of samples against a CDF.

    Args:
        samples: Sampled values.
        cdf: Vectorized CDF, e.g. ``Tabular.cdf`` or a frozen scipy
            distribution's ``cdf``.

    Returns:
        Tuple of (statistic, p-value).
    """
    result = stats.kstest(samples, cdf)
    return float(result.statistic), float(result.pvalue)
