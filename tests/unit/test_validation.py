import numpy as np
import pytest
from scipy import stats

from source_distributions.core.utils import get_rng
from source_distributions.distributions import (
    Interpolation,
    Tabular,
    draw_samples,
)
from source_distributions.validation import (
    ValidationError,
    cdf_tolerance,
    empirical_cdf,
    ks_test,
    validate_tabular_cdf,
)


def test_empirical_cdf() -> None:
    samples = np.array([0.1, 0.2, 0.2, 0.9])
    result = empirical_cdf(samples, [0.0, 0.2, 0.5, 1.0])

    np.testing.assert_allclose(result, [0.0, 0.75, 0.75, 1.0])


def test_empirical_cdf_of_no_samples_is_zero() -> None:
    result = empirical_cdf(np.array([]), [0.0, 1.0])
    np.testing.assert_array_equal(result, [0.0, 0.0])


def test_cdf_tolerance_shrinks_with_sample_count() -> None:
    assert cdf_tolerance(100) == pytest.approx(0.25)
    assert cdf_tolerance(10_000) == pytest.approx(0.025)


def test_cdf_tolerance_rejects_empty() -> None:
    with pytest.raises(ValueError):
        cdf_tolerance(0)


def test_validate_tabular_cdf_passes() -> None:
    dist = Tabular(x=[0.0, 1.0, 3.0], p=[2.0, 1.0, 0.0])
    samples = draw_samples(dist, 5000, get_rng(42))

    validate_tabular_cdf(samples, dist)


def test_validate_tabular_cdf_fails() -> None:
    dist = Tabular(x=[0.0, 1.0, 3.0], p=[2.0, 1.0, 0.0])
    # Uniform on [0, 3] puts 1/3 of the mass below 1, not 1/2
    samples = get_rng(42).uniform(0.0, 3.0, size=5000)

    with pytest.raises(ValidationError, match="differs from tabulated"):
        validate_tabular_cdf(samples, dist)


def test_ks_test_accepts_matching_distribution() -> None:
    dist = Tabular(
        x=[0.0, 1.0, 2.0],
        p=[0.0, 1.0, 0.0],
        interpolation=Interpolation.LINEAR_LINEAR,
    )
    samples = draw_samples(dist, 5000, get_rng(7))

    _, pvalue = ks_test(samples, dist.cdf)
    assert pvalue > 1e-3


def test_ks_test_rejects_wrong_distribution() -> None:
    samples = get_rng(7).uniform(0.0, 2.0, size=5000)

    statistic, pvalue = ks_test(samples, stats.norm(loc=1.0).cdf)
    assert statistic > 0.05
    assert pvalue < 1e-6
