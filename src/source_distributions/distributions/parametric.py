"""
Closed-form distributions described by a few scalar parameters.

Uniform is sampled directly. Maxwell and Watt delegate to the spectrum
primitives in ``core.spectra``; only parameter handling lives here.
"""

from dataclasses import dataclass

from source_distributions.core.errors import InvalidParameterError
from source_distributions.core.spectra import maxwell_spectrum, watt_spectrum
from source_distributions.core.utils import DrawSource
from source_distributions.distributions.base import Distribution


@dataclass(frozen=True)
class Uniform(Distribution):
    """Uniform distribution on [a, b)."""

    a: float
    b: float

    def __post_init__(self) -> None:
        if self.a > self.b:
            raise InvalidParameterError(
                f"Uniform lower bound {self.a} exceeds upper bound {self.b}"
            )

    def sample(self, rng: DrawSource) -> float:
        return self.a + rng.random() * (self.b - self.a)


@dataclass(frozen=True)
class Maxwell(Distribution):
    """
    Maxwellian spectrum with density proportional to sqrt(E) exp(-E/theta).

    Attributes:
        theta: Spectrum temperature. Mean energy is 1.5 * theta.
    """

    theta: float

    def __post_init__(self) -> None:
        if not self.theta > 0:
            raise InvalidParameterError(
                f"Maxwell temperature must be positive, got {self.theta}"
            )

    @property
    def mean(self) -> float:
        return 1.5 * self.theta

    def sample(self, rng: DrawSource) -> float:
        return maxwell_spectrum(self.theta, rng)


@dataclass(frozen=True)
class Watt(Distribution):
    """
    Watt fission spectrum with density proportional to
    exp(-E/a) sinh(sqrt(b E)).

    Attributes:
        a: Temperature parameter, > 0.
        b: Shape parameter in inverse energy units, >= 0.

    Examples:
        >>> # U-235 thermal fission, energies in MeV
        >>> dist = Watt(a=0.988, b=2.249)
    """

    a: float
    b: float

    def __post_init__(self) -> None:
        if not self.a > 0:
            raise InvalidParameterError(
                f"Watt parameter a must be positive, got {self.a}"
            )
        if self.b < 0:
            raise InvalidParameterError(
                f"Watt parameter b must be non-negative, got {self.b}"
            )

    @property
    def mean(self) -> float:
        return 1.5 * self.a + 0.25 * self.a * self.a * self.b

    def sample(self, rng: DrawSource) -> float:
        return watt_spectrum(self.a, self.b, rng)
