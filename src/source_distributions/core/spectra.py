"""
Numeric primitives for sampling fission and evaporation energy spectra.

Both functions consume a fixed number of draws from the stream they are
given, which keeps downstream draws reproducible:
    - maxwell_spectrum: 3 draws
    - watt_spectrum: 4 draws
"""

import math

from source_distributions.core.utils import DrawSource


def maxwell_spectrum(theta: float, rng: DrawSource) -> float:
    """
    Sample an energy from a Maxwellian spectrum.

    The density is proportional to sqrt(E) * exp(-E / theta), i.e. a gamma
    law with shape 3/2 and scale theta. The variate is the sum of an
    exponential and the square of a half-normal, both built from uniforms
    (rule C64 of the Monte Carlo Sampler).

    Args:
        theta: Spectrum temperature, in the same units as the result.
        rng: Uniform random stream.

    Returns:
        Sampled energy, >= 0.
    """
    r1 = rng.random()
    r2 = rng.random()
    r3 = rng.random()

    c = math.cos(0.5 * math.pi * r3)
    return -theta * (math.log(r1) + math.log(r2) * c * c)


def watt_spectrum(a: float, b: float, rng: DrawSource) -> float:
    """
    Sample an energy from a Watt fission spectrum.

    The density is proportional to exp(-E / a) * sinh(sqrt(b * E)). A
    Maxwellian variate with temperature ``a`` is shifted and smeared by one
    extra uniform draw (rule C82 of the Monte Carlo Sampler).

    Args:
        a: Spectrum temperature parameter.
        b: Spectrum shape parameter, in inverse energy units.
        rng: Uniform random stream.

    Returns:
        Sampled energy, >= 0.
    """
    w = maxwell_spectrum(a, rng)
    return w + 0.25 * a * a * b + (2.0 * rng.random() - 1.0) * math.sqrt(
        a * a * b * w
    )
