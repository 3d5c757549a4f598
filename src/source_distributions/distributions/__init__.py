"""
Source distributions and the factory that builds them from configuration.
"""

from source_distributions.distributions.base import Distribution, draw_samples
from source_distributions.distributions.discrete import Discrete
from source_distributions.distributions.enums import Interpolation
from source_distributions.distributions.factory import (
    DistributionRegistry,
    distribution_from_node,
    registry,
)
from source_distributions.distributions.parametric import (
    Maxwell,
    Uniform,
    Watt,
)
from source_distributions.distributions.tabular import Equiprobable, Tabular

__all__ = [
    "Discrete",
    "Distribution",
    "DistributionRegistry",
    "Equiprobable",
    "Interpolation",
    "Maxwell",
    "Tabular",
    "Uniform",
    "Watt",
    "distribution_from_node",
    "draw_samples",
    "registry",
]
