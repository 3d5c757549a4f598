"""
Build distributions from configuration nodes.

Each distribution type registers a builder that parses its fields from a
``ConfigNode``. ``distribution_from_node`` reads the node's ``type`` field and
dispatches to the matching builder.
"""

import logging
from collections.abc import Callable

import numpy as np

from source_distributions.config.nodes import ConfigNode
from source_distributions.core.errors import (
    MissingTypeError,
    UnknownInterpolationError,
    UnknownTypeError,
    WrongParameterCountError,
)
from source_distributions.distributions.base import Distribution
from source_distributions.distributions.discrete import Discrete
from source_distributions.distributions.enums import Interpolation
from source_distributions.distributions.parametric import (
    Maxwell,
    Uniform,
    Watt,
)
from source_distributions.distributions.tabular import Tabular

logger = logging.getLogger(__name__)

DistributionBuilder = Callable[[ConfigNode], Distribution]


class DistributionRegistry:
    def __init__(self) -> None:
        self._builders: dict[str, DistributionBuilder] = {}

    def register(
        self, name: str
    ) -> Callable[[DistributionBuilder], DistributionBuilder]:
        def decorator(func: DistributionBuilder) -> DistributionBuilder:
            self._builders[name] = func
            return func

        return decorator

    def names(self) -> list[str]:
        return sorted(self._builders)

    def build(self, name: str, node: ConfigNode) -> Distribution:
        if name not in self._builders:
            raise UnknownTypeError(name)
        return self._builders[name](node)


registry = DistributionRegistry()


def _split_pairs(
    params: list[float], distribution: str
) -> tuple[list[float], list[float]]:
    """Split a flat array of 2n values into its two halves."""
    if len(params) == 0 or len(params) % 2 != 0:
        raise WrongParameterCountError(
            distribution, "a non-zero even number of", len(params)
        )
    n = len(params) // 2
    return params[:n], params[n:]


@registry.register("uniform")
def uniform(node: ConfigNode) -> Uniform:
    """Uniform distribution from ``parameters = "a b"``."""
    params = node.get_array("parameters")
    if len(params) != 2:
        raise WrongParameterCountError("Uniform", "two", len(params))
    return Uniform(a=params[0], b=params[1])


@registry.register("maxwell")
def maxwell(node: ConfigNode) -> Maxwell:
    """Maxwell spectrum from ``parameters = "theta"``."""
    params = node.get_array("parameters")
    if len(params) != 1:
        raise WrongParameterCountError("Maxwell", "one", len(params))
    return Maxwell(theta=params[0])


@registry.register("watt")
def watt(node: ConfigNode) -> Watt:
    """Watt spectrum from ``parameters = "a b"``."""
    params = node.get_array("parameters")
    if len(params) != 2:
        raise WrongParameterCountError("Watt", "two", len(params))
    return Watt(a=params[0], b=params[1])


@registry.register("discrete")
def discrete(node: ConfigNode) -> Discrete:
    """
    Discrete distribution from ``parameters = "x_1 .. x_n p_1 .. p_n"``.
    """
    x, p = _split_pairs(node.get_array("parameters"), "Discrete")
    return Discrete(x=np.asarray(x), p=np.asarray(p))


@registry.register("tabular")
def tabular(node: ConfigNode) -> Tabular:
    """
    Tabular distribution from ``parameters = "x_1 .. x_n p_1 .. p_n"`` and
    an optional ``interpolation`` field (histogram by default).
    """
    interpolation = Interpolation.HISTOGRAM
    if node.has("interpolation"):
        text = node.get_value("interpolation")
        try:
            interpolation = Interpolation(text)
        except ValueError:
            raise UnknownInterpolationError(text) from None

    x, p = _split_pairs(node.get_array("parameters"), "Tabular")
    if len(x) < 2:
        raise WrongParameterCountError(
            "Tabular", "at least four", 2 * len(x)
        )
    return Tabular(
        x=np.asarray(x), p=np.asarray(p), interpolation=interpolation
    )


def distribution_from_node(node: ConfigNode) -> Distribution:
    """
    Create a Distribution from a configuration node.

    Args:
        node: Node with a ``type`` field and the fields that type needs.

    Returns:
        The constructed distribution. The caller owns it.

    Raises:
        MissingTypeError: If the node has no ``type`` field.
        UnknownTypeError: If the type is not registered.
        ConfigurationError: If the type's own fields are invalid.
    """
    if not node.has("type"):
        raise MissingTypeError()

    name = node.get_value("type", lowercase=True, strip=True)
    distribution = registry.build(name, node)
    logger.debug("Built %s distribution: %r", name, distribution)
    return distribution
