"""Tests for building distributions from configuration nodes."""

from typing import Any
from xml.etree import ElementTree as ET

import numpy as np
import pytest

from source_distributions.config.nodes import MappingNode, XmlNode
from source_distributions.core.errors import (
    ConfigurationError,
    InvalidParameterError,
    MissingTypeError,
    NonIncreasingGridError,
    UnknownInterpolationError,
    UnknownTypeError,
    WrongParameterCountError,
)
from source_distributions.distributions import (
    Discrete,
    DistributionRegistry,
    Interpolation,
    Maxwell,
    Tabular,
    Uniform,
    Watt,
    distribution_from_node,
    registry,
)


def _build(**fields: Any) -> Any:
    return distribution_from_node(MappingNode(fields))


class TestDistributionFromNode:
    def test_uniform(self) -> None:
        dist = _build(type="uniform", parameters=[0.0, 2.0])
        assert dist == Uniform(a=0.0, b=2.0)

    def test_maxwell(self) -> None:
        dist = _build(type="maxwell", parameters="1.33")
        assert dist == Maxwell(theta=1.33)

    def test_watt(self) -> None:
        dist = _build(type="watt", parameters="0.988 2.249")
        assert dist == Watt(a=0.988, b=2.249)

    def test_discrete_splits_outcomes_and_weights(self) -> None:
        dist = _build(type="discrete", parameters="1 2 3 1 1 2")

        assert isinstance(dist, Discrete)
        np.testing.assert_allclose(dist.x, [1.0, 2.0, 3.0])
        np.testing.assert_allclose(dist.p, [0.25, 0.25, 0.5])

    def test_tabular_defaults_to_histogram(self) -> None:
        dist = _build(type="tabular", parameters=[0.0, 1.0, 2.0, 1, 1, 1])

        assert isinstance(dist, Tabular)
        assert dist.interpolation is Interpolation.HISTOGRAM
        np.testing.assert_allclose(dist.x, [0.0, 1.0, 2.0])

    def test_tabular_linear_linear(self) -> None:
        dist = _build(
            type="tabular",
            interpolation="linear-linear",
            parameters="0 1 2 0 1 0",
        )

        assert isinstance(dist, Tabular)
        assert dist.interpolation is Interpolation.LINEAR_LINEAR

    @pytest.mark.parametrize(
        "type_name", ["Uniform", "  UNIFORM\n", "uniform "]
    )
    def test_type_is_case_and_whitespace_insensitive(
        self, type_name: str
    ) -> None:
        dist = _build(type=type_name, parameters="0 1")
        assert isinstance(dist, Uniform)

    def test_array_stops_at_first_non_numeric_token(self) -> None:
        dist = _build(type="uniform", parameters="0 1 end 5")
        assert dist == Uniform(a=0.0, b=1.0)


class TestFactoryErrors:
    def test_missing_type(self) -> None:
        with pytest.raises(MissingTypeError):
            _build(parameters="0 1")

    def test_unknown_type(self) -> None:
        with pytest.raises(UnknownTypeError, match="banana") as exc_info:
            _build(type="banana", parameters="0 1")
        assert exc_info.value.type_name == "banana"

    def test_equiprobable_has_no_configuration_path(self) -> None:
        with pytest.raises(UnknownTypeError):
            _build(type="equiprobable", parameters="0 1 2")

    @pytest.mark.parametrize("type_name", ["uniform", "watt"])
    @pytest.mark.parametrize("parameters", ["1.0", "1.0 2.0 3.0"])
    def test_two_parameter_types_reject_other_counts(
        self, type_name: str, parameters: str
    ) -> None:
        with pytest.raises(WrongParameterCountError) as exc_info:
            _build(type=type_name, parameters=parameters)
        assert exc_info.value.actual == len(parameters.split())

    @pytest.mark.parametrize("parameters", ["", "1.0 2.0"])
    def test_maxwell_needs_one_parameter(self, parameters: str) -> None:
        with pytest.raises(WrongParameterCountError):
            _build(type="maxwell", parameters=parameters)

    def test_missing_parameters(self) -> None:
        with pytest.raises(WrongParameterCountError):
            _build(type="uniform")

    @pytest.mark.parametrize("parameters", ["", "1 2 3"])
    def test_discrete_needs_even_parameter_count(
        self, parameters: str
    ) -> None:
        with pytest.raises(WrongParameterCountError):
            _build(type="discrete", parameters=parameters)

    def test_tabular_needs_two_points(self) -> None:
        with pytest.raises(WrongParameterCountError):
            _build(type="tabular", parameters="1 1")

    def test_unknown_interpolation(self) -> None:
        with pytest.raises(UnknownInterpolationError, match="spline"):
            _build(
                type="tabular",
                interpolation="spline",
                parameters="0 1 2 1 1 1",
            )

    @pytest.mark.parametrize(
        "text",
        [" Linear-Linear ", "Linear-Linear", " histogram ", "HISTOGRAM"],
    )
    def test_interpolation_must_match_exactly(self, text: str) -> None:
        with pytest.raises(UnknownInterpolationError):
            _build(
                type="tabular",
                interpolation=text,
                parameters="0 1 2 0 1 0",
            )

    def test_tabular_unordered_grid(self) -> None:
        with pytest.raises(NonIncreasingGridError):
            _build(type="tabular", parameters="0 2 1 1 1 1")

    def test_invalid_value_is_configuration_error(self) -> None:
        with pytest.raises(InvalidParameterError):
            _build(type="maxwell", parameters="-1")

    def test_errors_share_base_class(self) -> None:
        with pytest.raises(ConfigurationError):
            _build(type="banana")
        with pytest.raises(ValueError):
            _build(type="banana")


class TestXmlNodes:
    def test_attributes(self) -> None:
        element = ET.fromstring(
            '<energy type="watt" parameters="0.988 2.249" />'
        )
        dist = distribution_from_node(XmlNode(element))
        assert dist == Watt(a=0.988, b=2.249)

    def test_child_elements(self) -> None:
        element = ET.fromstring(
            "<energy>"
            "<type>tabular</type>"
            "<interpolation>linear-linear</interpolation>"
            "<parameters>0 1 2 0 1 0</parameters>"
            "</energy>"
        )
        dist = distribution_from_node(XmlNode(element))

        assert isinstance(dist, Tabular)
        assert dist.interpolation is Interpolation.LINEAR_LINEAR

    def test_matches_mapping_node(self) -> None:
        element = ET.fromstring('<angle type="uniform" parameters="-1 1" />')
        from_xml = distribution_from_node(XmlNode(element))
        from_mapping = _build(type="uniform", parameters=[-1, 1])

        assert from_xml == from_mapping

    def test_missing_type(self) -> None:
        element = ET.fromstring('<energy parameters="1.0" />')
        with pytest.raises(MissingTypeError):
            distribution_from_node(XmlNode(element))


class TestDistributionRegistry:
    def test_registered_types(self) -> None:
        assert registry.names() == [
            "discrete",
            "maxwell",
            "tabular",
            "uniform",
            "watt",
        ]

    def test_register_and_build(self) -> None:
        test_registry = DistributionRegistry()

        @test_registry.register("point")
        def point(node: Any) -> Discrete:
            value = node.get_array("parameters")[0]
            return Discrete(x=np.array([value]), p=np.array([1.0]))

        dist = test_registry.build("point", MappingNode({"parameters": "4"}))

        assert isinstance(dist, Discrete)
        assert dist.x[0] == 4.0

    def test_build_unknown_raises(self) -> None:
        test_registry = DistributionRegistry()

        with pytest.raises(UnknownTypeError):
            test_registry.build("unknown", MappingNode({}))
