"""
Load distribution configurations from YAML and XML files.

This module provides:
- ``load_config``: a ``SamplingConfig`` from YAML, validated with OmegaConf
- ``build_distribution``: the distribution a ``SamplingConfig`` describes
- ``load_distribution``: a distribution straight from a YAML or XML document
"""

import logging
from pathlib import Path
from typing import Any
from xml.etree import ElementTree as ET

from omegaconf import OmegaConf

from source_distributions.config.nodes import ConfigNode, MappingNode, XmlNode
from source_distributions.config.settings import SamplingConfig
from source_distributions.core.errors import ConfigurationError
from source_distributions.distributions.base import Distribution
from source_distributions.distributions.factory import distribution_from_node

logger = logging.getLogger(__name__)


def load_config(yaml_path: Path) -> SamplingConfig:
    """Load and validate a sampling configuration from YAML.

    Args:
        yaml_path: Path to YAML config file

    Returns:
        Validated SamplingConfig

    Raises:
        FileNotFoundError: If yaml_path doesn't exist
    """
    # Create schema from dataclass
    schema = OmegaConf.structured(SamplingConfig)

    if not yaml_path.exists():
        raise FileNotFoundError(f"Config file not found: {yaml_path}")

    user_config = OmegaConf.load(yaml_path)
    config = OmegaConf.merge(schema, user_config)

    # Convert to typed dataclass
    result = OmegaConf.to_object(config)
    assert isinstance(result, SamplingConfig)

    logger.info("Loaded sampling config from %s", yaml_path)
    return result


def build_distribution(config: SamplingConfig) -> Distribution:
    """Create the Distribution described by a SamplingConfig."""
    return distribution_from_node(MappingNode(config.distribution))


def _yaml_node(path: Path) -> ConfigNode:
    data = OmegaConf.to_container(OmegaConf.load(path), resolve=True)
    if not isinstance(data, dict):
        raise ConfigurationError(f"Expected a mapping at the top of {path}")
    mapping: dict[str, Any] = {str(k): v for k, v in data.items()}
    return MappingNode(mapping)


def load_distribution(path: Path, key: str | None = None) -> Distribution:
    """
    Load a distribution from a YAML or XML document.

    Files ending in ``.xml`` are read with ElementTree, anything else as YAML.

    Args:
        path: Document path.
        key: Name of the child node holding the distribution, e.g.
            ``energy`` inside a source definition. None uses the top level.

    Returns:
        The constructed distribution.

    Raises:
        FileNotFoundError: If path doesn't exist.
        ConfigurationError: If ``key`` is missing or the node is invalid.
    """
    if not path.exists():
        raise FileNotFoundError(f"Distribution file not found: {path}")

    node: ConfigNode | None
    if path.suffix.lower() == ".xml":
        node = XmlNode(ET.parse(path).getroot())
    else:
        node = _yaml_node(path)

    if key is not None:
        node = node.child(key)
        if node is None:
            raise ConfigurationError(f"No '{key}' node found in {path}")

    logger.info("Loading distribution from %s", path)
    return distribution_from_node(node)
