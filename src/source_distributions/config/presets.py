"""
Preset sampling configurations for common source spectra.

Energies in the presets are in MeV.
"""

from pathlib import Path

from source_distributions.config.loading import load_config
from source_distributions.config.settings import SamplingConfig

PARAMS_DIR = Path(__file__).parent / "params"


def get_available_presets() -> list[str]:
    return sorted(x.stem for x in PARAMS_DIR.glob("*.yaml"))


def get_preset(name: str) -> SamplingConfig:
    """Get a preset configuration by name."""
    config_path = PARAMS_DIR / f"{name}.yaml"
    if not config_path.exists():
        available_presets = get_available_presets()
        raise ValueError(
            f"Unknown preset: {name}. Available presets: {available_presets}"
        )
    return load_config(config_path)
