from dataclasses import dataclass
from typing import Any

from omegaconf import MISSING

DEFAULT_N_SAMPLES = 10_000


@dataclass
class SamplingConfig:
    """Configuration for drawing samples from one source distribution.

    Attributes:
        distribution: Distribution fields (type, parameters, interpolation).
        n_samples: Number of samples to draw.
        random_seed: Seed for the random stream. None uses entropy.
    """

    distribution: dict[str, Any] = MISSING
    n_samples: int = DEFAULT_N_SAMPLES
    random_seed: int | None = None

    def __post_init__(self) -> None:
        if self.n_samples < 1:
            raise ValueError(
                f"n_samples must be positive, got {self.n_samples}"
            )
