from collections.abc import Callable, Sequence

import pytest


class FixedDraws:
    """Uniform stream that replays a scripted sequence of draws."""

    def __init__(self, values: Sequence[float]) -> None:
        self._values = list(values)
        self.count = 0

    def random(self) -> float:
        if self.count >= len(self._values):
            raise AssertionError("Ran out of scripted draws")
        value = self._values[self.count]
        self.count += 1
        return value


@pytest.fixture
def fixed_draws() -> Callable[..., FixedDraws]:
    """Factory for scripted uniform streams: ``fixed_draws(0.1, 0.5)``."""

    def make(*values: float) -> FixedDraws:
        return FixedDraws(values)

    return make
