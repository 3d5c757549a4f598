"""
Errors raised while building distributions from configuration.

All of them are fatal at load time. They derive from ValueError so callers
that already guard against bad values keep working.
"""


class ConfigurationError(ValueError):
    """Raised when a distribution cannot be built from its configuration."""

    pass


class MissingTypeError(ConfigurationError):
    def __init__(self) -> None:
        super().__init__("Distribution type must be specified.")


class UnknownTypeError(ConfigurationError):
    def __init__(self, type_name: str) -> None:
        self.type_name = type_name
        super().__init__(f"Invalid distribution type: {type_name!r}")


class WrongParameterCountError(ConfigurationError):
    def __init__(self, distribution: str, expected: str, actual: int) -> None:
        self.distribution = distribution
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"{distribution} distribution must have {expected} parameters "
            f"specified, got {actual}."
        )


class UnknownInterpolationError(ConfigurationError):
    def __init__(self, interpolation: str) -> None:
        self.interpolation = interpolation
        super().__init__(
            f"Unknown interpolation type for distribution: {interpolation!r}"
        )


class InvalidParameterError(ConfigurationError):
    """Raised when a parameter value is outside the distribution's domain."""

    pass


class NonIncreasingGridError(ConfigurationError):
    """Raised when tabulated points are not in increasing order."""

    pass
