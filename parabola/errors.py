"""Exception types raised by the parabola package."""


class ParabolaError(Exception):
    """Base class for all parabola errors."""


class ConfigError(ParabolaError):
    """A configuration value could not be parsed."""

    def __init__(self, key: str, value: str, expected: str):
        self.key = key
        self.value = value
        super().__init__(f"{key}={value!r} is not a valid {expected}")


class FlightFinishedError(ParabolaError):
    """step() was called on a flight that already reached its outcome."""
