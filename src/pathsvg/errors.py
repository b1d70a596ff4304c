from __future__ import annotations


class PathSvgError(Exception):
    """Base class for errors raised while generating an artwork."""


class InvalidRange(PathSvgError, ValueError):
    def __init__(self, min_value: int, max_value: int) -> None:
        super().__init__(f"invalid range: min={min_value} > max={max_value}")
        self.min_value = min_value
        self.max_value = max_value


class InvalidProbability(PathSvgError, ValueError):
    def __init__(self, probability: int, modulus: int) -> None:
        super().__init__(f"probability must be in [0, {modulus}], got {probability}")
        self.probability = probability


class DegenerateCanvas(PathSvgError, ValueError):
    """Padding leaves no room for the inner waypoint box."""


class RemoteRandomnessUnavailable(PathSvgError, RuntimeError):
    """The remote randomness endpoint failed or answered with garbage."""
