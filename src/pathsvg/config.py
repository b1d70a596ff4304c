from __future__ import annotations

from dataclasses import dataclass

NORMALIZATION_MODULUS = 1_000_000

# Distinguishes these draws from any other consumer of a shared endpoint.
SCOPE_TAG = "PATH"

STEP_COUNT_RANGE = (1, 50)
SHARPNESS_RANGE = (1, 7)
OFF_CANVAS_MARGIN = 50

# Jitter bound is 1/JITTER_DIVISOR of the canvas dimension.
JITTER_DIVISOR = 100
PADDING_MIN_DIVISOR = 10
PADDING_MAX_DIVISOR = 3


@dataclass(frozen=True)
class CanvasConfig:
    width: int = 1024
    height: int = 1024

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError(
                f"canvas size must be positive, got {self.width}x{self.height}"
            )


DEFAULT_CANVAS = CanvasConfig()


@dataclass(frozen=True)
class RandomnessConfig:
    """
    endpoint: URL of a remote randomness service; None computes draws locally.
    timeout: seconds per request to the remote endpoint.
    scope: scope tag sent with (or hashed into) every draw.
    """

    endpoint: str | None = None
    timeout: float = 10.0
    scope: str = SCOPE_TAG
