from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

import requests  # type: ignore[reportMissingModuleSource]

from ..utils import debug
from .config import NORMALIZATION_MODULUS, SCOPE_TAG, RandomnessConfig
from .errors import InvalidRange, RemoteRandomnessUnavailable
from .prf import draw, normalized, ranged, scale_normalized


@runtime_checkable
class RandomnessPort(Protocol):
    def ranged_draw(
        self,
        seed: int,
        label: str,
        occurrence: int,
        min_value: int,
        max_value: int,
    ) -> int: ...


def normalized_draw(scope: str, seed: int, label: str, occurrence: int) -> int:
    """The value a conforming remote endpoint returns, in [0, N)."""
    return normalized(draw(scope, seed, label, occurrence))


class LocalRandomness:
    def __init__(self, scope: str = SCOPE_TAG) -> None:
        self.scope = scope

    def ranged_draw(
        self,
        seed: int,
        label: str,
        occurrence: int,
        min_value: int,
        max_value: int,
    ) -> int:
        value = ranged(draw(self.scope, seed, label, occurrence), min_value, max_value)
        debug.log_draw(label, occurrence, min_value, max_value, value)
        return value


class RemoteRandomness:
    """
    Delegates the hash to a remote endpoint and applies the range scaling locally.

    Request:  POST {"scopeTag": str, "seed": str, "label": str, "occurrence": int}
    Response: {"value": int in [0, 999999]}

    One round trip per draw. Failures are raised, never retried.
    """

    def __init__(
        self,
        config: RandomnessConfig,
        session: requests.Session | None = None,
    ) -> None:
        if not config.endpoint:
            raise ValueError("RemoteRandomness requires config.endpoint")
        self.endpoint = config.endpoint
        self.timeout = config.timeout
        self.scope = config.scope
        # Only a session created here is closed by close().
        self._owns_session = session is None
        self.session = session if session is not None else requests.Session()

    def close(self) -> None:
        if self._owns_session:
            self.session.close()

    def __enter__(self) -> RemoteRandomness:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def fetch_normalized(self, seed: int, label: str, occurrence: int) -> int:
        payload = {
            "scopeTag": self.scope,
            "seed": str(seed),
            "label": label,
            "occurrence": occurrence,
        }
        debug.log(f"remote draw POST {self.endpoint} {payload}")
        try:
            response = self.session.post(
                self.endpoint, json=payload, timeout=self.timeout
            )
            response.raise_for_status()
            body: Any = response.json()
        except (requests.RequestException, ValueError) as exc:
            raise RemoteRandomnessUnavailable(
                f"randomness endpoint {self.endpoint} failed for "
                f"{label}[{occurrence}]: {exc}"
            ) from exc

        value = body.get("value") if isinstance(body, dict) else None
        if isinstance(value, bool) or not isinstance(value, int):
            raise RemoteRandomnessUnavailable(
                f"randomness endpoint {self.endpoint} returned no integer value: {body!r}"
            )
        if not 0 <= value < NORMALIZATION_MODULUS:
            raise RemoteRandomnessUnavailable(
                f"randomness endpoint {self.endpoint} returned {value}, "
                f"outside [0, {NORMALIZATION_MODULUS - 1}]"
            )
        return value

    def ranged_draw(
        self,
        seed: int,
        label: str,
        occurrence: int,
        min_value: int,
        max_value: int,
    ) -> int:
        if min_value > max_value:
            raise InvalidRange(min_value, max_value)
        value = scale_normalized(
            self.fetch_normalized(seed, label, occurrence), min_value, max_value
        )
        debug.log_draw(label, occurrence, min_value, max_value, value)
        return value


def make_randomness_port(config: RandomnessConfig) -> RandomnessPort:
    if config.endpoint:
        return RemoteRandomness(config)
    return LocalRandomness(config.scope)


def close_port(port: RandomnessPort) -> None:
    """Release transport resources held by `port`; local ports hold none."""
    if isinstance(port, RemoteRandomness):
        port.close()
