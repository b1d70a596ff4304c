from __future__ import annotations

import hashlib
from collections.abc import Sequence

from .config import NORMALIZATION_MODULUS
from .errors import InvalidProbability, InvalidRange

MAX_SHORT_STRING_LEN = 31


def encode_short_string(tag: str) -> int:
    """
    Encode an ASCII tag as a big-endian integer (a "short string").
    Tags are limited to 31 characters so they fit a 248-bit field element.
    """
    if not isinstance(tag, str):
        raise TypeError(f"tag must be str, got {type(tag).__name__}")
    if not tag:
        raise ValueError("tag must be non-empty")
    if len(tag) > MAX_SHORT_STRING_LEN:
        raise ValueError(f"tag {tag!r} longer than {MAX_SHORT_STRING_LEN} chars")
    if not tag.isascii():
        raise ValueError(f"tag {tag!r} is not ASCII")
    return int.from_bytes(tag.encode("ascii"), "big")


def _as_field(value: int | str) -> int:
    if isinstance(value, str):
        return encode_short_string(value)
    # bool is an int subclass; treat it as a caller mistake.
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"expected int or str, got {type(value).__name__}")
    if value < 0:
        raise ValueError(f"hash inputs must be non-negative, got {value}")
    return value


def _encode_fields(values: Sequence[int | str]) -> bytes:
    # Length-prefixed big-endian so arbitrarily large seeds stay unambiguous.
    chunks: list[bytes] = []
    for value in values:
        n = _as_field(value)
        raw = n.to_bytes(max(1, (n.bit_length() + 7) // 8), "big")
        chunks.append(len(raw).to_bytes(4, "big"))
        chunks.append(raw)
    return b"".join(chunks)


def hash_fields(values: Sequence[int | str]) -> int:
    digest = hashlib.sha256(_encode_fields(values)).digest()
    return int.from_bytes(digest, "big")


def draw(scope: str | int, seed: int, label: str | int, occurrence: int) -> int:
    """Hash (scope, seed, label, occurrence), in that order, to a 256-bit int."""
    return hash_fields((scope, seed, label, occurrence))


def multi_seed(seeds: Sequence[int | str], occurrence: int) -> int:
    """Hash an ordered list of seeds followed by the occurrence."""
    return hash_fields((*seeds, occurrence))


def normalized(h: int) -> int:
    return h % NORMALIZATION_MODULUS


def scale_normalized(value: int, min_value: int, max_value: int) -> int:
    """
    Map a normalized value in [0, N) onto [min_value, max_value].

    Uses floor(value * span / N). Buckets differ in size by at most one unit,
    so the bias is bounded by span / N; it is kept so every implementation
    maps the same value to the same integer.
    """
    if min_value > max_value:
        raise InvalidRange(min_value, max_value)
    if not 0 <= value < NORMALIZATION_MODULUS:
        raise ValueError(
            f"normalized value must be in [0, {NORMALIZATION_MODULUS}), got {value}"
        )
    span = max_value - min_value + 1
    return min_value + (value * span) // NORMALIZATION_MODULUS


def ranged(h: int, min_value: int, max_value: int) -> int:
    return scale_normalized(normalized(h), min_value, max_value)


def boolean(h: int, probability: int) -> bool:
    """True with probability `probability / N`."""
    if not 0 <= probability <= NORMALIZATION_MODULUS:
        raise InvalidProbability(probability, NORMALIZATION_MODULUS)
    return normalized(h) < probability
