from __future__ import annotations

import numpy as np
from beartype import beartype
from jaxtyping import Int, jaxtyped

from .path_types import CurveDescription, Vertices


@jaxtyped(typechecker=beartype)
def rounded_div(delta: Int[np.ndarray, "..."], divisor: int) -> Int[np.ndarray, "..."]:
    """Integer division rounded to nearest, ties away from zero."""
    if divisor < 1:
        raise ValueError(f"divisor must be >= 1, got {divisor}")
    d = np.asarray(delta, dtype=np.int64)
    half = divisor // 2
    return np.where(d >= 0, (d + half) // divisor, -((-d + half) // divisor))


@jaxtyped(typechecker=beartype)
def smooth(vertices: Vertices, sharpness: int) -> CurveDescription:
    """Convert an open polyline into integer cubic Bezier segments.

    Catmull-Rom-style: the tangent at each vertex is the chord between its
    neighbours, divided by `sharpness` (1 = loosest, larger = straighter).
    The first and last vertices reuse themselves as the missing neighbour.

    Parameters
    - vertices: (N,2) integer vertices.
    - sharpness: tangent divisor, >= 1.

    Returns
    - curve: (N-1,4,2) int64 rows of (p1, cp1, cp2, p2); (0,4,2) when N < 2.
    """

    if sharpness < 1:
        raise ValueError(f"sharpness must be >= 1, got {sharpness}")
    P = np.asarray(vertices, dtype=np.int64)
    N = P.shape[0]
    if N < 2:
        return np.zeros((0, 4, 2), dtype=np.int64)

    p1 = P[:-1]
    p2 = P[1:]
    # Previous / next neighbours, clamped at the ends.
    p0 = np.concatenate([P[:1], P[: N - 2]], axis=0)
    p3 = np.concatenate([P[2:], P[-1:]], axis=0)

    cp1 = p1 + rounded_div(p2 - p0, sharpness)
    cp2 = p2 - rounded_div(p3 - p1, sharpness)
    return np.stack([p1, cp1, cp2, p2], axis=1).astype(np.int64)


@jaxtyped(typechecker=beartype)
def curve_to_svg_path_d(curve: CurveDescription) -> str:
    """Build an SVG path 'd' string from a curve description."""

    if curve.shape[0] == 0:
        return ""

    def f(pt: np.ndarray) -> str:
        return f"{int(pt[0])},{int(pt[1])}"

    parts = [f"M {f(curve[0, 0])}"]
    for _p1, cp1, cp2, p2 in curve:
        parts.append(f"C {f(cp1)} {f(cp2)} {f(p2)}")
    return " ".join(parts)
