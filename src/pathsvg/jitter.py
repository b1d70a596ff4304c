from __future__ import annotations

import numpy as np
from beartype import beartype
from jaxtyping import jaxtyped

from ..utils import debug
from .config import JITTER_DIVISOR, CanvasConfig
from .labels import Strand
from .path_types import Vertices
from .randomness import RandomnessPort


@jaxtyped(typechecker=beartype)
def jitter(
    seed: int,
    port: RandomnessPort,
    vertices: Vertices,
    strand: Strand,
    canvas: CanvasConfig,
) -> Vertices:
    """
    Offset every vertex by a per-strand draw in [0, dim/100], then clamp to the canvas.

    Offsets only ever push right/down. Vertex i uses occurrence i of the strand's
    DX and DY labels. Returns a new (N,2) int64 array; `vertices` is not touched.
    """
    max_dx = canvas.width // JITTER_DIVISOR
    max_dy = canvas.height // JITTER_DIVISOR
    dx_site, dy_site = strand.dx_site, strand.dy_site
    out = np.empty_like(vertices, dtype=np.int64)
    for i in range(vertices.shape[0]):
        dx = port.ranged_draw(seed, dx_site.label, dx_site.occurrence_for(i), 0, max_dx)
        dy = port.ranged_draw(seed, dy_site.label, dy_site.occurrence_for(i), 0, max_dy)
        out[i, 0] = int(vertices[i, 0]) + dx
        out[i, 1] = int(vertices[i, 1]) + dy
    out[:, 0] = np.clip(out[:, 0], 0, canvas.width)
    out[:, 1] = np.clip(out[:, 1], 0, canvas.height)
    debug.log_vertices(f"strand {strand.name}", out)
    return out
