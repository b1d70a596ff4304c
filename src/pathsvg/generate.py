from __future__ import annotations

from dataclasses import dataclass

from ..utils import debug
from .bezier import smooth
from .config import DEFAULT_CANVAS, SHARPNESS_RANGE, CanvasConfig
from .jitter import jitter
from .labels import SHARPNESS_SITE, STRANDS, Strand
from .path_types import CurveDescription, Vertices
from .randomness import RandomnessPort
from .waypoints import Skeleton, plan


@dataclass(frozen=True)
class StrandCurve:
    strand: Strand
    vertices: Vertices
    curve: CurveDescription


@dataclass(frozen=True)
class Artwork:
    seed: int
    canvas: CanvasConfig
    skeleton: Skeleton
    sharpness: int
    strands: tuple[StrandCurve, ...]

    def strand(self, name: str) -> StrandCurve:
        for sc in self.strands:
            if sc.strand.name == name:
                return sc
        raise KeyError(name)


def generate_artwork(
    seed: int,
    port: RandomnessPort,
    canvas: CanvasConfig = DEFAULT_CANVAS,
) -> Artwork:
    """
    Derive the full three-strand artwork for `seed`.

    Draw order: STEP_COUNT, PADDING, TARGET_X/TARGET_Y per waypoint,
    SHARPNESS, then each strand's DX/DY per vertex. Any failure aborts the
    whole generation.
    """
    if isinstance(seed, bool) or not isinstance(seed, int) or seed < 0:
        raise ValueError(f"seed must be a non-negative int, got {seed!r}")

    skeleton = plan(seed, port, canvas)
    sharpness = port.ranged_draw(
        seed,
        SHARPNESS_SITE.label,
        SHARPNESS_SITE.occurrence_for(),
        *SHARPNESS_RANGE,
    )
    debug.log(f"seed={seed} sharpness={sharpness}")

    strands: list[StrandCurve] = []
    for strand in STRANDS:
        vertices = jitter(seed, port, skeleton.vertices, strand, canvas)
        curve = smooth(vertices, sharpness)
        strands.append(StrandCurve(strand=strand, vertices=vertices, curve=curve))

    return Artwork(
        seed=seed,
        canvas=canvas,
        skeleton=skeleton,
        sharpness=sharpness,
        strands=tuple(strands),
    )
