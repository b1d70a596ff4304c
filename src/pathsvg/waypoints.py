from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from ..utils import debug
from .config import (
    OFF_CANVAS_MARGIN,
    PADDING_MAX_DIVISOR,
    PADDING_MIN_DIVISOR,
    STEP_COUNT_RANGE,
    CanvasConfig,
)
from .errors import DegenerateCanvas
from .labels import PADDING_SITE, STEP_COUNT_SITE, TARGET_X_SITE, TARGET_Y_SITE
from .path_types import Vertices
from .randomness import RandomnessPort


@dataclass(frozen=True)
class Skeleton:
    step_count: int
    padding: int
    vertices: Vertices


def plan_padding_bounds(width: int) -> tuple[int, int]:
    return width // PADDING_MIN_DIVISOR, width // PADDING_MAX_DIVISOR


def plan(seed: int, port: RandomnessPort, canvas: CanvasConfig) -> Skeleton:
    """
    Build the shared waypoint skeleton for `seed`.

    Layout: [(-50, h/2)] + step_count random waypoints inside the padded box
    + [(w+50, h/2)]. Waypoint i uses occurrence i of TARGET_X and TARGET_Y.
    """
    width, height = canvas.width, canvas.height
    step_count = port.ranged_draw(
        seed,
        STEP_COUNT_SITE.label,
        STEP_COUNT_SITE.occurrence_for(),
        *STEP_COUNT_RANGE,
    )

    padding_min, padding_max = plan_padding_bounds(width)
    padding = port.ranged_draw(
        seed,
        PADDING_SITE.label,
        PADDING_SITE.occurrence_for(),
        padding_min,
        padding_max,
    )
    if 2 * padding >= width or 2 * padding >= height:
        raise DegenerateCanvas(
            f"padding {padding} leaves no inner box on a {width}x{height} canvas"
        )
    inner_w = width - 2 * padding
    inner_h = height - 2 * padding
    debug.log(f"plan seed={seed} steps={step_count} padding={padding}")

    points: list[tuple[int, int]] = [(-OFF_CANVAS_MARGIN, height // 2)]
    for i in range(step_count):
        x = padding + port.ranged_draw(
            seed, TARGET_X_SITE.label, TARGET_X_SITE.occurrence_for(i), 0, inner_w
        )
        y = padding + port.ranged_draw(
            seed, TARGET_Y_SITE.label, TARGET_Y_SITE.occurrence_for(i), 0, inner_h
        )
        points.append((x, y))
    points.append((width + OFF_CANVAS_MARGIN, height // 2))

    vertices = np.array(points, dtype=np.int64)
    vertices.setflags(write=False)
    debug.log_vertices("skeleton", vertices)
    return Skeleton(step_count=step_count, padding=padding, vertices=vertices)
