from . import (
    bezier,
    export_svg,
    gallery,
    generate,
    jitter,
    labels,
    metadata,
    prf,
    randomness,
    svg_io,
    waypoints,
)

__all__ = [
    "prf",
    "randomness",
    "labels",
    "waypoints",
    "jitter",
    "bezier",
    "generate",
    "export_svg",
    "metadata",
    "svg_io",
    "gallery",
]
