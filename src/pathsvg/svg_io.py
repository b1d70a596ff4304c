from __future__ import annotations

from svgpathtools import svg2paths2  # type: ignore[reportMissingTypeStubs]

from ..utils import debug
from .bezier import curve_to_svg_path_d
from .config import CanvasConfig
from .generate import generate_artwork
from .randomness import RandomnessPort


def load_strand_paths(svg_path: str) -> dict[str, str]:
    """
    Returns {path id: path 'd' attribute} for every <path> carrying both.
    """
    _paths, attributes, _svg_attributes = svg2paths2(svg_path)
    out: dict[str, str] = {}
    for attrs in attributes:
        path_id = attrs.get("id")
        d = attrs.get("d")
        if path_id and d is not None:
            out[path_id] = d
    return out


def load_svg_canvas(svg_path: str) -> tuple[int, int] | None:
    """Returns (width, height) from the viewBox, or None if absent or not integral."""
    svg_attributes = svg2paths2(svg_path)[2]
    viewbox = _parse_viewbox(
        svg_attributes.get("viewBox") or svg_attributes.get("viewbox")
    )
    if viewbox is None:
        return None
    minx, miny, w, h = viewbox
    if minx != 0 or miny != 0 or not w.is_integer() or not h.is_integer():
        return None
    return int(w), int(h)


def verify_svg(
    svg_path: str,
    seed: int,
    port: RandomnessPort,
    canvas: CanvasConfig | None = None,
) -> list[str]:
    """
    Recompute the artwork for `seed` and compare it with the exported file.
    Returns the names of strands whose path data is missing or differs.
    """
    if canvas is None:
        size = load_svg_canvas(svg_path)
        canvas = CanvasConfig() if size is None else CanvasConfig(*size)
    artwork = generate_artwork(seed, port, canvas)
    found = load_strand_paths(svg_path)

    mismatched: list[str] = []
    for sc in artwork.strands:
        expected = curve_to_svg_path_d(sc.curve)
        actual = found.get(sc.strand.name.lower())
        if actual is None or actual.split() != expected.split():
            debug.log(f"verify {sc.strand.name}: mismatch")
            mismatched.append(sc.strand.name)
    return mismatched


def _parse_viewbox(viewbox_raw: str | None) -> tuple[float, float, float, float] | None:
    if not viewbox_raw:
        return None
    parts = viewbox_raw.replace(",", " ").split()
    if len(parts) != 4:
        return None
    try:
        minx, miny, w, h = (float(p) for p in parts)
    except ValueError:
        return None
    return minx, miny, w, h
