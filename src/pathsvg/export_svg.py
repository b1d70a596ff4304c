from __future__ import annotations

from collections.abc import Mapping

import svgwrite  # type: ignore[reportMissingTypeStubs]

from .bezier import curve_to_svg_path_d
from .generate import Artwork

BACKGROUND = "#000000"
STROKE_WIDTH = 4


def _drawing(artwork: Artwork, out_path: str | None = None) -> svgwrite.Drawing:
    width, height = artwork.canvas.width, artwork.canvas.height
    if out_path is None:
        dwg = svgwrite.Drawing(profile="tiny", size=(width, height))
    else:
        dwg = svgwrite.Drawing(out_path, profile="tiny", size=(width, height))
    dwg.attribs["viewBox"] = f"0 0 {width} {height}"
    return dwg


def build_drawing(
    artwork: Artwork,
    minted: Mapping[str, bool],
    *,
    out_path: str | None = None,
    stroke_width: float | str = STROKE_WIDTH,
) -> svgwrite.Drawing:
    """
    One black background rect, then one path per strand in strand order.
    Unminted strands are kept in the document with visibility="hidden" so the
    path data can always be verified.
    """
    dwg = _drawing(artwork, out_path)
    dwg.add(
        dwg.rect(
            insert=(0, 0),
            size=(artwork.canvas.width, artwork.canvas.height),
            fill=BACKGROUND,
        )
    )
    for sc in artwork.strands:
        visible = bool(minted.get(sc.strand.name, False))
        dwg.add(
            dwg.path(
                d=curve_to_svg_path_d(sc.curve),
                id=sc.strand.name.lower(),
                stroke=sc.strand.color,
                stroke_width=stroke_width,
                stroke_linecap="round",
                stroke_linejoin="round",
                fill="none",
                visibility="visible" if visible else "hidden",
            )
        )
    return dwg


def render_svg(
    artwork: Artwork,
    minted: Mapping[str, bool],
    *,
    stroke_width: float | str = STROKE_WIDTH,
) -> str:
    return build_drawing(artwork, minted, stroke_width=stroke_width).tostring()


def export_svg(
    out_path: str,
    artwork: Artwork,
    minted: Mapping[str, bool],
    *,
    stroke_width: float | str = STROKE_WIDTH,
) -> None:
    dwg = build_drawing(
        artwork, minted, out_path=out_path, stroke_width=stroke_width
    )
    dwg.save()
