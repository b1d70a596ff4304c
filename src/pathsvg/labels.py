from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

STEP_COUNT = "STEP_COUNT"
PADDING = "PADDING"
TARGET_X = "TARGET_X"
TARGET_Y = "TARGET_Y"
SHARPNESS = "SHARPNESS"


@dataclass(frozen=True)
class DrawSite:
    """
    A place in the pipeline that draws from a (label, occurrence) stream.
    occurrence=None means the site walks the indexed stream 0, 1, 2, ...

    Call sites draw through these objects so DRAW_SITES is the complete list.
    """

    label: str
    occurrence: int | None

    def occurrence_for(self, index: int | None = None) -> int:
        if self.occurrence is None:
            if index is None:
                raise ValueError(f"indexed draw site {self.label!r} needs an index")
            return index
        if index is not None:
            raise ValueError(
                f"draw site {self.label!r} is fixed at occurrence {self.occurrence}"
            )
        return self.occurrence


@dataclass(frozen=True)
class Strand:
    name: str
    dx_label: str
    dy_label: str
    color: str

    @property
    def dx_site(self) -> DrawSite:
        return DrawSite(self.dx_label, None)

    @property
    def dy_site(self) -> DrawSite:
        return DrawSite(self.dy_label, None)


THOUGHT = Strand("THOUGHT", "THOUGHT_DX", "THOUGHT_DY", "#38bdf8")
WILL = Strand("WILL", "WILL_DX", "WILL_DY", "#f472b6")
AWA = Strand("AWA", "AWA_DX", "AWA_DY", "#facc15")

# Generation and rendering order.
STRANDS: tuple[Strand, ...] = (THOUGHT, WILL, AWA)
STRAND_NAMES: tuple[str, ...] = tuple(s.name for s in STRANDS)

STEP_COUNT_SITE = DrawSite(STEP_COUNT, 0)
PADDING_SITE = DrawSite(PADDING, 0)
TARGET_X_SITE = DrawSite(TARGET_X, None)
TARGET_Y_SITE = DrawSite(TARGET_Y, None)
# Occurrence 1, not 0: kept bit-compatible with other implementations.
SHARPNESS_SITE = DrawSite(SHARPNESS, 1)

DRAW_SITES: tuple[DrawSite, ...] = (
    STEP_COUNT_SITE,
    PADDING_SITE,
    TARGET_X_SITE,
    TARGET_Y_SITE,
    SHARPNESS_SITE,
    *(site for strand in STRANDS for site in (strand.dx_site, strand.dy_site)),
)


def check_draw_sites(sites: Iterable[DrawSite]) -> None:
    """Raise ValueError if two call sites could draw the same (label, occurrence)."""
    seen: dict[str, list[DrawSite]] = {}
    for site in sites:
        for other in seen.get(site.label, []):
            if (
                site.occurrence is None
                or other.occurrence is None
                or site.occurrence == other.occurrence
            ):
                raise ValueError(
                    f"draw sites collide on label {site.label!r}: "
                    f"occurrence {other.occurrence} vs {site.occurrence}"
                )
        seen.setdefault(site.label, []).append(site)


def is_registered(
    label: str, occurrence: int, sites: Iterable[DrawSite] = DRAW_SITES
) -> bool:
    """True if some site in `sites` may draw (label, occurrence)."""
    return any(
        s.label == label and (s.occurrence is None or s.occurrence == occurrence)
        for s in sites
    )


LABELS: frozenset[str] = frozenset(site.label for site in DRAW_SITES)

check_draw_sites(DRAW_SITES)
