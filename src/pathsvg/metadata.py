from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any

from .generate import Artwork

DESCRIPTION = (
    "PATH is a generative line drawing derived entirely from its token id. "
    "Three strands, THOUGHT, WILL and AWA, share one path and appear as they are minted."
)


def build_metadata(
    artwork: Artwork,
    minted: Mapping[str, bool],
    *,
    image: str | None = None,
) -> dict[str, Any]:
    attributes: list[dict[str, Any]] = [
        {"trait_type": "Steps", "value": artwork.skeleton.step_count},
        {"trait_type": "Sharpness", "value": artwork.sharpness},
        {"trait_type": "Padding", "value": artwork.skeleton.padding},
    ]
    for sc in artwork.strands:
        name = sc.strand.name
        attributes.append(
            {
                "trait_type": name.title(),
                "value": "Minted" if minted.get(name, False) else "Unminted",
            }
        )

    metadata: dict[str, Any] = {
        "name": f"PATH #{artwork.seed}",
        "description": DESCRIPTION,
        "attributes": attributes,
    }
    if image is not None:
        metadata["image"] = image
    return metadata


def metadata_json(metadata: Mapping[str, Any]) -> str:
    return json.dumps(metadata, indent=2, sort_keys=True)
