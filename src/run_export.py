from __future__ import annotations

import argparse
from pathlib import Path
from typing import Protocol, cast

from tqdm import tqdm  # type: ignore[reportMissingModuleSource]

from . import PROJECT_ROOT
from .pathsvg.config import CanvasConfig, RandomnessConfig
from .pathsvg.export_svg import STROKE_WIDTH, export_svg
from .pathsvg.generate import generate_artwork
from .pathsvg.labels import AWA, THOUGHT, WILL
from .pathsvg.metadata import build_metadata, metadata_json
from .pathsvg.randomness import close_port, make_randomness_port
from .utils import debug

DEFAULT_OUT_DIR = PROJECT_ROOT / "exports"


class CliArgs(Protocol):
    seed: int
    count: int
    thought: int
    will: int
    awa: int
    output: str | None
    out_dir: str
    metadata: bool
    width: int
    height: int
    randomness_url: str | None
    timeout: float
    stroke_width: float
    verbose: bool


def _flag(value: str) -> int:
    if value not in ("0", "1"):
        raise argparse.ArgumentTypeError("flags must be either 0 or 1")
    return int(value)


def main() -> None:
    ap = argparse.ArgumentParser(
        description="Export PATH artworks as SVG, recomputed from their seed."
    )
    ap.add_argument("--seed", type=int, required=True, help="Token id / seed")
    ap.add_argument(
        "--count", type=int, default=1, help="Export COUNT consecutive seeds"
    )
    ap.add_argument("--thought", type=_flag, default=1, help="THOUGHT minted (0/1)")
    ap.add_argument("--will", type=_flag, default=1, help="WILL minted (0/1)")
    ap.add_argument("--awa", type=_flag, default=1, help="AWA minted (0/1)")
    ap.add_argument(
        "--output", default=None, help="Output SVG file (single seed only)"
    )
    ap.add_argument(
        "--out_dir",
        default=str(DEFAULT_OUT_DIR),
        help="Directory for path_<seed>.svg files",
    )
    ap.add_argument(
        "--metadata",
        action="store_true",
        help="Also write JSON metadata next to each SVG",
    )
    ap.add_argument("--width", type=int, default=1024)
    ap.add_argument("--height", type=int, default=1024)
    ap.add_argument(
        "--randomness_url",
        default=None,
        help="Remote randomness endpoint (default: compute locally)",
    )
    ap.add_argument("--timeout", type=float, default=10.0)
    ap.add_argument("--stroke_width", type=float, default=STROKE_WIDTH)
    ap.add_argument("-v", "--verbose", action="store_true", help="Enable debug logs")

    args = cast(CliArgs, ap.parse_args())
    debug.set_verbose(args.verbose)

    if args.seed < 0:
        ap.error("--seed must be >= 0")
    if args.count < 1:
        ap.error("--count must be >= 1")
    if args.output is not None and args.count != 1:
        ap.error("--output only applies to a single seed; use --out_dir")

    canvas = CanvasConfig(args.width, args.height)
    port = make_randomness_port(
        RandomnessConfig(endpoint=args.randomness_url, timeout=args.timeout)
    )
    minted = {
        THOUGHT.name: bool(args.thought),
        WILL.name: bool(args.will),
        AWA.name: bool(args.awa),
    }
    debug.log(f"minted={minted} canvas={canvas.width}x{canvas.height}")

    seeds = range(args.seed, args.seed + args.count)
    try:
        for seed in tqdm(seeds, desc="export", disable=args.count == 1):
            if args.output is not None:
                svg_path = Path(args.output).expanduser().resolve()
            else:
                svg_path = Path(args.out_dir).expanduser().resolve() / f"path_{seed}.svg"
            svg_path.parent.mkdir(parents=True, exist_ok=True)

            artwork = generate_artwork(seed, port, canvas)
            export_svg(str(svg_path), artwork, minted, stroke_width=args.stroke_width)

            if args.metadata:
                meta = build_metadata(artwork, minted, image=svg_path.name)
                svg_path.with_suffix(".json").write_text(
                    metadata_json(meta), encoding="utf-8"
                )
            tqdm.write(f"Saved SVG to {svg_path}")
    finally:
        close_port(port)


if __name__ == "__main__":
    main()
