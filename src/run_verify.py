from __future__ import annotations

import argparse
import sys
from typing import Protocol, cast

from .pathsvg.config import RandomnessConfig
from .pathsvg.randomness import close_port, make_randomness_port
from .pathsvg.svg_io import verify_svg
from .utils import debug


class CliArgs(Protocol):
    svg: str
    seed: int
    randomness_url: str | None
    timeout: float
    verbose: bool


def main() -> None:
    ap = argparse.ArgumentParser(
        description="Check an exported SVG against a fresh recomputation from its seed."
    )
    ap.add_argument("svg", help="Exported SVG file")
    ap.add_argument("--seed", type=int, required=True, help="Token id / seed")
    ap.add_argument("--randomness_url", default=None)
    ap.add_argument("--timeout", type=float, default=10.0)
    ap.add_argument("-v", "--verbose", action="store_true", help="Enable debug logs")

    args = cast(CliArgs, ap.parse_args())
    debug.set_verbose(args.verbose)
    if args.seed < 0:
        ap.error("--seed must be >= 0")

    port = make_randomness_port(
        RandomnessConfig(endpoint=args.randomness_url, timeout=args.timeout)
    )
    try:
        mismatched = verify_svg(args.svg, args.seed, port)
    finally:
        close_port(port)
    if mismatched:
        print(f"MISMATCH {args.svg}: {', '.join(mismatched)}")
        sys.exit(1)
    print(f"Verified {args.svg} for seed {args.seed}")


if __name__ == "__main__":
    main()
