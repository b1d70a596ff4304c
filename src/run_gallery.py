from __future__ import annotations

import argparse
from pathlib import Path
from typing import Protocol, cast

from .pathsvg.gallery import DEFAULT_PATTERN, DEFAULT_TITLE, write_gallery


class CliArgs(Protocol):
    source: str
    output: str | None
    pattern: str
    recursive: bool
    title: str


def main() -> None:
    ap = argparse.ArgumentParser(
        description="Build an HTML gallery for exported PATH SVGs."
    )
    ap.add_argument("source", help="Directory holding SVG files")
    ap.add_argument(
        "-o",
        "--output",
        default=None,
        help="Gallery HTML file (default: <source>/gallery.html)",
    )
    ap.add_argument("--pattern", default=DEFAULT_PATTERN, help="Glob for SVG files")
    ap.add_argument(
        "--recursive", action="store_true", help="Search directories recursively"
    )
    ap.add_argument("--title", default=DEFAULT_TITLE, help="Page title")
    args = cast(CliArgs, ap.parse_args())

    output = Path(args.output) if args.output is not None else None
    try:
        out = write_gallery(
            Path(args.source),
            output,
            pattern=args.pattern,
            recursive=args.recursive,
            title=args.title,
        )
    except ValueError as exc:
        ap.error(str(exc))
    print(f"Gallery written to {out}")


if __name__ == "__main__":
    main()
