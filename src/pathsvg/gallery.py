from __future__ import annotations

import fnmatch
import html
import os
import re
from pathlib import Path

DEFAULT_TITLE = "PATH SVG Gallery"
DEFAULT_PATTERN = "*.svg"

_PAGE = """<!doctype html>
<html lang="en">
  <head>
    <meta charset="utf-8">
    <meta name="viewport" content="width=device-width, initial-scale=1">
    <title>{title}</title>
    <style>
      :root {{ color-scheme: dark; font-family: sans-serif; background: #050505; color: #ececec; }}
      body {{ margin: 0; }}
      header {{ padding: 24px; border-bottom: 1px solid #1b1b1b; }}
      h1 {{ margin: 0; font-size: 1.25rem; font-weight: 600; }}
      main {{ padding: 24px; }}
      .grid {{ display: grid; grid-template-columns: repeat(auto-fill, minmax(260px, 1fr)); gap: 24px; }}
      .tile {{ margin: 0; background: #0c0c0c; border: 1px solid #1f1f1f; border-radius: 12px; overflow: hidden; }}
      .thumb {{ background: #000; padding: 16px; }}
      .thumb img {{ width: 100%; height: auto; display: block; }}
      figcaption {{ font-size: 0.8rem; padding: 10px 14px 12px; color: #b5b5b5; border-top: 1px solid #1b1b1b; }}
      .empty {{ grid-column: 1 / -1; text-align: center; opacity: 0.75; }}
    </style>
  </head>
  <body>
    <header>
      <h1>{title}</h1>
    </header>
    <main>
      <div class="grid">
{tiles}      </div>
    </main>
  </body>
</html>
"""

_TILE = """        <figure class="tile">
          <div class="thumb"><img src="{src}" loading="lazy" alt="{label}"></div>
          <figcaption>{label}</figcaption>
        </figure>
"""

_EMPTY = """        <p class="empty">No SVG files matched the provided pattern.</p>
"""


def collect_svgs(
    source: Path,
    pattern: str = DEFAULT_PATTERN,
    recursive: bool = False,
) -> list[Path]:
    """
    Files under `source` whose posix path relative to `source` matches the
    glob `pattern` (case-insensitive). Sorted.
    """
    regex = re.compile(fnmatch.translate(pattern), re.IGNORECASE)
    candidates = source.rglob("*") if recursive else source.iterdir()
    found = [
        p
        for p in candidates
        if p.is_file() and regex.match(p.relative_to(source).as_posix())
    ]
    return sorted(found)


def build_gallery_html(title: str, tiles: list[tuple[str, str]]) -> str:
    """tiles: (label, image src) pairs, in display order."""
    if tiles:
        inner = "".join(
            _TILE.format(label=html.escape(label), src=html.escape(src))
            for label, src in tiles
        )
    else:
        inner = _EMPTY
    return _PAGE.format(title=html.escape(title), tiles=inner)


def write_gallery(
    source: Path,
    output: Path | None = None,
    *,
    pattern: str = DEFAULT_PATTERN,
    recursive: bool = False,
    title: str = DEFAULT_TITLE,
) -> Path:
    source = source.resolve()
    if not source.is_dir():
        raise ValueError(f"{source} is not a directory")
    output = (output if output is not None else source / "gallery.html").resolve()
    output.parent.mkdir(parents=True, exist_ok=True)

    tiles: list[tuple[str, str]] = []
    for idx, svg in enumerate(collect_svgs(source, pattern, recursive), start=1):
        rel = Path(os.path.relpath(svg, output.parent)).as_posix()
        tiles.append((f"{idx:02d} · {svg.name}", rel))

    output.write_text(build_gallery_html(title, tiles), encoding="utf-8")
    return output
