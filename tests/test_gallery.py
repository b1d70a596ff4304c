from pathlib import Path

import pytest

from src.pathsvg.gallery import build_gallery_html, collect_svgs, write_gallery


def _make_tree(root: Path) -> None:
    (root / "a.svg").write_text("<svg/>")
    (root / "B.SVG").write_text("<svg/>")
    (root / "notes.txt").write_text("x")
    (root / "sub").mkdir()
    (root / "sub" / "c.svg").write_text("<svg/>")


def test_collect_svgs(tmp_path: Path) -> None:
    _make_tree(tmp_path)
    flat = collect_svgs(tmp_path)
    assert [p.name for p in flat] == ["B.SVG", "a.svg"]
    deep = collect_svgs(tmp_path, recursive=True)
    assert [p.relative_to(tmp_path).as_posix() for p in deep] == [
        "B.SVG",
        "a.svg",
        "sub/c.svg",
    ]
    assert [p.name for p in collect_svgs(tmp_path, pattern="a*")] == ["a.svg"]


def test_write_gallery(tmp_path: Path) -> None:
    _make_tree(tmp_path)
    out = write_gallery(tmp_path, recursive=True, title="Seeds <1-3>")
    assert out == (tmp_path / "gallery.html").resolve()
    text = out.read_text(encoding="utf-8")
    assert "<title>Seeds &lt;1-3&gt;</title>" in text
    assert "01 · B.SVG" in text
    assert 'src="sub/c.svg"' in text
    assert text.count('<figure class="tile">') == 3


def test_write_gallery_to_other_directory(tmp_path: Path) -> None:
    src = tmp_path / "exports"
    src.mkdir()
    (src / "path_1.svg").write_text("<svg/>")
    out = write_gallery(src, tmp_path / "site" / "index.html")
    assert 'src="../exports/path_1.svg"' in out.read_text(encoding="utf-8")


def test_empty_gallery_and_missing_source(tmp_path: Path) -> None:
    html = build_gallery_html("Empty", [])
    assert "No SVG files matched" in html
    with pytest.raises(ValueError):
        write_gallery(tmp_path / "missing")
