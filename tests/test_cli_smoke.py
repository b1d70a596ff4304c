import json
import sys
from pathlib import Path

import pytest

from src import run_export, run_gallery, run_verify


def test_export_verify_gallery_smoke(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    monkeypatch.setattr(
        sys,
        "argv",
        [
            "run_export",
            "--seed", "10",
            "--count", "2",
            "--will", "0",
            "--out_dir", str(tmp_path),
            "--metadata",
        ],
    )
    run_export.main()
    assert (tmp_path / "path_10.svg").exists()
    assert (tmp_path / "path_11.svg").exists()
    meta = json.loads((tmp_path / "path_11.json").read_text(encoding="utf-8"))
    assert meta["name"] == "PATH #11"
    assert meta["image"] == "path_11.svg"

    monkeypatch.setattr(
        sys, "argv", ["run_verify", str(tmp_path / "path_10.svg"), "--seed", "10"]
    )
    run_verify.main()
    assert "Verified" in capsys.readouterr().out

    monkeypatch.setattr(
        sys, "argv", ["run_verify", str(tmp_path / "path_10.svg"), "--seed", "11"]
    )
    with pytest.raises(SystemExit) as exc:
        run_verify.main()
    assert exc.value.code == 1

    monkeypatch.setattr(sys, "argv", ["run_gallery", str(tmp_path)])
    run_gallery.main()
    assert (tmp_path / "gallery.html").exists()


def test_export_rejects_bad_flags(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(sys, "argv", ["run_export", "--seed", "1", "--awa", "2"])
    with pytest.raises(SystemExit):
        run_export.main()
