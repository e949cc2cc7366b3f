"""Tests for the generation driver."""

import argparse
from pathlib import Path

import pytest

from automatic_interface.run_generation import collect_descriptor_files, run_generation

WIDGET_YML = """\
namespace: Demo
name: Widget
members:
  - {kind: property, name: Name, type: string}
"""

POINT_YML = """\
namespace: Demo
name: Point
kind: struct
"""


def _args(paths: list[Path], **kwargs: object) -> argparse.Namespace:
    defaults: dict[str, object] = {
        "out_dir": None,
        "config": None,
        "dry_run": False,
    }
    defaults.update(kwargs)
    return argparse.Namespace(paths=paths, **defaults)


def _write_inputs(root: Path) -> Path:
    src = root / "descriptors"
    (src / "nested").mkdir(parents=True)
    (src / "widget.yml").write_text(WIDGET_YML, encoding="utf-8")
    (src / "nested" / "point.yaml").write_text(POINT_YML, encoding="utf-8")
    return src


def test_collect_descriptor_files(tmp_path: Path) -> None:
    """Verify directory expansion finds .yml and .yaml files."""
    src = _write_inputs(tmp_path)
    files = collect_descriptor_files([src, tmp_path / "missing.yml"])
    assert sorted(f.name for f in files) == ["point.yaml", "widget.yml"]


def test_run_generation_writes_files(tmp_path: Path) -> None:
    """Verify one file per class, skipping non-class descriptors."""
    src = _write_inputs(tmp_path)
    out = tmp_path / "out"
    assert run_generation(_args([src], out_dir=out)) == 0

    assert sorted(p.name for p in out.iterdir()) == ["Demo.IWidget.g.cs"]
    text = (out / "Demo.IWidget.g.cs").read_text(encoding="utf-8")
    assert "public partial interface IWidget" in text
    assert "string Name { get; set; }" in text


def test_run_generation_stdout(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    """Verify that generated text goes to stdout without an output directory."""
    src = _write_inputs(tmp_path)
    run_generation(_args([src / "widget.yml"]))
    assert "interface IWidget" in capsys.readouterr().out


def test_run_generation_dry_run(tmp_path: Path) -> None:
    """Verify that dry runs write nothing."""
    src = _write_inputs(tmp_path)
    out = tmp_path / "out"
    run_generation(_args([src], out_dir=out, dry_run=True))
    assert not out.exists()


def test_run_generation_uses_config(tmp_path: Path) -> None:
    """Verify that the output suffix comes from the config file."""
    src = _write_inputs(tmp_path)
    config = tmp_path / "config.yml"
    config.write_text("output:\n  file_suffix: .cs\n", encoding="utf-8")
    out = tmp_path / "out"
    run_generation(_args([src], out_dir=out, config=str(config)))
    assert (out / "Demo.IWidget.cs").exists()


def test_run_generation_no_files(tmp_path: Path) -> None:
    """Verify that an empty input set aborts."""
    with pytest.raises(SystemExit, match="No descriptor files"):
        run_generation(_args([tmp_path]))


def test_run_generation_bad_descriptor(tmp_path: Path) -> None:
    """Verify that malformed descriptors abort with the loader message."""
    bad = tmp_path / "bad.yml"
    bad.write_text("namespace: Demo\n", encoding="utf-8")
    with pytest.raises(SystemExit, match="without a name"):
        run_generation(_args([bad]))
