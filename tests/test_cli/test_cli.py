"""Tests for the command line entry point."""

import json

from icontree.cli import main


def test_build_writes_outputs(svg_dir, tmp_path, capsys):
    out = tmp_path / "out"
    manifest = tmp_path / "manifest.json"
    code = main([
        "build",
        "--svg-dir", str(svg_dir),
        "--output-dir", str(out),
        "--manifest", str(manifest),
    ])
    # broken.svg has no viewBox in every theme pass
    assert code == 1
    assert "outline/broken" in capsys.readouterr().err

    assert (out / "outline" / "CloseOutline.json").exists()
    assert (out / "twotone" / "AlertTwoTone.json").exists()
    assert (out / "fill" / "AlertFill.json").exists()
    assert json.loads(manifest.read_text())["twotone"] == ["alert"]


def test_build_single_theme_with_clear(svg_dir, tmp_path):
    (svg_dir / "outline" / "broken.svg").unlink()
    out = tmp_path / "out"
    stale = out / "fill" / "Stale.json"
    stale.parent.mkdir(parents=True)
    stale.write_text("{}")

    code = main([
        "build",
        "--svg-dir", str(svg_dir),
        "--output-dir", str(out),
        "--manifest", str(tmp_path / "manifest.json"),
        "--theme", "outline",
        "--clear",
    ])
    assert code == 0
    assert not stale.exists()
    assert (out / "outline" / "AlertOutline.json").exists()
    assert not (out / "fill").exists()


def test_tree_command(svg_dir, capsys):
    assert main(["tree", str(svg_dir / "outline" / "close.svg")]) == 0
    assert '"tag": "svg"' in capsys.readouterr().out


def test_tree_command_svg_output(svg_dir, capsys):
    assert main(["tree", "--svg", str(svg_dir / "fill" / "close.svg")]) == 0
    assert capsys.readouterr().out.startswith("<svg ")


def test_tree_command_invalid(svg_dir, capsys):
    assert main(["tree", str(svg_dir / "outline" / "broken.svg")]) == 1
    assert "broken" in capsys.readouterr().err
