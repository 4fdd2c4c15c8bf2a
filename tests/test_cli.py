"""Tests for the command-line interface."""

import json
import zipfile
from pathlib import Path

import pytest

from levelset_audit.cli import main

MAP_WITH_MODEL = '{\n"classname" "misc_model"\n"model" "geom/bush.obj"\n}\n'


@pytest.fixture
def level_set(data_dirs, put_file, sol_bytes) -> tuple[Path, Path, Path]:
    """A complete level set: (base dir, addon dir, set file)."""
    base, addon = data_dirs
    set_file = put_file(addon, "set-mine.txt", "Mine\nDesc\nmine\nshot-mine/shot.png\n\nmap-mine/one.sol\n")
    put_file(addon, "shot-mine/shot.png", b"png")
    put_file(addon, "map-mine/one.sol", sol_bytes(dicts={"back": "map-back/sky.sol"}, materials=["mtrl/grass"]))
    put_file(addon, "map-mine/one.map", MAP_WITH_MODEL)
    put_file(addon, "textures/mtrl/grass.png", b"override")

    put_file(base, "map-back/sky.sol", sol_bytes())
    put_file(base, "map-back/sky.map", "")
    put_file(base, "geom/bush.obj")
    put_file(base, "textures/mtrl/grass")
    put_file(base, "textures/mtrl/grass.png", b"stock")
    return base, addon, set_file


class TestMain:
    """Test exit codes and output formats."""

    def test_clean_set_lists_new_files(self, level_set, capsys) -> None:
        """Test that a clean audit prints the new addon files and exits 0."""
        base, addon, set_file = level_set

        assert main([str(base), str(set_file), "--quiet"]) == 0

        out = capsys.readouterr().out.splitlines()
        assert set(out) == {
            str(addon / "set-mine.txt"),
            str(addon / "map-mine" / "one.sol"),
            str(addon / "shot-mine" / "shot.png"),
            str(addon / "map-mine" / "one.map"),
        }
        assert out[0] == str(addon / "set-mine.txt")

    def test_missing_assets_listed(self, level_set, capsys) -> None:
        """Test that missing assets are printed as not-found lines and exit 1."""
        base, addon, set_file = level_set
        (base / "geom" / "bush.obj").unlink()
        (addon / "shot-mine" / "shot.png").unlink()

        assert main([str(base), str(set_file)]) == 1

        captured = capsys.readouterr()
        assert captured.out.splitlines() == [
            "not-found:image:shot-mine/shot.png:set-mine.txt",
            "not-found:model:geom/bush.obj:map-mine/one.map",
        ]
        assert "Missing 2 assets" in captured.err

    def test_zip_written(self, level_set, tmp_path: Path, capsys) -> None:
        """Test that --zip writes only the new addon files."""
        base, _, set_file = level_set
        out_dir = tmp_path / "dist"

        assert main([str(base), str(set_file), "--zip", "--output-dir", str(out_dir), "-q"]) == 0

        with zipfile.ZipFile(out_dir / "set-mine.zip") as archive:
            assert sorted(archive.namelist()) == [
                "map-mine/one.map",
                "map-mine/one.sol",
                "set-mine.txt",
                "shot-mine/shot.png",
            ]
        assert "Wrote" in capsys.readouterr().err

    def test_zip_custom_name(self, level_set, tmp_path: Path, monkeypatch) -> None:
        """Test --archive-name in the current directory."""
        base, _, set_file = level_set
        monkeypatch.chdir(tmp_path)

        assert main([str(base), str(set_file), "--zip", "--archive-name", "mine.zip", "-q"]) == 0
        assert (tmp_path / "mine.zip").is_file()

    def test_no_zip_when_missing(self, level_set, tmp_path: Path) -> None:
        """Test that no archive is written for an incomplete set."""
        base, _, set_file = level_set
        (base / "map-back" / "sky.sol").unlink()

        assert main([str(base), str(set_file), "--zip", "--output-dir", str(tmp_path), "-q"]) == 1
        assert not (tmp_path / "set-mine.zip").exists()

    def test_json_report(self, level_set, capsys) -> None:
        """Test that --json prints a schema-valid report."""
        base, addon, set_file = level_set

        assert main([str(base), str(set_file), "--json", "-q"]) == 0

        report = json.loads(capsys.readouterr().out)
        assert report["ok"] is True
        assert report["missing"] == []
        assert report["addon_dir"] == str(addon)
        assert {"kind": "model", "path": "geom/bush.obj", "parent": "map-mine/one.map"} in report["found"]
        assert [a["name"] for a in report["archive"]][0] == "set-mine.txt"

    def test_json_report_with_missing(self, level_set, capsys) -> None:
        """Test that --json still exits 1 when assets are missing."""
        base, _, set_file = level_set
        (base / "textures" / "mtrl" / "grass").unlink()

        assert main([str(base), str(set_file), "--json", "-q"]) == 1

        report = json.loads(capsys.readouterr().out)
        assert report["missing"] == [{"kind": "material", "path": "mtrl/grass", "parent": "map-mine/one.sol"}]

    def test_json_report_with_unnamed_material(self, level_set, put_file, sol_bytes, capsys) -> None:
        """Test that a level with an unnamed material still gives a valid report."""
        base, addon, set_file = level_set
        put_file(addon, "map-mine/one.sol", sol_bytes(dicts={"back": "map-back/sky.sol"}, materials=["", "mtrl/grass"]))

        assert main([str(base), str(set_file), "--json", "-q"]) == 0

        captured = capsys.readouterr()
        report = json.loads(captured.out)
        assert report["missing"] == []
        assert all(entry["path"] for entry in report["found"])
        assert captured.err == ""

    def test_linked_base_files_found(self, level_set, tmp_path: Path, capsys) -> None:
        """Test that base files linked in from another directory count as present."""
        base, _, set_file = level_set
        shared = tmp_path / "shared"
        shared.mkdir()
        (base / "geom" / "bush.obj").rename(shared / "bush.obj")
        (base / "geom" / "bush.obj").symlink_to(shared / "bush.obj")

        assert main([str(base), str(set_file), "-q"]) == 0
        assert "not-found" not in capsys.readouterr().out

    def test_bad_base_dir(self, tmp_path: Path, capsys) -> None:
        """Test that configuration errors exit 1 with a message."""
        set_file = tmp_path / "set.txt"
        set_file.write_text("t\n")

        assert main([str(tmp_path / "missing"), str(set_file)]) == 1
        assert "Error: Base directory does not exist" in capsys.readouterr().err

    def test_bad_set_file(self, data_dirs, capsys) -> None:
        """Test that a missing set file exits 1 with a message."""
        base, addon = data_dirs

        assert main([str(base), str(addon / "set.txt")]) == 1
        assert "Error: Set file does not exist" in capsys.readouterr().err

    def test_usage_error(self, capsys) -> None:
        """Test that missing arguments are an argparse usage error."""
        with pytest.raises(SystemExit) as excinfo:
            main([])
        assert excinfo.value.code == 2
