"""Tests for the command line entry point."""

from __future__ import annotations

from pathlib import Path

import pytest

from scenetree.cli import build_parser, main, options_from_args


def _write(tmp_path: Path, name: str, text: str) -> Path:
    path = tmp_path / name
    path.write_text(text, encoding="utf-8")
    return path


class TestMain:
    """Tests for main."""

    def test_prints_tree(
        self, fixtures_dir: Path, sample_golden: str, capsys: pytest.CaptureFixture[str]
    ) -> None:
        status = main([str(fixtures_dir / "sample.tscn")])

        captured = capsys.readouterr()
        assert status == 0
        assert captured.out == sample_golden

    def test_flags_map_to_options(
        self, fixtures_dir: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        status = main(
            [str(fixtures_dir / "sample.tscn"), "--no-types", "--no-properties", "--depth", "1"]
        )

        out = capsys.readouterr().out
        assert status == 0
        assert out.splitlines()[0] == "Main"
        assert "Player" in out
        assert "Glow" not in out
        assert "* position" not in out

    def test_missing_file(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        status = main([str(tmp_path / "nope.tscn")])

        assert status == 1
        assert "nope.tscn" in capsys.readouterr().err

    def test_fatal_error_reports_file_and_line(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        path = _write(tmp_path, "bad.tscn", '[node name="One"]\n[node name="Two"]\n')

        status = main([str(path)])

        captured = capsys.readouterr()
        assert status == 1
        assert captured.out == ""
        assert f"scenetree: {path}: line 2: second root node 'Two'" in captured.err

    def test_skipped_connections_go_to_stderr(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        path = _write(
            tmp_path,
            "scene.tscn",
            '[node name="Root"]\n[connection signal="s" from="Nope" to="." method="m"]\n',
        )

        status = main([str(path)])

        captured = capsys.readouterr()
        assert status == 0
        assert captured.out == "Root\n"
        assert "Skipped connections:" in captured.err

    def test_multiple_files_keep_argument_order(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        first = _write(tmp_path, "b.tscn", '[node name="Beta"]\n')
        second = _write(tmp_path, "a.tscn", '[node name="Alpha"]\n')
        broken = _write(tmp_path, "c.tscn", '[node name="X" parent="Y"]\n')

        status = main([str(first), str(broken), str(second)])

        captured = capsys.readouterr()
        assert status == 1
        assert captured.out == f"==> {first} <==\nBeta\n\n==> {second} <==\nAlpha\n"
        assert "c.tscn" in captured.err


class TestParser:
    """Tests for argument parsing."""

    def test_defaults(self) -> None:
        args = build_parser().parse_args(["scene.tscn"])
        options = options_from_args(args)

        assert options.show_type_suffix
        assert options.show_properties
        assert options.show_connections
        assert options.show_instances
        assert options.resolve_resources

    def test_raw_values_flag(self) -> None:
        options = options_from_args(build_parser().parse_args(["scene.tscn", "--raw-values"]))

        assert not options.resolve_resources

    def test_rejects_negative_depth(self) -> None:
        with pytest.raises(SystemExit):
            build_parser().parse_args(["scene.tscn", "--depth", "-1"])
