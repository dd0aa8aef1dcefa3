"""Tests for the svg-header CLI.

Tests cover the transform and inspect commands, option validation,
saving to an output directory and error exit codes.
Tests use CliRunner for isolated command invocation.
"""

from pathlib import Path

import pytest
from click.testing import CliRunner

from svg_header import __version__
from svg_header.cli.main import cli


@pytest.fixture
def runner() -> CliRunner:
    """Create a CliRunner instance for testing CLI commands."""
    return CliRunner()


class TestCliGroup:
    """Tests for the top-level group."""

    def test_help_lists_commands(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["--help"])
        assert result.exit_code == 0
        assert "transform" in result.output
        assert "inspect" in result.output

    def test_version(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output

    def test_bad_config_file(self, runner: CliRunner, tmp_path: Path, temp_svg: Path) -> None:
        config_file = tmp_path / "bad.yaml"
        config_file.write_text("content_mode: dom\n")
        result = runner.invoke(cli, ["--config", str(config_file), "inspect", str(temp_svg)])
        assert result.exit_code == 1
        assert "Config error" in result.output


class TestTransformCommand:
    """Tests for the transform subcommand."""

    def test_no_changes_prints_render(self, runner: CliRunner, temp_svg: Path) -> None:
        result = runner.invoke(cli, ["transform", str(temp_svg)])
        assert result.exit_code == 0, result.output
        assert result.output.startswith('<svg width="200" height="100"')
        assert 'xmlns="http://www.w3.org/2000/svg">' in result.output

    def test_all_changes(self, runner: CliRunner, temp_svg: Path) -> None:
        result = runner.invoke(
            cli,
            [
                "transform",
                str(temp_svg),
                "--clean",
                "--add-class",
                "foo",
                "--add-class",
                "baz",
                "--id",
                "logo",
                "--color",
                "#1a2b3c",
                "--size",
                "100",
                "50",
                "--title",
                "T",
                "--link",
                "Click",
                "--href",
                "https://x",
                "--link-class",
                "btn",
            ],
        )
        assert result.exit_code == 0, result.output
        assert result.output.startswith(
            '<a href="https://x"><span class="btn">Click</span>'
            '<svg viewBox="0 0 200 100" class="foo baz" id="logo" fill="#1a2b3c" '
            'width="100" height="50" xmlns="http://www.w3.org/2000/svg">'
            "<title>T</title><rect "
        )
        assert result.output.rstrip().endswith("</svg></a>")

    def test_set_class_then_add(self, runner: CliRunner, temp_svg: Path) -> None:
        result = runner.invoke(
            cli, ["transform", str(temp_svg), "--class", "a", "--add-class", "b"]
        )
        assert result.exit_code == 0
        assert 'class="a b"' in result.output

    def test_invalid_color_warns(self, runner: CliRunner, temp_svg: Path) -> None:
        result = runner.invoke(cli, ["transform", str(temp_svg), "--color", "#ZZZ"])
        assert result.exit_code == 0
        assert "ignored invalid color" in result.output
        assert "fill=" not in result.output.split(">", 1)[0]

    def test_link_requires_href(self, runner: CliRunner, temp_svg: Path) -> None:
        result = runner.invoke(cli, ["transform", str(temp_svg), "--link", "Click"])
        assert result.exit_code == 2
        assert "--link requires --href" in result.output

    def test_stdout_and_output_dir_conflict(
        self, runner: CliRunner, temp_svg: Path, tmp_path: Path
    ) -> None:
        result = runner.invoke(
            cli, ["transform", str(temp_svg), "--stdout", "-o", str(tmp_path)]
        )
        assert result.exit_code == 2

    def test_anchored_flag(self, runner: CliRunner, tmp_path: Path, prolog_svg_content: str) -> None:
        src = tmp_path / "prolog.svg"
        src.write_text(prolog_svg_content, encoding="utf-8")
        result = runner.invoke(cli, ["transform", str(src), "--anchored"])
        assert result.exit_code == 0
        assert result.output.strip() == (
            '<svg width="10" height="10" xmlns="http://www.w3.org/2000/svg"><rect/></svg>'
        )

    def test_output_dir_saves_file(
        self, runner: CliRunner, temp_svg: Path, tmp_path: Path
    ) -> None:
        out_dir = tmp_path / "out"
        out_dir.mkdir()
        result = runner.invoke(
            cli, ["transform", str(temp_svg), "--title", "Saved", "-o", str(out_dir)]
        )
        assert result.exit_code == 0, result.output
        assert "Wrote" in result.output
        saved = list(out_dir.glob("svg_*.svg"))
        assert len(saved) == 1
        assert "<title>Saved</title>" in saved[0].read_text(encoding="utf-8")

    def test_missing_output_dir_is_permissive(
        self, runner: CliRunner, temp_svg: Path, tmp_path: Path
    ) -> None:
        result = runner.invoke(cli, ["transform", str(temp_svg), "-o", str(tmp_path / "nope")])
        assert result.exit_code == 0
        assert "nothing saved" in result.output

    def test_missing_output_dir_strict_config(
        self, runner: CliRunner, temp_svg: Path, tmp_path: Path
    ) -> None:
        (tmp_path / "svg-header.yaml").write_text("strict_save: true\n")
        result = runner.invoke(cli, ["transform", str(temp_svg), "-o", str(tmp_path / "nope")])
        assert result.exit_code == 1
        assert "Cannot save SVG" in result.output

    def test_config_output_dir_and_prefix(
        self, runner: CliRunner, temp_svg: Path, tmp_path: Path
    ) -> None:
        out_dir = tmp_path / "icons"
        out_dir.mkdir()
        (tmp_path / "svg-header.yaml").write_text(
            f"output_dir: {out_dir.as_posix()}\nsave_prefix: icon_\n"
        )
        result = runner.invoke(cli, ["transform", str(temp_svg)])
        assert result.exit_code == 0, result.output
        assert len(list(out_dir.glob("icon_*.svg"))) == 1

    def test_missing_input(self, runner: CliRunner, tmp_path: Path) -> None:
        result = runner.invoke(cli, ["transform", str(tmp_path / "missing.svg")])
        assert result.exit_code == 1
        assert "Resource not found" in result.output

    def test_not_svg_input(self, runner: CliRunner, temp_text_file: Path) -> None:
        result = runner.invoke(cli, ["transform", str(temp_text_file)])
        assert result.exit_code == 1
        assert "Not an SVG file" in result.output

    def test_malformed_input(
        self, runner: CliRunner, tmp_path: Path, malformed_svg_content: str
    ) -> None:
        src = tmp_path / "broken.svg"
        src.write_text(malformed_svg_content, encoding="utf-8")
        result = runner.invoke(cli, ["transform", str(src)])
        assert result.exit_code == 1
        assert "Failed to parse SVG" in result.output


class TestInspectCommand:
    """Tests for the inspect subcommand."""

    def test_inspect_shows_maps(self, runner: CliRunner, temp_svg: Path) -> None:
        result = runner.invoke(cli, ["inspect", str(temp_svg)])
        assert result.exit_code == 0, result.output
        assert "Root attributes" in result.output
        assert "viewBox" in result.output
        assert "circle" in result.output
        assert "Inner content" in result.output

    def test_inspect_missing_file(self, runner: CliRunner, tmp_path: Path) -> None:
        result = runner.invoke(cli, ["inspect", str(tmp_path / "missing.svg")])
        assert result.exit_code == 1
        assert "Resource not found" in result.output
