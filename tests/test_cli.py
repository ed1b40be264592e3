"""Tests for the extpath command line."""

import json
from pathlib import Path

from click.testing import CliRunner

from extpath import __version__
from extpath.cli import main
from extpath.separators import for_current_os, preset_name


def _invoke(tmp_path: Path, *args: str, input: str | None = None):
    """Run the CLI with an isolated (absent) pyproject.toml."""
    config = tmp_path / "pyproject.toml"
    runner = CliRunner()
    return runner.invoke(main, ["--config", str(config), *args], input=input)


class TestRewrite:
    def test_replace_extension(self, tmp_path):
        result = _invoke(tmp_path, "--dialect", "unix", "--ext", ".md", "file.txt", "dir/a.b")
        assert result.exit_code == 0, result.output
        assert result.output.splitlines() == ["file.md", "dir/a.md"]

    def test_strip_extension_when_ext_omitted(self, tmp_path):
        result = _invoke(tmp_path, "--dialect", "unix", "archive.tar.gz")
        assert result.exit_code == 0
        assert result.output == "archive.tar\n"

    def test_empty_ext_leaves_trailing_dot(self, tmp_path):
        result = _invoke(tmp_path, "--dialect", "unix", "--ext", "", "file.txt")
        assert result.output == "file.\n"

    def test_dialect_changes_boundaries(self, tmp_path):
        unix = _invoke(tmp_path, "--dialect", "unix", "a.b\\c")
        windows = _invoke(tmp_path, "--dialect", "windows", "a.b\\c")
        assert unix.output == "a\n"
        assert windows.output == "a.b\\c\n"

    def test_dialect_case_insensitive(self, tmp_path):
        result = _invoke(tmp_path, "--dialect", "Windows-UNC", "--ext", "md", "a\\b.txt")
        assert result.exit_code == 0
        assert result.output == "a\\b.md\n"

    def test_reads_stdin_when_no_paths(self, tmp_path):
        result = _invoke(tmp_path, "--dialect", "unix", "--ext", "bak", input="a.txt\nb\n")
        assert result.exit_code == 0
        assert result.output.splitlines() == ["a.bak", "b.bak"]

    def test_double_dash_allows_dash_prefixed_paths(self, tmp_path):
        result = _invoke(tmp_path, "--dialect", "unix", "--ext", "md", "--", "-a.txt", "--b")
        assert result.exit_code == 0, result.output
        assert result.output.splitlines() == ["-a.md", "--b.md"]


class TestCustomDialect:
    def test_separator_option(self, tmp_path):
        result = _invoke(
            tmp_path,
            "--dialect", "unix",
            "--separator", "|",
            "--preferred-separator", "|",
            "a.b|c",
            "a.b/c",
        )
        assert result.exit_code == 0, result.output
        assert result.output.splitlines() == ["a.b|c", "a"]

    def test_invalid_dialect_is_reported(self, tmp_path):
        result = _invoke(tmp_path, "--dialect", "windows", "--separator", "/", "x.txt")
        assert result.exit_code == 1
        assert "preferred separator" in result.output


class TestFileConfig:
    def test_dialect_from_pyproject(self, tmp_path):
        (tmp_path / "pyproject.toml").write_text('[tool.extpath]\ndialect = "windows"\n')
        result = _invoke(tmp_path, "a.b\\c")
        assert result.output == "a.b\\c\n"

    def test_cli_dialect_wins(self, tmp_path):
        (tmp_path / "pyproject.toml").write_text('[tool.extpath]\ndialect = "windows"\n')
        result = _invoke(tmp_path, "--dialect", "unix", "a.b\\c")
        assert result.output == "a\n"

    def test_bad_file_config_is_reported(self, tmp_path):
        (tmp_path / "pyproject.toml").write_text("[tool.extpath]\nbogus = 1\n")
        result = _invoke(tmp_path, "x.txt")
        assert result.exit_code == 1
        assert "unknown key 'bogus'" in result.output


class TestOutput:
    def test_json_output(self, tmp_path):
        result = _invoke(
            tmp_path, "--dialect", "unix", "--format", "json", "--ext", ".md", "a.txt", ""
        )
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["dialect"] == "unix"
        assert data["total"] == 2
        assert data["results"] == [
            {"path": "a.txt", "result": "a.md"},
            {"path": "", "result": ""},
        ]

    def test_json_names_resolved_current_preset(self, tmp_path):
        result = _invoke(tmp_path, "--format", "json", "a.txt")
        data = json.loads(result.output)
        assert data["dialect"] == preset_name(for_current_os())

    def test_json_reports_custom_dialect(self, tmp_path):
        (tmp_path / "pyproject.toml").write_text(
            "[tool.extpath]\n"
            'dialect = "unix"\n'
            'separators = ["|"]\n'
            'preferred-separator = "|"\n'
        )
        result = _invoke(tmp_path, "--format", "json", "a.b|c")
        assert result.exit_code == 0, result.output
        data = json.loads(result.output)
        assert data["dialect"] == "custom"
        assert data["results"] == [{"path": "a.b|c", "result": "a.b|c"}]

    def test_version(self, tmp_path):
        result = _invoke(tmp_path, "--version")
        assert __version__ in result.output
