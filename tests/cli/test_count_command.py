"""Tests for the csloc count command."""

import json

from typer.testing import CliRunner

from csloc import __version__
from csloc.cli import app

runner = CliRunner()


def _run_json(*args):
    result = runner.invoke(app, [*args, "--format", "json"])
    assert result.exit_code == 0, result.output
    return json.loads(result.stdout)


class TestCountOutput:
    """Report contents for files and directories."""

    def test_directory_in_name_order(self, c_project):
        data = _run_json(str(c_project))
        names = [f["path"].rsplit("/", 1)[-1] for f in data["files"]]
        assert names == ["legacy.c", "main.cpp", "util.h"]
        assert data["totals"]["file_count"] == 3

    def test_recursive(self, c_project):
        data = _run_json("-r", str(c_project))
        assert len(data["files"]) == 4
        assert data["totals"]["total_lines"] == 13 + 8 + 5 + 5

    def test_single_file_has_no_totals(self, c_project):
        data = _run_json(str(c_project / "main.cpp"))
        assert data["totals"] is None
        main = data["files"][0]
        assert main["language"] == "C++"
        assert main["doc_comment_count"] == 5
        assert main["code_count"] == 5

    def test_sort_descending_by_code(self, c_project):
        data = _run_json("-r", "-S", "s", str(c_project))
        assert [f["code_count"] for f in data["files"]] == [5, 4, 3, 3]

    def test_sort_ascending_by_filename(self, c_project):
        data = _run_json("-s", "f", str(c_project / "util.h"), str(c_project / "legacy.c"))
        names = [f["path"].rsplit("/", 1)[-1] for f in data["files"]]
        assert names == ["legacy.c", "util.h"]

    def test_exclude_option(self, c_project):
        data = _run_json("-r", "-e", "*.hpp", "-e", "legacy.c", str(c_project))
        names = [f["path"].rsplit("/", 1)[-1] for f in data["files"]]
        assert names == ["main.cpp", "util.h"]

    def test_quiet_format(self, c_project):
        result = runner.invoke(app, ["--format", "quiet", str(c_project / "legacy.c")])
        assert result.exit_code == 0
        assert result.stdout.strip() == f"5\t{c_project / 'legacy.c'}"

    def test_rich_table(self, c_project):
        result = runner.invoke(app, [str(c_project)])
        assert result.exit_code == 0
        assert "Files processed" in result.stdout
        assert "SUM" in result.stdout

    def test_format_from_project_config(self, c_project):
        (c_project.parent / "cwd" / "csloc.toml").write_text('output_format = "csv"\n', encoding="utf-8")
        result = runner.invoke(app, [str(c_project / "util.h")])
        assert result.exit_code == 0
        assert result.stdout.startswith("filename,language,")


class TestCountErrors:
    """Exit codes for usage and configuration problems."""

    def test_sort_and_sort_desc_conflict(self, c_project):
        result = runner.invoke(app, ["-s", "f", "-S", "f", str(c_project)])
        assert result.exit_code == 2

    def test_invalid_sort_key(self, c_project):
        result = runner.invoke(app, ["-s", "size", str(c_project)])
        assert result.exit_code == 1
        assert "Error" in result.output

    def test_invalid_format(self, c_project):
        result = runner.invoke(app, ["--format", "xml", str(c_project)])
        assert result.exit_code == 1
        assert "Error" in result.output

    def test_wrongly_typed_config_value(self, c_project, tmp_path):
        cfg = tmp_path / "bad.toml"
        cfg.write_text("sort_key = 5\n", encoding="utf-8")
        result = runner.invoke(app, ["-c", str(cfg), str(c_project)])
        assert result.exit_code == 1
        assert "Error" in result.output
        assert not isinstance(result.exception, AttributeError)

    def test_log_file_in_missing_directory(self, c_project, tmp_path):
        log_path = tmp_path / "no" / "such" / "csloc.log"
        result = runner.invoke(app, ["--log-file", str(log_path), str(c_project)])
        assert result.exit_code == 1
        assert "Error" in result.output
        assert not isinstance(result.exception, OSError)

    def test_no_source_files(self, tmp_path):
        empty = tmp_path / "empty"
        empty.mkdir()
        result = runner.invoke(app, [str(empty)])
        assert result.exit_code == 1
        assert "No C/C++ source files" in result.output

    def test_missing_input_only(self, tmp_path):
        result = runner.invoke(app, [str(tmp_path / "nope.c")])
        assert result.exit_code == 1

    def test_no_arguments(self):
        result = runner.invoke(app, [])
        assert result.exit_code == 2


class TestCountMisc:
    def test_version(self):
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.stdout

    def test_log_file(self, c_project, tmp_path):
        log_path = tmp_path / "csloc.log"
        result = runner.invoke(
            app, ["-v", "--log-file", str(log_path), "--format", "quiet", str(c_project / "util.h")]
        )
        assert result.exit_code == 0
        assert "Scan complete" in log_path.read_text(encoding="utf-8")
