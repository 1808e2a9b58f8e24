"""Unit tests for the CLI — Typer command registration and behavior.

Exercises the commands via typer.testing.CliRunner against temporary
trees; every path is passed explicitly so no .env or environment leaks in.
"""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from lilacstat.cli.app import app
from lilacstat.config import StatusConfig

runner = CliRunner()

LOG_LINE = "[2024-01-01T00:00:00] foo 1.0-1 [1.0-1] successful after 12s"


def _path_args(config: StatusConfig) -> list[str]:
    return [
        "--packages", str(config.packages_dir),
        "--build-log", str(config.build_log_path),
        "--captures", str(config.capture_dir),
        "--html", str(config.html_dir),
        "--checkpoint", str(config.checkpoint_path),
        "--index", str(config.index_path),
    ]


@pytest.fixture(autouse=True)
def _isolated_cwd(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.chdir(tmp_path)


# ---------------------------------------------------------------------------
# Test: CLI help and registration
# ---------------------------------------------------------------------------


class TestCliApp:
    def test_no_args_shows_help(self):
        result = runner.invoke(app, [])
        # Typer's no_args_is_help may exit with 0 or 2 depending on version
        assert result.exit_code in (0, 2)
        assert "usage" in result.output.lower()

    def test_help_flag(self):
        result = runner.invoke(app, ["--help"])
        assert result.exit_code == 0
        for name in ("run", "render", "index", "status", "checkpoint"):
            assert name in result.output

    @pytest.mark.parametrize("command", ["run", "render", "index", "status", "checkpoint"])
    def test_command_help(self, command: str):
        result = runner.invoke(app, [command, "--help"])
        assert result.exit_code == 0


# ---------------------------------------------------------------------------
# Test: commands
# ---------------------------------------------------------------------------


class TestRunCommand:
    def test_run_publishes_index(self, status_config: StatusConfig, make_package, write_build_log, make_capture):
        make_package("foo", ["alice"])
        write_build_log([LOG_LINE])
        make_capture("2024-01-01T00:00:00", "foo.log", b"\x1b[32mok\x1b[0m\n")

        result = runner.invoke(app, ["run", *_path_args(status_config)])
        assert result.exit_code == 0, result.output
        data = json.loads(status_config.index_path.read_text(encoding="utf-8"))
        assert data[0]["name"] == "foo"
        assert (status_config.html_dir / "foo" / "2024-01-01T00:00:00.html").exists()

    def test_no_render_leaves_captures_alone(self, status_config: StatusConfig, make_package, write_build_log, make_capture):
        make_package("foo", ["alice"])
        write_build_log([LOG_LINE])
        make_capture("2024-01-01T00:00:00", "foo.log")

        result = runner.invoke(app, ["run", "--no-render", *_path_args(status_config)])
        assert result.exit_code == 0, result.output
        assert not status_config.html_dir.exists()
        assert status_config.index_path.exists()

    def test_fatal_error_exits_nonzero_without_index(self, status_config: StatusConfig, make_package):
        make_package("foo", ["alice"])
        # no build log written
        result = runner.invoke(app, ["run", *_path_args(status_config)])
        assert result.exit_code == 1
        assert "Run aborted" in result.output
        assert not status_config.index_path.exists()


class TestStageCommands:
    def test_index_only(self, status_config: StatusConfig, make_package, write_build_log):
        make_package("foo", ["alice"])
        write_build_log([LOG_LINE])
        result = runner.invoke(app, [
            "index",
            "--packages", str(status_config.packages_dir),
            "--build-log", str(status_config.build_log_path),
            "--index", str(status_config.index_path),
        ])
        assert result.exit_code == 0, result.output
        assert "Published 1 rows" in result.output

    def test_render_only(self, status_config: StatusConfig, make_capture):
        make_capture("2024-01-01T00:00:00", "foo.log")
        result = runner.invoke(app, [
            "render",
            "--captures", str(status_config.capture_dir),
            "--html", str(status_config.html_dir),
            "--checkpoint", str(status_config.checkpoint_path),
        ])
        assert result.exit_code == 0, result.output
        assert "2024-01-01T00:00:00" in result.output

    def test_render_with_bad_folder_fails(self, status_config: StatusConfig, make_capture):
        make_capture("latest", "foo.log")
        result = runner.invoke(app, [
            "render",
            "--captures", str(status_config.capture_dir),
            "--html", str(status_config.html_dir),
            "--checkpoint", str(status_config.checkpoint_path),
        ])
        assert result.exit_code == 1


class TestStatusCommand:
    def test_missing_index(self, tmp_dir: Path):
        result = runner.invoke(app, ["status", "--index", str(tmp_dir / "none.json")])
        assert result.exit_code == 1
        assert "Index not found" in result.output

    def test_shows_rows(self, status_config: StatusConfig, make_package, write_build_log):
        make_package("foo", ["alice"])
        write_build_log([LOG_LINE])
        runner.invoke(app, ["run", "--no-render", *_path_args(status_config)])

        result = runner.invoke(app, ["status", "--index", str(status_config.index_path)])
        assert result.exit_code == 0, result.output
        assert "foo" in result.output
        assert "alice" in result.output

    def test_failing_filter(self, status_config: StatusConfig, make_package, write_build_log):
        make_package("foo", ["alice"])
        write_build_log([LOG_LINE])
        runner.invoke(app, ["run", "--no-render", *_path_args(status_config)])

        result = runner.invoke(app, ["status", "--failing", "--index", str(status_config.index_path)])
        assert result.exit_code == 0
        assert "No packages to show" in result.output

    def test_bracketed_package_name(self, tmp_dir: Path):
        index = tmp_dir / "i.json"
        index.write_text(
            '[{"name":"a[/b]","maintainers":"alice","time":"t","during":1,'
            '"version":"1","result":["✅"]}]',
            encoding="utf-8",
        )
        result = runner.invoke(app, ["status", "--index", str(index)])
        assert result.exit_code == 0, result.output
        assert "a[/b]" in result.output


class TestCheckpointCommand:
    def test_set_and_show(self, tmp_dir: Path):
        path = tmp_dir / "state" / "timestamp"
        result = runner.invoke(app, ["checkpoint", "--checkpoint", str(path), "--set", "1704067200"])
        assert result.exit_code == 0, result.output
        assert path.read_text(encoding="ascii") == "1704067200"
        assert "2024-01-01T00:00:00" in result.output

    def test_show_missing(self, tmp_dir: Path):
        result = runner.invoke(app, ["checkpoint", "--checkpoint", str(tmp_dir / "missing")])
        assert result.exit_code == 1

    def test_set_out_of_range_is_rejected(self, tmp_dir: Path):
        path = tmp_dir / "state" / "timestamp"
        result = runner.invoke(app, ["checkpoint", "--checkpoint", str(path), "--set", "99999999999999999"])
        assert result.exit_code == 1
        assert result.exception is None or isinstance(result.exception, SystemExit)
        assert "out of range" in result.output
        assert not path.exists()

    def test_show_value_beyond_datetime_range(self, tmp_dir: Path):
        path = tmp_dir / "timestamp"
        path.write_text("99999999999999999", encoding="ascii")
        result = runner.invoke(app, ["checkpoint", "--checkpoint", str(path)])
        assert result.exit_code == 0, result.output
        assert "99999999999999999" in result.output


class TestInvalidConfiguration:
    def test_invalid_env_setting_exits_cleanly(self, monkeypatch: pytest.MonkeyPatch, tmp_dir: Path):
        monkeypatch.setenv("LILACSTAT_HISTORY_LENGTH", "0")
        result = runner.invoke(app, ["index", "--index", str(tmp_dir / "i.json")])
        assert result.exit_code == 1
        assert result.exception is None or isinstance(result.exception, SystemExit)
        assert "Invalid configuration" in result.output
