"""Tests for the destiny CLI command."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from gunghap.cli import cli


@pytest.mark.usefixtures("_isolated_cwd")
class TestDestinyCommand:
    def test_human_output(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["destiny", "철수", "영희"])
        assert result.exit_code == 0, result.output
        assert "OK" in result.output
        assert "58%" in result.output
        assert "6   9   9" in result.output

    def test_json_output(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "destiny", "홍길동", "아무개"])
        assert result.exit_code == 0, result.output
        data = json.loads(result.output)
        assert data["ok"] is True
        assert data["op"] == "destiny"
        assert data["data"]["combined_sequence"] == ["홍", "아", "길", "무", "동", "개"]
        assert data["data"]["trace"] == [[9, 1, 4, 2, 1], [0, 5, 6, 3], [5, 1, 9]]
        assert data["data"]["result"] == [6, 0]
        assert data["data"]["percentage"] == "60%"

    def test_quiet_output(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "destiny", "철수", "영희"])
        assert result.exit_code == 0
        assert result.output.strip() == "58%"

    def test_deterministic(self, cli_runner: CliRunner) -> None:
        first = cli_runner.invoke(cli, ["--json", "destiny", "남궁민수", "김철수"])
        second = cli_runner.invoke(cli, ["--json", "destiny", "남궁민수", "김철수"])
        assert first.output == second.output

    def test_validation_error_exits_1(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["destiny", "철", "영희"])
        assert result.exit_code == 1
        assert "ERROR" in result.output
        assert "at least 2 characters" in result.output

    def test_validation_error_json(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "destiny", "남궁민수", "김철"])
        assert result.exit_code == 1
        data = json.loads(result.output)
        assert data["ok"] is False
        assert data["error"]["code"] == "LENGTH_MISMATCH"

    def test_both_ways(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["destiny", "철수", "영희", "--both-ways"])
        assert result.exit_code == 0
        assert "[forward] 철수 + 영희" in result.output
        assert "[reverse] 영희 + 철수" in result.output
        assert "WARNING: Score depends on name order" in result.output

    def test_both_ways_quiet(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "destiny", "철수", "영희", "--both-ways"])
        assert result.exit_code == 0
        assert result.output.splitlines()[:2] == ["58%", "25%"]

    def test_display_config_hides_process(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        (tmp_path / "gunghap.toml").write_text("[display]\nshow_process = false\n")
        result = cli_runner.invoke(cli, ["destiny", "철수", "영희"])
        assert result.exit_code == 0
        assert "process:" not in result.output
        assert "58%" in result.output

    def test_validation_config_via_option(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        cfg = tmp_path / "custom.toml"
        cfg.write_text("[validation]\nmin_name_length = 1\n")
        result = cli_runner.invoke(cli, ["-c", str(cfg), "-q", "destiny", "철", "영희"])
        assert result.exit_code == 0
        assert result.output.strip().endswith("%")

    def test_verbose_telemetry_only_for_verbose_run(self, cli_runner: CliRunner) -> None:
        verbose = cli_runner.invoke(cli, ["-v", "destiny", "철수", "영희"])
        assert verbose.exit_code == 0
        assert "compute_destiny" in verbose.output

        plain = cli_runner.invoke(cli, ["destiny", "철수", "영희"])
        assert plain.exit_code == 0
        assert "compute_destiny" not in plain.output
