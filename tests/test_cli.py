"""CLI commands that do not need a live API."""

from __future__ import annotations

import pytest
from click.testing import CliRunner

from telepoll.cli import cli


@pytest.fixture
def runner(monkeypatch):
    monkeypatch.delenv("TELEPOLL_TOKEN", raising=False)
    monkeypatch.delenv("BOT_TOKEN", raising=False)
    return CliRunner()


def test_status_masks_token(runner, monkeypatch):
    monkeypatch.setenv("TELEPOLL_TOKEN", "123456:SECRET-PART")

    result = runner.invoke(cli, ["status"])

    assert result.exit_code == 0
    assert "123456:***" in result.output
    assert "SECRET-PART" not in result.output
    assert "Poll timeout:    120s" in result.output


def test_status_reads_config_file(runner, tmp_path):
    path = tmp_path / "telepoll.toml"
    path.write_text('[runner]\nhandler = "log"\n')

    result = runner.invoke(cli, ["-c", str(path), "status"])

    assert result.exit_code == 0
    assert "Handler:         log" in result.output
    assert "(not set)" in result.output


def test_run_requires_token(runner):
    result = runner.invoke(cli, ["run"])

    assert result.exit_code == 1


def test_me_requires_token(runner):
    result = runner.invoke(cli, ["me"])

    assert result.exit_code == 1
