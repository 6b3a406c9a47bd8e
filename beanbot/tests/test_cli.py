"""Tests for the unified CLI entry point."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest
from _pytest.monkeypatch import MonkeyPatch

from beanbot.application import entries
from beanbot.cli import main as unified_cli
from beanbot.runtime.config import load_config
from beanbot.runtime.git_sync import GitSyncError


@pytest.fixture
def config_file(tmp_path: Path, ledger_root: Path) -> Path:
    path = tmp_path / "bot.toml"
    path.write_text(
        f"""
[bot]
token = "123:abc"
secret = "s"

[beancount]
root = "{ledger_root.as_posix()}"
default_currency = "CNY"
"""
    )
    load_config.cache_clear()
    return path


def test_no_command_prints_help(capsys: pytest.CaptureFixture[str]) -> None:
    assert unified_cli.main([]) == 1
    assert "usage:" in capsys.readouterr().out


def test_draft_prints_entry(config_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
    exit_code = unified_cli.main(["--config", str(config_file), "draft", "#x 7 cmb bus 'night bus'"])

    out = capsys.readouterr().out
    assert exit_code == 0
    assert '* "night bus" #x' in out
    assert "    Liabilities:CreditCard:CMB -7 CNY" in out


def test_draft_error_is_printed_not_raised(config_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
    exit_code = unified_cli.main(["--config", str(config_file), "draft", "7 cmb food"])

    assert exit_code == 1
    assert "Invalid expense account: More than one matched account" in capsys.readouterr().out


def test_draft_commit_without_sync(
    config_file: Path,
    ledger_root: Path,
    monkeypatch: MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    def fail(*args: object, **kwargs: object) -> None:
        raise AssertionError("git must not run")

    monkeypatch.setattr(entries, "check_repo", fail)
    sentinel_argv = ["sentinel", "keep-this"]
    monkeypatch.setattr(sys, "argv", sentinel_argv)

    exit_code = unified_cli.main(["--config", str(config_file), "draft", "7 cmb bus", "--commit", "--no-sync"])

    assert exit_code == 0
    assert sys.argv == sentinel_argv
    written = list((ledger_root / "txs").rglob("*.bean"))
    assert len(written) == 1
    assert "Appended to" in capsys.readouterr().out


def test_accounts_lists_matches(config_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert unified_cli.main(["--config", str(config_file), "accounts", "food", "--no-sync"]) == 0
    assert capsys.readouterr().out.splitlines() == ["Expenses:Food:Out", "Expenses:Food:Groceries"]


def test_accounts_reports_pull_failure(
    config_file: Path, monkeypatch: MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    def failing_pull(root: Path) -> None:
        raise GitSyncError("git pull failed: fatal: no upstream")

    monkeypatch.setattr(entries, "check_repo", failing_pull)

    assert unified_cli.main(["--config", str(config_file), "accounts", "food"]) == 1
    assert "git pull failed: fatal: no upstream" in capsys.readouterr().out


def test_missing_config_is_reported(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    load_config.cache_clear()
    assert unified_cli.main(["--config", str(tmp_path / "nope.toml"), "accounts"]) == 1
    assert "Config file not found" in capsys.readouterr().out
