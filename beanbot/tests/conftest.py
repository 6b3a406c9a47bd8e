"""Shared pytest fixtures for beanbot tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from beanbot.runtime.config import AppConfig, BotSettings, LedgerSettings

SAMPLE_ACCOUNTS = (
    "Assets:Cash:CNY",
    "Assets:Cash:USD",
    "Expenses:International:Fees",
    "Expenses:Food:Groceries",
    "Expenses:Health:Dental:Insurance",
    "Expenses:Health:Life:GroupTermLife",
    "Expenses:Health:Medical:Insurance",
    "Expenses:Health:Vision:Insurance",
    "Expenses:Home:Internet",
    "Expenses:Home:Phone",
    "Expenses:Home:Rent",
)

ACCOUNTS_BEAN = """\
; Assets
2020-01-01 open Assets:Cash:CNY CNY
2020-01-01 open Assets:Bank:Alipay CNY
2020-01-01 open Liabilities:CreditCard:CMB CNY
2020-01-01 open Assets:Bank:OldBank CNY
2023-06-30 close Assets:Bank:OldBank

; Expenses
2020-01-01 open Expenses:Food:Out
2020-01-01 open Expenses:Food:Groceries
2020-01-01 open Expenses:Transport:Bus
"""


@pytest.fixture
def catalog() -> tuple[str, ...]:
    return SAMPLE_ACCOUNTS


@pytest.fixture
def ledger_root(tmp_path: Path) -> Path:
    root = tmp_path / "ledger"
    root.mkdir()
    (root / "accounts.bean").write_text(ACCOUNTS_BEAN, encoding="utf-8")
    return root


@pytest.fixture
def ledger_settings(ledger_root: Path) -> LedgerSettings:
    return LedgerSettings(root=ledger_root, default_currency="CNY")


@pytest.fixture
def app_config(tmp_path: Path, ledger_settings: LedgerSettings) -> AppConfig:
    return AppConfig(
        bot=BotSettings(token="123:abc", secret="open sesame", state_file=tmp_path / "state.json"),
        beancount=ledger_settings,
    )
