from __future__ import annotations

import datetime as dt
from pathlib import Path

import pytest
from _pytest.monkeypatch import MonkeyPatch

from beanbot.application import entries
from beanbot.application.entries import LedgerService
from beanbot.domain import InvalidAccountError, UnmatchedQuoteError
from beanbot.ledger_reader import LedgerValidationError
from beanbot.runtime.config import LedgerSettings

TODAY = dt.date(2026, 3, 14)


def test_draft_renders_entry(ledger_settings: LedgerSettings) -> None:
    service = LedgerService(ledger_settings)

    draft = service.draft(">Bakery #weekend 12.5 ali groc \"bread, 2 loaves\"", today=TODAY)

    assert draft.transaction.payee == "Bakery"
    assert draft.text == (
        '2026-03-14 * "Bakery" "bread, 2 loaves" #weekend\n'
        "    Expenses:Food:Groceries 12.5 CNY\n"
        "    Assets:Bank:Alipay -12.5 CNY"
    )


def test_draft_reports_command_errors(ledger_settings: LedgerSettings) -> None:
    service = LedgerService(ledger_settings)

    with pytest.raises(UnmatchedQuoteError):
        service.draft("10 cash 'bus", today=TODAY)
    with pytest.raises(InvalidAccountError):
        # closed accounts are not resolvable by default
        service.draft("10 oldbank bus", today=TODAY)


def test_closed_accounts_can_be_kept(ledger_root: Path) -> None:
    service = LedgerService(LedgerSettings(root=ledger_root, default_currency="CNY", include_closed_accounts=True))
    draft = service.draft("10 oldbank bus", today=TODAY)
    assert draft.transaction.postings[1].account == "Assets:Bank:OldBank"


def test_accounts_query(ledger_settings: LedgerSettings) -> None:
    service = LedgerService(ledger_settings)
    assert service.accounts("food", sync=False) == ["Expenses:Food:Out", "Expenses:Food:Groceries"]
    assert len(service.accounts(sync=False)) == 6


def test_accounts_pulls_before_reading(ledger_settings: LedgerSettings, monkeypatch: MonkeyPatch) -> None:
    def pull(root: Path) -> None:
        # simulate an account opened on the remote arriving with the rebase
        with open(root / "accounts.bean", "a", encoding="utf-8") as f:
            f.write("2026-03-01 open Expenses:Food:Snacks\n")

    monkeypatch.setattr(entries, "check_repo", pull)
    service = LedgerService(ledger_settings)

    assert service.accounts("snack") == ["Expenses:Food:Snacks"]


def test_draft_rejects_entry_beancount_cannot_parse(ledger_settings: LedgerSettings) -> None:
    service = LedgerService(ledger_settings)

    # single-letter commodities are not valid Beancount 2 currencies
    with pytest.raises(LedgerValidationError, match="rejected by Beancount parser"):
        service.draft("'1 V' cash out", today=TODAY)


def test_commit_without_sync_appends_only(ledger_settings: LedgerSettings, monkeypatch: MonkeyPatch) -> None:
    def fail(*args: object, **kwargs: object) -> None:
        raise AssertionError("git must not run")

    monkeypatch.setattr(entries, "check_repo", fail)
    monkeypatch.setattr(entries, "commit_file", fail)
    service = LedgerService(ledger_settings)
    draft = service.draft("3 cash bus", today=TODAY)

    path = service.commit(draft.text, sync=False)

    assert path == ledger_settings.root / "txs" / "2026" / "03.bean"
    assert path.read_text(encoding="utf-8") == draft.text + "\n"


def test_commit_syncs_around_the_append(ledger_settings: LedgerSettings, monkeypatch: MonkeyPatch) -> None:
    calls: list[tuple[object, ...]] = []
    monkeypatch.setattr(entries, "check_repo", lambda root: calls.append(("pull", root)))
    monkeypatch.setattr(
        entries,
        "commit_file",
        lambda root, path, original: calls.append(("commit", root, path.exists(), original)),
    )
    service = LedgerService(ledger_settings)
    draft = service.draft("3 cash bus", today=TODAY)

    service.commit(draft.text, original_command="3 cash bus")

    root = ledger_settings.root
    assert calls == [("pull", root), ("commit", root, True, "3 cash bus")]
