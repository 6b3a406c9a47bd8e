"""Ledger entry workflow: draft an entry from a command, then commit it."""

from __future__ import annotations

import datetime as dt
from dataclasses import dataclass
from pathlib import Path

from beanbot.domain import (
    AccountCatalog,
    Transaction,
    build_today,
    command_split,
    filter_accounts,
    format_transaction,
)
from beanbot.ledger_reader import AccountCatalogReader, LedgerWriter
from beanbot.runtime import get_logger
from beanbot.runtime.config import LedgerSettings
from beanbot.runtime.git_sync import check_repo, commit_file

logger = get_logger(__name__)


@dataclass(frozen=True)
class EntryDraft:
    """A transaction built from one command, with its rendered text."""

    command: str
    transaction: Transaction
    text: str


class LedgerService:
    """Orchestrates catalog reads, entry drafting and committing for one ledger."""

    def __init__(
        self,
        settings: LedgerSettings,
        reader: AccountCatalogReader | None = None,
        writer: LedgerWriter | None = None,
    ) -> None:
        self.settings = settings
        self.paths = settings.paths
        self.reader = reader or AccountCatalogReader(self.paths, include_closed=settings.include_closed_accounts)
        self.writer = writer or LedgerWriter(self.paths)

    def catalog(self) -> AccountCatalog:
        """Return a fresh snapshot of the declared accounts."""
        return self.reader.load()

    def draft(self, command: str, today: dt.date | None = None) -> EntryDraft:
        """
        Turn a shorthand command into a rendered entry without writing it.

        Raises:
            CommandError: the command cannot be tokenized or built.
            LedgerValidationError: Beancount would not accept the rendered entry.
            OSError: the accounts file cannot be read.
        """
        args = command_split(command)
        txn = build_today(args, self.catalog(), self.settings.default_currency, today=today)
        text = format_transaction(txn)
        self.writer.check_entry(text)
        logger.debug("Drafted entry for %d argument(s)", len(args))
        return EntryDraft(command=command, transaction=txn, text=text)

    def accounts(self, query: str = "", sync: bool = True) -> list[str]:
        """Return accounts matching every word of ``query``, after a rebase when ``sync``."""
        if sync:
            check_repo(self.paths.root)
        return filter_accounts(self.catalog(), query)

    def commit(self, text: str, original_command: str | None = None, sync: bool = True) -> Path:
        """
        Append a rendered entry to the ledger and record it in git.

        With ``sync`` the repository is rebased first and the file is
        committed and pushed afterwards.
        """
        if sync:
            check_repo(self.paths.root)
        path = self.writer.append_entry(text)
        if sync:
            commit_file(self.paths.root, path, original_command)
        return path
