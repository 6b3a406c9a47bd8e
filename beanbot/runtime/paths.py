"""Path layout of the Beancount ledger repository.

A single source of truth for where accounts are declared and where new
entries are appended:

    <root>/accounts.bean            open/close directives
    <root>/txs/<YYYY>/<MM>.bean     appended transactions, one file per month
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

ACCOUNTS_FILE_NAME = "accounts.bean"
TRANSACTIONS_DIR_NAME = "txs"
LEDGER_SUFFIX = ".bean"


@dataclass(frozen=True)
class LedgerPaths:
    """Container for all ledger-repository paths, relative to ``root``."""

    root: Path

    @property
    def accounts_file(self) -> Path:
        """Account definitions file."""
        return self.root / ACCOUNTS_FILE_NAME

    @property
    def transactions(self) -> Path:
        """Directory holding appended transactions by year."""
        return self.root / TRANSACTIONS_DIR_NAME

    def year_dir(self, year: str) -> Path:
        return self.transactions / year

    def month_file(self, year: str, month: str) -> Path:
        """Monthly ledger file, e.g. ``txs/2026/03.bean``."""
        return self.year_dir(year) / f"{month}{LEDGER_SUFFIX}"
