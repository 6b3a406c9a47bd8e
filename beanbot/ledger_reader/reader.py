"""Read-only access to the account declarations of a ledger repository.

Each call reads the accounts file again and returns a fresh, immutable
catalog snapshot; nothing is cached between requests.
"""

from __future__ import annotations

from pathlib import Path

from beanbot.domain.account_catalog import AccountCatalog, parse_account_catalog
from beanbot.runtime import get_logger
from beanbot.runtime.paths import LedgerPaths

logger = get_logger(__name__)


class AccountCatalogReader:
    """Builds account catalogs from ``<root>/accounts.bean``."""

    def __init__(self, paths: LedgerPaths, include_closed: bool = False) -> None:
        self.paths = paths
        self.include_closed = include_closed

    def _resolve_path(self, accounts_path: Path | str | None) -> Path:
        if accounts_path is None:
            return self.paths.accounts_file
        return Path(accounts_path)

    def load(self, accounts_path: Path | str | None = None) -> AccountCatalog:
        """Return the accounts currently declared in the accounts file."""
        path = self._resolve_path(accounts_path)
        with open(path, encoding="utf-8") as f:
            catalog = parse_account_catalog(f, include_closed=self.include_closed)
        logger.debug("Loaded %d account(s) from %s", len(catalog), path)
        return catalog
