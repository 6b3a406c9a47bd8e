"""Centralized ledger file access for the Beancount repository."""

from beanbot.ledger_reader.reader import AccountCatalogReader
from beanbot.ledger_reader.writer import LedgerValidationError, LedgerWriter

__all__ = [
    "AccountCatalogReader",
    "LedgerValidationError",
    "LedgerWriter",
]
