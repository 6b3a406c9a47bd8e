"""Ledger entry workflows."""

from beanbot.application.entries import EntryDraft, LedgerService

__all__ = [
    "EntryDraft",
    "LedgerService",
]
