"""Resolve short, user-typed search terms to one account name."""

from __future__ import annotations

import re
from collections.abc import Callable, Sequence

from beanbot.domain.errors import AmbiguousAccountError, NoMatchingAccountError

EXPENSE_PREFIX = "Expenses:"

_ASCII_WHITESPACE_RE = re.compile(r"[ \t\n\f\r]+")


def _subterms(term: str) -> list[str]:
    return [part for part in _ASCII_WHITESPACE_RE.split(term.lower()) if part]


def last_component(account: str) -> str:
    """Return the leaf segment of a colon-separated account name."""
    return account.rsplit(":", 1)[-1]


def is_expense_account(account: str) -> bool:
    return account.startswith(EXPENSE_PREFIX)


def account_matches(account: str, term: str) -> bool:
    """
    Return True if every whitespace-separated subterm of ``term`` is a
    case-insensitive substring of ``account``.
    """
    lowered = account.lower()
    return all(sub in lowered for sub in _subterms(term))


def filter_accounts(catalog: Sequence[str], query: str) -> list[str]:
    """Return the catalog accounts matching ``query``; an empty query keeps all."""
    return [account for account in catalog if account_matches(account, query)]


def resolve_account(
    catalog: Sequence[str],
    term: str,
    predicate: Callable[[str], bool],
) -> str:
    """
    Return the single account in ``catalog`` that matches ``term``.

    Candidates are the accounts whose full name matches the term and satisfy
    ``predicate``. If there are several, the ones whose leaf segment alone
    matches the term are kept; a single survivor wins.

    Raises:
        NoMatchingAccountError: no candidate at all.
        AmbiguousAccountError: several candidates that the leaf segment does
            not narrow down to one.
    """
    matched = [account for account in catalog if account_matches(account, term) and predicate(account)]
    if not matched:
        raise NoMatchingAccountError(term)
    if len(matched) == 1:
        return matched[0]

    leaf_matched = [account for account in matched if account_matches(last_component(account), term)]
    if len(leaf_matched) == 1:
        return leaf_matched[0]
    if not leaf_matched:
        raise AmbiguousAccountError(term, matched, stage="full")
    raise AmbiguousAccountError(term, leaf_matched, stage="leaf")
