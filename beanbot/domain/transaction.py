"""Two-legged transactions built from a tokenized ledger command."""

from __future__ import annotations

import datetime as dt
from collections.abc import Sequence
from dataclasses import dataclass

from beanbot.domain.account_match import is_expense_account, resolve_account
from beanbot.domain.amount import Amount, parse_amount
from beanbot.domain.errors import (
    AccountResolveError,
    InvalidAccountError,
    InvalidAmountError,
    MissingArgumentError,
)


@dataclass(frozen=True)
class Posting:
    account: str
    amount: Amount


@dataclass(frozen=True)
class Transaction:
    """A completed entry: the expense leg first, then the negated source leg."""

    date: dt.date
    payee: str | None
    narration: str
    tags: tuple[str, ...]
    postings: tuple[Posting, Posting]


def _resolve_leg(catalog: Sequence[str], term: str, *, expense: bool) -> str:
    role = "expense" if expense else "source"
    try:
        return resolve_account(catalog, term, lambda account: is_expense_account(account) is expense)
    except AccountResolveError as exc:
        raise InvalidAccountError(role, exc) from exc


def build_transaction(
    args: Sequence[str],
    catalog: Sequence[str],
    default_currency: str,
    date: dt.date,
) -> Transaction:
    """
    Build a transaction from command arguments.

    Grammar: ``[>Payee] [#tag ...] Amount SourceAccount ExpenseAccount [Narration ...]``

    All three required slots are checked for presence before the amount is
    parsed or any account is resolved.
    """
    pos = 0
    payee: str | None = None
    if pos < len(args) and args[pos].startswith(">"):
        payee = args[pos][1:]
        pos += 1

    tags: dict[str, None] = {}
    while pos < len(args) and args[pos].startswith("#"):
        tags.setdefault(args[pos], None)
        pos += 1

    required = args[pos : pos + 3]
    for field, index in (("amount", 0), ("source account", 1), ("expense account", 2)):
        if len(required) <= index:
            raise MissingArgumentError(field)
    amount_text, source_term, expense_term = required
    narration = " ".join(args[pos + 3 :])

    amount = parse_amount(amount_text, default_currency)
    if amount is None:
        raise InvalidAmountError(amount_text)

    source_account = _resolve_leg(catalog, source_term, expense=False)
    expense_account = _resolve_leg(catalog, expense_term, expense=True)

    return Transaction(
        date=date,
        payee=payee,
        narration=narration,
        tags=tuple(tags),
        postings=(
            Posting(expense_account, amount),
            Posting(source_account, -amount),
        ),
    )


def build_today(
    args: Sequence[str],
    catalog: Sequence[str],
    default_currency: str,
    today: dt.date | None = None,
) -> Transaction:
    """Build a transaction dated today (local calendar date unless ``today`` is given)."""
    return build_transaction(args, catalog, default_currency, today or dt.date.today())
