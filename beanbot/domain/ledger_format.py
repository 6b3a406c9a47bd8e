"""Render transactions as Beancount text."""

from __future__ import annotations

from decimal import Decimal

from beanbot.domain.amount import Amount
from beanbot.domain.transaction import Posting, Transaction

POSTING_INDENT = "    "


def escape_string(text: str) -> str:
    """Escape backslashes and double quotes for a Beancount string literal."""
    return text.replace("\\", "\\\\").replace('"', '\\"')


def format_number(number: Decimal) -> str:
    # Positional notation keeps the typed scale and never emits an exponent.
    if number.is_zero():
        number = number.copy_abs()
    return format(number, "f")


def format_amount(amount: Amount) -> str:
    return f"{format_number(amount.number)} {amount.currency}"


def format_posting(posting: Posting) -> str:
    return f"{posting.account} {format_amount(posting.amount)}"


def format_transaction(txn: Transaction) -> str:
    """
    Format a transaction as Beancount text, without a trailing newline.

    Example:
        2024-05-01 * "Cafe" "lunch" #trip
            Expenses:Food:Out 10 CNY
            Assets:Cash:CNY -10 CNY
    """
    header = [f"{txn.date.strftime('%Y-%m-%d')} *"]
    if txn.payee is not None:
        header.append(f'"{escape_string(txn.payee)}"')
    header.append(f'"{escape_string(txn.narration)}"')
    header.extend(txn.tags)

    lines = [" ".join(header)]
    lines.extend(f"{POSTING_INDENT}{format_posting(posting)}" for posting in txn.postings)
    return "\n".join(lines)
