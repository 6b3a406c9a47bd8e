"""Core domain logic for turning a shorthand command into a ledger entry.

This package is pure: no file, network or process access. It provides:
- command_split: shell-like tokenizer for the command line
- parse_account_catalog / resolve_account: account catalog and fuzzy lookup
- parse_amount, build_today: amount grammar and transaction construction
- format_transaction: canonical Beancount rendering

Usage:
    from beanbot.domain import build_today, command_split, format_transaction

    txn = build_today(command_split(text), catalog, "CNY")
    print(format_transaction(txn))
"""

from beanbot.domain.account_catalog import AccountCatalog, parse_account_catalog
from beanbot.domain.account_match import (
    EXPENSE_PREFIX,
    account_matches,
    filter_accounts,
    is_expense_account,
    last_component,
    resolve_account,
)
from beanbot.domain.amount import Amount, parse_amount
from beanbot.domain.command_split import command_split, iter_command_args
from beanbot.domain.errors import (
    AccountResolveError,
    AmbiguousAccountError,
    CommandError,
    InvalidAccountError,
    InvalidAmountError,
    MissingArgumentError,
    NewlineInArgumentError,
    NoMatchingAccountError,
    TokenizeError,
    TransactionBuildError,
    UnmatchedQuoteError,
)
from beanbot.domain.ledger_format import escape_string, format_amount, format_posting, format_transaction
from beanbot.domain.transaction import Posting, Transaction, build_today, build_transaction

__all__ = [
    # Tokenizer
    "command_split",
    "iter_command_args",
    # Accounts
    "AccountCatalog",
    "parse_account_catalog",
    "EXPENSE_PREFIX",
    "account_matches",
    "filter_accounts",
    "is_expense_account",
    "last_component",
    "resolve_account",
    # Entries
    "Amount",
    "parse_amount",
    "Posting",
    "Transaction",
    "build_today",
    "build_transaction",
    "escape_string",
    "format_amount",
    "format_posting",
    "format_transaction",
    # Errors
    "CommandError",
    "TokenizeError",
    "UnmatchedQuoteError",
    "NewlineInArgumentError",
    "AccountResolveError",
    "NoMatchingAccountError",
    "AmbiguousAccountError",
    "TransactionBuildError",
    "MissingArgumentError",
    "InvalidAmountError",
    "InvalidAccountError",
]
