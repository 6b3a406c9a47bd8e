"""User-facing errors raised while interpreting a ledger command.

Every error here is reported back to whoever typed the command; none of them
should take the hosting process down.
"""

from __future__ import annotations

from collections.abc import Sequence


class CommandError(ValueError):
    """Base class for errors caused by the content of a user command."""


class TokenizeError(CommandError):
    """The command line could not be split into arguments."""


class UnmatchedQuoteError(TokenizeError):
    def __init__(self, quote: str) -> None:
        self.quote = quote
        super().__init__(f"unmatched {quote} quote")


class NewlineInArgumentError(TokenizeError):
    def __init__(self, context: str) -> None:
        self.context = context
        super().__init__(f"newline within {context}")


class AccountResolveError(CommandError):
    """A search term did not resolve to exactly one account."""

    def __init__(self, term: str, message: str) -> None:
        self.term = term
        super().__init__(message)


class NoMatchingAccountError(AccountResolveError):
    def __init__(self, term: str) -> None:
        super().__init__(term, f"No matched account for {term!r}")


class AmbiguousAccountError(AccountResolveError):
    """
    More than one account matched the term.

    ``stage`` is ``"full"`` when the full account names were ambiguous and no
    leaf segment matched, or ``"leaf"`` when several leaf segments matched.
    """

    def __init__(self, term: str, candidates: Sequence[str], stage: str) -> None:
        self.candidates = tuple(candidates)
        self.stage = stage
        label = "last-component matched" if stage == "leaf" else "matched"
        super().__init__(term, f"More than one {label} account: {', '.join(self.candidates)}")


class TransactionBuildError(CommandError):
    """The arguments could not be turned into a transaction."""


class MissingArgumentError(TransactionBuildError):
    def __init__(self, field: str) -> None:
        self.field = field
        super().__init__(f"Not enough arguments: {field}")


class InvalidAmountError(TransactionBuildError):
    def __init__(self, token: str) -> None:
        self.token = token
        super().__init__(f"Invalid amount {token}")


class InvalidAccountError(TransactionBuildError):
    """Wraps an :class:`AccountResolveError` for one leg of the transaction."""

    def __init__(self, role: str, cause: AccountResolveError) -> None:
        self.role = role
        self.cause = cause
        super().__init__(f"Invalid {role} account: {cause}")
