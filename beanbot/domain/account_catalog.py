"""Pure extraction of the known account names from ``open`` directives."""

from __future__ import annotations

from collections.abc import Iterable

AccountCatalog = tuple[str, ...]


def parse_account_catalog(lines: Iterable[str], include_closed: bool = False) -> AccountCatalog:
    """
    Return the account names opened in ``lines``, in the order they are opened.

    Only the rudimentary directive shape is understood: ``<date> open <account> ...``
    and ``<date> close <account>``. Comment lines (``;``) and lines with fewer
    than three fields are skipped. Closed accounts are dropped unless
    ``include_closed`` is set; an account opened again after closing comes back.
    """
    accounts: dict[str, None] = {}
    for line in lines:
        fields = line.split()
        if len(fields) < 3 or fields[0].startswith(";"):
            continue
        directive, account = fields[1], fields[2]
        if directive == "open":
            accounts.setdefault(account, None)
        elif directive == "close" and not include_closed:
            accounts.pop(account, None)
    return tuple(accounts)
