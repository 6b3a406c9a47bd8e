"""Amounts typed as ``<number> [CURRENCY]``."""

from __future__ import annotations

import re
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation

CURRENCY_PATTERN = r"[A-Z](?:[A-Z0-9'._-]{0,22}[A-Z0-9])?"
_AMOUNT_RE = re.compile(rf"([0-9.]+)\s*({CURRENCY_PATTERN})?")


@dataclass(frozen=True)
class Amount:
    """An exact decimal number in one currency."""

    number: Decimal
    currency: str

    def __neg__(self) -> Amount:
        return Amount(self.number.copy_negate(), self.currency)


def parse_amount(token: str, default_currency: str) -> Amount | None:
    """
    Parse an amount token such as ``"10 CNY"``, ``"3.50"`` or ``"7USD"``.

    Returns None when the token does not fit the grammar or the number is
    malformed (``"1.2.3"``); ``default_currency`` fills in a missing currency.
    """
    match = _AMOUNT_RE.fullmatch(token)
    if match is None:
        return None
    try:
        number = Decimal(match.group(1))
    except InvalidOperation:
        return None
    return Amount(number, match.group(2) or default_currency)
