"""Pure helpers for working with Beancount text snippets."""

from __future__ import annotations

import re

_ENTRY_DATE_RE = re.compile(r"^\s*(\d{4})-(\d{2})-\d{2}\s")


def entry_year_month(content: str) -> tuple[str, str]:
    """
    Extract the year and month of the entry that ``content`` starts with.

    "2025-01-15 * ..." -> ("2025", "01")
    """
    match = _ENTRY_DATE_RE.match(content)
    if match is None:
        raise ValueError(f"Entry does not start with a YYYY-MM-DD date: {content[:40]!r}")
    return match.group(1), match.group(2)
