"""Privileged ledger mutation: appending rendered entries to monthly files."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from beancount.parser import parser

from beanbot.domain.beancount_dates import entry_year_month
from beanbot.runtime import get_logger
from beanbot.runtime.paths import LedgerPaths

logger = get_logger(__name__)


class LedgerValidationError(RuntimeError):
    """Rendered entry text is not accepted by the Beancount parser."""


class LedgerWriter:
    """Append-only write access to ``<root>/txs/<YYYY>/<MM>.bean``."""

    def __init__(self, paths: LedgerPaths) -> None:
        self.paths = paths

    def validate_entry(self, text: str) -> list[Any]:
        """Parse ``text`` with Beancount and return parser errors (if any)."""
        entries, errors, _ = parser.parse_string(text.rstrip("\n") + "\n")
        if not errors and not entries:
            return [f"no entry found in {text[:40]!r}"]
        return list(errors)

    def check_entry(self, text: str) -> None:
        """Raise :class:`LedgerValidationError` unless Beancount accepts ``text``."""
        errors = self.validate_entry(text)
        if errors:
            error_preview = "; ".join(str(getattr(err, "message", err)) for err in errors[:2])
            raise LedgerValidationError(f"Entry rejected by Beancount parser: {error_preview}")

    def entry_path(self, text: str) -> Path:
        """Return the monthly file an entry starting with ``YYYY-MM-DD`` belongs to."""
        year, month = entry_year_month(text)
        return self.paths.month_file(year, month)

    def append_entry(self, text: str, validate: bool = True) -> Path:
        """
        Append one entry to its monthly file and return the file path.

        Creates the year directory if needed. A blank line separates the entry
        from any previous content; the entry is terminated by a newline.
        """
        if validate:
            self.check_entry(text)

        path = self.entry_path(text)
        path.parent.mkdir(parents=True, exist_ok=True)
        needs_separator = path.exists() and path.stat().st_size > 0
        with open(path, "a", encoding="utf-8") as f:
            if needs_separator:
                f.write("\n")
            f.write(text.rstrip("\n"))
            f.write("\n")

        logger.info("Appended entry to %s", path)
        return path
