#!/usr/bin/env python3

import argparse
from collections.abc import Sequence

from beanbot.runtime import configure_logging, get_logger, load_config

logger = get_logger(__name__)


def _print_error(error: str) -> None:
    for line in error.splitlines():
        print(line)


def main(argv: Sequence[str] | None = None) -> int:
    """Main entry point for the CLI."""
    parser = argparse.ArgumentParser(
        description="Shorthand Beancount entries, from the terminal or a Telegram bot",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Commands:
  draft <command> [--commit] [--no-sync]
                             Render an entry; optionally append and commit it
  accounts [query ...] [--no-sync]
                             List accounts matching every query word
  serve                      Run the Telegram bot (long polling)

Entry command grammar:
  [>Payee] [#tag ...] Amount SourceAccount ExpenseAccount [Narration ...]
  e.g.  >Cafe #trip '12.50 USD' cash lunch "sandwich and coffee"
""",
    )
    parser.add_argument("--config", default="bot.toml", help="Path to bot.toml (default: bot.toml)")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    draft_parser = subparsers.add_parser("draft", help="Render an entry from a shorthand command")
    draft_parser.add_argument("text", help="Shorthand command, quoted as one shell argument")
    draft_parser.add_argument("--commit", action="store_true", help="Append the entry to the ledger and commit it")
    draft_parser.add_argument("--no-sync", action="store_true", help="With --commit, skip git pull/commit/push")

    accounts_parser = subparsers.add_parser("accounts", help="List accounts")
    accounts_parser.add_argument("query", nargs="*", help="Words that must all appear in the account name")
    accounts_parser.add_argument("--no-sync", action="store_true", help="Skip git pull before listing")

    subparsers.add_parser("serve", help="Run the Telegram bot")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    configure_logging()

    try:
        config = load_config(args.config)
    except (OSError, ValueError) as exc:
        _print_error(str(exc))
        return 1

    if args.command == "serve":
        from beanbot.application.telegram_bot import run_bot

        run_bot(config)
        return 0

    from beanbot.application.entries import LedgerService
    from beanbot.domain import CommandError
    from beanbot.ledger_reader import LedgerValidationError
    from beanbot.runtime import GitSyncError

    service = LedgerService(config.beancount)

    if args.command == "accounts":
        try:
            accounts = service.accounts(" ".join(args.query), sync=not args.no_sync)
        except (GitSyncError, OSError) as exc:
            _print_error(str(exc))
            return 1
        for account in accounts:
            print(account)
        return 0

    if args.command == "draft":
        try:
            draft = service.draft(args.text)
            print(draft.text)
            if args.commit:
                path = service.commit(draft.text, original_command=args.text, sync=not args.no_sync)
                print(f"Appended to {path}")
        except (CommandError, GitSyncError, LedgerValidationError, OSError) as exc:
            logger.debug("draft failed: %r", exc)
            _print_error(str(exc))
            return 1
        return 0

    return 1


if __name__ == "__main__":
    raise SystemExit(main())
