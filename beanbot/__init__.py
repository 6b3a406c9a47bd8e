"""Telegram bot that turns shorthand commands into Beancount ledger entries."""
