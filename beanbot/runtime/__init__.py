"""Runtime infrastructure for beanbot.

This package provides process/runtime services including:
- Logging setup via get_logger()
- Ledger path layout via LedgerPaths
- Configuration loading via load_config()
- Persisted bot state and git synchronization

Usage:
    from beanbot.runtime import get_logger, load_config

    logger = get_logger(__name__)
    config = load_config("bot.toml")
    print(config.beancount.paths.accounts_file)
"""

from beanbot.runtime.config import AppConfig, BotSettings, LedgerSettings, load_config
from beanbot.runtime.git_sync import GitSyncError, check_repo, commit_file
from beanbot.runtime.logging import (
    DEFAULT_LOG_LEVEL,
    LOG_FORMAT,
    LOG_FORMAT_DEBUG,
    configure_logging,
    get_logger,
    set_log_level,
)
from beanbot.runtime.paths import LedgerPaths
from beanbot.runtime.state import BotState, load_state, save_state

__all__ = [
    # Logging
    "get_logger",
    "configure_logging",
    "set_log_level",
    "DEFAULT_LOG_LEVEL",
    "LOG_FORMAT",
    "LOG_FORMAT_DEBUG",
    # Config
    "AppConfig",
    "BotSettings",
    "LedgerSettings",
    "load_config",
    # Paths
    "LedgerPaths",
    # State
    "BotState",
    "load_state",
    "save_state",
    # Git
    "GitSyncError",
    "check_repo",
    "commit_file",
]
