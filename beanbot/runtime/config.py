"""Runtime loader for the bot configuration file (``bot.toml``).

Example:

    [bot]
    token = "123456:ABC..."
    secret = "let-me-in"
    state_file = "state.json"      # optional
    max_message_age = 180          # optional, seconds

    [beancount]
    root = "/home/me/ledger"
    default_currency = "CNY"
    include_closed_accounts = false  # optional
"""

from __future__ import annotations

import tomllib
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Any

from beanbot.runtime.paths import LedgerPaths

DEFAULT_CONFIG_PATH = "bot.toml"
DEFAULT_STATE_FILE = "state.json"
DEFAULT_MAX_MESSAGE_AGE = 180


@dataclass(frozen=True)
class BotSettings:
    token: str
    secret: str
    state_file: Path = Path(DEFAULT_STATE_FILE)
    max_message_age: int = DEFAULT_MAX_MESSAGE_AGE


@dataclass(frozen=True)
class LedgerSettings:
    root: Path
    default_currency: str
    include_closed_accounts: bool = False

    @property
    def paths(self) -> LedgerPaths:
        return LedgerPaths(self.root)


@dataclass(frozen=True)
class AppConfig:
    bot: BotSettings
    beancount: LedgerSettings


def _required_str(section: dict[str, Any], section_name: str, key: str, path: Path) -> str:
    value = str(section.get(key, "")).strip()
    if not value:
        raise ValueError(f"Missing required setting [{section_name}].{key} in {path}")
    return value


def _optional_bool(section: dict[str, Any], section_name: str, key: str, path: Path, default: bool) -> bool:
    value = section.get(key, default)
    if not isinstance(value, bool):
        raise ValueError(f"Setting [{section_name}].{key} in {path} must be true or false, got {value!r}")
    return value


def parse_config(config: dict[str, Any], path: Path) -> AppConfig:
    """Validate a decoded TOML document and build an :class:`AppConfig`."""
    bot = config.get("bot", {})
    ledger = config.get("beancount", {})

    bot_settings = BotSettings(
        token=_required_str(bot, "bot", "token", path),
        secret=_required_str(bot, "bot", "secret", path),
        state_file=Path(bot.get("state_file", DEFAULT_STATE_FILE)),
        max_message_age=int(bot.get("max_message_age", DEFAULT_MAX_MESSAGE_AGE)),
    )
    ledger_settings = LedgerSettings(
        root=Path(_required_str(ledger, "beancount", "root", path)).expanduser(),
        default_currency=_required_str(ledger, "beancount", "default_currency", path),
        include_closed_accounts=_optional_bool(ledger, "beancount", "include_closed_accounts", path, False),
    )
    return AppConfig(bot=bot_settings, beancount=ledger_settings)


@lru_cache(maxsize=4)
def load_config(config_path: str | None = None) -> AppConfig:
    """
    Load the application configuration from TOML.

    Args:
        config_path: Optional TOML path override. If None, uses ``bot.toml``
            in the working directory.

    Raises:
        FileNotFoundError: the file does not exist.
        ValueError: a required setting is missing.
    """
    path = Path(config_path if config_path is not None else DEFAULT_CONFIG_PATH)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    with open(path, "rb") as f:
        config = tomllib.load(f)

    return parse_config(config, path)
