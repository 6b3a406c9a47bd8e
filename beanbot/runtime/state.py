"""Persisted bot state: the Telegram users allowed to add entries."""

from __future__ import annotations

import json
from dataclasses import asdict, dataclass, field
from pathlib import Path

from beanbot.runtime.logging import get_logger

logger = get_logger(__name__)


@dataclass
class BotState:
    auth_users: list[int] = field(default_factory=list)

    def is_authorized(self, user_id: int) -> bool:
        return user_id in self.auth_users

    def authorize(self, user_id: int) -> bool:
        """Add ``user_id``; returns False if it was already authorized."""
        if self.is_authorized(user_id):
            return False
        self.auth_users.append(user_id)
        return True


def load_state(path: Path) -> BotState:
    """Load state from JSON; a missing file yields an empty state."""
    if not path.exists():
        logger.info("State file %s not found, starting with no authorized users", path)
        return BotState()
    data = json.loads(path.read_text(encoding="utf-8"))
    return BotState(auth_users=[int(user) for user in data.get("auth_users", [])])


def save_state(state: BotState, path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(asdict(state)), encoding="utf-8")
