"""Keep the ledger repository in sync with its git remote."""

from __future__ import annotations

import subprocess
from pathlib import Path

from beanbot.runtime.logging import get_logger

logger = get_logger(__name__)

COMMIT_MESSAGE = "Add a transaction"


class GitSyncError(RuntimeError):
    """A git command failed; the message carries git's stderr when available."""


def _run_git(repo: Path, *args: str) -> subprocess.CompletedProcess[str]:
    command = ["git", "-C", str(repo), *args]
    logger.debug("Running %s", " ".join(command))
    try:
        result = subprocess.run(command, capture_output=True, text=True)
    except OSError as exc:
        raise GitSyncError(f"execution of git {args[0]} failed: {exc}") from exc
    if result.returncode != 0:
        stderr = result.stderr.strip()
        message = f"git {args[0]} failed"
        raise GitSyncError(f"{message}: {stderr}" if stderr else message)
    return result


def check_repo(repo: Path) -> None:
    """Rebase the repository onto its upstream before reading or writing."""
    _run_git(repo, "pull", "--rebase")


def commit_file(repo: Path, file: Path, original_command: str | None = None) -> None:
    """
    Commit one ledger file and push it.

    The original command, when known, becomes the second paragraph of the
    commit message.
    """
    _run_git(repo, "add", str(file))

    commit_args = ["commit", "-m", COMMIT_MESSAGE]
    if original_command:
        commit_args.extend(["-m", original_command])
    _run_git(repo, *commit_args)

    _run_git(repo, "push")
    logger.info("Committed and pushed %s", file)
