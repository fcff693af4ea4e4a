"""Build identification: git commit and build date."""

from __future__ import annotations

import logging
import os
import subprocess
from datetime import datetime, timezone

log = logging.getLogger(__name__)

COMMIT_ENV = "SUBWASM_CLI_GIT_COMMIT_HASH"
DATE_ENV = "SOURCE_DATE_EPOCH"
DATE_FORMAT = "%Y-%m-%dT%H:%M:%SZ"
UNKNOWN = "unknown"


def git_commit_hash() -> str:
    """The commit from the environment, else from ``git``, else ``unknown``."""
    from_env = os.environ.get(COMMIT_ENV)
    if from_env is not None:
        return from_env.strip()
    try:
        result = subprocess.run(
            ["git", "rev-parse", "--short=11", "HEAD"],
            capture_output=True,
            check=False,
        )
    except OSError as exc:
        log.warning("Failed to execute git command: %s", exc)
        return UNKNOWN
    if result.returncode != 0:
        log.warning("Git command failed with status: %s", result.returncode)
        return UNKNOWN
    return result.stdout.decode("utf-8", errors="replace").strip()


def build_date() -> str:
    """The build date in UTC, taken from ``SOURCE_DATE_EPOCH`` when it is valid."""
    moment = None
    raw = os.environ.get(DATE_ENV)
    if raw is not None:
        try:
            moment = datetime.fromtimestamp(int(raw), tz=timezone.utc)
        except (ValueError, OverflowError, OSError):
            moment = None
    if moment is None:
        moment = datetime.now(timezone.utc)
    return moment.strftime(DATE_FORMAT)