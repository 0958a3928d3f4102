"""Runtime configuration for gh-lol.

The only setting is ``supportive``. It is read from ``$GH_LOL_SUPPORTIVE``
when set, otherwise from the gh CLI's own config (``gh config set supportive
enabled``). Settings are loaded once at startup and handed to commands.
"""

import logging
import os
import subprocess

from pydantic import BaseModel, Field

logger = logging.getLogger(__name__)

SUPPORTIVE_ENV = "GH_LOL_SUPPORTIVE"
TRUTHY = {"enabled", "true", "1", "yes", "on"}

SUPPORTIVE_MESSAGE = "hey. you're doing great. take a break if you need to."


class Settings(BaseModel):
    """Process-wide configuration."""

    supportive: bool = Field(
        False, description="Print an encouraging message before every command"
    )


def _gh_config_get(key: str) -> str | None:
    try:
        result = subprocess.run(
            ["gh", "config", "get", key],
            capture_output=True,
            text=True,
            check=False,
        )
    except FileNotFoundError:
        logger.debug("gh is not installed; skipping gh config lookup")
        return None
    if result.returncode != 0:
        logger.debug("gh config get %s failed: %s", key, result.stderr.strip())
        return None
    return result.stdout.strip()


def load_settings() -> Settings:
    """Load settings from the environment, falling back to gh config."""
    raw = os.getenv(SUPPORTIVE_ENV)
    if raw is None:
        raw = _gh_config_get("supportive")
    return Settings(supportive=(raw or "").strip().lower() in TRUTHY)
