"""linkmeta configuration — loads settings from .env file or environment.

Config is loaded from (in priority order):
  1. Environment variables (highest priority)
  2. .env file in current directory
  3. .linkmeta/.env file
  4. Defaults

Credentials are read once into a ``Settings`` object which is handed to the
fetchers at construction time; the pipeline itself never touches os.environ.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)

DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"
)
GITHUB_API_BASE = "https://api.github.com"
YOUTUBE_API_BASE = "https://www.googleapis.com/youtube/v3"

_loaded = False


def _parse_env_file(path: Path) -> dict[str, str]:
    """Parse a simple .env file (KEY=VALUE, one per line)."""
    values: dict[str, str] = {}
    if not path.exists():
        return values
    for line in path.read_text(encoding="utf-8").splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue
        if "=" not in line:
            continue
        key, _, value = line.partition("=")
        values[key.strip()] = value.strip().strip("\"'")
    return values


def load_config() -> None:
    """Load config from .env files into os.environ (if not already set)."""
    global _loaded
    if _loaded:
        return
    _loaded = True

    candidates = [
        Path.cwd() / ".env",
        Path.cwd() / ".linkmeta" / ".env",
    ]

    for env_path in candidates:
        values = _parse_env_file(env_path)
        if values:
            logger.debug("Loaded config from %s", env_path)
            for key, value in values.items():
                if key not in os.environ:  # env vars take priority
                    os.environ[key] = value
            break  # use first found


def get(key: str, default: str = "") -> str:
    """Get a config value (loads .env on first call)."""
    load_config()
    return os.environ.get(key, default)


def _get_timeout() -> float | None:
    raw = get("LINKMETA_HTTP_TIMEOUT")
    if not raw:
        return None
    try:
        return float(raw)
    except ValueError:
        logger.warning("Ignoring invalid LINKMETA_HTTP_TIMEOUT=%r", raw)
        return None


@dataclass(frozen=True, slots=True)
class Settings:
    """Read-only process configuration for the authenticated fetchers."""

    github_token: str = ""
    youtube_api_key: str = ""
    user_agent: str = DEFAULT_USER_AGENT
    http_timeout: float | None = None
    github_api_base: str = GITHUB_API_BASE
    youtube_api_base: str = YOUTUBE_API_BASE

    @classmethod
    def from_env(cls) -> Settings:
        return cls(
            github_token=get("GITHUB_TOKEN") or get("LINKMETA_GITHUB_TOKEN"),
            youtube_api_key=get("YOUTUBE_API_KEY") or get("LINKMETA_YOUTUBE_API_KEY"),
            user_agent=get("LINKMETA_USER_AGENT") or DEFAULT_USER_AGENT,
            http_timeout=_get_timeout(),
        )
