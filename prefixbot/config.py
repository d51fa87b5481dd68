"""Configuration and shared state."""

__version__ = "0.1.0"

import os
import sys
from dataclasses import dataclass

from dotenv import load_dotenv

load_dotenv()

_stderr_print = lambda *a, **kw: print(*a, **kw, file=sys.stderr)


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        value = int(raw)
    except ValueError:
        _stderr_print(f"Invalid {name}={raw!r}, falling back to {default}")
        return default
    if value < 0:
        _stderr_print(f"Negative {name}={raw!r}, falling back to {default}")
        return default
    return value


DISCORD_TOKEN = os.getenv("DISCORD_BOT_TOKEN", "")

# 0 = no developer configured; every developer command is denied
DEVELOPER_ID = _int_env("DEVELOPER_ID", 0)

# Messages kept in discord.py's cache
MESSAGE_CACHE_SIZE = _int_env("DISCORD_MESSAGE_CACHE_SIZE", 1024)


@dataclass
class AppConfig:
    """Typed configuration passed to the launcher and router."""

    discord_token: str = ""
    developer_id: int = 0
    message_cache_size: int = 1024

    @classmethod
    def from_env(cls) -> "AppConfig":
        """Create AppConfig from environment variables."""
        return cls(
            discord_token=os.getenv("DISCORD_BOT_TOKEN", DISCORD_TOKEN),
            developer_id=_int_env("DEVELOPER_ID", DEVELOPER_ID),
            message_cache_size=_int_env("DISCORD_MESSAGE_CACHE_SIZE", MESSAGE_CACHE_SIZE),
        )
