"""prefixbot — Discord prefix command router package."""

from prefixbot.config import AppConfig, DEVELOPER_ID, DISCORD_TOKEN
from prefixbot.domain.router import MessageRouter
from prefixbot.ports.inbound import IncomingMessage

__all__ = [
    "AppConfig",
    "DEVELOPER_ID",
    "DISCORD_TOKEN",
    "MessageRouter",
    "IncomingMessage",
]
