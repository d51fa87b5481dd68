"""Port interfaces (Hexagonal Architecture)."""

from prefixbot.ports.inbound import IncomingMessage
from prefixbot.ports.outbound import NotificationPort

__all__ = [
    "IncomingMessage",
    "NotificationPort",
]
