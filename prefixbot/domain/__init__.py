"""Domain layer — pure Python, no framework dependencies."""

from prefixbot.domain.models import DENIED_REPLY, DispatchResult, Prefix
from prefixbot.domain.router import MessageRouter

__all__ = [
    "DENIED_REPLY",
    "DispatchResult",
    "MessageRouter",
    "Prefix",
]
