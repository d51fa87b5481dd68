"""Outbound ports — interfaces for external system adapters."""

from typing import Protocol, runtime_checkable


@runtime_checkable
class NotificationPort(Protocol):
    """Interface for sending messages to channels."""

    async def send(self, channel_id: int, text: str) -> None: ...
