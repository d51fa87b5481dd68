"""Inbound port — platform-agnostic message representation."""

from dataclasses import dataclass


@dataclass(frozen=True)
class IncomingMessage:
    """Discord-agnostic message representation."""

    content: str
    channel_id: int
    author_id: int
    is_bot: bool
    author_name: str = ""
