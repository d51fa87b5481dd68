"""Domain data models — pure Python dataclasses."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

DENIED_REPLY = "開発者専用コマンドです。"


class Prefix(str, Enum):
    """Leading characters that select a handler."""

    GENERAL = "!"
    ECHO = "$"
    DEVELOPER = "%"
    DEVELOPER_FULLWIDTH = "％"  # U+FF05


@dataclass
class DispatchResult:
    """Outcome of handling one incoming message."""

    reply: Optional[str] = None
    sent: bool = False
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None
