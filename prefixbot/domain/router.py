"""MessageRouter — prefix dispatch, no framework dependencies.

Decides from the first character of a message which canned responder
handles it, and sends at most one reply through a NotificationPort.
"""

import sys
from typing import Optional

from prefixbot.domain.models import DENIED_REPLY, DispatchResult, Prefix
from prefixbot.ports.inbound import IncomingMessage
from prefixbot.ports.outbound import NotificationPort

_PREFIXES = frozenset(p.value for p in Prefix)


def _log(msg: str):
    print(msg, file=sys.stderr)


class MessageRouter:
    """Pure routing logic — no discord import, testable with mock ports.

    Handles:
    - ``!`` general commands (``!ping`` → pong)
    - ``$`` echo (body returned verbatim)
    - ``%`` / ``％`` developer-only commands (``%ping`` → dev-pong)
    """

    def __init__(self, developer_id: int, notification: Optional[NotificationPort] = None):
        self.developer_id = developer_id
        self._notification = notification

    def wire(self, notification: NotificationPort) -> None:
        """Attach the outbound port once the platform adapter is ready."""
        self._notification = notification
        _log(f"[router] prefix routing enabled for {', '.join(p.value for p in Prefix)}")

    # -- Decision --

    def route(self, message: IncomingMessage) -> Optional[str]:
        """Return the reply text for ``message``, or None to stay silent."""
        if message.is_bot:
            return None
        content = message.content
        if not content:
            return None

        prefix, body = content[0], content[1:]

        if prefix not in _PREFIXES:
            return None
        _log(f"[router] prefix {prefix!r} from user {message.author_id} ({message.author_name})")

        if prefix == Prefix.GENERAL:
            return self._general(body)
        if prefix == Prefix.ECHO:
            return self._echo(body)
        return self._developer(body, message.author_id)

    def _general(self, body: str) -> Optional[str]:
        if body.strip() == "ping":
            return "pong"
        return None

    def _echo(self, body: str) -> Optional[str]:
        if not body:
            return None
        # Untrimmed
        return body

    def _developer(self, body: str, author_id: int) -> Optional[str]:
        if author_id != self.developer_id:
            _log(f"[router] non-developer user {author_id} attempted a developer command")
            return DENIED_REPLY
        if body.strip() == "ping":
            return "dev-pong"
        return None

    # -- Dispatch --

    async def handle(self, message: IncomingMessage) -> DispatchResult:
        """Route ``message`` and send the reply, if any.

        Never raises: failures come back as ``DispatchResult.error`` so the
        gateway keeps delivering later messages.
        """
        try:
            reply = self.route(message)
            if reply is None:
                return DispatchResult()
            if self._notification is None:
                _log(f"[router] dropped reply for user {message.author_id}: notification port not wired")
                return DispatchResult(reply=reply, error="notification port not wired")
            await self._notification.send(message.channel_id, reply)
        except Exception as e:
            _log(f"[router] error handling message from user {message.author_id}: {e!r}")
            return DispatchResult(error=repr(e))

        _log(f"[router] replied to user {message.author_id}: {reply[:80]}")
        return DispatchResult(reply=reply, sent=True)
