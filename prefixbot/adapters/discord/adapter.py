"""Discord adapter — bridges discord.Client to MessageRouter.

PrefixRouterBot converts Discord messages to IncomingMessage and delegates
the routing decision and the reply to MessageRouter.
"""

import sys

import discord

from prefixbot.domain.router import MessageRouter
from prefixbot.ports.inbound import IncomingMessage

# Discord rejects messages longer than this
MAX_MESSAGE_LENGTH = 2000


def _log(msg: str):
    print(msg, file=sys.stderr)


class DiscordNotificationAdapter:
    """NotificationPort implementation using discord.Client."""

    def __init__(self, client: discord.Client):
        self._client = client

    async def send(self, channel_id: int, text: str) -> None:
        channel = self._client.get_channel(channel_id)
        if channel is None:
            # DM channels are not always cached
            channel = await self._client.fetch_channel(channel_id)
        # Split long messages
        while text:
            await channel.send(text[:MAX_MESSAGE_LENGTH])
            text = text[MAX_MESSAGE_LENGTH:]


class PrefixRouterBot(discord.Client):
    """Thin Discord client that delegates every message to MessageRouter."""

    def __init__(self, router: MessageRouter, message_cache_size: int = 1024, **discord_kwargs):
        intents = discord.Intents.default()
        intents.message_content = True
        super().__init__(intents=intents, max_messages=message_cache_size, **discord_kwargs)
        self._router = router
        # Channel lookups work before READY, so replies never wait on on_ready
        self._router.wire(DiscordNotificationAdapter(self))

    @staticmethod
    def to_incoming(message: discord.Message) -> IncomingMessage:
        """Convert a Discord message to platform-agnostic IncomingMessage."""
        return IncomingMessage(
            content=message.content or "",
            channel_id=message.channel.id,
            author_id=message.author.id,
            is_bot=message.author.bot,
            author_name=str(message.author),
        )

    async def on_ready(self):
        _log(f"[discord] logged in as {self.user}")

    async def on_message(self, message: discord.Message):
        # Guard: self.user is None until the gateway READY event
        if not self.user or message.author == self.user:
            return
        await self._router.handle(self.to_incoming(message))
