"""Launcher for the prefix router bot."""

import asyncio
import sys
from typing import Optional

import discord

from prefixbot.adapters.discord.adapter import PrefixRouterBot
from prefixbot.config import AppConfig
from prefixbot.domain.router import MessageRouter


def _log(msg: str):
    print(msg, file=sys.stderr)


def build_bot(config: AppConfig) -> PrefixRouterBot:
    """Instantiate the router and its Discord client from config."""
    if not config.developer_id:
        _log("DEVELOPER_ID not set — developer commands will be denied for everyone")
    router = MessageRouter(developer_id=config.developer_id)
    return PrefixRouterBot(router, message_cache_size=config.message_cache_size)


async def launch_bot(config: Optional[AppConfig] = None) -> None:
    """Run the bot until the connection closes."""
    config = config or AppConfig.from_env()

    if not config.discord_token:
        _log("No bot configured. Set the DISCORD_BOT_TOKEN environment variable.")
        return

    bot = build_bot(config)
    _log("Launching prefix router bot...")
    try:
        await bot.start(config.discord_token)
    except discord.LoginFailure as e:
        _log(f"[discord] login failed: {e}")
    except discord.DiscordException as e:
        _log(f"[discord] crashed: {e!r}")
    finally:
        if not bot.is_closed():
            await bot.close()


def main() -> int:
    try:
        asyncio.run(launch_bot())
    except KeyboardInterrupt:
        _log("Shutting down.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
