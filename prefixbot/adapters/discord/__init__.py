"""Discord adapter package."""

from prefixbot.adapters.discord.adapter import DiscordNotificationAdapter, PrefixRouterBot

__all__ = ["DiscordNotificationAdapter", "PrefixRouterBot"]
