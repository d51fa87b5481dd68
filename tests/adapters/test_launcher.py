"""Tests for the launcher — config wiring and clean shutdown."""

from unittest.mock import AsyncMock, MagicMock, patch

import discord
import pytest

from prefixbot.adapters.discord import launcher
from prefixbot.adapters.discord.adapter import PrefixRouterBot
from prefixbot.config import AppConfig


def test_build_bot_passes_developer_id():
    bot = launcher.build_bot(AppConfig(discord_token="tok", developer_id=42, message_cache_size=10))
    assert isinstance(bot, PrefixRouterBot)
    assert bot._router.developer_id == 42
    assert bot._connection.max_messages == 10


@pytest.mark.asyncio
async def test_launch_without_token_returns(capsys):
    with patch.object(launcher, "build_bot") as build:
        await launcher.launch_bot(AppConfig(discord_token=""))
    build.assert_not_called()
    assert "DISCORD_BOT_TOKEN" in capsys.readouterr().err


@pytest.mark.asyncio
async def test_launch_starts_and_closes():
    bot = MagicMock()
    bot.start = AsyncMock()
    bot.close = AsyncMock()
    bot.is_closed = MagicMock(return_value=False)
    with patch.object(launcher, "build_bot", return_value=bot):
        await launcher.launch_bot(AppConfig(discord_token="tok", developer_id=1))
    bot.start.assert_awaited_once_with("tok")
    bot.close.assert_awaited_once()


@pytest.mark.asyncio
async def test_login_failure_logged(capsys):
    bot = MagicMock()
    bot.start = AsyncMock(side_effect=discord.LoginFailure("bad token"))
    bot.close = AsyncMock()
    bot.is_closed = MagicMock(return_value=False)
    with patch.object(launcher, "build_bot", return_value=bot):
        await launcher.launch_bot(AppConfig(discord_token="tok"))
    assert "login failed" in capsys.readouterr().err
    bot.close.assert_awaited_once()


def test_main_returns_zero_on_interrupt():
    def _interrupt(coro):
        coro.close()
        raise KeyboardInterrupt

    with patch.object(launcher.asyncio, "run", side_effect=_interrupt):
        assert launcher.main() == 0


@pytest.mark.asyncio
async def test_gateway_error_logged(capsys):
    bot = MagicMock()
    bot.start = AsyncMock(side_effect=discord.PrivilegedIntentsRequired(None))
    bot.close = AsyncMock()
    bot.is_closed = MagicMock(return_value=False)
    with patch.object(launcher, "build_bot", return_value=bot):
        await launcher.launch_bot(AppConfig(discord_token="tok"))
    assert "crashed" in capsys.readouterr().err
    bot.close.assert_awaited_once()
