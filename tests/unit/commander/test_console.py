"""Tests for the console host client."""

from unittest.mock import AsyncMock

import pytest

from commander.commands import command
from commander.core import CommanderClient
from commander.core.console import ConsoleClient
from commander.core.host import HostChat, HostClient, HostMessage


@pytest.fixture
def console_commander():
    console = ConsoleClient("bot", "me")
    commander = CommanderClient(console, prefix="!", owner="me")
    commander.registry.register_defaults()
    return commander.start()


class TestConsoleClient:
    """Test the console host."""

    def test_satisfies_host_protocols(self):
        console = ConsoleClient("bot", "me")

        assert isinstance(console, HostClient)
        assert isinstance(console.chat, HostChat)

    @pytest.mark.asyncio
    async def test_feed_builds_messages(self):
        console = ConsoleClient("bot", "me")
        listener = AsyncMock()
        console.subscribe("message", listener)

        first = await console.feed("hello")
        second = await console.feed("again", quoted=True)

        assert isinstance(first, HostMessage)
        assert first.sender == "me"
        assert first.id != second.id
        assert second.has_quoted_msg is True
        assert listener.await_count == 2

    @pytest.mark.asyncio
    async def test_run_skips_blank_lines_and_marks_quotes(self):
        console = ConsoleClient("bot", "me")
        listener = AsyncMock()
        console.subscribe("message", listener)

        await console.run(["first", "   ", "> quoted line"])

        messages = [call.args[0] for call in listener.await_args_list]
        assert [m.body for m in messages] == ["first", "quoted line"]
        assert [m.has_quoted_msg for m in messages] == [False, True]

    def test_group_chat_participants(self):
        console = ConsoleClient("bot", "me", group=True)

        assert console.chat.is_group is True
        assert {p.address for p in console.chat.participants} == {"bot", "me"}
        assert all(p.is_admin for p in console.chat.participants)


class TestConsoleCommander:
    """Test commands dispatched through the console host."""

    @pytest.mark.asyncio
    async def test_ping_round_trip(self, console_commander):
        message = await console_commander.client.feed("!ping")

        assert message.replies == ["pong"]

    @pytest.mark.asyncio
    async def test_mention_uses_console_address(self, console_commander):
        message = await console_commander.client.feed("@bot ping")

        assert message.replies == ["pong"]

    @pytest.mark.asyncio
    async def test_start_subscribes_once(self, console_commander):
        console_commander.start()

        message = await console_commander.client.feed("!ping")

        assert message.replies == ["pong"]

    @pytest.mark.asyncio
    async def test_send_goes_to_chat(self, console_commander):
        @command(name="announce")
        async def announce(ctx):
            await ctx.send("hello everyone")

        console_commander.registry.register_command(announce)

        await console_commander.client.feed("!announce")

        assert console_commander.client.chat.sent == ["hello everyone"]
