"""Tests for the CommanderClient facade."""

import asyncio
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from commander.core import CommanderClient, CommandEvents, DispatchOutcome
from commander.middleware import ErrorHandlerMiddleware, LoggingMiddleware


class TestCommanderClient:
    """Test CommanderClient wiring."""

    def test_creation(self, commander, mock_host_client):
        assert commander.client is mock_host_client
        assert commander.prefix == "!"
        assert commander.owners == frozenset({"999"})
        assert commander.owner_override is True
        assert commander.registry.commander is commander
        assert commander.dispatcher.registry is commander.registry
        middleware_types = [type(m) for m in commander.event_system._middleware]
        assert middleware_types == [LoggingMiddleware, ErrorHandlerMiddleware]

    def test_defaults_from_settings(self, mock_host_client):
        with patch("commander.core.client.settings") as mock_settings:
            mock_settings.bot_prefix = "?"
            mock_settings.bot_owner = ["1"]
            mock_settings.owner_override = False

            commander = CommanderClient(mock_host_client)

        assert commander.prefix == "?"
        assert commander.owners == frozenset({"1"})
        assert commander.owner_override is False

    def test_explicit_none_prefix(self, mock_host_client):
        assert CommanderClient(mock_host_client, prefix=None).prefix is None

    def test_address_read_lazily(self, commander, mock_host_client):
        assert commander.address == "123"

        mock_host_client.info.address = "456"
        assert commander.address == "123"
        assert commander.refresh_address() == "456"

    def test_is_owner(self, commander):
        assert commander.is_owner("999") is True
        assert commander.is_owner("111") is False

    def test_start_subscribes_once(self, commander, mock_host_client):
        assert commander.start() is commander
        commander.start()

        mock_host_client.subscribe.assert_called_once_with("message", commander.handle_message)

    @pytest.mark.asyncio
    async def test_handle_message_contains_unexpected_errors(self, commander, make_message):
        commander.dispatcher.handle_message = AsyncMock(side_effect=RuntimeError("boom"))

        assert await commander.handle_message(make_message("!ping")) == DispatchOutcome.ERROR

    def test_schedule_event_without_loop(self, commander):
        commander.event_system.emit = MagicMock()

        commander.schedule_event(CommandEvents.COMMAND_REGISTER, "command")

        commander.event_system.emit.assert_not_called()

    @pytest.mark.asyncio
    async def test_schedule_event_with_loop(self, commander):
        listener = MagicMock()
        commander.event_system.add_listener(CommandEvents.COMMAND_STATUS_CHANGE, listener)

        commander.schedule_event(CommandEvents.COMMAND_STATUS_CHANGE, "command", False)
        await asyncio.gather(*commander._pending_events)

        listener.assert_called_once_with("command", False)
        assert commander._pending_events == set()
