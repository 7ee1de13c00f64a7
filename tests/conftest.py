"""Pytest configuration and shared fixtures."""

import logging
from unittest.mock import AsyncMock, MagicMock

import pytest

from commander.core import CommanderClient

# Disable logging during tests
logging.disable(logging.CRITICAL)

BOT_ADDRESS = "123"
OWNER_ADDRESS = "999"
USER_ADDRESS = "111"


@pytest.fixture
def mock_chat():
    """Mock private chat."""
    chat = MagicMock()
    chat.is_group = False
    chat.participants = []
    chat.send_message = AsyncMock()
    return chat


@pytest.fixture
def mock_group_chat():
    """Mock group chat where the bot is admin and the user is not."""
    chat = MagicMock()
    chat.is_group = True
    chat.participants = [
        MagicMock(address=BOT_ADDRESS, is_admin=True),
        MagicMock(address=OWNER_ADDRESS, is_admin=True),
        MagicMock(address=USER_ADDRESS, is_admin=False),
    ]
    chat.send_message = AsyncMock()
    return chat


@pytest.fixture
def make_message(mock_chat):
    """Factory for inbound host messages."""

    def factory(body, sender=USER_ADDRESS, author=None, quoted=False, chat=None):
        message = MagicMock()
        message.id = f"msg-{body}"
        message.body = body
        message.sender = sender
        message.author = author
        message.has_quoted_msg = quoted
        message.reply = AsyncMock()
        message.get_chat = AsyncMock(return_value=chat or mock_chat)
        return message

    return factory


@pytest.fixture
def mock_host_client():
    """Mock host chat client."""
    client = MagicMock()
    client.info = MagicMock(address=BOT_ADDRESS)
    client.subscribe = MagicMock()
    return client


@pytest.fixture
def commander(mock_host_client):
    """Commander with prefix "!" and one owner."""
    return CommanderClient(mock_host_client, prefix="!", owner=[OWNER_ADDRESS], owner_override=True)


@pytest.fixture
def commander_with_defaults(commander):
    """Commander with the built-in commands registered."""
    commander.registry.register_defaults()
    return commander
