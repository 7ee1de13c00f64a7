"""A host client driven from the terminal, used by the CLI."""

from __future__ import annotations

import asyncio
import itertools
import logging
from collections.abc import Awaitable, Callable, Iterable
from dataclasses import dataclass, field
from typing import Any

import typer

logger = logging.getLogger(__name__)


@dataclass
class ConsoleParticipant:
    address: str
    is_admin: bool = False


@dataclass
class ConsoleInfo:
    address: str


@dataclass
class ConsoleChat:
    is_group: bool = False
    participants: list[ConsoleParticipant] = field(default_factory=list)
    sent: list[str] = field(default_factory=list)

    async def send_message(self, text: str) -> None:
        self.sent.append(text)
        typer.echo(text)


@dataclass
class ConsoleMessage:
    id: str
    body: str
    sender: str
    chat: ConsoleChat
    author: str | None = None
    has_quoted_msg: bool = False
    replies: list[str] = field(default_factory=list)

    async def reply(self, text: str) -> None:
        self.replies.append(text)
        typer.echo(f"> {text}")

    async def get_chat(self) -> ConsoleChat:
        return self.chat


class ConsoleClient:
    """Feeds lines of text to subscribers as messages from one console user."""

    def __init__(self, address: str, user_address: str, group: bool = False) -> None:
        self.info = ConsoleInfo(address)
        self.user_address = user_address
        self.chat = ConsoleChat(
            is_group=group,
            participants=[
                ConsoleParticipant(address, is_admin=True),
                ConsoleParticipant(user_address, is_admin=True),
            ]
            if group
            else [],
        )
        self._listeners: dict[str, list[Callable[[Any], Awaitable[Any]]]] = {}
        self._ids = itertools.count(1)

    def subscribe(self, event_name: str, callback: Callable[[Any], Awaitable[Any]]) -> None:
        self._listeners.setdefault(event_name, []).append(callback)

    async def feed(self, body: str, quoted: bool = False) -> ConsoleMessage:
        message = ConsoleMessage(
            id=f"console-{next(self._ids)}",
            body=body,
            sender=self.user_address,
            chat=self.chat,
            has_quoted_msg=quoted,
        )
        for callback in self._listeners.get("message", []):
            await callback(message)
        return message

    async def run(self, lines: Iterable[str]) -> None:
        for line in lines:
            line = line.rstrip("\n")
            if not line.strip():
                continue
            # A leading ">" marks the line as a reply to an earlier message
            quoted = line.startswith(">")
            await self.feed(line[1:].lstrip() if quoted else line, quoted=quoted)

    async def interact(self) -> None:
        loop = asyncio.get_running_loop()
        while True:
            try:
                line = await loop.run_in_executor(None, input, f"{self.user_address}: ")
            except EOFError:
                logger.info("Console input closed")
                return
            await self.run([line])
