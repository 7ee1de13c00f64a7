"""Contract between the command framework and the chat transport."""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Sequence
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class HostParticipant(Protocol):
    address: str
    is_admin: bool


@runtime_checkable
class HostChat(Protocol):
    is_group: bool
    participants: Sequence[HostParticipant]

    async def send_message(self, text: str) -> Any: ...


@runtime_checkable
class HostMessage(Protocol):
    id: str
    body: str
    sender: str
    author: str | None
    has_quoted_msg: bool

    async def reply(self, text: str) -> Any: ...

    async def get_chat(self) -> HostChat: ...


class HostInfo(Protocol):
    address: str


@runtime_checkable
class HostClient(Protocol):
    info: HostInfo

    def subscribe(self, event_name: str, callback: Callable[[HostMessage], Awaitable[Any]]) -> None: ...


def author_of(message: HostMessage) -> str:
    """Address of whoever wrote the message (group author first, then sender)."""
    return getattr(message, "author", None) or message.sender
