from __future__ import annotations

from typing import TYPE_CHECKING, Any

from ..core.host import HostChat, HostMessage, author_of

if TYPE_CHECKING:
    from ..core.client import CommanderClient
    from .base import Command


class CommandContext:
    """Everything a command needs while it runs for one message."""

    def __init__(
        self,
        message: HostMessage,
        command: Command,
        commander: CommanderClient,
        arg_string: str = "",
        chat: HostChat | None = None,
    ) -> None:
        self.message = message
        self.command = command
        self.commander = commander
        self.arg_string = arg_string
        self._chat = chat

        self.author = author_of(message)
        self.body = message.body

    @property
    def registry(self) -> Any:
        return self.commander.registry

    @property
    def is_owner(self) -> bool:
        return self.commander.is_owner(self.author)

    async def get_chat(self) -> HostChat:
        if self._chat is None:
            self._chat = await self.message.get_chat()
        return self._chat

    async def reply(self, text: str) -> Any:
        return await self.message.reply(text)

    async def send(self, text: str) -> Any:
        chat = await self.get_chat()
        return await chat.send_message(text)
