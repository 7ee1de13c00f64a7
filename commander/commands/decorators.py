"""Command decorator building commands from plain coroutine functions."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from .argument import Argument
from .base import Command, CommandCallback

if TYPE_CHECKING:
    from ..core.client import CommanderClient


class CommandFactory:
    """Builds a :class:`Command` around a callback once a commander exists."""

    def __init__(self, callback: CommandCallback, **info: Any) -> None:
        self.callback = callback
        self.info = info
        self.__name__ = getattr(callback, "__name__", info.get("name", "command"))
        self.__doc__ = getattr(callback, "__doc__", None)

    @property
    def name(self) -> str:
        return self.info["name"]

    def __call__(self, commander: CommanderClient) -> Command:
        return Command(commander, callback=self.callback, **self.info)

    def __repr__(self) -> str:
        return f"<CommandFactory name={self.name!r}>"


def command(
    name: str,
    description: str = "",
    aliases: list[str] | None = None,
    arguments: list[Argument | dict[str, Any]] | None = None,
    **info: Any,
):
    """
    Turn ``async def callback(ctx, **args)`` into a command factory.

    The factory is handed to ``CommandRegistry.register_command`` which
    calls it with the commander, the same way a ``Command`` subclass is
    instantiated. Remaining keyword arguments are the ``Command`` flags
    (``owner_only``, ``guarded``, ``group_id`` ...).
    """

    def decorator(func: CommandCallback) -> CommandFactory:
        return CommandFactory(
            func,
            name=name,
            description=description or (func.__doc__ or "").strip(),
            aliases=aliases or [],
            args=arguments or [],
            **info,
        )

    return decorator
