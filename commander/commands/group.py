from __future__ import annotations

from typing import TYPE_CHECKING, Any

from ..errors import CommandDefinitionError

if TYPE_CHECKING:
    from .base import Command


class CommandGroup:
    def __init__(self, commander: Any, id: str, name: str | None = None, guarded: bool = False) -> None:
        if commander is None:
            raise CommandDefinitionError("A commander must be specified.")
        if not isinstance(id, str) or not id:
            raise CommandDefinitionError("Group ID must be a non-empty string.")
        if id != id.lower():
            raise CommandDefinitionError("Group ID must be lowercase.")

        self.commander = commander
        self.id = id
        self.name = name or id
        self.guarded = bool(guarded)
        self.commands: dict[str, Command] = {}

    def __repr__(self) -> str:
        return f"<CommandGroup id={self.id!r} commands={len(self.commands)}>"
