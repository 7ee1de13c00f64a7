"""Command and group registration."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import TYPE_CHECKING, Any

from ..commands.base import Command
from ..commands.group import CommandGroup
from ..errors import (
    CommandGuardedError,
    DuplicateCommandError,
    GroupNotFoundError,
    InvalidCommandError,
    UnknownCommandConflictError,
)
from .event_system import CommandEvents

if TYPE_CHECKING:
    from .client import CommanderClient

logger = logging.getLogger(__name__)


class CommandRegistry:
    """Owns the registered commands, groups and their enabled state."""

    def __init__(self, commander: CommanderClient) -> None:
        self.commander = commander
        self.commands: dict[str, Command] = {}
        self.groups: dict[str, CommandGroup] = {}
        self.unknown_command: Command | None = None
        self._command_state: dict[str, bool] = {}
        self._group_state: dict[str, bool] = {}

    # Groups

    def register_group(
        self,
        group: CommandGroup | Mapping[str, Any] | str,
        name: str | None = None,
        guarded: bool = False,
    ) -> CommandRegistry:
        if isinstance(group, str):
            group = CommandGroup(self.commander, group, name, guarded)
        elif isinstance(group, Mapping):
            group = CommandGroup(self.commander, group.get("id"), group.get("name"), group.get("guarded", False))
        elif not isinstance(group, CommandGroup):
            raise TypeError(f"Invalid group to register: {group!r}")

        existing = self.groups.get(group.id)
        if existing:
            existing.name = group.name
            logger.debug(f"Updated group {group.id} name to {group.name}")
        else:
            self.groups[group.id] = group
            self._group_state[group.id] = True
            logger.debug(f"Registered group: {group.id}")

        return self

    def register_groups(self, groups: Iterable[Any]) -> CommandRegistry:
        if isinstance(groups, (str, Mapping)):
            raise TypeError("Groups must be an iterable of groups.")
        for group in groups:
            if isinstance(group, (tuple, list)):
                self.register_group(*group)
            else:
                self.register_group(group)
        return self

    def find_group(self, search: str | None) -> CommandGroup | None:
        if not search:
            return None
        lowered = search.lower()
        for group in self.groups.values():
            if group.id == lowered or group.name.lower() == lowered:
                return group
        return None

    # Commands

    def _build(self, entry: Any) -> Command:
        if isinstance(entry, Command):
            return entry
        if callable(entry):
            entry = entry(self.commander)
        if not isinstance(entry, Command):
            raise InvalidCommandError(entry)
        return entry

    def _find_conflict(self, name_or_alias: str) -> Command | None:
        token = name_or_alias.lower()
        for name, existing in self.commands.items():
            if name == token or token in existing.aliases:
                return existing
        return None

    def register_command(self, command: Any) -> CommandRegistry:
        """Register a Command, or a callable building one from the commander."""
        command = self._build(command)

        seen: set[str] = set()
        for token in command.names:
            if token in seen:
                raise DuplicateCommandError(token)
            seen.add(token)
            if self._find_conflict(token):
                raise DuplicateCommandError(token)

        if command.unknown and self.unknown_command:
            raise UnknownCommandConflictError()

        if command.group_id is not None:
            group = self.groups.get(command.group_id)
            if group is None:
                raise GroupNotFoundError(command.group_id)
            command.group = group
            group.commands[command.name] = command

        self.commands[command.name] = command
        self._command_state[command.name] = True
        if command.unknown:
            self.unknown_command = command

        logger.info(f"Registered command: {command.name} (aliases: {command.aliases})")
        self._emit(CommandEvents.COMMAND_REGISTER, command, self)
        return self

    def register_commands(self, commands: Iterable[Any], ignore_invalid: bool = False) -> CommandRegistry:
        if isinstance(commands, (str, Mapping)):
            raise TypeError("Commands must be an iterable of commands.")
        for command in commands:
            if ignore_invalid and not (isinstance(command, Command) or callable(command)):
                logger.debug(f"Skipping invalid command entry: {command!r}")
                continue
            self.register_command(command)
        return self

    def register_defaults(self) -> CommandRegistry:
        """Register the ``util`` group with the ping, help, enable and disable commands."""
        from ..commands.util import DEFAULT_COMMANDS

        self.register_group("util", "Utility", guarded=True)
        return self.register_commands(DEFAULT_COMMANDS)

    def unregister_command(self, command: Command) -> None:
        self.commands.pop(command.name, None)
        self._command_state.pop(command.name, None)
        if command.group is not None:
            command.group.commands.pop(command.name, None)
        if self.unknown_command is command:
            self.unknown_command = None
        logger.info(f"Unregistered command: {command.name}")

    def find_command(self, search: str | None) -> Command | None:
        if not search:
            return None
        lowered = search.lower()
        for command in self.commands.values():
            if command.name == lowered:
                return command
        for command in self.commands.values():
            if lowered in command.aliases:
                return command
        return None

    # Enabled state

    def is_enabled(self, command: Command) -> bool:
        if not self._command_state.get(command.name, True):
            return False
        if command.group is not None:
            return self._group_state.get(command.group.id, True)
        return True

    def is_group_enabled(self, group: CommandGroup) -> bool:
        return self._group_state.get(group.id, True)

    def set_command_enabled(self, command: Command, enabled: bool) -> None:
        if not enabled and command.guarded:
            raise CommandGuardedError(command.name)
        self._command_state[command.name] = bool(enabled)
        logger.info(f"Command {command.name} {'enabled' if enabled else 'disabled'}")
        self._emit(CommandEvents.COMMAND_STATUS_CHANGE, command, bool(enabled))

    def set_group_enabled(self, group: CommandGroup, enabled: bool) -> None:
        if not enabled and group.guarded:
            raise CommandGuardedError(group.id)
        self._group_state[group.id] = bool(enabled)
        logger.info(f"Group {group.id} {'enabled' if enabled else 'disabled'}")
        self._emit(CommandEvents.COMMAND_STATUS_CHANGE, group, bool(enabled))

    def _emit(self, event_name: str, *args: Any) -> None:
        # Dropped when no event loop is running, e.g. during startup registration
        self.commander.schedule_event(event_name, *args)
