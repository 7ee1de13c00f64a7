import logging
import re
from dataclasses import dataclass
from enum import Enum
from typing import Any

from ..commands.base import Command
from ..commands.context import CommandContext
from ..permissions import Allowed, DeniedWithMessage
from .event_system import CommandEvents
from .host import HostChat, HostMessage, author_of
from .utils import build_command_pattern, code

logger = logging.getLogger(__name__)


class DispatchOutcome(str, Enum):
    NOT_COMMAND = "not_command"
    DISABLED = "disabled"
    REPLY_ONLY = "reply_only"
    GROUP_ONLY = "group_only"
    CLIENT_ADMIN = "client_admin"
    DENIED = "denied"
    INVALID_ARGS = "invalid_args"
    SUCCESS = "success"
    ERROR = "error"


@dataclass(slots=True)
class ParsedMessage:
    command: Command
    arg_string: str
    unknown: bool = False


class CommandDispatcher:
    """Turns inbound messages into command invocations."""

    def __init__(self, commander: Any, registry: Any) -> None:
        self.commander = commander
        self.registry = registry
        self._command_pattern: re.Pattern[str] | None = None
        self._pattern_key: tuple[str | None, str] | None = None

    def get_command_pattern(self) -> re.Pattern[str]:
        """Return the invocation pattern, rebuilt whenever the prefix or bot address changes."""
        key = (self.commander.prefix, self.commander.address)
        if self._command_pattern is None or key != self._pattern_key:
            self._command_pattern = build_command_pattern(*key)
            self._pattern_key = key
            logger.debug(f"Built command pattern: {self._command_pattern.pattern}")
        return self._command_pattern

    def parse_message(self, message: HostMessage) -> ParsedMessage | None:
        body = message.body or ""
        match = self.get_command_pattern().match(body)
        if not match:
            return None

        lead, token = match.group(1), match.group(2)
        command = self.registry.find_command(token)
        if command is None:
            unknown = self.registry.unknown_command
            if unknown is None:
                return None
            return ParsedMessage(unknown, body[len(lead):], unknown=True)

        return ParsedMessage(command, body[len(lead) + len(token):])

    async def handle_message(self, message: HostMessage) -> DispatchOutcome:
        parsed = self.parse_message(message)
        if parsed is None:
            return DispatchOutcome.NOT_COMMAND

        command = parsed.command
        events = self.commander.event_system
        if parsed.unknown:
            await events.emit(CommandEvents.UNKNOWN_COMMAND, message)

        logger.info(f"Command called: {command.name} by {author_of(message)}")

        try:
            outcome, ctx, args = await self._prepare(message, parsed)
        except Exception as e:
            logger.error(f"Error preparing command {command.name}: {e}")
            await self._reply(message, "There was an error trying to execute the command!")
            return DispatchOutcome.ERROR

        if outcome is not None:
            await events.emit(CommandEvents.COMMAND_BLOCKED, message, command, outcome.value)
            return outcome

        await events.emit(CommandEvents.COMMAND_PRERUN, command, message, args)
        try:
            result = await command.run(ctx, args)
        except Exception as e:
            logger.error(f"Error executing command {command.name}: {e}")
            await events.emit(CommandEvents.COMMAND_ERROR, command, e, message)
            await self._reply(message, "There was an error trying to execute the command!")
            return DispatchOutcome.ERROR

        await events.emit(CommandEvents.COMMAND_RUN, command, result, message, args)
        return DispatchOutcome.SUCCESS

    async def _prepare(
        self, message: HostMessage, parsed: ParsedMessage
    ) -> tuple[DispatchOutcome | None, CommandContext | None, dict[str, Any]]:
        """Run the gates and bind arguments; a non-None outcome means dispatch stops."""
        command = parsed.command
        name = code(command.name)
        chat: HostChat | None = None

        if not self.registry.is_enabled(command):
            await self._reply(message, f"The {name} command is disabled.")
            return DispatchOutcome.DISABLED, None, {}

        if command.reply_only and not getattr(message, "has_quoted_msg", False):
            await self._reply(message, f"The {name} command can only be used when replying to a message.")
            return DispatchOutcome.REPLY_ONLY, None, {}

        if command.group_only or command.client_admin_only:
            chat = await message.get_chat()

        if command.group_only and not chat.is_group:
            await self._reply(message, f"The {name} command can only be used in a group chat.")
            return DispatchOutcome.GROUP_ONLY, None, {}

        if command.client_admin_only and chat.is_group and not self._client_is_admin(chat):
            await self._reply(message, f"I need to be a group admin to run the {name} command.")
            return DispatchOutcome.CLIENT_ADMIN, None, {}

        permission = await command.has_permission(message, self.commander.owner_override)
        if not isinstance(permission, Allowed):
            if isinstance(permission, DeniedWithMessage):
                await self._reply(message, permission.text)
            else:
                await self._reply(message, f"You do not have permission to use the {name} command.")
            return DispatchOutcome.DENIED, None, {}

        tokens = command.parse_args(parsed.arg_string)
        result = await command.obtain_args(message, tokens)
        if result.error:
            hint = result.message or "Invalid arguments provided."
            await self._reply(message, f"{hint}\nUsage: {command.usage()}")
            return DispatchOutcome.INVALID_ARGS, None, {}

        ctx = CommandContext(message, command, self.commander, parsed.arg_string.strip(), chat)
        return None, ctx, result.values

    def _client_is_admin(self, chat: HostChat) -> bool:
        address = self.commander.address
        for participant in chat.participants:
            if participant.address == address:
                return bool(participant.is_admin)
        return False

    async def _reply(self, message: HostMessage, text: str) -> None:
        try:
            await message.reply(text)
        except Exception as e:
            logger.error(f"Failed to reply to message {getattr(message, 'id', '?')}: {e}")
