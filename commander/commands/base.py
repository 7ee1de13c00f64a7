from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable, Sequence
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from ..core.host import HostMessage
from ..core.utils import code, maybe_await
from ..errors import ArgumentParseError, CommandDefinitionError
from ..permissions import PermissionResult
from .argument import Argument, build_arguments
from .parsers import ArgumentParserFactory, tokenize

if TYPE_CHECKING:
    from ..core.client import CommanderClient
    from .context import CommandContext

logger = logging.getLogger(__name__)

CommandCallback = Callable[..., Awaitable[Any]]


@dataclass
class ArgumentResult:
    """Outcome of binding tokens to a command's formal arguments."""

    values: dict[str, Any] = field(default_factory=dict)
    error: bool = False
    message: str | None = None
    failed: Argument | None = None


class Command:
    """
    A named unit of bot behaviour.

    Subclasses override :meth:`run`; the ``command`` decorator builds plain
    instances around a callback instead.
    """

    def __init__(
        self,
        commander: CommanderClient,
        name: str,
        description: str,
        aliases: Sequence[str] | None = None,
        auto_aliases: bool = True,
        group_id: str | None = None,
        details: str | None = None,
        examples: Sequence[str] | None = None,
        format: str | None = None,
        args: Sequence[Argument | dict[str, Any]] | None = None,
        reply_only: bool = False,
        group_only: bool = False,
        owner_only: bool = False,
        admin_only: bool = False,
        client_admin_only: bool = False,
        hidden: bool = False,
        guarded: bool = False,
        unknown: bool = False,
        callback: CommandCallback | None = None,
    ) -> None:
        self.validate_info(commander, name, description, aliases, format, group_id)

        self.commander = commander
        self.name = name
        self.description = description
        self.details = details
        self.examples = list(examples or [])
        self.group_id = group_id
        self.group = None

        self.aliases = list(aliases or [])
        if auto_aliases:
            for candidate in [self.name, *self.aliases]:
                stripped = candidate.replace("-", "")
                if stripped != candidate and stripped not in self.aliases:
                    self.aliases.append(stripped)

        self.reply_only = bool(reply_only)
        self.group_only = bool(group_only)
        self.owner_only = bool(owner_only)
        self.admin_only = bool(admin_only)
        self.client_admin_only = bool(client_admin_only)
        self.hidden = bool(hidden)
        self.guarded = bool(guarded)
        self.unknown = bool(unknown)

        self.args: tuple[Argument, ...] = build_arguments(args)
        self.format = format if format is not None else self._build_format()
        self._callback = callback

    def _build_format(self) -> str | None:
        if not self.args:
            return None
        parts = []
        for arg in self.args:
            label = f"{arg.label}..." if arg.infinite else arg.label
            parts.append(f"[{label}]" if arg.has_default else f"<{label}>")
        return " ".join(parts)

    @staticmethod
    def validate_info(
        commander: Any,
        name: Any,
        description: Any,
        aliases: Any,
        format: Any,
        group_id: Any,
    ) -> None:
        if commander is None:
            raise CommandDefinitionError("A commander must be specified.")
        if not isinstance(name, str) or not name:
            raise CommandDefinitionError("Command name must be a non-empty string.")
        if name != name.lower():
            raise CommandDefinitionError("Command name must be lowercase.")
        if any(char.isspace() for char in name):
            raise CommandDefinitionError("Command name may not contain whitespace.")
        if aliases is not None:
            if isinstance(aliases, str) or not all(isinstance(alias, str) for alias in aliases):
                raise CommandDefinitionError("Command aliases must be a sequence of strings.")
            if any(alias != alias.lower() for alias in aliases):
                raise CommandDefinitionError("Command aliases must be lowercase.")
        if not isinstance(description, str):
            raise CommandDefinitionError("Command description must be a string.")
        if format is not None and not isinstance(format, str):
            raise CommandDefinitionError("Command format must be a string.")
        if group_id is not None and (not isinstance(group_id, str) or group_id != group_id.lower()):
            raise CommandDefinitionError("Command group ID must be a lowercase string.")

    @property
    def names(self) -> list[str]:
        return [self.name, *self.aliases]

    @property
    def has_infinite(self) -> bool:
        return bool(self.args) and self.args[-1].infinite

    async def has_permission(self, message: HostMessage, owner_override: bool = True) -> PermissionResult:
        return await self.commander.permission_manager.check(self, message, owner_override)

    async def run(self, ctx: CommandContext, args: dict[str, Any]) -> Any:
        if self._callback is None:
            raise NotImplementedError(f"{type(self).__name__} doesn't have a run() method.")
        return await maybe_await(self._callback(ctx, **args))

    def parse_args(self, arg_string: str) -> list[str | None]:
        """Tokenize the text following the command name for this command's arguments."""
        if not self.args or self.has_infinite:
            return tokenize(arg_string)
        return tokenize(arg_string, len(self.args))

    async def obtain_args(self, message: HostMessage, provided: Sequence[str | None] = ()) -> ArgumentResult:
        values: dict[str, Any] = {}

        for index, arg in enumerate(self.args):
            if arg.infinite:
                value: Any = [token for token in provided[index:] if token is not None]
                empty = not value
            else:
                value = provided[index] if index < len(provided) else None
                empty = value is None

            if empty:
                if not arg.has_default:
                    logger.debug(f"Missing argument {arg.key} for {self.name}")
                    return ArgumentResult(values, error=True, failed=arg)
                values[arg.key] = await arg.provider.resolve(message, self)
                continue

            try:
                if arg.infinite:
                    values[arg.key] = [await ArgumentParserFactory.parse_value(item, arg) for item in value]
                else:
                    values[arg.key] = await ArgumentParserFactory.parse_value(value, arg)
            except ArgumentParseError as e:
                logger.debug(f"Invalid value for {self.name}.{arg.key}: {e}")
                return ArgumentResult(values, error=True, message=arg.error or str(e), failed=arg)

        return ArgumentResult(values, error=False)

    def usage(self, arg_string: str | None = None, prefix: str | None = None) -> str:
        """
        Render the usage string, e.g. ```!help [command]```.

        ``prefix`` defaults to the commander's prefix; pass an empty string for the bare form.
        """
        if prefix is None:
            prefix = self.commander.prefix
        fmt = f" {arg_string}" if arg_string else (f" {self.format}" if self.format else "")
        usage = f"{self.name}{fmt}"

        if not prefix:
            return code(usage)
        if len(prefix) > 1 and not prefix.endswith(" "):
            prefix += " "
        return code(f"{prefix}{usage}")

    def __repr__(self) -> str:
        return f"<Command name={self.name!r} aliases={self.aliases!r}>"
