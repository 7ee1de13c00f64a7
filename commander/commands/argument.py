"""Command argument definitions and default providers."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from ..core.utils import maybe_await
from ..errors import ArgumentDefinitionError, CommandDefinitionError

if TYPE_CHECKING:
    from ..core.host import HostMessage
    from .base import Command

ARGUMENT_TYPES = ("string", "integer", "float", "boolean")


class DefaultProvider(ABC):
    """Supplies the value of an argument that was left empty."""

    @abstractmethod
    async def resolve(self, message: HostMessage, command: Command) -> Any:
        pass


class StaticDefault(DefaultProvider):
    def __init__(self, value: Any) -> None:
        self.value = value

    async def resolve(self, message: HostMessage, command: Command) -> Any:
        return self.value

    def __repr__(self) -> str:
        return f"StaticDefault({self.value!r})"


class ComputedDefault(DefaultProvider):
    """Default computed from the triggering message and command; may be async."""

    def __init__(self, rule: Callable[[HostMessage, Command], Any]) -> None:
        self.rule = rule

    async def resolve(self, message: HostMessage, command: Command) -> Any:
        return await maybe_await(self.rule(message, command))

    def __repr__(self) -> str:
        return f"ComputedDefault({getattr(self.rule, '__name__', self.rule)!r})"


def as_default_provider(default: Any) -> DefaultProvider | None:
    if default is None or isinstance(default, DefaultProvider):
        return default
    if callable(default):
        return ComputedDefault(default)
    return StaticDefault(default)


@dataclass
class Argument:
    """Defines one formal parameter of a command."""

    key: str
    label: str | None = None
    optional: bool = False
    infinite: bool = False
    default: Any = None
    type: str = "string"
    choices: list[Any] | None = None
    error: str | None = None
    description: str = ""
    provider: DefaultProvider | None = field(init=False, repr=False, default=None)

    def __post_init__(self) -> None:
        if not isinstance(self.key, str) or not self.key:
            raise CommandDefinitionError("Argument key must be a non-empty string.")
        if self.label is not None and not isinstance(self.label, str):
            raise CommandDefinitionError("Argument label must be a string.")
        if self.error is not None and not isinstance(self.error, str):
            raise CommandDefinitionError("Argument error must be a string.")
        if self.type not in ARGUMENT_TYPES:
            raise CommandDefinitionError(f"Argument type must be one of {', '.join(ARGUMENT_TYPES)}.")

        self.label = self.label or self.key
        self.provider = as_default_provider(self.default)
        # An optional argument left empty binds None
        if self.provider is None and self.optional:
            self.provider = StaticDefault(None)

    @property
    def has_default(self) -> bool:
        return self.provider is not None

    @classmethod
    def from_info(cls, info: Argument | dict[str, Any]) -> Argument:
        if isinstance(info, Argument):
            return info
        if not isinstance(info, dict):
            raise CommandDefinitionError("Argument info must be a mapping or an Argument.")
        return cls(**info)


def build_arguments(infos: Sequence[Argument | dict[str, Any]] | None) -> tuple[Argument, ...]:
    """Build an argument list, enforcing the optional/infinite ordering rules."""
    if infos is None:
        return ()
    if isinstance(infos, (str, bytes)) or not isinstance(infos, Sequence):
        raise CommandDefinitionError("Command args must be a sequence.")

    args: list[Argument] = []
    keys: set[str] = set()
    has_infinite = False
    has_optional = False
    for info in infos:
        arg = Argument.from_info(info)
        if has_infinite:
            raise ArgumentDefinitionError("No other argument may come after an infinite argument.")
        if arg.optional or arg.has_default:
            has_optional = True
        elif has_optional:
            raise ArgumentDefinitionError("Required arguments may not come after optional arguments.")
        if arg.key in keys:
            raise ArgumentDefinitionError(f'Duplicate argument key "{arg.key}".')
        keys.add(arg.key)
        args.append(arg)
        if arg.infinite:
            has_infinite = True

    return tuple(args)
