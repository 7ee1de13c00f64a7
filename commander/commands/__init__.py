"""Command system for chat bots."""

from .argument import Argument, ComputedDefault, DefaultProvider, StaticDefault
from .base import ArgumentResult, Command
from .context import CommandContext
from .decorators import CommandFactory, command
from .group import CommandGroup
from .parsers import ArgumentParserFactory, tokenize

__all__ = [
    "Argument",
    "ArgumentResult",
    "ArgumentParserFactory",
    "Command",
    "CommandContext",
    "CommandFactory",
    "CommandGroup",
    "ComputedDefault",
    "DefaultProvider",
    "StaticDefault",
    "command",
    "tokenize",
]
