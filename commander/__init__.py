"""Command routing for chat bots: registry, dispatcher and argument pipeline."""

# core imports the command modules itself; it has to load first
from .core import CommanderClient, CommandDispatcher, CommandRegistry, DispatchOutcome
from .commands import Argument, Command, CommandContext, CommandGroup, command
from .errors import (
    CommanderError,
    CommandGuardedError,
    CommandRegistrationError,
    DuplicateCommandError,
)

__all__ = [
    "Argument",
    "Command",
    "CommandContext",
    "CommandGroup",
    "CommanderClient",
    "CommandDispatcher",
    "CommandRegistry",
    "DispatchOutcome",
    "CommanderError",
    "CommandGuardedError",
    "CommandRegistrationError",
    "DuplicateCommandError",
    "command",
]
