"""Built-in utility commands."""

from .disable import disable_command
from .enable import enable_command
from .help import help_command
from .ping import ping

DEFAULT_COMMANDS = [ping, help_command, enable_command, disable_command]

__all__ = ["DEFAULT_COMMANDS", "ping", "help_command", "enable_command", "disable_command"]
