"""Utility functions for the command framework."""

import inspect
import re
from typing import Any


async def maybe_await(value: Any) -> Any:
    """Await ``value`` when a callback handed back a coroutine or future."""
    if inspect.isawaitable(value):
        return await value
    return value


def build_command_pattern(prefix: str | None, address: str) -> re.Pattern[str]:
    """
    Build the regular expression matching a command invocation.

    Group 1 holds the prefix and/or mention, group 2 the command token.

    Args:
        prefix: The command prefix; empty or None only accepts the mention form
        address: The bot's own address, used for the ``@address`` mention form

    Returns:
        The compiled, case-insensitive pattern
    """
    mention = re.escape(f"@{address}")
    if prefix:
        escaped_prefix = re.escape(prefix)
        return re.compile(
            rf"^({mention}\s+(?:{escaped_prefix}\s*)?|{escaped_prefix}\s*)(\S+)",
            re.IGNORECASE,
        )
    return re.compile(rf"^({mention}\s+)(\S+)", re.IGNORECASE)


def code(text: str) -> str:
    """Wrap text in the chat monospace markers."""
    return f"```{text}```"
