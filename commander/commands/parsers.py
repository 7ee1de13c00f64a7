"""Argument tokenizing and value parsers using strategy pattern."""

import re
from abc import ABC, abstractmethod
from typing import Any

from ..errors import ArgumentParseError
from .argument import Argument


# A straight or curly double-quoted span, or a run of non-whitespace
TOKEN_PATTERN = re.compile(r"\s*(?:([\"“])(.*?)(\1|”)|(\S+))\s*", re.DOTALL)
WRAPPED_PATTERN = re.compile(r"^([\"“])(.*)(\1|”)$", re.DOTALL)


def tokenize(arg_string: str, limit: int | None = None) -> list[str | None]:
    """
    Split an argument string into tokens.

    Args:
        arg_string: The raw text following the command name
        limit: Maximum number of tokens, None for unbounded. When the limit is
            reached the remaining text becomes the last token verbatim, with
            wrapping quotes removed only if it is a single quoted span.

    Returns:
        The tokens; an empty quoted span yields None
    """
    arg_string = arg_string.strip()
    if not arg_string or limit == 0:
        return []

    tokens: list[str | None] = []
    position = 0
    delimited = None if limit is None else limit - 1
    while delimited is None or len(tokens) < delimited:
        match = TOKEN_PATTERN.match(arg_string, position)
        if not match:
            return tokens
        quoted, bare = match.group(2), match.group(4)
        tokens.append(quoted or bare or None)
        position = match.end()
        if position >= len(arg_string):
            return tokens

    remainder = WRAPPED_PATTERN.sub(r"\2", arg_string[position:])
    tokens.append(remainder or None)
    return tokens


class ArgumentParser(ABC):
    """Base class for argument value parsers."""

    @abstractmethod
    async def parse(self, value: str, definition: Argument) -> Any:
        """Parse a token according to the definition."""
        pass


class StringArgumentParser(ArgumentParser):
    async def parse(self, value: str, definition: Argument) -> Any:
        return value


class IntegerArgumentParser(ArgumentParser):
    async def parse(self, value: str, definition: Argument) -> Any:
        try:
            return int(value)
        except ValueError:
            raise ArgumentParseError(definition.key, value, f"{definition.label} must be a whole number.")


class FloatArgumentParser(ArgumentParser):
    async def parse(self, value: str, definition: Argument) -> Any:
        try:
            return float(value)
        except ValueError:
            raise ArgumentParseError(definition.key, value, f"{definition.label} must be a number.")


class BooleanArgumentParser(ArgumentParser):
    TRUTHY = ("true", "1", "yes", "on", "y", "enable")
    FALSY = ("false", "0", "no", "off", "n", "disable")

    async def parse(self, value: str, definition: Argument) -> Any:
        lowered = value.lower()
        if lowered in self.TRUTHY:
            return True
        if lowered in self.FALSY:
            return False
        raise ArgumentParseError(definition.key, value, f"{definition.label} must be yes or no.")


class ArgumentParserFactory:
    """Factory for looking up value parsers."""

    _parsers: dict[str, ArgumentParser] = {
        "string": StringArgumentParser(),
        "integer": IntegerArgumentParser(),
        "float": FloatArgumentParser(),
        "boolean": BooleanArgumentParser(),
    }

    @classmethod
    def get_parser(cls, arg_type: str) -> ArgumentParser:
        return cls._parsers.get(arg_type, cls._parsers["string"])

    @classmethod
    async def parse_value(cls, value: str, definition: Argument) -> Any:
        parsed = await cls.get_parser(definition.type).parse(value, definition)
        if definition.choices is not None and parsed not in definition.choices:
            choices = ", ".join(str(choice) for choice in definition.choices)
            raise ArgumentParseError(
                definition.key, value, f"{definition.label} must be one of: {choices}."
            )
        return parsed
